"""Greedy opponent policy.

Strategy:
- Play the first playable ordinary card in hand order
- Otherwise play the first wild card
- Otherwise draw
- After a wild card, name the suit held most often among the remaining
  cards, ties broken by suit precedence (hearts, diamonds, clubs, spades)

The policy looks only at its own hand and the discard pile.
"""

from typing import Iterable

from crazy_eights.models.card import SUIT_PRECEDENCE, Card, Suit
from crazy_eights.models.game_state import GameState, Side

from .validator import playable_cards

# Named when a wild card was the last card in hand
FALLBACK_SUIT = Suit.HEARTS


class OpponentPolicy:
    """Decision policy for the AI side."""

    def __init__(self, side: Side = Side.AI):
        self.side = side

    def choose_card(self, state: GameState) -> Card | None:
        """Select the card to play, or None to draw."""
        candidates = playable_cards(state, self.side)
        for card in candidates:
            if not card.is_wild:
                return card
        return candidates[0] if candidates else None

    def choose_suit(self, remaining: Iterable[Card]) -> Suit:
        """Select the suit to name after playing a wild card.

        Args:
            remaining: Cards left in hand, excluding the wild card played.

        Returns:
            Most common suit, or FALLBACK_SUIT if no cards remain.
        """
        counts = [0] * len(SUIT_PRECEDENCE)
        index = {suit: i for i, suit in enumerate(SUIT_PRECEDENCE)}
        for card in remaining:
            counts[index[card.suit]] += 1

        if not any(counts):
            return FALLBACK_SUIT

        # max() keeps the first maximum, i.e. the highest precedence suit
        best = max(range(len(counts)), key=lambda i: counts[i])
        return SUIT_PRECEDENCE[best]
