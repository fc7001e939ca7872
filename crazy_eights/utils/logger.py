"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from crazy_eights.game.validator import is_playable
from crazy_eights.models.card import SUIT_SYMBOLS, sort_hand
from crazy_eights.models.game_state import GameStatus, Side

if TYPE_CHECKING:
    from crazy_eights.models.card import Card
    from crazy_eights.models.game_state import GameState


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to reveal the AI hand
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def player_cards(self, state: "GameState") -> list["Card"]:
        """Get the player's hand in display order; menu numbers index this list."""
        return sort_hand(state.player_hand)

    def print_state(self, state: "GameState") -> None:
        """Print piles, counts and the last action."""
        self.print_separator()
        suit = SUIT_SYMBOLS[state.current_suit] if state.current_suit else "-"
        top = str(state.top_discard) if state.top_discard else "-"
        print(f"Discard: {top}   Suit: {suit}   Draw pile: {state.deck_count}")
        print(
            f"AI: {state.hand_count(Side.AI)} cards   "
            f"You: {state.hand_count(Side.PLAYER)} cards"
        )
        if self.show_hands:
            print(f"AI hand: {' '.join(str(c) for c in sort_hand(state.ai_hand))}")
        print(f"> {state.last_action}")

    def print_hand(self, state: "GameState") -> None:
        """Print the player's hand, marking playable cards with '*'."""
        markable = state.status == GameStatus.PLAYING and state.current_turn is Side.PLAYER
        entries = []
        for i, card in enumerate(self.player_cards(state), 1):
            playable = markable and is_playable(card, state.top_discard, state.current_suit)
            entries.append(f"{i}:{card}{'*' if playable else ''}")
        print("Your hand: " + "  ".join(entries))

    def print_game_over(self, state: "GameState") -> None:
        """Print the result."""
        self.print_separator()
        if state.winner is Side.PLAYER:
            print("You win! You emptied your hand.")
        else:
            print("AI wins! Better luck next time.")
