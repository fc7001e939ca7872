"""Game state models."""

from enum import Enum

from pydantic import BaseModel

from .card import Card, Suit


class Side(str, Enum):
    """Seat at the table."""

    PLAYER = "player"
    AI = "ai"

    @property
    def other(self) -> "Side":
        """Get the opposing side."""
        return Side.AI if self is Side.PLAYER else Side.PLAYER

    @property
    def label(self) -> str:
        """Name used in the action transcript."""
        return "You" if self is Side.PLAYER else "AI"


class GameStatus(str, Enum):
    """Phase of the game."""

    WAITING = "waiting"  # Before the first deal
    PLAYING = "playing"
    SUIT_SELECTION = "suit_selection"  # Player played a wild card, suit pending
    GAME_OVER = "game_over"


class GameState(BaseModel, frozen=True):
    """Complete snapshot of one game.

    Never mutated; every accepted transition produces a new instance.
    Tops of the draw and discard piles are the last elements.
    """

    deck: tuple[Card, ...] = ()
    discard_pile: tuple[Card, ...] = ()
    player_hand: tuple[Card, ...] = ()
    ai_hand: tuple[Card, ...] = ()

    current_turn: Side = Side.PLAYER
    status: GameStatus = GameStatus.WAITING
    current_suit: Suit | None = None
    winner: Side | None = None
    last_action: str = ""

    # Wild card taken from the player's hand while the suit is chosen
    pending_card: Card | None = None

    @property
    def top_discard(self) -> Card | None:
        """Get the top card of the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def deck_count(self) -> int:
        """Get number of cards left in the draw pile."""
        return len(self.deck)

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.status == GameStatus.GAME_OVER

    def hand(self, side: Side) -> tuple[Card, ...]:
        """Get the hand owned by ``side``."""
        return self.player_hand if side is Side.PLAYER else self.ai_hand

    def hand_count(self, side: Side) -> int:
        """Get number of cards in a hand."""
        return len(self.hand(side))

    def with_hand(self, side: Side, cards: tuple[Card, ...]) -> dict[str, tuple[Card, ...]]:
        """Build the update mapping that replaces one side's hand."""
        if side is Side.PLAYER:
            return {"player_hand": cards}
        return {"ai_hand": cards}

    def all_cards(self) -> list[Card]:
        """Get every card of the pool wherever it currently is."""
        cards = [*self.deck, *self.discard_pile, *self.player_hand, *self.ai_hand]
        if self.pending_card is not None:
            cards.append(self.pending_card)
        return cards

    def __str__(self) -> str:
        parts = [f"[{self.status.value}]"]
        if self.top_discard is not None:
            parts.append(f"Top: {self.top_discard}")
        if self.current_suit is not None:
            parts.append(f"Suit: {self.current_suit.value}")
        parts.append(f"Deck: {self.deck_count}")
        parts.append(f"{self.current_turn.value}'s turn")
        return " ".join(parts)
