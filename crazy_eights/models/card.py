"""Card models."""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel


class Suit(str, Enum):
    """Card suit.

    Declaration order is the suit precedence used to break ties.
    """

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(str, Enum):
    """Card rank."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


# Playable on anything, lets the player name the next suit
WILD_RANK = Rank.EIGHT

SUIT_PRECEDENCE: tuple[Suit, ...] = (
    Suit.HEARTS,
    Suit.DIAMONDS,
    Suit.CLUBS,
    Suit.SPADES,
)

# Display ordinal for each rank (ace low)
RANK_ORDER: dict[Rank, int] = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Card(BaseModel, frozen=True):
    """Single card.

    ``id`` keeps duplicate cards from different decks distinct.
    """

    id: str
    suit: Suit
    rank: Rank

    @classmethod
    def create(cls, suit: Suit, rank: Rank, deck_index: int = 0) -> "Card":
        """Create a card with its canonical id."""
        return cls(id=f"{rank.value}-{suit.value}-{deck_index}", suit=suit, rank=rank)

    @property
    def is_wild(self) -> bool:
        """Check if this card is of the wild rank."""
        return self.rank == WILD_RANK

    def __str__(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.id!r})"


def create_full_deck(deck_index: int = 0) -> list[Card]:
    """Create one 52-card deck in suit-major order."""
    return [
        Card.create(suit, rank, deck_index)
        for suit in SUIT_PRECEDENCE
        for rank in RANK_ORDER
    ]


def sort_hand(cards: Iterable[Card]) -> list[Card]:
    """Get cards in display order (suit precedence, then rank ordinal)."""
    suit_index = {suit: i for i, suit in enumerate(SUIT_PRECEDENCE)}
    return sorted(cards, key=lambda c: (suit_index[c.suit], RANK_ORDER[c.rank], c.id))
