"""Formatters for game log output."""

from typing import Iterable

from crazy_eights.models.card import Card, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "H8" for the eight of hearts, "S10" for
        the ten of spades). Empty string if no card.
    """
    if card is None:
        return ""
    return f"{SUIT_CODES[card.suit]}{card.rank.value}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
