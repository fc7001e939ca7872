"""Game models."""

from .card import (
    RANK_ORDER,
    SUIT_PRECEDENCE,
    SUIT_SYMBOLS,
    WILD_RANK,
    Card,
    Rank,
    Suit,
    create_full_deck,
    sort_hand,
)
from .game_state import GameState, GameStatus, Side

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "RANK_ORDER",
    "SUIT_PRECEDENCE",
    "SUIT_SYMBOLS",
    "WILD_RANK",
    "create_full_deck",
    "sort_hand",
    "GameState",
    "GameStatus",
    "Side",
]
