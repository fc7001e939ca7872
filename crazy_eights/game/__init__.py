"""Game logic."""

from .deck import DeckConfigurationError, build_pool, choose_initial_discard, deal
from .engine import GameEngine
from .intents import ChooseSuit, Draw, Intent, Play, Restart
from .opponent import OpponentPolicy
from .scheduler import OpponentScheduler
from .validator import (
    IllegalMoveError,
    MoveValidator,
    ValidationResult,
    is_playable,
    playable_cards,
)

__all__ = [
    "ChooseSuit",
    "DeckConfigurationError",
    "Draw",
    "GameEngine",
    "IllegalMoveError",
    "Intent",
    "MoveValidator",
    "OpponentPolicy",
    "OpponentScheduler",
    "Play",
    "Restart",
    "ValidationResult",
    "build_pool",
    "choose_initial_discard",
    "deal",
    "is_playable",
    "playable_cards",
]
