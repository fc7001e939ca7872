"""Intents a host forwards to the engine."""

from dataclasses import dataclass

from crazy_eights.models.card import Card, Suit
from crazy_eights.models.game_state import Side


@dataclass(frozen=True)
class Draw:
    """Take the top card of the draw pile (or skip if it is empty)."""

    side: Side


@dataclass(frozen=True)
class Play:
    """Play a card from a hand."""

    card: Card
    side: Side


@dataclass(frozen=True)
class ChooseSuit:
    """Name the suit after the player's wild card."""

    suit: Suit


@dataclass(frozen=True)
class Restart:
    """Reshuffle and deal a new game."""


Intent = Draw | Play | ChooseSuit | Restart
