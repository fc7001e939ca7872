"""Move validation for submitted intents."""

from dataclasses import dataclass

from crazy_eights.models.card import Card, Suit
from crazy_eights.models.game_state import GameState, GameStatus, Side


@dataclass
class ValidationResult:
    """Result of intent validation."""

    is_valid: bool
    error_message: str = ""


class IllegalMoveError(Exception):
    """Intent rejected by the rules; the state it was applied to is unchanged."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.error_message)
        self.result = result


def is_playable(card: Card, top_discard: Card | None, current_suit: Suit | None) -> bool:
    """Check if a card may be played on the current discard pile.

    Args:
        card: Candidate card.
        top_discard: Top card of the discard pile.
        current_suit: Suit in force.

    Returns:
        True for wild cards, or a card matching the suit in force or the
        rank of the top discard.
    """
    if card.is_wild:
        return True
    if current_suit is not None and card.suit == current_suit:
        return True
    return top_discard is not None and card.rank == top_discard.rank


def playable_cards(state: GameState, side: Side) -> list[Card]:
    """Get the cards of a hand that are playable right now, in hand order."""
    return [
        c
        for c in state.hand(side)
        if is_playable(c, state.top_discard, state.current_suit)
    ]


class MoveValidator:
    """Validates intents against a game state."""

    def validate_draw(self, state: GameState, side: Side) -> ValidationResult:
        """Validate a draw.

        Args:
            state: Current game state
            side: Side asking to draw

        Returns:
            ValidationResult
        """
        return self._check_turn(state, side)

    def validate_play(self, state: GameState, card: Card, side: Side) -> ValidationResult:
        """Validate playing a card.

        Args:
            state: Current game state
            card: Card being played
            side: Side playing it

        Returns:
            ValidationResult
        """
        result = self._check_turn(state, side)
        if not result.is_valid:
            return result

        if card not in state.hand(side):
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} is not in the {side.value} hand",
            )

        if not is_playable(card, state.top_discard, state.current_suit):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"{card} does not match suit {state.current_suit.value} "
                    f"or rank {state.top_discard.rank.value}"
                ),
            )

        return ValidationResult(is_valid=True)

    def validate_choose_suit(self, state: GameState, suit: Suit) -> ValidationResult:
        """Validate naming the suit after a wild card.

        Args:
            state: Current game state
            suit: Suit being named

        Returns:
            ValidationResult
        """
        if state.status != GameStatus.SUIT_SELECTION:
            return ValidationResult(
                is_valid=False,
                error_message=f"No suit to choose while {state.status.value}",
            )
        if not isinstance(suit, Suit):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown suit: {suit!r}",
            )
        return ValidationResult(is_valid=True)

    def _check_turn(self, state: GameState, side: Side) -> ValidationResult:
        """Check that the game is in progress and it is ``side``'s turn."""
        if state.status != GameStatus.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cannot act while {state.status.value}",
            )
        if side != state.current_turn:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not the {side.value}'s turn",
            )
        return ValidationResult(is_valid=True)
