"""Delayed opponent turns.

The engine never waits. The host hands each new state to the scheduler,
which pauses for the configured delay before letting the opponent act.
"""

import logging
import time
from typing import Callable

from crazy_eights.models.game_state import GameState, GameStatus

from .engine import GameEngine

logger = logging.getLogger(__name__)


class OpponentScheduler:
    """Runs the opponent's turn after a fixed delay."""

    def __init__(
        self,
        engine: GameEngine,
        delay_seconds: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize scheduler.

        Args:
            engine: Engine whose opponent policy acts
            delay_seconds: Pause before each opponent action (config if not provided)
            sleep: Blocking wait function, replaceable in tests
        """
        self.engine = engine
        if delay_seconds is None:
            delay_seconds = engine.config.opponent.delay_seconds
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def is_due(self, state: GameState) -> bool:
        """Check if the opponent should act on this state."""
        return (
            state.status == GameStatus.PLAYING
            and state.current_turn == self.engine.policy.side
        )

    def step(self, state: GameState) -> GameState:
        """Let the opponent act once if it is its turn."""
        if not self.is_due(state):
            return state

        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
        next_state = self.engine.take_opponent_turn(state)
        logger.debug(f"Opponent turn: {next_state.last_action}")
        return next_state

    def run_until_player(
        self,
        state: GameState,
        on_step: Callable[[GameState], None] | None = None,
    ) -> GameState:
        """Run opponent turns until the player has to act or the game ends.

        Args:
            state: Current game state
            on_step: Called with each state the opponent produces

        Returns:
            First state that is not the opponent's turn
        """
        while self.is_due(state):
            state = self.step(state)
            if on_step:
                on_step(state)
        return state
