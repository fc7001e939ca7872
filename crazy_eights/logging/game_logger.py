"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from crazy_eights.models.card import Card
from crazy_eights.models.game_state import GameState, Side

from .formatters import format_card, format_cards


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._game_num = 0
        self._turn_num = 0

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, state: GameState) -> None:
        """Log game start with the initial deal.

        Args:
            state: State right after the deal.
        """
        self._game_num += 1
        self._turn_num = 0
        self._write({
            "type": "game_start",
            "game": self._game_num,
            "timestamp": datetime.now().isoformat(),
            "hands": {
                Side.PLAYER.value: format_cards(state.player_hand),
                Side.AI.value: format_cards(state.ai_hand),
            },
            "discard": format_card(state.top_discard),
            "suit": state.current_suit.value if state.current_suit else None,
            "deck": state.deck_count,
        })

    def log_turn(
        self,
        side: Side,
        action: str,
        card: Card | None,
        state: GameState,
    ) -> None:
        """Log a single transition.

        Args:
            side: Side that acted.
            action: "draw", "skip", "play", "wild" or "choose_suit".
            card: Card drawn or played (None for a skip).
            state: Game state after the action.
        """
        self._turn_num += 1
        self._write({
            "type": "turn",
            "game": self._game_num,
            "turn": self._turn_num,
            "side": side.value,
            "action": action,
            "card": format_card(card),
            "suit": state.current_suit.value if state.current_suit else None,
            "counts": {
                Side.PLAYER.value: state.hand_count(Side.PLAYER),
                Side.AI.value: state.hand_count(Side.AI),
                "deck": state.deck_count,
            },
        })

    def log_game_end(self, state: GameState) -> None:
        """Log game end with the winner.

        Args:
            state: Terminal game state.
        """
        self._write({
            "type": "game_end",
            "game": self._game_num,
            "turns": self._turn_num,
            "winner": state.winner.value if state.winner else None,
            "remaining": {
                Side.PLAYER.value: format_cards(state.player_hand),
                Side.AI.value: format_cards(state.ai_hand),
            },
        })
