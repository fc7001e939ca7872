"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from crazy_eights.logging.game_logger import GameLogConfig


class DeckConfig(BaseModel):
    """Deck configuration."""

    num_decks: int = 2
    pool_size: int = 100
    hand_size: int = 8


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # None for a fresh shuffle every run


class OpponentConfig(BaseModel):
    """Opponent configuration."""

    delay_seconds: float = 1.5


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    deck: DeckConfig = DeckConfig()
    game: GameConfig = GameConfig()
    opponent: OpponentConfig = OpponentConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
