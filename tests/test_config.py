"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from crazy_eights.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test the default configuration."""
        config = load_config()

        assert config.deck.num_decks == 2
        assert config.deck.pool_size == 100
        assert config.deck.hand_size == 8
        assert config.game.seed is None
        assert config.opponent.delay_seconds == 1.5
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        """Test that a missing file falls back to defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    def test_yaml_overrides(self, tmp_path):
        """Test loading values from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "deck:\n"
            "  hand_size: 10\n"
            "game:\n"
            "  seed: 7\n"
            "opponent:\n"
            "  delay_seconds: 0.5\n"
            "game_log:\n"
            "  enabled: true\n"
            "  output_path: logs/run.jsonl\n",
            encoding="utf-8",
        )

        config = load_config(str(path))

        assert config.deck.hand_size == 10
        assert config.deck.pool_size == 100
        assert config.game.seed == 7
        assert config.opponent.delay_seconds == 0.5
        assert config.game_log.enabled
        assert config.game_log.output_path == "logs/run.jsonl"

    def test_invalid_value(self, tmp_path):
        """Test that a wrongly typed value is rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("deck:\n  hand_size: many\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)
