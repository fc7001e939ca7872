"""Tests for the JSONL game logger and formatters."""

import json

from crazy_eights.logging import GameLogConfig, GameLogger, format_card, format_cards
from crazy_eights.models.card import Card, Rank, Suit
from crazy_eights.models.game_state import GameState, GameStatus, Side


def read_events(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def make_state() -> GameState:
    top = Card.create(Suit.CLUBS, Rank.SEVEN)
    return GameState(
        deck=(Card.create(Suit.SPADES, Rank.TEN),),
        discard_pile=(top,),
        player_hand=(Card.create(Suit.HEARTS, Rank.EIGHT), Card.create(Suit.DIAMONDS, Rank.QUEEN)),
        ai_hand=(Card.create(Suit.SPADES, Rank.ACE),),
        status=GameStatus.PLAYING,
        current_suit=top.suit,
    )


class TestFormatters:
    """Tests for card formatters."""

    def test_format_card(self):
        """Test compact card codes."""
        assert format_card(Card.create(Suit.HEARTS, Rank.EIGHT)) == "H8"
        assert format_card(Card.create(Suit.SPADES, Rank.TEN)) == "S10"
        assert format_card(None) == ""

    def test_format_cards_keeps_order(self):
        """Test that cards are listed in the given order."""
        cards = [Card.create(Suit.SPADES, Rank.KING), Card.create(Suit.HEARTS, Rank.ACE)]
        assert format_cards(cards) == "SK,HA"
        assert format_cards([]) == ""


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_disabled_writes_nothing(self, tmp_path):
        """Test that a disabled logger creates no file."""
        path = tmp_path / "game.jsonl"
        with GameLogger(GameLogConfig(enabled=False, output_path=str(path))) as game_logger:
            game_logger.log_game_start(make_state())
        assert not path.exists()

    def test_game_events(self, tmp_path):
        """Test the start, turn and end records."""
        path = tmp_path / "game.jsonl"
        state = make_state()
        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            game_logger.log_game_start(state)
            game_logger.log_turn(Side.PLAYER, "skip", None, state)
            over = state.model_copy(update={"status": GameStatus.GAME_OVER, "winner": Side.AI})
            game_logger.log_game_end(over)

        start, turn, end = read_events(path)

        assert start["type"] == "game_start"
        assert start["game"] == 1
        assert start["hands"] == {"player": "H8,DQ", "ai": "SA"}
        assert start["discard"] == "C7"
        assert start["suit"] == "clubs"
        assert start["deck"] == 1

        assert turn == {
            "type": "turn",
            "game": 1,
            "turn": 1,
            "side": "player",
            "action": "skip",
            "card": "",
            "suit": "clubs",
            "counts": {"player": 2, "ai": 1, "deck": 1},
        }

        assert end["type"] == "game_end"
        assert end["winner"] == "ai"
        assert end["turns"] == 1

    def test_game_number_increments(self, tmp_path):
        """Test that each game start opens a new game number."""
        path = tmp_path / "game.jsonl"
        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            game_logger.log_game_start(make_state())
            game_logger.log_game_start(make_state())

        assert [e["game"] for e in read_events(path)] == [1, 2]
