"""Main entry point for a terminal game of Crazy Eights."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from crazy_eights.config import load_config
from crazy_eights.game.engine import GameEngine
from crazy_eights.game.intents import ChooseSuit, Draw, Intent, Play, Restart
from crazy_eights.game.scheduler import OpponentScheduler
from crazy_eights.game.validator import IllegalMoveError
from crazy_eights.logging import GameLogConfig, GameLogger
from crazy_eights.models.card import Card, Suit
from crazy_eights.models.game_state import GameState, GameStatus, Side
from crazy_eights.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT = "quit"

SUIT_KEYS: dict[str, Suit] = {
    "h": Suit.HEARTS,
    "d": Suit.DIAMONDS,
    "c": Suit.CLUBS,
    "s": Suit.SPADES,
}


def generate_log_filename(log_dir: str) -> str:
    """Generate a timestamped game log filename inside ``log_dir``."""
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_crazy_eights.jsonl")


def parse_command(text: str, state: GameState, hand: list[Card]) -> Intent | str | None:
    """Translate a line of user input into an intent.

    Args:
        text: Raw input line.
        state: State the command applies to.
        hand: Player's hand as numbered on screen (1-based).

    Returns:
        An intent, QUIT, or None if the input is not understood.
    """
    command = text.strip().lower()
    if command in ("q", "quit"):
        return QUIT
    if command in ("r", "restart"):
        return Restart()

    if state.status == GameStatus.SUIT_SELECTION:
        if command in SUIT_KEYS:
            return ChooseSuit(SUIT_KEYS[command])
        for suit in Suit:
            if command == suit.value:
                return ChooseSuit(suit)
        return None

    if state.status != GameStatus.PLAYING:
        return None
    if command in ("d", "draw"):
        return Draw(Side.PLAYER)
    if command.isdigit() and 1 <= int(command) <= len(hand):
        return Play(hand[int(command) - 1], Side.PLAYER)
    return None


def _prompt(state: GameState) -> str:
    if state.is_over:
        return "[r]estart or [q]uit: "
    if state.status == GameStatus.SUIT_SELECTION:
        return "Choose a suit [h/d/c/s]: "
    return "Card number, [d]raw, [r]estart or [q]uit: "


def run(
    engine: GameEngine,
    scheduler: OpponentScheduler,
    display: GameDisplay,
    read: Callable[[str], str] = input,
) -> GameState:
    """Play games until the user quits.

    Returns:
        The last state reached.
    """
    state = engine.initialize()
    display.print_state(state)

    while True:
        if scheduler.is_due(state):
            state = scheduler.step(state)
            display.print_state(state)
            continue

        if state.is_over:
            display.print_game_over(state)
        elif state.status == GameStatus.PLAYING:
            display.print_hand(state)

        command = parse_command(read(_prompt(state)), state, display.player_cards(state))
        if command == QUIT:
            return state
        if command is None:
            print("Unrecognized command.")
            continue

        try:
            state = engine.apply(state, command)
        except IllegalMoveError as e:
            print(f"Illegal move: {e}")
            continue
        display.print_state(state)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Crazy Eights card game against a simple AI"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Cards dealt to each side (overrides config)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        help="Seconds the AI waits before acting (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Reveal the AI hand",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.hand_size:
        config.deck.hand_size = args.hand_size
    if args.delay is not None:
        config.opponent.delay_seconds = args.delay
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    # CLI argument overrides config file
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    if args.game_log:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = GameLogConfig(
            enabled=game_log_enabled, output_path=config.game_log.output_path
        )

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    try:
        with GameLogger(game_log_config) as game_logger:
            if game_log_enabled:
                print(f"Game log: {game_log_config.output_path}")
            engine = GameEngine(config, game_logger=game_logger)
            scheduler = OpponentScheduler(engine)
            run(engine, scheduler, display)
        return 0

    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
