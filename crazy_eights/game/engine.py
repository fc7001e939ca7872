"""Game engine for Crazy Eights.

Every operation takes a GameState and returns the next one; the engine keeps
no game state of its own, so the host decides which state is current.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from crazy_eights.config import Config
from crazy_eights.models.card import SUIT_SYMBOLS, Card, Suit
from crazy_eights.models.game_state import GameState, GameStatus, Side

from .deck import build_pool, choose_initial_discard, deal
from .intents import ChooseSuit, Draw, Intent, Play, Restart
from .opponent import OpponentPolicy
from .validator import IllegalMoveError, MoveValidator, ValidationResult

if TYPE_CHECKING:
    from crazy_eights.logging import GameLogger

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Crazy Eights!"


class GameEngine:
    """Rules engine for a player vs. AI game."""

    def __init__(
        self,
        config: Config | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
        policy: OpponentPolicy | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            rng: Random source for shuffling (seeded from config if not provided)
            game_logger: GameLogger instance for detailed logging
            policy: Opponent decision policy
        """
        self.config = config or Config()
        self.rng = rng or random.Random(self.config.game.seed)
        self.game_logger = game_logger
        self.policy = policy or OpponentPolicy(Side.AI)
        self.validator = MoveValidator()

    def waiting_state(self) -> GameState:
        """Get the state shown before the first deal."""
        return GameState(last_action=WELCOME_MESSAGE)

    def initialize(self) -> GameState:
        """Shuffle a new pool and deal a game.

        Raises:
            DeckConfigurationError: If the deck settings cannot produce a game.
        """
        deck_config = self.config.deck
        pool = build_pool(deck_config.num_decks, deck_config.pool_size, self.rng)
        player_hand, ai_hand, remaining = deal(pool, deck_config.hand_size)
        seed, remaining = choose_initial_discard(remaining)

        state = GameState(
            deck=tuple(remaining),
            discard_pile=(seed,),
            player_hand=tuple(player_hand),
            ai_hand=tuple(ai_hand),
            current_turn=Side.PLAYER,
            status=GameStatus.PLAYING,
            current_suit=seed.suit,
            last_action="Game started! Your turn.",
        )
        logger.info(
            f"Game dealt: {len(player_hand)} cards each, discard {seed}, deck {state.deck_count}"
        )

        if self.game_logger:
            self.game_logger.log_game_start(state)
        return state

    def restart(self) -> GameState:
        """Discard the current game and deal a new one."""
        logger.info("Restarting game")
        return self.initialize()

    def apply(self, state: GameState, intent: Intent) -> GameState:
        """Apply an intent to a state.

        Args:
            state: Current game state
            intent: Draw, Play, ChooseSuit or Restart

        Returns:
            Next game state

        Raises:
            IllegalMoveError: If the intent breaks the rules in this state.
        """
        if isinstance(intent, Restart):
            return self.restart()
        if isinstance(intent, Draw):
            return self.draw(state, intent.side)
        if isinstance(intent, Play):
            return self.play(state, intent.card, intent.side)
        if isinstance(intent, ChooseSuit):
            return self.choose_suit(state, intent.suit)
        raise TypeError(f"Unknown intent: {intent!r}")

    def draw(self, state: GameState, side: Side) -> GameState:
        """Draw one card and pass the turn.

        An empty draw pile is not an error: nothing is drawn and the turn
        passes to the other side.
        """
        self._check(self.validator.validate_draw(state, side))

        if not state.deck:
            next_state = state.model_copy(update={
                "current_turn": side.other,
                "last_action": "Draw pile is empty, turn skipped.",
            })
            logger.debug(f"{side.value} skipped: draw pile empty")
            self._log_turn(side, "skip", None, next_state)
            return next_state

        card = state.deck[-1]
        next_state = state.model_copy(update={
            "deck": state.deck[:-1],
            **state.with_hand(side, state.hand(side) + (card,)),
            "current_turn": side.other,
            "last_action": f"{side.label} drew a card.",
        })
        logger.debug(f"{side.value} drew {card}")
        self._log_turn(side, "draw", card, next_state)
        return next_state

    def play(self, state: GameState, card: Card, side: Side) -> GameState:
        """Play a card from ``side``'s hand.

        A wild card played by the player is held until choose_suit; the
        AI names its suit immediately.
        """
        self._check(self.validator.validate_play(state, card, side))

        hand = tuple(c for c in state.hand(side) if c.id != card.id)

        if card.is_wild and side is Side.PLAYER:
            next_state = state.model_copy(update={
                **state.with_hand(side, hand),
                "pending_card": card,
                "status": GameStatus.SUIT_SELECTION,
                "last_action": "Choose a new suit.",
            })
            logger.debug(f"{side.value} played wild {card}, awaiting suit")
            self._log_turn(side, "wild", card, next_state)
            return next_state

        suit = self.policy.choose_suit(hand) if card.is_wild else card.suit
        return self._complete_play(state, card, side, hand, suit)

    def choose_suit(self, state: GameState, suit: Suit) -> GameState:
        """Name the suit for the player's pending wild card and finish the play."""
        self._check(self.validator.validate_choose_suit(state, suit))
        return self._complete_play(
            state, state.pending_card, Side.PLAYER, state.player_hand, suit
        )

    def take_opponent_turn(self, state: GameState) -> GameState:
        """Run the opponent policy for one turn (play or draw)."""
        self._check(self.validator.validate_draw(state, self.policy.side))

        card = self.policy.choose_card(state)
        if card is None:
            return self.draw(state, self.policy.side)
        return self.play(state, card, self.policy.side)

    def _complete_play(
        self,
        state: GameState,
        card: Card,
        side: Side,
        hand: tuple[Card, ...],
        suit: Suit,
    ) -> GameState:
        """Put a card on the discard pile and either pass the turn or end the game."""
        update = {
            **state.with_hand(side, hand),
            "discard_pile": state.discard_pile + (card,),
            "current_suit": suit,
            "pending_card": None,
        }
        action = "choose_suit" if state.status == GameStatus.SUIT_SELECTION else "play"

        if not hand:
            owner = "your" if side is Side.PLAYER else "its"
            next_state = state.model_copy(update={
                **update,
                "status": GameStatus.GAME_OVER,
                "winner": side,
                "last_action": f"{side.label} played all {owner} cards!",
            })
            logger.info(f"Game over: {side.value} wins")
            self._log_turn(side, action, card, next_state)
            if self.game_logger:
                self.game_logger.log_game_end(next_state)
            return next_state

        message = f"{side.label} played {card}"
        if card.is_wild:
            message += f" and changed the suit to {SUIT_SYMBOLS[suit]}"
        next_state = state.model_copy(update={
            **update,
            "status": GameStatus.PLAYING,
            "current_turn": side.other,
            "last_action": message,
        })
        logger.debug(f"{side.value} played {card}, suit now {suit.value}")
        self._log_turn(side, action, card, next_state)
        return next_state

    def _check(self, result: ValidationResult) -> None:
        """Raise IllegalMoveError for a failed validation."""
        if not result.is_valid:
            logger.warning(f"Rejected intent: {result.error_message}")
            raise IllegalMoveError(result)

    def _log_turn(
        self, side: Side, action: str, card: Card | None, state: GameState
    ) -> None:
        if self.game_logger:
            self.game_logger.log_turn(side, action, card, state)
