"""Card pool construction and the initial deal."""

import logging
import random

from crazy_eights.models.card import Card, create_full_deck

logger = logging.getLogger(__name__)

CARDS_PER_DECK = 52


class DeckConfigurationError(ValueError):
    """Deck setup cannot produce a playable game."""


def build_pool(
    num_decks: int,
    pool_size: int,
    rng: random.Random | None = None,
) -> list[Card]:
    """Build the shuffled card pool.

    The decks are shuffled together before truncation, so the cards left out
    of the pool are a uniformly random selection.

    Args:
        num_decks: Number of full 52-card decks to combine.
        pool_size: Number of cards kept after shuffling.
        rng: Random source (module-level random if not provided).

    Returns:
        Shuffled pool of ``pool_size`` cards.

    Raises:
        DeckConfigurationError: If the decks cannot supply ``pool_size`` cards.
    """
    if num_decks < 1 or pool_size < 1:
        raise DeckConfigurationError(
            f"num_decks and pool_size must be positive (got {num_decks}, {pool_size})"
        )
    available = num_decks * CARDS_PER_DECK
    if pool_size > available:
        raise DeckConfigurationError(
            f"Pool size {pool_size} exceeds the {available} cards in {num_decks} deck(s)"
        )

    cards: list[Card] = []
    for deck_index in range(num_decks):
        cards.extend(create_full_deck(deck_index))

    (rng or random).shuffle(cards)
    logger.debug(f"Built pool of {pool_size} from {available} cards")
    return cards[:pool_size]


def deal(
    pool: list[Card], hand_size: int
) -> tuple[list[Card], list[Card], list[Card]]:
    """Deal two hands from the front of the pool.

    Args:
        pool: Shuffled pool.
        hand_size: Cards per hand.

    Returns:
        Tuple of (player hand, AI hand, remaining pool).

    Raises:
        DeckConfigurationError: If the pool cannot cover both hands.
    """
    if hand_size < 1:
        raise DeckConfigurationError(f"hand_size must be positive (got {hand_size})")
    if 2 * hand_size > len(pool):
        raise DeckConfigurationError(
            f"Pool of {len(pool)} cards cannot deal two hands of {hand_size}"
        )

    player_hand = pool[:hand_size]
    ai_hand = pool[hand_size : 2 * hand_size]
    return player_hand, ai_hand, pool[2 * hand_size :]


def choose_initial_discard(pool: list[Card]) -> tuple[Card, list[Card]]:
    """Pick the first non-wild card from the front of the pool.

    Args:
        pool: Cards left after the deal.

    Returns:
        Tuple of (seed card, remaining pool without it).

    Raises:
        DeckConfigurationError: If every remaining card is wild.
    """
    for index, card in enumerate(pool):
        if not card.is_wild:
            return card, pool[:index] + pool[index + 1 :]

    raise DeckConfigurationError(
        f"No non-wild card among the {len(pool)} cards left to seed the discard pile"
    )
