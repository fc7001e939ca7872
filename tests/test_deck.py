"""Tests for pool construction and dealing."""

import random

import pytest

from crazy_eights.game.deck import (
    DeckConfigurationError,
    build_pool,
    choose_initial_discard,
    deal,
)
from crazy_eights.models.card import Card, Rank, Suit, create_full_deck


class TestBuildPool:
    """Tests for build_pool."""

    def test_pool_size(self):
        """Test a 100-card pool from two decks."""
        pool = build_pool(2, 100, random.Random(0))

        assert len(pool) == 100
        assert len({c.id for c in pool}) == 100

    def test_seeded_shuffle_is_reproducible(self):
        """Test that the same seed gives the same pool."""
        first = build_pool(2, 100, random.Random(42))
        second = build_pool(2, 100, random.Random(42))
        assert first == second

    def test_truncation_after_shuffle(self):
        """Test that omitted cards are not the tail of the sorted decks."""
        sorted_head = {c.id for c in (create_full_deck(0) + create_full_deck(1))[:100]}
        pool = build_pool(2, 100, random.Random(3))
        assert {c.id for c in pool} != sorted_head

    def test_full_pool(self):
        """Test that the pool may use every card."""
        assert len(build_pool(2, 104, random.Random(0))) == 104

    def test_pool_too_large(self):
        """Test that asking for more cards than the decks hold fails."""
        with pytest.raises(DeckConfigurationError):
            build_pool(2, 105)

    @pytest.mark.parametrize("num_decks,pool_size", [(0, 10), (1, 0), (-1, 5)])
    def test_non_positive_sizes(self, num_decks, pool_size):
        """Test that non-positive sizes are rejected."""
        with pytest.raises(DeckConfigurationError):
            build_pool(num_decks, pool_size)


class TestDeal:
    """Tests for deal and choose_initial_discard."""

    def test_deal_from_front(self):
        """Test that the player gets the first cards, then the AI."""
        pool = build_pool(2, 100, random.Random(7))
        player, ai, remaining = deal(pool, 8)

        assert player == pool[:8]
        assert ai == pool[8:16]
        assert remaining == pool[16:]

    def test_deal_pool_too_small(self):
        """Test that a pool smaller than two hands fails."""
        pool = build_pool(1, 10, random.Random(0))
        with pytest.raises(DeckConfigurationError):
            deal(pool, 6)

    def test_initial_discard_skips_wild(self):
        """Test that leading eights are skipped for the seed card."""
        eight_a = Card.create(Suit.HEARTS, Rank.EIGHT, 0)
        eight_b = Card.create(Suit.CLUBS, Rank.EIGHT, 1)
        five = Card.create(Suit.SPADES, Rank.FIVE, 0)
        king = Card.create(Suit.HEARTS, Rank.KING, 0)

        seed, remaining = choose_initial_discard([eight_a, eight_b, five, king])

        assert seed == five
        assert remaining == [eight_a, eight_b, king]

    def test_initial_discard_first_card(self):
        """Test that a non-wild first card is taken directly."""
        king = Card.create(Suit.HEARTS, Rank.KING)
        five = Card.create(Suit.SPADES, Rank.FIVE)

        seed, remaining = choose_initial_discard([king, five])

        assert seed == king
        assert remaining == [five]

    def test_initial_discard_all_wild(self):
        """Test that a pool of only eights is a configuration error."""
        eights = [Card.create(s, Rank.EIGHT) for s in Suit]
        with pytest.raises(DeckConfigurationError):
            choose_initial_discard(eights)

    def test_deal_scenario(self):
        """Test the standard setup: 8 cards each, 83 left after the seed."""
        pool = build_pool(2, 100, random.Random(11))
        player, ai, remaining = deal(pool, 8)
        seed, remaining = choose_initial_discard(remaining)

        assert len(player) == 8
        assert len(ai) == 8
        assert len(remaining) == 83
        assert not seed.is_wild
