"""
Tests for the card model.

Tests:
- Rank ordering
- Colours
- Identity ignores the face-down flag
- String keys
"""

import pytest

from ..engine_core.cards import (
    ALL_CARD_NUMBERS,
    Card,
    CardNumber,
    Suit,
    are_cards_equal,
    from_key,
    key,
    next_number,
    prev_number,
)
from ..engine_core.setup import generate_deck


class TestRankOrdering:
    """Tests for next/prev rank."""

    def test_ace_is_lowest_king_is_highest(self):
        assert ALL_CARD_NUMBERS[0] == CardNumber.ACE
        assert ALL_CARD_NUMBERS[-1] == CardNumber.KING
        assert len(ALL_CARD_NUMBERS) == 13

    def test_next_number(self):
        assert next_number(CardNumber.ACE) == CardNumber.TWO
        assert next_number(CardNumber.NINE) == CardNumber.TEN
        assert next_number(CardNumber.QUEEN) == CardNumber.KING

    def test_no_wraparound(self):
        assert next_number(CardNumber.KING) is None
        assert prev_number(CardNumber.ACE) is None

    def test_prev_number(self):
        assert prev_number(CardNumber.TWO) == CardNumber.ACE
        assert prev_number(CardNumber.KING) == CardNumber.QUEEN


class TestCardIdentity:
    """Tests for equality, hashing and colour."""

    def test_face_down_flag_not_part_of_identity(self):
        card = Card(Suit.HEARTS, CardNumber.TEN)
        assert card == card.flipped(face_down=True)
        assert hash(card) == hash(card.flipped(face_down=True))

    def test_flipped_returns_new_value(self):
        card = Card(Suit.HEARTS, CardNumber.TEN)
        flipped = card.flipped(face_down=True)
        assert flipped.face_down
        assert not card.face_down

    def test_different_cards_not_equal(self):
        assert Card(Suit.HEARTS, CardNumber.TEN) != Card(Suit.DIAMONDS, CardNumber.TEN)
        assert Card(Suit.HEARTS, CardNumber.TEN) != Card(Suit.HEARTS, CardNumber.NINE)

    def test_are_cards_equal_with_missing_card(self):
        card = Card(Suit.CLUBS, CardNumber.ACE)
        assert are_cards_equal(card, Card(Suit.CLUBS, CardNumber.ACE))
        assert not are_cards_equal(card, None)
        assert not are_cards_equal(None, None)

    def test_colours(self):
        assert Card(Suit.HEARTS, CardNumber.ACE).is_red
        assert Card(Suit.DIAMONDS, CardNumber.ACE).is_red
        assert Card(Suit.CLUBS, CardNumber.ACE).is_black
        assert Card(Suit.SPADES, CardNumber.ACE).is_black


class TestKeys:
    """Tests for string keys."""

    def test_key_format(self):
        assert key(Card(Suit.CLUBS, CardNumber.ACE)) == "♣A"
        assert key(Card(Suit.HEARTS, CardNumber.TEN)) == "♥10"

    def test_round_trip_all_cards(self):
        for card in generate_deck():
            assert from_key(key(card)) == card

    def test_keys_are_distinct(self):
        keys = {key(card) for card in generate_deck()}
        assert len(keys) == 52

    def test_from_key_is_face_up(self):
        assert not from_key("♠Q").face_down

    @pytest.mark.parametrize("bad_key", ["", "♣", "X10", "♣1", "♣11", "A♣"])
    def test_unknown_key_rejected(self, bad_key):
        with pytest.raises(ValueError):
            from_key(bad_key)
