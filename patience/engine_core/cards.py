"""
Card Model - Suits, ranks and the identity of the 52 cards.

A card is identified by suit and number only. The face-down flag is
presentation state carried on the value, so two copies of the same card
with different flags still compare equal.

String keys ("♣A", "♥10") are the only serialized form the engine defines.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum


class Suit(Enum):
    """The four suits, valued by their symbol."""
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class CardNumber(Enum):
    """Ranks, declared in playing order from Ace to King."""
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


ALL_SUITS: tuple[Suit, ...] = (
    Suit.CLUBS,
    Suit.DIAMONDS,
    Suit.HEARTS,
    Suit.SPADES,
)

ALL_CARD_NUMBERS: tuple[CardNumber, ...] = tuple(CardNumber)

LOWEST_NUMBER = ALL_CARD_NUMBERS[0]
HIGHEST_NUMBER = ALL_CARD_NUMBERS[-1]


def next_number(number: CardNumber) -> CardNumber | None:
    """Return the rank directly above, or None for a King."""
    index = ALL_CARD_NUMBERS.index(number)
    if index + 1 >= len(ALL_CARD_NUMBERS):
        return None
    return ALL_CARD_NUMBERS[index + 1]


def prev_number(number: CardNumber) -> CardNumber | None:
    """Return the rank directly below, or None for an Ace."""
    index = ALL_CARD_NUMBERS.index(number)
    if index == 0:
        return None
    return ALL_CARD_NUMBERS[index - 1]


@dataclass(frozen=True, eq=False)
class Card:
    """
    A playing card value.

    Immutable: flipping returns a new Card.
    """
    suit: Suit
    number: CardNumber
    face_down: bool = False

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.number == other.number

    def __hash__(self):
        return hash((self.suit, self.number))

    def __str__(self):
        return key(self)

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    @property
    def is_black(self) -> bool:
        return not self.suit.is_red

    def flipped(self, face_down: bool) -> Card:
        """Return a copy with the face-down flag set."""
        return replace(self, face_down=face_down)


def are_cards_equal(card1: Card | None, card2: Card | None) -> bool:
    """Identity check that treats a missing card as matching nothing."""
    if card1 is None or card2 is None:
        return False
    return card1 == card2


def key(card: Card) -> str:
    """Stable string identity: suit symbol followed by rank symbol."""
    return f"{card.suit.value}{card.number.value}"


_SUITS_BY_SYMBOL = {suit.value: suit for suit in Suit}
_NUMBERS_BY_SYMBOL = {number.value: number for number in CardNumber}


def from_key(card_key: str) -> Card:
    """
    Parse a key produced by key().

    Returns a face-up card.

    Raises:
        ValueError: If the suit or rank symbol is unknown
    """
    suit = _SUITS_BY_SYMBOL.get(card_key[:1])
    number = _NUMBERS_BY_SYMBOL.get(card_key[1:])
    if suit is None or number is None:
        raise ValueError(f"Unknown card key: {card_key!r}")
    return Card(suit=suit, number=number)
