"""
Pytest fixtures for Patience tests.
"""

import pytest

from ..engine_core.cards import ALL_SUITS, Card, Suit, from_key
from ..engine_core.setup import generate_deck, generate_game, shuffle
from ..engine_core.state import BARS_COUNT, Game, Pile


def up(card_key: str) -> Card:
    """Face-up card from a key."""
    return from_key(card_key)


def down(card_key: str) -> Card:
    """Face-down card from a key."""
    return from_key(card_key).flipped(face_down=True)


@pytest.fixture
def fresh_game() -> Game:
    """A seeded opening deal."""
    return generate_game(shuffle(generate_deck(), seed=7))


@pytest.fixture
def unshuffled_game() -> Game:
    """The deal of the canonical deck order."""
    return generate_game(generate_deck())


@pytest.fixture
def build_game():
    """
    Build a full-deck Game from the zones a test cares about.

    Every card not placed explicitly goes face-down into the stock, so
    the built table always holds exactly 52 cards.
    """
    def _build(
        free_cards: list[Card] | None = None,
        stacks: dict[Suit, list[Card]] | None = None,
        bars: list[list[Card]] | None = None,
        deck: list[Card] | None = None,
    ) -> Game:
        free_cards = free_cards or []
        stacks = stacks or {}
        bars = list(bars or [])
        bars += [[] for _ in range(BARS_COUNT - len(bars))]

        placed = set(free_cards)
        for suit in ALL_SUITS:
            placed.update(stacks.get(suit, []))
        for bar in bars:
            placed.update(bar)

        if deck is None:
            deck = [card.flipped(face_down=True) for card in generate_deck() if card not in placed]

        return Game(
            deck=Pile(cards=deck),
            free_cards=Pile(cards=free_cards),
            stacks={suit: Pile(cards=cards) for suit, cards in stacks.items()},
            bars=tuple(Pile(cards=bar) for bar in bars),
        )

    return _build
