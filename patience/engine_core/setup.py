"""
Deck Factory - Builds the deck and deals the opening table.

This module handles:
- The canonical 52-card order
- Shuffling with a seed for determinism
- The triangular Klondike deal
"""

from __future__ import annotations
import random
from typing import Sequence

from .cards import ALL_CARD_NUMBERS, ALL_SUITS, Card
from .state import BARS_COUNT, DECK_SIZE, Game, Pile


def generate_deck() -> list[Card]:
    """Return all 52 cards face-up, suit-major then rank-minor."""
    return [
        Card(suit=suit, number=number)
        for suit in ALL_SUITS
        for number in ALL_CARD_NUMBERS
    ]


def shuffle(cards: Sequence[Card], seed: int | None = None) -> list[Card]:
    """Return a shuffled copy of cards. The same seed gives the same order."""
    rng = random.Random(seed)
    shuffled = list(cards)
    rng.shuffle(shuffled)
    return shuffled


def generate_game(shuffled_deck: Sequence[Card]) -> Game:
    """
    Deal a new game from a shuffled deck.

    Column i receives i face-down cards followed by one face-up card,
    each taken from the end of the sequence. The 24 undealt cards become
    the face-down stock, in their original order.

    Args:
        shuffled_deck: Exactly 52 distinct cards

    Returns:
        Initial Game ready for play

    Raises:
        ValueError: If the input is not a full deck of distinct cards
    """
    if len(shuffled_deck) != DECK_SIZE:
        raise ValueError(f"A deal needs {DECK_SIZE} cards, got {len(shuffled_deck)}")
    if len(set(shuffled_deck)) != DECK_SIZE:
        raise ValueError("A deal needs 52 distinct cards")

    remaining = list(shuffled_deck)
    bars = []
    for bar_index in range(BARS_COUNT):
        bar = [remaining.pop().flipped(face_down=True) for _ in range(bar_index)]
        bar.append(remaining.pop().flipped(face_down=False))
        bars.append(Pile(cards=bar))

    return Game(
        deck=Pile(cards=[card.flipped(face_down=True) for card in remaining]),
        bars=tuple(bars),
    )


def new_game(seed: int | None = None) -> Game:
    """Shuffle a fresh deck and deal it."""
    return generate_game(shuffle(generate_deck(), seed=seed))
