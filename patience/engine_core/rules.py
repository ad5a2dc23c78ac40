"""
Move Legality Rules - Pure predicates over cards and table state.

Tableau: alternate colours, each card exactly one rank below the card
it covers. An empty column takes only a King.

Foundations: one per suit, built upward from the Ace.
"""

from __future__ import annotations
from typing import Sequence

from .cards import HIGHEST_NUMBER, LOWEST_NUMBER, Card, Suit, next_number
from .state import Game


def can_stack_in_bars(below: Card, above: Card) -> bool:
    """True when above may sit directly on below in a tableau column."""
    is_color_ok = below.is_red != above.is_red
    is_order_ok = next_number(above.number) == below.number
    return is_color_ok and is_order_ok


def can_stack_in_stacks(below: Card, above: Card) -> bool:
    """True when above may sit directly on below in a foundation."""
    is_suit_ok = below.suit == above.suit
    is_order_ok = next_number(below.number) == above.number
    return is_suit_ok and is_order_ok


def can_place_on_bar(game: Game, bar_index: int, card: Card) -> bool:
    """Check whether card may be appended to a tableau column right now."""
    bar = game.bars[bar_index]
    destination_card = bar.top_card

    # Empty column takes only the highest card
    if destination_card is None:
        return card.number == HIGHEST_NUMBER

    # Cannot place over an unopened card
    if destination_card.face_down:
        return False

    return can_stack_in_bars(destination_card, card)


def can_place_on_stack(game: Game, stack_suit: Suit, card: Card) -> bool:
    """Check whether card may be placed on a suit's foundation right now."""
    if card.suit != stack_suit:
        return False

    destination_card = game.stacks[stack_suit].top_card
    if destination_card is None:
        return card.number == LOWEST_NUMBER

    return can_stack_in_stacks(destination_card, card)


def is_valid_run(cards: Sequence[Card]) -> bool:
    """A movable group: all face-up, alternating colour, descending by one."""
    if any(card.face_down for card in cards):
        return False
    return all(
        can_stack_in_bars(below, above)
        for below, above in zip(cards, cards[1:])
    )
