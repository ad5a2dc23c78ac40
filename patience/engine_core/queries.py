"""
Query Helpers - Read-only questions the input layer asks the engine.

Used by:
1. Drag-and-drop to highlight drop targets
2. Input handling to turn a picked-up card into a Move source
3. Hint and auto-play tooling to enumerate legal actions

Nothing here modifies the Game; every rule comes from rules.py so the
answers always agree with the reducer.
"""

from __future__ import annotations

from .action import (
    Action,
    FlipCard,
    FromFoundation,
    FromTableau,
    FromWaste,
    Move,
    MoveSource,
    OpenDeck,
    ToFoundation,
    ToTableau,
)
from .cards import ALL_SUITS, Card, Suit, are_cards_equal, key
from .errors import EngineInvariantError
from .rules import can_place_on_bar, can_place_on_stack, is_valid_run
from .state import Game


def get_possible_stack_destinations(game: Game, card: Card) -> list[Suit]:
    """Suits whose foundation would accept card right now."""
    return [suit for suit in ALL_SUITS if can_place_on_stack(game, suit, card)]


def get_possible_bar_destinations(game: Game, card: Card) -> list[int]:
    """Column indices that would accept card right now."""
    return [
        bar_index
        for bar_index in range(len(game.bars))
        if can_place_on_bar(game, bar_index, card)
    ]


def generate_source(game: Game, card: Card) -> MoveSource:
    """
    Locate where card can currently be played from.

    Checks the waste top, then face-up tableau cards column by column,
    then the foundation tops.

    Raises:
        EngineInvariantError: If card is buried, face-down or in the stock
    """
    if are_cards_equal(game.free_cards.top_card, card):
        return FromWaste()

    for bar_index, bar in enumerate(game.bars):
        for card_index, bar_card in enumerate(bar):
            if bar_card.face_down:
                continue
            if bar_card == card:
                return FromTableau(column_index=bar_index, card_index=card_index)

    for suit in ALL_SUITS:
        if are_cards_equal(game.stacks[suit].top_card, card):
            return FromFoundation(suit=suit)

    raise EngineInvariantError(f"{key(card)} is not at a playable position")


def get_card_group(game: Game, card: Card) -> list[Card]:
    """
    The cards that travel with card when it is picked up.

    A face-up tableau card brings everything above it; the waste top
    travels alone. Anything else yields an empty list.
    """
    for bar in game.bars:
        for card_index, bar_card in enumerate(bar):
            if bar_card == card:
                if bar_card.face_down:
                    return []
                return list(bar.cards[card_index:])

    if are_cards_equal(game.free_cards.top_card, card):
        return [game.free_cards.top_card]

    return []


def legal_actions(game: Game) -> list[Action]:
    """
    Every action the reducer would accept in this state.

    Order: OpenDeck, FlipCards, then moves by source (waste, tableau,
    foundations).
    """
    actions: list[Action] = []

    if not game.deck.is_empty:
        actions.append(OpenDeck())

    for bar_index, bar in enumerate(game.bars):
        if bar.top_card is not None and bar.top_card.face_down:
            actions.append(FlipCard(column_index=bar_index))

    waste_card = game.free_cards.top_card
    if waste_card is not None:
        actions.extend(_moves_for(game, FromWaste(), waste_card, to_stacks=True))

    for bar_index, bar in enumerate(game.bars):
        for card_index, bar_card in enumerate(bar):
            if bar_card.face_down or not is_valid_run(bar.cards[card_index:]):
                continue
            source = FromTableau(column_index=bar_index, card_index=card_index)
            is_last = card_index == len(bar) - 1
            actions.extend(
                move for move in _moves_for(game, source, bar_card, to_stacks=is_last)
                if not (isinstance(move.destination, ToTableau)
                        and move.destination.column_index == bar_index)
            )

    for suit in ALL_SUITS:
        top_card = game.stacks[suit].top_card
        if top_card is not None:
            actions.extend(_moves_for(game, FromFoundation(suit=suit), top_card, to_stacks=False))

    return actions


def _moves_for(game: Game, source: MoveSource, card: Card, to_stacks: bool) -> list[Move]:
    moves = []
    if to_stacks:
        moves.extend(
            Move(source=source, destination=ToFoundation(suit=suit))
            for suit in get_possible_stack_destinations(game, card)
        )
    moves.extend(
        Move(source=source, destination=ToTableau(column_index=bar_index))
        for bar_index in get_possible_bar_destinations(game, card)
    )
    return moves
