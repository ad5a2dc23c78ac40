"""
Reducer - Applies actions to table state.

The reducer is the only way to get from one Game to the next.

Design principles:
- Pure function: (game, action) -> new game
- Validates everything before building the new state
- Never partially applies a move
- InvalidMove for rule violations, EngineInvariantError for anything
  that should be unreachable
"""

from __future__ import annotations
import logging

from .action import (
    Action,
    ActionResult,
    FlipCard,
    FromFoundation,
    FromTableau,
    FromWaste,
    Move,
    OpenDeck,
    ToFoundation,
    ToTableau,
)
from .cards import Suit, key
from .errors import EngineInvariantError, InvalidMove
from .rules import can_place_on_bar, can_place_on_stack, is_valid_run
from .state import Game, Pile

logger = logging.getLogger(__name__)


def _bar(game: Game, column_index: int) -> Pile:
    if not 0 <= column_index < len(game.bars):
        raise InvalidMove(f"There is no column {column_index}.")
    return game.bars[column_index]


def _check_card_index(bar: Pile, column_index: int, card_index: int) -> None:
    if not 0 <= card_index < len(bar):
        raise InvalidMove(f"Column {column_index} has no card at position {card_index}.")


def _check_placing_on_bar(game: Game, column_index: int, card) -> None:
    if not can_place_on_bar(game, column_index, card):
        raise InvalidMove(f"{key(card)} cannot go on column {column_index}.")


def _check_placing_on_stack(game: Game, suit: Suit, card) -> None:
    if not can_place_on_stack(game, suit, card):
        raise InvalidMove(f"{key(card)} cannot go on the {suit.value} foundation.")


class Reducer:
    """
    Reducer applies actions to table state.

    Stateless - the caller holds the current Game.
    """

    def react(self, game: Game, action: Action) -> Game:
        """
        Apply an action and return the next state.

        Raises:
            InvalidMove: If the action breaks a rule
            EngineInvariantError: If the action is not a known variant
        """
        if isinstance(action, Move):
            return self._move(game, action)
        if isinstance(action, OpenDeck):
            return self._open_deck(game)
        if isinstance(action, FlipCard):
            return self._flip_card(game, action.column_index)
        raise EngineInvariantError(f"Unknown action: {action!r}")

    def apply(self, game: Game, action: Action) -> ActionResult:
        """
        Apply an action to the table state.

        Returns ActionResult with new state or error. Only InvalidMove is
        turned into a failure result; engine errors propagate.
        """
        try:
            new_game = self.react(game, action)
        except InvalidMove as e:
            logger.debug("Rejected %r: %s", action, e)
            return ActionResult.failure(str(e), error_code="INVALID_MOVE")
        return ActionResult.success_with_state(new_game, changes=[describe_action(action)])

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def _move(self, game: Game, action: Move) -> Game:
        source, destination = action.source, action.destination

        if isinstance(source, FromWaste):
            if isinstance(destination, ToFoundation):
                return self._move_free_to_stacks(game, destination.suit)
            if isinstance(destination, ToTableau):
                return self._move_free_to_bars(game, destination.column_index)
        elif isinstance(source, FromFoundation):
            if isinstance(destination, ToFoundation):
                return self._move_stack_to_stacks(game, source.suit, destination.suit)
            if isinstance(destination, ToTableau):
                return self._move_stack_to_bars(game, source.suit, destination.column_index)
        elif isinstance(source, FromTableau):
            if isinstance(destination, ToFoundation):
                return self._move_bar_to_stacks(
                    game, source.column_index, source.card_index, destination.suit
                )
            if isinstance(destination, ToTableau):
                return self._move_bar_to_bar(
                    game, source.column_index, source.card_index, destination.column_index
                )

        raise EngineInvariantError(f"Unhandled move: {source!r} -> {destination!r}")

    def _move_free_to_stacks(self, game: Game, suit: Suit) -> Game:
        card, free_cards = game.free_cards.remove_top()
        if card is None:
            raise InvalidMove("The waste is empty.")
        _check_placing_on_stack(game, suit, card)

        new_game = game._copy_with(free_cards=free_cards)
        return new_game.with_stack(suit, game.stacks[suit].add_top(card))

    def _move_free_to_bars(self, game: Game, column_index: int) -> Game:
        bar = _bar(game, column_index)
        card, free_cards = game.free_cards.remove_top()
        if card is None:
            raise InvalidMove("The waste is empty.")
        _check_placing_on_bar(game, column_index, card)

        new_game = game._copy_with(free_cards=free_cards)
        return new_game.with_bar(column_index, bar.add_top(card))

    def _move_stack_to_stacks(self, game: Game, source_suit: Suit, destination_suit: Suit) -> Game:
        # A card only ever fits its own foundation, which it already sits on
        raise InvalidMove("Cards never move between foundations.")

    def _move_stack_to_bars(self, game: Game, suit: Suit, column_index: int) -> Game:
        bar = _bar(game, column_index)
        card, stack = game.stacks[suit].remove_top()
        if card is None:
            raise InvalidMove(f"The {suit.value} foundation is empty.")
        if card.face_down:
            raise InvalidMove(f"{key(card)} is face down.")
        _check_placing_on_bar(game, column_index, card)

        new_game = game.with_stack(suit, stack)
        return new_game.with_bar(column_index, bar.add_top(card))

    def _move_bar_to_stacks(self, game: Game, column_index: int, card_index: int, suit: Suit) -> Game:
        bar = _bar(game, column_index)
        _check_card_index(bar, column_index, card_index)
        if card_index != len(bar) - 1:
            raise InvalidMove("Only the last card of a column can go to a foundation.")
        card, remaining = bar.remove_top()
        if card.face_down:
            raise InvalidMove(f"{key(card)} is face down.")
        _check_placing_on_stack(game, suit, card)

        new_game = game.with_bar(column_index, remaining)
        return new_game.with_stack(suit, game.stacks[suit].add_top(card))

    def _move_bar_to_bar(
        self, game: Game, source_index: int, card_index: int, destination_index: int
    ) -> Game:
        source_bar = _bar(game, source_index)
        destination_bar = _bar(game, destination_index)
        if source_index == destination_index:
            raise InvalidMove("A run cannot move onto its own column.")
        _check_card_index(source_bar, source_index, card_index)

        remaining, group = source_bar.split_at(card_index)
        if not is_valid_run(group.cards):
            raise InvalidMove("Only a face-up run can be moved.")
        _check_placing_on_bar(game, destination_index, group[0])

        new_game = game.with_bar(source_index, remaining)
        return new_game.with_bar(destination_index, destination_bar.add_all(group))

    # -------------------------------------------------------------------------
    # Stock and tableau flips
    # -------------------------------------------------------------------------

    def _open_deck(self, game: Game) -> Game:
        card, deck = game.deck.remove_top()
        if card is None:
            raise InvalidMove("The stock is empty.")

        free_cards = game.free_cards.add_top(card.flipped(face_down=False))
        return game._copy_with(deck=deck, free_cards=free_cards)

    def _flip_card(self, game: Game, column_index: int) -> Game:
        bar = _bar(game, column_index)
        card = bar.top_card
        if card is None:
            raise InvalidMove(f"Column {column_index} is empty.")
        if not card.face_down:
            raise InvalidMove(f"{key(card)} is already face up.")

        return game.with_bar(column_index, bar.replace_top(card.flipped(face_down=False)))


def describe_action(action: Action) -> str:
    """Human-readable one-liner for logs and result change lists."""
    if isinstance(action, OpenDeck):
        return "Drew a card from the stock"
    if isinstance(action, FlipCard):
        return f"Flipped the last card of column {action.column_index}"
    if isinstance(action, Move):
        source, destination = action.source, action.destination
        if isinstance(source, FromWaste):
            origin = "the waste"
        elif isinstance(source, FromFoundation):
            origin = f"the {source.suit.value} foundation"
        else:
            origin = f"column {source.column_index} from position {source.card_index}"
        if isinstance(destination, ToFoundation):
            target = f"the {destination.suit.value} foundation"
        else:
            target = f"column {destination.column_index}"
        return f"Moved {origin} to {target}"
    return repr(action)


_default_reducer = Reducer()


def react(game: Game, action: Action) -> Game:
    """
    Apply an action, raising InvalidMove when it is not allowed.

    The input game is never modified.
    """
    return _default_reducer.react(game, action)


def apply_action(game: Game, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Returns an ActionResult instead of raising InvalidMove.
    """
    return _default_reducer.apply(game, action)
