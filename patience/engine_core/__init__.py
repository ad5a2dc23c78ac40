"""
Engine Core - Deterministic Klondike rules and state transitions.

The engine is the runtime that:
1. Builds and deals the deck
2. Holds table state as immutable values
3. Decides move legality
4. Applies actions via the reducer
5. Answers read-only queries for the input layer
"""

from .cards import (
    ALL_CARD_NUMBERS,
    ALL_SUITS,
    Card,
    CardNumber,
    Suit,
    are_cards_equal,
    from_key,
    key,
    next_number,
    prev_number,
)
from .errors import EngineInvariantError, InvalidMove
from .state import BARS_COUNT, DECK_SIZE, Game, Pile, check_invariants
from .setup import generate_deck, generate_game, new_game, shuffle
from .action import (
    Action,
    ActionResult,
    ActionType,
    FlipCard,
    FromFoundation,
    FromTableau,
    FromWaste,
    Move,
    MoveDestination,
    MoveDestinationType,
    MoveSource,
    MoveSourceType,
    OpenDeck,
    ToFoundation,
    ToTableau,
)
from .rules import (
    can_place_on_bar,
    can_place_on_stack,
    can_stack_in_bars,
    can_stack_in_stacks,
    is_valid_run,
)
from .reducer import Reducer, apply_action, describe_action, react
from .queries import (
    generate_source,
    get_card_group,
    get_possible_bar_destinations,
    get_possible_stack_destinations,
    legal_actions,
)

__all__ = [
    "ALL_CARD_NUMBERS",
    "ALL_SUITS",
    "Card",
    "CardNumber",
    "Suit",
    "are_cards_equal",
    "from_key",
    "key",
    "next_number",
    "prev_number",
    "EngineInvariantError",
    "InvalidMove",
    "BARS_COUNT",
    "DECK_SIZE",
    "Game",
    "Pile",
    "check_invariants",
    "generate_deck",
    "generate_game",
    "new_game",
    "shuffle",
    "Action",
    "ActionResult",
    "ActionType",
    "FlipCard",
    "FromFoundation",
    "FromTableau",
    "FromWaste",
    "Move",
    "MoveDestination",
    "MoveDestinationType",
    "MoveSource",
    "MoveSourceType",
    "OpenDeck",
    "ToFoundation",
    "ToTableau",
    "can_place_on_bar",
    "can_place_on_stack",
    "can_stack_in_bars",
    "can_stack_in_stacks",
    "is_valid_run",
    "Reducer",
    "apply_action",
    "describe_action",
    "react",
    "generate_source",
    "get_card_group",
    "get_possible_bar_destinations",
    "get_possible_stack_destinations",
    "legal_actions",
]
