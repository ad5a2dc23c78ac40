"""
Action System - The closed set of player intents, and action results.

Actions:
- Move: take a card (or a run of cards) from a source to a destination
- OpenDeck: draw the top stock card onto the waste
- FlipCard: turn up the last face-down card of a tableau column

Move sources and destinations are their own small closed families, so
the reducer can dispatch on the (source, destination) pair.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .cards import Suit


class ActionType(Enum):
    """Types of actions a player can issue."""
    MOVE = "move"
    OPEN_DECK = "open-deck"
    FLIP_CARD = "flip-card"


class MoveSourceType(Enum):
    """Where a moved card comes from."""
    WASTE = "waste"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


class MoveDestinationType(Enum):
    """Where a moved card goes to."""
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


# =============================================================================
# Move sources
# =============================================================================

@dataclass(frozen=True)
class FromWaste:
    """The top card of the waste."""

    @property
    def source_type(self) -> MoveSourceType:
        return MoveSourceType.WASTE


@dataclass(frozen=True)
class FromFoundation:
    """The top card of one suit's foundation."""
    suit: Suit

    @property
    def source_type(self) -> MoveSourceType:
        return MoveSourceType.FOUNDATION


@dataclass(frozen=True)
class FromTableau:
    """
    The run starting at card_index in a tableau column.

    Examples:
        FromTableau(column_index=3, card_index=2)  # third card up to the top
    """
    column_index: int
    card_index: int

    @property
    def source_type(self) -> MoveSourceType:
        return MoveSourceType.TABLEAU


MoveSource = Union[FromWaste, FromFoundation, FromTableau]


# =============================================================================
# Move destinations
# =============================================================================

@dataclass(frozen=True)
class ToFoundation:
    """One suit's foundation."""
    suit: Suit

    @property
    def destination_type(self) -> MoveDestinationType:
        return MoveDestinationType.FOUNDATION


@dataclass(frozen=True)
class ToTableau:
    """The end of a tableau column."""
    column_index: int

    @property
    def destination_type(self) -> MoveDestinationType:
        return MoveDestinationType.TABLEAU


MoveDestination = Union[ToFoundation, ToTableau]


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class Move:
    """Move a card or run from source to destination."""
    source: MoveSource
    destination: MoveDestination

    @property
    def action_type(self) -> ActionType:
        return ActionType.MOVE


@dataclass(frozen=True)
class OpenDeck:
    """Draw the top stock card onto the waste."""

    @property
    def action_type(self) -> ActionType:
        return ActionType.OPEN_DECK


@dataclass(frozen=True)
class FlipCard:
    """Turn up the last card of a tableau column."""
    column_index: int

    @property
    def action_type(self) -> ActionType:
        return ActionType.FLIP_CARD


# Union type for all actions
Action = Union[Move, OpenDeck, FlipCard]


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error message and code (if failed)
    - Human-readable changes (for logs and UI)
    """
    success: bool
    new_state: Any | None = None  # Game
    error: str | None = None
    error_code: str | None = None
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
