"""
Engine errors.

Two kinds of failure, never sharing a base class:
- InvalidMove: the player asked for something the rules forbid.
  Expected, recoverable, shown to the user.
- EngineInvariantError: the engine or its caller broke an internal
  contract (unreachable dispatch, looking up a card that is not in play).
  Unexpected, never caught by the reducer.
"""

from __future__ import annotations


class InvalidMove(Exception):
    """Raised when an action's preconditions are not met."""

    def __init__(self, details: str | None = None):
        message = "Invalid move." if details is None else f"Invalid move. {details}"
        super().__init__(message)
        self.details = details


class EngineInvariantError(RuntimeError):
    """Raised on programming errors inside the engine or its caller."""
