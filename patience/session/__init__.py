"""
Session Module - Holds the current game for a caller.

The engine itself is stateless. A session is the one place that keeps
"the current Game" and replaces it after each accepted action.

Sessions are in-memory only and are dropped when the game is abandoned.
"""

from .manager import SessionManager, GameSession, SessionState

__all__ = [
    "SessionManager",
    "GameSession",
    "SessionState",
]
