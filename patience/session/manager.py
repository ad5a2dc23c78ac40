"""
Session Manager - Creates and tracks game sessions.

LIFECYCLE:
1. Caller creates a session: the deck is shuffled (optionally seeded) and dealt
2. During play:
   - Caller reads the current Game or a TableSnapshot
   - Caller submits an action
   - Accepted actions replace the held Game in full
   - Rejected actions leave the session exactly as it was
3. Caller ends the session and it is dropped from memory
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import time
import uuid

from ..engine_core.action import Action
from ..engine_core.errors import InvalidMove
from ..engine_core.reducer import Reducer, describe_action
from ..engine_core.setup import generate_deck, generate_game, shuffle
from ..engine_core.state import Game
from ..schemas import TableSnapshot

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class GameSession:
    """
    One play-through of a deal.

    Contains:
    - The current Game (replaced after every accepted action)
    - The actions accepted so far, in order
    - The seed the deck was shuffled with, if any
    """
    session_id: str
    game: Game
    created_at: float
    seed: int | None = None
    state: SessionState = SessionState.ACTIVE
    history: list[Action] = field(default_factory=list)
    reducer: Reducer = field(default_factory=Reducer)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def react(self, action: Action) -> Game:
        """
        Apply an action to the held game.

        Raises:
            InvalidMove: If the action is illegal; the session is unchanged
        """
        try:
            new_game = self.reducer.react(self.game, action)
        except InvalidMove as e:
            logger.debug("Session %s rejected %r: %s", self.session_id, action, e)
            raise

        self.game = new_game
        self.history.append(action)
        logger.debug("Session %s: %s", self.session_id, describe_action(action))
        return new_game

    def snapshot(self) -> TableSnapshot:
        """Serializable view of the current game."""
        return TableSnapshot.from_game(self.game)


class SessionManager:
    """
    Manages game sessions.

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}

    def create_session(self, seed: int | None = None) -> GameSession:
        """
        Shuffle, deal and start a new session.

        Args:
            seed: Seed for a reproducible shuffle

        Returns:
            New GameSession holding the opening deal
        """
        session_id = str(uuid.uuid4())
        game = generate_game(shuffle(generate_deck(), seed=seed))

        session = GameSession(
            session_id=session_id,
            game=game,
            created_at=time.time(),
            seed=seed,
        )
        self._sessions[session_id] = session
        logger.info("Created session %s (seed=%s)", session_id, seed)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Drop a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.state = SessionState.ENDED
        logger.info("Ended session %s after %d actions", session_id, len(session.history))
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]
