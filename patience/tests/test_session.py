"""
Tests for game sessions.
"""

import pytest

from ..engine_core.action import FlipCard, OpenDeck
from ..engine_core.errors import InvalidMove
from ..engine_core.setup import new_game
from ..session import SessionManager, SessionState


class TestSessionLifecycle:
    """Tests for creating and ending sessions."""

    def test_create_session(self):
        manager = SessionManager()
        session = manager.create_session(seed=7)

        assert session.session_id is not None
        assert session.is_active()
        assert session.game == new_game(seed=7)
        assert manager.get_session(session.session_id) is session

    def test_end_session(self):
        manager = SessionManager()
        session = manager.create_session()
        session_id = session.session_id

        assert session_id in manager.list_active_sessions()
        assert manager.end_session(session_id)
        assert session_id not in manager.list_active_sessions()
        assert session.state == SessionState.ENDED
        assert manager.get_session(session_id) is None

    def test_end_unknown_session(self):
        assert not SessionManager().end_session("nonexistent-id")


class TestSessionPlay:
    """Tests for threading state through a session."""

    def test_accepted_action_replaces_game(self):
        session = SessionManager().create_session(seed=7)
        previous = session.game

        new_game_state = session.react(OpenDeck())

        assert session.game is new_game_state
        assert session.game is not previous
        assert len(previous.deck) == 24
        assert len(session.game.deck) == 23
        assert session.history == [OpenDeck()]

    def test_rejected_action_leaves_session_unchanged(self):
        session = SessionManager().create_session(seed=7)
        previous = session.game

        with pytest.raises(InvalidMove):
            session.react(FlipCard(column_index=0))

        assert session.game is previous
        assert session.history == []

    def test_snapshot(self):
        session = SessionManager().create_session(seed=7)
        session.react(OpenDeck())
        snapshot = session.snapshot()

        assert len(snapshot.deck) == 23
        assert len(snapshot.free_cards) == 1
