"""Tests for the API session registry."""

from scorebook.api.services.session_manager import SessionManager
from scorebook.core.models import Game


class TestSessionManager:
    def test_create_and_get(self):
        manager = SessionManager()
        session = manager.create_session(Game(id="g1"))
        assert manager.get_session("g1") is session
        assert manager.active_sessions == ["g1"]

    def test_create_replaces_open_session(self):
        manager = SessionManager()
        first = manager.create_session(Game(id="g1"))
        second = manager.create_session(Game(id="g1"))
        assert first.is_closed
        assert manager.get_session("g1") is second

    def test_remove(self):
        manager = SessionManager()
        session = manager.create_session(Game(id="g1"))
        assert manager.remove_session("g1")
        assert session.is_closed
        assert not manager.remove_session("g1")
        assert manager.get_session("g1") is None

    def test_close_all(self):
        manager = SessionManager()
        sessions = [manager.create_session(Game(id=f"g{i}")) for i in range(3)]
        manager.close_all()
        assert manager.active_sessions == []
        assert all(s.is_closed for s in sessions)
