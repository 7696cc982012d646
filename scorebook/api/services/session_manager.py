"""Registry of live scoring sessions served by the API."""

import logging
from typing import Optional

from scorebook.core.models.game import Game
from scorebook.game.session import SaveCallback, ScoringSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages active scoring sessions, keyed by game id."""

    def __init__(self) -> None:
        self._sessions: dict[str, ScoringSession] = {}

    def create_session(
        self,
        game: Game,
        save: Optional[SaveCallback] = None,
        tick_interval: Optional[float] = None,
    ) -> ScoringSession:
        """Open a session for a game, replacing any session already open for it."""
        existing = self._sessions.pop(game.id, None)
        if existing is not None:
            logger.warning("Replacing open session for game %s", game.id)
            existing.close()

        session = ScoringSession(game, save=save, tick_interval=tick_interval)
        self._sessions[game.id] = session
        return session

    def get_session(self, game_id: str) -> Optional[ScoringSession]:
        """Get a session by game id."""
        return self._sessions.get(game_id)

    def remove_session(self, game_id: str) -> bool:
        """Close and forget a session. Returns False if none was open."""
        session = self._sessions.pop(game_id, None)
        if session is None:
            return False
        session.close()
        return True

    @property
    def active_sessions(self) -> list[str]:
        """Ids of games with an open session."""
        return list(self._sessions.keys())

    def close_all(self) -> None:
        for game_id in self.active_sessions:
            self.remove_session(game_id)


# Global session manager instance
session_manager = SessionManager()
