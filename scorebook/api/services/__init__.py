"""API services."""

from scorebook.api.services.session_manager import SessionManager, session_manager

__all__ = ["SessionManager", "session_manager"]
