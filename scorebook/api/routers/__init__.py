"""API routers for different resource types."""

from scorebook.api.routers.games import router as games_router

__all__ = ["games_router"]
