"""REST API for live game scoring."""

from scorebook.api.main import app, create_app, run_api

__all__ = ["app", "create_app", "run_api"]
