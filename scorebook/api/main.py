"""FastAPI application for the Scorebook game tracker."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorebook import __version__
from scorebook.api.routers import games_router
from scorebook.api.services.session_manager import session_manager
from scorebook.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Scorebook API starting up")
    yield
    logger.info("Scorebook API shutting down")
    # Cancel clock tasks before the loop goes away
    session_manager.close_all()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    app = FastAPI(
        title="Scorebook API",
        description="Live play-by-play scoring for football games",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(games_router, prefix="/api/v1")

    return app


# Create app instance
app = create_app()


@app.get("/")
async def root() -> dict:
    """Root endpoint - API info."""
    return {
        "name": "Scorebook API",
        "version": __version__,
        "description": "Football play log, box score and game clock",
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "active_games": len(session_manager.active_sessions),
    }


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "scorebook.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=get_config().log_level.lower(),
    )


if __name__ == "__main__":
    run_api(reload=True)
