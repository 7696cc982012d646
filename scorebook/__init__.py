"""Scorebook - play-by-play football scoring and live game-state engine."""

__version__ = "0.1.0"
