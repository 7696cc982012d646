"""Core game models."""

from scorebook.core.models.game import Game, GameRules, RosterSnapshot, ScoringConfig
from scorebook.core.models.play import Play, PlayParticipant
from scorebook.core.models.player import Player
from scorebook.core.models.stats import GameStatsReport, TeamGameStats, compute_passer_rating

__all__ = [
    "Game",
    "GameRules",
    "GameStatsReport",
    "Play",
    "PlayParticipant",
    "Player",
    "RosterSnapshot",
    "ScoringConfig",
    "TeamGameStats",
    "compute_passer_rating",
]
