"""Attribution and tallying of play statistics."""

from scorebook.stats.attribution import (
    FALLBACK_ROLES,
    fallback_role,
    resolve_credits,
    resolve_defenders,
    resolve_role,
)
from scorebook.stats.tally import StatTally, compute_game_stats

__all__ = [
    "FALLBACK_ROLES",
    "StatTally",
    "compute_game_stats",
    "fallback_role",
    "resolve_credits",
    "resolve_defenders",
    "resolve_role",
]
