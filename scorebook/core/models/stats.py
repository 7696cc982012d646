"""Team and player statistics models."""

from dataclasses import asdict, dataclass, field, fields
from decimal import ROUND_HALF_UP, Decimal


def compute_passer_rating(
    attempts: int,
    completions: int,
    yards: int,
    touchdowns: int,
    interceptions: int,
) -> float:
    """
    NCAA/NFHS passer efficiency rating, rounded to one decimal.

    (8.4 * yards + 330 * TD + 100 * completions - 200 * INT) / attempts.
    Halves round away from zero (6.25 -> 6.3). Returns 0.0 when there are
    no attempts.
    """
    if attempts <= 0:
        return 0.0
    numerator = (8.4 * yards) + (330 * touchdowns) + (100 * completions) - (200 * interceptions)
    rating = Decimal(repr(numerator / attempts)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(rating)


@dataclass
class TeamGameStats:
    """
    Category counters for one game.

    The same shape is used for a team and for each player. A fresh
    instance is built for every computation; instances are never shared
    between games or players.
    """

    # Rushing
    rushing_attempts: int = 0
    rushing_yards: int = 0
    rushing_yards_positive: int = 0
    rushing_yards_negative: int = 0
    rushing_longest: int = 0
    rushing_tds: int = 0

    # Receiving
    receiving_attempts: int = 0  # Targets
    receptions: int = 0
    receiving_yards: int = 0
    receiving_yards_positive: int = 0
    receiving_yards_negative: int = 0
    receiving_longest: int = 0
    receiving_tds: int = 0
    drops: int = 0

    # Passing
    passing_attempts: int = 0
    completions: int = 0
    passing_yards: int = 0
    passing_tds: int = 0
    interceptions: int = 0
    sacks: int = 0  # Sacks taken
    sack_yards: int = 0
    passing_longest: int = 0
    qb_rating: float = 0.0

    # Returns
    kickoff_returns: int = 0
    kickoff_return_yards: int = 0
    kickoff_return_longest: int = 0
    kickoff_return_tds: int = 0
    punt_returns: int = 0
    punt_return_yards: int = 0
    punt_return_longest: int = 0
    punt_return_tds: int = 0

    # Kicking
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    field_goal_longest: int = 0
    field_goals_blocked: int = 0
    extra_points_made: int = 0
    extra_points_attempted: int = 0
    extra_points_blocked: int = 0
    kickoffs: int = 0
    kickoff_yards: int = 0

    # Punting
    punts: int = 0
    punt_yards: int = 0
    punt_longest: int = 0
    punts_blocked: int = 0

    # Two-point tries
    two_point_attempts: int = 0
    two_point_conversions: int = 0

    # Defense
    tackles: int = 0
    tackles_for_loss: int = 0
    tackle_for_loss_yards: int = 0
    sacks_made: int = 0
    sack_yards_made: int = 0
    interceptions_made: int = 0
    interception_return_yards: int = 0
    fumbles_recovered: int = 0
    fumble_return_yards: int = 0
    forced_fumbles: int = 0
    pass_breakups: int = 0
    missed_tackles: int = 0
    safeties: int = 0
    defensive_tds: int = 0

    # Penalties
    penalties: int = 0
    penalty_yards: int = 0
    penalty_breakdown: dict[str, int] = field(default_factory=dict)

    @property
    def completion_pct(self) -> float:
        """Completion percentage."""
        if self.passing_attempts == 0:
            return 0.0
        return self.completions / self.passing_attempts * 100

    @property
    def yards_per_carry(self) -> float:
        """Yards per rushing attempt."""
        return self.rushing_yards / self.rushing_attempts if self.rushing_attempts > 0 else 0.0

    @property
    def yards_per_reception(self) -> float:
        return self.receiving_yards / self.receptions if self.receptions > 0 else 0.0

    @property
    def field_goal_pct(self) -> float:
        if self.field_goals_attempted == 0:
            return 0.0
        return self.field_goals_made / self.field_goals_attempted * 100

    @property
    def total_yards(self) -> int:
        """Rushing plus passing yards (sack yardage is already in rushing)."""
        return self.rushing_yards + self.passing_yards

    def update_passer_rating(self) -> None:
        """Recompute qb_rating from the passing counters."""
        self.qb_rating = compute_passer_rating(
            self.passing_attempts,
            self.completions,
            self.passing_yards,
            self.passing_tds,
            self.interceptions,
        )

    def to_stat_bucket(self) -> dict[str, float]:
        """
        Flat name -> number mapping stored on Player.stats.

        The penalty breakdown is a team-level map and is left out.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "penalty_breakdown"
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TeamGameStats":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "penalty_breakdown" in values:
            values["penalty_breakdown"] = dict(values["penalty_breakdown"])
        return cls(**values)


@dataclass
class GameStatsReport:
    """Team tallies plus per-player tallies for one side of a game."""

    team_stats: TeamGameStats = field(default_factory=TeamGameStats)
    player_stats: dict[str, TeamGameStats] = field(default_factory=dict)

    def player(self, player_id: str) -> TeamGameStats:
        """Get or create the bucket for a player."""
        if player_id not in self.player_stats:
            self.player_stats[player_id] = TeamGameStats()
        return self.player_stats[player_id]

    def to_dict(self) -> dict:
        return {
            "team_stats": self.team_stats.to_dict(),
            "player_stats": {pid: s.to_dict() for pid, s in self.player_stats.items()},
        }
