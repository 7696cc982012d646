"""Game snapshot and rules models."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from scorebook.core.enums import PlayType, TackleMode, TeamSide
from scorebook.core.models.play import Play
from scorebook.core.models.player import Player
from scorebook.core.models.stats import TeamGameStats


@dataclass(frozen=True)
class ScoringConfig:
    """Point values for each way of scoring."""

    touchdown: int = 6
    field_goal: int = 3
    safety: int = 2
    extra_point_kick: int = 1
    extra_point_conversion: int = 2

    def points_for(self, play_type: PlayType) -> int:
        """Points a play of this type is worth, 0 for non-scoring types."""
        if play_type in (PlayType.RUSH_TD, PlayType.PASS_TD):
            return self.touchdown
        if play_type == PlayType.FIELD_GOAL_MADE:
            return self.field_goal
        if play_type == PlayType.EXTRA_POINT_KICK_MADE:
            return self.extra_point_kick
        if play_type == PlayType.TWO_POINT_CONVERSION_MADE:
            return self.extra_point_conversion
        if play_type == PlayType.SAFETY:
            return self.safety
        return 0

    def to_dict(self) -> dict:
        return {
            "touchdown": self.touchdown,
            "field_goal": self.field_goal,
            "safety": self.safety,
            "extra_point_kick": self.extra_point_kick,
            "extra_point_conversion": self.extra_point_conversion,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScoringConfig":
        return cls(
            touchdown=data.get("touchdown", 6),
            field_goal=data.get("field_goal", 3),
            safety=data.get("safety", 2),
            extra_point_kick=data.get("extra_point_kick", 1),
            extra_point_conversion=data.get("extra_point_conversion", 2),
        )


@dataclass(frozen=True)
class GameRules:
    """
    Per-game configuration.

    Only the scoring values feed the recompute. `tackle_mode` is carried
    so it round-trips with the game record.
    """

    quarter_length_minutes: int = 12
    overtime_enabled: bool = False
    tackle_mode: TackleMode = TackleMode.EQUAL
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    follow_nfhs: bool = True

    @property
    def quarter_length_seconds(self) -> int:
        return self.quarter_length_minutes * 60

    def to_dict(self) -> dict:
        return {
            "quarter_length_minutes": self.quarter_length_minutes,
            "overtime_enabled": self.overtime_enabled,
            "tackle_mode": self.tackle_mode.value,
            "scoring": self.scoring.to_dict(),
            "follow_nfhs": self.follow_nfhs,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameRules":
        return cls(
            quarter_length_minutes=data.get("quarter_length_minutes", 12),
            overtime_enabled=data.get("overtime_enabled", False),
            tackle_mode=TackleMode(data.get("tackle_mode", "equal")),
            scoring=ScoringConfig.from_dict(data.get("scoring", {})),
            follow_nfhs=data.get("follow_nfhs", True),
        )


@dataclass(frozen=True)
class RosterSnapshot:
    """Roster as it stood for one game."""

    team_id: Optional[str] = None
    season_id: Optional[str] = None
    roster: tuple[Player, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.roster, tuple):
            object.__setattr__(self, "roster", tuple(self.roster))

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "season_id": self.season_id,
            "roster": [p.to_dict() for p in self.roster],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RosterSnapshot":
        return cls(
            team_id=data.get("team_id"),
            season_id=data.get("season_id"),
            roster=tuple(Player.from_dict(p) for p in data.get("roster", [])),
        )


@dataclass(frozen=True)
class Game:
    """
    Immutable game snapshot.

    The scoring team is always the home side of the log: `home_score` is
    its score and `opp_score` the opponent's. Scores, team stats and
    roster stats are derived from `plays` and rebuilt by every recompute
    (see scorebook.game.recalc); a new Game is returned each time.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    plays: tuple[Play, ...] = ()
    home_score: int = 0
    opp_score: int = 0
    my_team_id: Optional[str] = None
    opponent_name: Optional[str] = None
    my_team_snapshot: RosterSnapshot = field(default_factory=RosterSnapshot)
    opponent_snapshot: RosterSnapshot = field(default_factory=RosterSnapshot)
    rules: GameRules = field(default_factory=GameRules)

    # Team-level tallies from the last recompute
    home_stats: TeamGameStats = field(default_factory=TeamGameStats)
    opponent_stats: TeamGameStats = field(default_factory=TeamGameStats)

    def __post_init__(self) -> None:
        if not isinstance(self.plays, tuple):
            object.__setattr__(self, "plays", tuple(self.plays))

    @property
    def last_play(self) -> Optional[Play]:
        return self.plays[-1] if self.plays else None

    def find_play(self, play_id: str) -> Optional[Play]:
        for play in self.plays:
            if play.id == play_id:
                return play
        return None

    def roster_for(self, side: TeamSide) -> RosterSnapshot:
        """Roster snapshot of the given side."""
        return self.my_team_snapshot if side == TeamSide.HOME else self.opponent_snapshot

    def stats_for(self, side: TeamSide) -> TeamGameStats:
        return self.home_stats if side == TeamSide.HOME else self.opponent_stats

    @property
    def score_display(self) -> str:
        """Display score as 'HOME - OPP'."""
        return f"{self.home_score} - {self.opp_score}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "plays": [p.to_dict() for p in self.plays],
            "home_score": self.home_score,
            "opp_score": self.opp_score,
            "my_team_id": self.my_team_id,
            "opponent_name": self.opponent_name,
            "my_team_snapshot": self.my_team_snapshot.to_dict(),
            "opponent_snapshot": self.opponent_snapshot.to_dict(),
            "rules": self.rules.to_dict(),
            "home_stats": self.home_stats.to_dict(),
            "opponent_stats": self.opponent_stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """Create from dictionary."""
        return cls(
            id=data.get("id") or str(uuid4()),
            plays=tuple(Play.from_dict(p) for p in data.get("plays", [])),
            home_score=data.get("home_score", 0),
            opp_score=data.get("opp_score", 0),
            my_team_id=data.get("my_team_id"),
            opponent_name=data.get("opponent_name"),
            my_team_snapshot=RosterSnapshot.from_dict(data.get("my_team_snapshot", {})),
            opponent_snapshot=RosterSnapshot.from_dict(data.get("opponent_snapshot", {})),
            rules=GameRules.from_dict(data.get("rules", {})),
            home_stats=TeamGameStats.from_dict(data.get("home_stats", {})),
            opponent_stats=TeamGameStats.from_dict(data.get("opponent_stats", {})),
        )
