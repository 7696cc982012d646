"""Pydantic schemas for games, plays and live session state."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from scorebook.core.enums import FieldDirection, ParticipantRole, PlayType, TackleMode, TeamSide


# === Shared schemas ===


class ParticipantSchema(BaseModel):
    """A player credited on a play."""

    player_id: str
    role: ParticipantRole
    credit: Optional[float] = None


class ScoringConfigSchema(BaseModel):
    """Point values."""

    touchdown: int = 6
    field_goal: int = 3
    safety: int = 2
    extra_point_kick: int = 1
    extra_point_conversion: int = 2


class GameRulesSchema(BaseModel):
    """Per-game rules."""

    quarter_length_minutes: int = Field(12, gt=0)
    overtime_enabled: bool = False
    tackle_mode: TackleMode = TackleMode.EQUAL
    scoring: ScoringConfigSchema = Field(default_factory=ScoringConfigSchema)
    follow_nfhs: bool = True


class PlayerInput(BaseModel):
    """Roster entry supplied when a game is created."""

    id: str
    name: str
    jersey_number: Optional[int] = None
    position: Optional[str] = None


# === Request schemas ===


class CreateGameRequest(BaseModel):
    """Request to open a scoring session for a new game."""

    game_id: Optional[str] = None
    my_team_id: Optional[str] = None
    opponent_name: Optional[str] = None
    roster: list[PlayerInput] = Field(default_factory=list)
    opponent_roster: list[PlayerInput] = Field(default_factory=list)
    rules: Optional[GameRulesSchema] = None  # Config defaults when omitted


class PlayCreateRequest(BaseModel):
    """Request to record a play."""

    type: PlayType
    yards: int = 0
    team_side: TeamSide = TeamSide.HOME
    player_id: Optional[str] = None
    participants: Optional[list[ParticipantSchema]] = None
    description: str = ""
    quarter: Optional[int] = Field(None, ge=1)
    down: Optional[int] = Field(None, ge=1, le=4)
    distance: Optional[str] = None
    yard_line: Optional[int] = Field(None, ge=0, le=100)
    penalty_type: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_touchdown: Optional[bool] = None


class PlayUpdateRequest(BaseModel):
    """Partial update for a recorded play. Only fields sent are changed."""

    type: Optional[PlayType] = None
    yards: Optional[int] = None
    team_side: Optional[TeamSide] = None
    player_id: Optional[str] = None
    participants: Optional[list[ParticipantSchema]] = None
    description: Optional[str] = None
    quarter: Optional[int] = Field(None, ge=1)
    down: Optional[int] = Field(None, ge=1, le=4)
    distance: Optional[str] = None
    yard_line: Optional[int] = Field(None, ge=0, le=100)
    penalty_type: Optional[str] = None
    tags: Optional[list[str]] = None
    is_touchdown: Optional[bool] = None

    def to_updates(self) -> dict[str, Any]:
        """
        Fields explicitly set by the client, as Play keyword updates.

        Optional play fields may be cleared with null; required ones may not.
        """
        updates = self.model_dump(exclude_unset=True)
        for name in _REQUIRED_PLAY_FIELDS:
            if name in updates and updates[name] is None:
                del updates[name]
        return updates


_REQUIRED_PLAY_FIELDS = ("type", "yards", "team_side", "description", "tags")


class ClockResetRequest(BaseModel):
    time_remaining: Optional[int] = Field(None, ge=0)


class ClockAdjustRequest(BaseModel):
    delta: int


class ChangePossessionRequest(BaseModel):
    """Request to hand the ball to the other side."""

    new_field_position: Optional[int] = Field(None, ge=0, le=100)
    preserve_direction: bool = False
    override_clock: Optional[int] = Field(None, ge=0)


class DownAndDistanceRequest(BaseModel):
    down: int = Field(..., ge=1, le=4)
    yards_to_go: int = Field(..., ge=0)


# === Response schemas ===


class PlaySchema(BaseModel):
    """A recorded play."""

    id: str
    type: str
    yards: int
    team_side: TeamSide
    player_id: Optional[str] = None
    participants: Optional[list[ParticipantSchema]] = None
    description: str = ""
    timestamp: datetime
    quarter: Optional[int] = None
    down: Optional[int] = None
    distance: Optional[str] = None
    yard_line: Optional[int] = None
    penalty_type: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_touchdown: Optional[bool] = None

    @classmethod
    def from_model(cls, play) -> "PlaySchema":
        """Create from Play model."""
        return cls(
            id=play.id,
            type=play.type.value if isinstance(play.type, PlayType) else play.type,
            yards=play.yards,
            team_side=play.team_side,
            player_id=play.player_id,
            participants=[
                ParticipantSchema(player_id=p.player_id, role=p.role, credit=p.credit)
                for p in play.participants
            ]
            if play.participants is not None
            else None,
            description=play.description,
            timestamp=play.timestamp,
            quarter=play.quarter,
            down=play.down,
            distance=play.distance,
            yard_line=play.yard_line,
            penalty_type=play.penalty_type,
            tags=list(play.tags),
            is_touchdown=play.is_touchdown,
        )


class PlayerSchema(BaseModel):
    """Roster entry with derived stats."""

    id: str
    name: str
    jersey_number: Optional[int] = None
    position: Optional[str] = None
    stats: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_model(cls, player) -> "PlayerSchema":
        return cls(
            id=player.id,
            name=player.name,
            jersey_number=player.jersey_number,
            position=player.position,
            stats=dict(player.stats),
        )


class ClockSchema(BaseModel):
    """Game clock state."""

    time_remaining: int
    running: bool
    display: str = "12:00"

    @classmethod
    def from_model(cls, clock) -> "ClockSchema":
        """Create from ClockState model."""
        return cls(
            time_remaining=clock.time_remaining,
            running=clock.running,
            display=clock.display,
        )


class PossessionSchema(BaseModel):
    """Possession and time-of-possession state."""

    possession_side: TeamSide
    field_position: int
    down: int
    yards_to_go: int
    attack_direction: FieldDirection
    home_top_seconds: int
    away_top_seconds: int
    possession_clock_start: int
    down_display: str = ""

    @classmethod
    def from_model(cls, possession) -> "PossessionSchema":
        """Create from PossessionState model."""
        return cls(
            possession_side=possession.possession_side,
            field_position=possession.field_position,
            down=possession.down,
            yards_to_go=possession.yards_to_go,
            attack_direction=possession.attack_direction,
            home_top_seconds=possession.home_top_seconds,
            away_top_seconds=possession.away_top_seconds,
            possession_clock_start=possession.possession_clock_start,
            down_display=possession.down_display,
        )


class GameSchema(BaseModel):
    """Game snapshot."""

    id: str
    my_team_id: Optional[str] = None
    opponent_name: Optional[str] = None
    home_score: int
    opp_score: int
    plays: list[PlaySchema]
    roster: list[PlayerSchema]
    opponent_roster: list[PlayerSchema]
    rules: GameRulesSchema

    @classmethod
    def from_model(cls, game) -> "GameSchema":
        """Create from Game model."""
        return cls(
            id=game.id,
            my_team_id=game.my_team_id,
            opponent_name=game.opponent_name,
            home_score=game.home_score,
            opp_score=game.opp_score,
            plays=[PlaySchema.from_model(p) for p in game.plays],
            roster=[PlayerSchema.from_model(p) for p in game.my_team_snapshot.roster],
            opponent_roster=[PlayerSchema.from_model(p) for p in game.opponent_snapshot.roster],
            rules=GameRulesSchema.model_validate(game.rules.to_dict()),
        )


class GameResponse(BaseModel):
    """Game snapshot with the live session state."""

    game: GameSchema
    clock: ClockSchema
    possession: PossessionSchema

    @classmethod
    def from_session(cls, session) -> "GameResponse":
        return cls(
            game=GameSchema.from_model(session.game),
            clock=ClockSchema.from_model(session.clock.state),
            possession=PossessionSchema.from_model(session.possession),
        )


class StatsResponse(BaseModel):
    """Team stat tallies for both sides plus every rostered player's bucket."""

    home: dict[str, Any]
    opponent: dict[str, Any]
    players: dict[str, dict[str, float]]
    opponent_players: dict[str, dict[str, float]]

    @classmethod
    def from_model(cls, game) -> "StatsResponse":
        return cls(
            home=game.home_stats.to_dict(),
            opponent=game.opponent_stats.to_dict(),
            players={p.id: dict(p.stats) for p in game.my_team_snapshot.roster},
            opponent_players={p.id: dict(p.stats) for p in game.opponent_snapshot.roster},
        )


class ScoreTimelineEntry(BaseModel):
    play_id: str
    home_score: int
    opp_score: int
