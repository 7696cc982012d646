"""Play log entries."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional, Union
from uuid import uuid4

from scorebook.core.enums import ParticipantRole, PlayType, TeamSide


@dataclass(frozen=True)
class PlayParticipant:
    """A player credited on a play under a specific role."""

    player_id: str
    role: ParticipantRole
    credit: Optional[float] = None  # Fractional weight, carried but not applied

    def to_dict(self) -> dict:
        data = {"player_id": self.player_id, "role": self.role.value}
        if self.credit is not None:
            data["credit"] = self.credit
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PlayParticipant":
        return cls(
            player_id=data["player_id"],
            role=ParticipantRole(data["role"]),
            credit=data.get("credit"),
        )


@dataclass(frozen=True)
class Play:
    """
    One recorded game event.

    Plays are immutable. An edit produces a new Play with the same id
    (see `with_updates`), and the log is rebuilt around it.

    `yards` is signed: negative values are losses. `team_side` is the side
    that executed the play; for defensive entries (tackle, sack, ...) it is
    the offense the defense played against.
    """

    id: str
    type: Union[PlayType, str]
    yards: int = 0
    team_side: TeamSide = TeamSide.HOME
    player_id: Optional[str] = None
    participants: Optional[tuple[PlayParticipant, ...]] = None
    description: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    # Situation at the snap
    quarter: Optional[int] = None
    down: Optional[int] = None
    distance: Optional[str] = None
    yard_line: Optional[int] = None

    penalty_type: Optional[str] = None
    tags: tuple[str, ...] = ()

    # Explicit touchdown flag for returns and turnovers. None means
    # "not recorded", and the description is searched instead.
    is_touchdown: Optional[bool] = None

    def __post_init__(self) -> None:
        """Normalize stored strings to enums and sequences to tuples."""
        if not isinstance(self.team_side, TeamSide):
            object.__setattr__(self, "team_side", TeamSide(self.team_side))
        if not isinstance(self.type, PlayType):
            object.__setattr__(self, "type", PlayType.parse(self.type))
        if self.participants is not None and not isinstance(self.participants, tuple):
            object.__setattr__(self, "participants", tuple(self.participants))
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags or ()))

    @classmethod
    def create(
        cls,
        play_type: Union[PlayType, str],
        yards: int = 0,
        team_side: TeamSide = TeamSide.HOME,
        **kwargs: Any,
    ) -> "Play":
        """Create a new play with a fresh unique id."""
        return cls(id=str(uuid4()), type=play_type, yards=yards, team_side=team_side, **kwargs)

    @property
    def scored_touchdown(self) -> bool:
        """
        Whether a return or turnover play went for a touchdown.

        Older logs carry no flag, only free text, so fall back to a
        case-insensitive search for "touchdown" in the description.
        """
        if self.is_touchdown is not None:
            return self.is_touchdown
        return "touchdown" in self.description.lower()

    def participants_with_role(self, role: ParticipantRole) -> list[PlayParticipant]:
        """Participants tagged with the given role, in recorded order."""
        return [p for p in self.participants or () if p.role == role]

    def with_updates(self, **updates: Any) -> "Play":
        """
        Return a copy with the given fields merged in.

        The id is kept: an edit never moves or re-keys a play.
        """
        updates.pop("id", None)
        if "type" in updates and isinstance(updates["type"], str):
            updates["type"] = PlayType.parse(updates["type"])
        if "team_side" in updates and updates["team_side"] is not None:
            updates["team_side"] = TeamSide(updates["team_side"])
        if updates.get("participants") is not None:
            updates["participants"] = tuple(
                p if isinstance(p, PlayParticipant) else PlayParticipant.from_dict(p)
                for p in updates["participants"]
            )
        return replace(self, **updates)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "type": self.type.value if isinstance(self.type, PlayType) else self.type,
            "yards": self.yards,
            "team_side": self.team_side.value,
            "player_id": self.player_id,
            "participants": [p.to_dict() for p in self.participants]
            if self.participants is not None
            else None,
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
            "quarter": self.quarter,
            "down": self.down,
            "distance": self.distance,
            "yard_line": self.yard_line,
            "penalty_type": self.penalty_type,
            "tags": list(self.tags),
            "is_touchdown": self.is_touchdown,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Play":
        """Create from dictionary."""
        participants = data.get("participants")
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        return cls(
            id=data["id"],
            type=PlayType.parse(data["type"]),
            yards=data.get("yards", 0),
            team_side=TeamSide(data.get("team_side", "home")),
            player_id=data.get("player_id"),
            participants=tuple(PlayParticipant.from_dict(p) for p in participants)
            if participants is not None
            else None,
            description=data.get("description", ""),
            timestamp=timestamp or datetime.now(),
            quarter=data.get("quarter"),
            down=data.get("down"),
            distance=data.get("distance"),
            yard_line=data.get("yard_line"),
            penalty_type=data.get("penalty_type"),
            tags=tuple(data.get("tags") or ()),
            is_touchdown=data.get("is_touchdown"),
        )

    def __str__(self) -> str:
        play_type = self.type.value if isinstance(self.type, PlayType) else self.type
        return f"{self.team_side.value} {play_type} {self.yards:+d}"
