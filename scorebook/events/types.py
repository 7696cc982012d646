"""Event types emitted by a scoring session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from scorebook.core.enums import TeamSide

if TYPE_CHECKING:
    from scorebook.core.models.play import Play
    from scorebook.game.possession import PossessionState


@dataclass
class GameEvent:
    """Base class for all session events."""

    timestamp: datetime = field(default_factory=datetime.now)
    game_id: Optional[str] = None

    # Score after the change
    home_score: int = 0
    opp_score: int = 0


@dataclass
class PlayRecordedEvent(GameEvent):
    """A play was appended to the log."""

    play: "Play" = None


@dataclass
class PlayEditedEvent(GameEvent):
    """A play in the log was edited in place."""

    play: "Play" = None


@dataclass
class PlayUndoneEvent(GameEvent):
    """The last play was removed from the log."""

    play: "Play" = None


@dataclass
class SnapshotAppliedEvent(GameEvent):
    """A game snapshot arrived from the persistence layer."""

    play_count: int = 0


@dataclass
class PossessionChangedEvent(GameEvent):
    """Possession passed to the other side."""

    new_side: TeamSide = TeamSide.HOME
    seconds_credited: int = 0
    possession: "PossessionState" = None


@dataclass
class ClockExpiredEvent(GameEvent):
    """The game clock ran down to zero."""
