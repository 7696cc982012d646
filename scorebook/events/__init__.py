"""Event system for scoring sessions."""

from scorebook.events.bus import EventBus
from scorebook.events.types import (
    ClockExpiredEvent,
    GameEvent,
    PlayEditedEvent,
    PlayRecordedEvent,
    PlayUndoneEvent,
    PossessionChangedEvent,
    SnapshotAppliedEvent,
)

__all__ = [
    "ClockExpiredEvent",
    "EventBus",
    "GameEvent",
    "PlayEditedEvent",
    "PlayRecordedEvent",
    "PlayUndoneEvent",
    "PossessionChangedEvent",
    "SnapshotAppliedEvent",
]
