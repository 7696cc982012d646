"""Game enumerations."""

from scorebook.core.enums.plays import (
    FieldDirection,
    ParticipantRole,
    PlayType,
    TackleMode,
    TeamSide,
)

__all__ = [
    "FieldDirection",
    "ParticipantRole",
    "PlayType",
    "TackleMode",
    "TeamSide",
]
