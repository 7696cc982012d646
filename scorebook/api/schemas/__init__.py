"""Pydantic schemas for API request/response models."""

from scorebook.api.schemas.game import (
    ChangePossessionRequest,
    ClockAdjustRequest,
    ClockResetRequest,
    ClockSchema,
    CreateGameRequest,
    DownAndDistanceRequest,
    GameResponse,
    GameRulesSchema,
    GameSchema,
    ParticipantSchema,
    PlayCreateRequest,
    PlayerInput,
    PlayerSchema,
    PlaySchema,
    PlayUpdateRequest,
    PossessionSchema,
    ScoreTimelineEntry,
    ScoringConfigSchema,
    StatsResponse,
)

__all__ = [
    "ChangePossessionRequest",
    "ClockAdjustRequest",
    "ClockResetRequest",
    "ClockSchema",
    "CreateGameRequest",
    "DownAndDistanceRequest",
    "GameResponse",
    "GameRulesSchema",
    "GameSchema",
    "ParticipantSchema",
    "PlayCreateRequest",
    "PlayerInput",
    "PlayerSchema",
    "PlaySchema",
    "PlayUpdateRequest",
    "PossessionSchema",
    "ScoreTimelineEntry",
    "ScoringConfigSchema",
    "StatsResponse",
]
