"""Games API router - REST endpoints for live game scoring."""

from fastapi import APIRouter, HTTPException, status

from scorebook.api.schemas.game import (
    ChangePossessionRequest,
    ClockAdjustRequest,
    ClockResetRequest,
    ClockSchema,
    CreateGameRequest,
    DownAndDistanceRequest,
    GameResponse,
    PlayCreateRequest,
    PlayUpdateRequest,
    PossessionSchema,
    ScoreTimelineEntry,
    StatsResponse,
)
from scorebook.api.services.session_manager import session_manager
from scorebook.config import get_config
from scorebook.core.models import Game, GameRules, Play, PlayParticipant, Player, RosterSnapshot
from scorebook.game.recalc import score_timeline
from scorebook.game.session import ScoringSession

router = APIRouter(prefix="/games", tags=["games"])


def _get_session(game_id: str) -> ScoringSession:
    session = session_manager.get_session(game_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game {game_id} not found",
        )
    return session


def _build_game(request: CreateGameRequest) -> Game:
    """Convert CreateGameRequest to a Game model with an empty log."""
    if request.rules is not None:
        rules = GameRules.from_dict(request.rules.model_dump(mode="json"))
    else:
        rules = GameRules(quarter_length_minutes=get_config().quarter_minutes)
    kwargs = {}
    if request.game_id:
        kwargs["id"] = request.game_id
    return Game(
        my_team_id=request.my_team_id,
        opponent_name=request.opponent_name,
        my_team_snapshot=RosterSnapshot(
            team_id=request.my_team_id,
            roster=tuple(Player(**p.model_dump()) for p in request.roster),
        ),
        opponent_snapshot=RosterSnapshot(
            roster=tuple(Player(**p.model_dump()) for p in request.opponent_roster),
        ),
        rules=rules,
        **kwargs,
    )


def _build_play(request: PlayCreateRequest) -> Play:
    """Convert PlayCreateRequest to a Play with a fresh id."""
    participants = None
    if request.participants is not None:
        participants = tuple(
            PlayParticipant(player_id=p.player_id, role=p.role, credit=p.credit)
            for p in request.participants
        )
    return Play.create(
        request.type,
        yards=request.yards,
        team_side=request.team_side,
        player_id=request.player_id,
        participants=participants,
        description=request.description,
        quarter=request.quarter,
        down=request.down,
        distance=request.distance,
        yard_line=request.yard_line,
        penalty_type=request.penalty_type,
        tags=tuple(request.tags),
        is_touchdown=request.is_touchdown,
    )


# =============================================================================
# Games
# =============================================================================


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(request: CreateGameRequest) -> GameResponse:
    """Create a game and open a scoring session for it."""
    session = session_manager.create_session(_build_game(request))
    return GameResponse.from_session(session)


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(game_id: str) -> GameResponse:
    """Get the current snapshot, clock and possession."""
    return GameResponse.from_session(_get_session(game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str) -> None:
    """Close a game's scoring session."""
    if not session_manager.remove_session(game_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game {game_id} not found",
        )


# =============================================================================
# Play log
# =============================================================================


@router.post("/{game_id}/plays", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def record_play(game_id: str, request: PlayCreateRequest) -> GameResponse:
    """Append a play; scores and stats are recomputed from the full log."""
    session = _get_session(game_id)
    session.record_play(_build_play(request))
    return GameResponse.from_session(session)


@router.patch("/{game_id}/plays/{play_id}", response_model=GameResponse)
async def edit_play(game_id: str, play_id: str, request: PlayUpdateRequest) -> GameResponse:
    """Edit a recorded play in place."""
    session = _get_session(game_id)
    if session.game.find_play(play_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Play {play_id} not found",
        )
    session.edit_play(play_id, request.to_updates())
    return GameResponse.from_session(session)


@router.post("/{game_id}/plays/undo", response_model=GameResponse)
async def undo_play(game_id: str) -> GameResponse:
    """Remove the most recent play. An empty log is left as is."""
    session = _get_session(game_id)
    session.undo()
    return GameResponse.from_session(session)


@router.get("/{game_id}/stats", response_model=StatsResponse)
async def get_stats(game_id: str) -> StatsResponse:
    """Team and player stat buckets derived from the log."""
    return StatsResponse.from_model(_get_session(game_id).game)


@router.get("/{game_id}/score-timeline", response_model=list[ScoreTimelineEntry])
async def get_score_timeline(game_id: str) -> list[ScoreTimelineEntry]:
    """Running score after each play."""
    game = _get_session(game_id).game
    timeline = score_timeline(game.plays, game.rules.scoring)
    return [
        ScoreTimelineEntry(play_id=play.id, home_score=home, opp_score=opp)
        for play, (home, opp) in zip(game.plays, timeline)
    ]


# =============================================================================
# Clock
# =============================================================================


@router.get("/{game_id}/clock", response_model=ClockSchema)
async def get_clock(game_id: str) -> ClockSchema:
    return ClockSchema.from_model(_get_session(game_id).clock.state)


@router.post("/{game_id}/clock/start", response_model=ClockSchema)
async def start_clock(game_id: str) -> ClockSchema:
    """Start the countdown. Starting a running clock does nothing."""
    session = _get_session(game_id)
    session.start_clock()
    return ClockSchema.from_model(session.clock.state)


@router.post("/{game_id}/clock/stop", response_model=ClockSchema)
async def stop_clock(game_id: str) -> ClockSchema:
    session = _get_session(game_id)
    session.stop_clock()
    return ClockSchema.from_model(session.clock.state)


@router.post("/{game_id}/clock/reset", response_model=ClockSchema)
async def reset_clock(game_id: str, request: ClockResetRequest) -> ClockSchema:
    """Stop the clock and set it, to a full quarter by default."""
    session = _get_session(game_id)
    session.reset_clock(request.time_remaining)
    return ClockSchema.from_model(session.clock.state)


@router.post("/{game_id}/clock/adjust", response_model=ClockSchema)
async def adjust_clock(game_id: str, request: ClockAdjustRequest) -> ClockSchema:
    """Add or remove seconds. The clock never goes below zero."""
    session = _get_session(game_id)
    session.adjust_time(request.delta)
    return ClockSchema.from_model(session.clock.state)


# =============================================================================
# Possession
# =============================================================================


@router.get("/{game_id}/possession", response_model=PossessionSchema)
async def get_possession(game_id: str) -> PossessionSchema:
    return PossessionSchema.from_model(_get_session(game_id).possession)


@router.post("/{game_id}/possession/advance", response_model=PossessionSchema)
async def advance_ball(game_id: str) -> PossessionSchema:
    """Move the ball one yard in the attacking direction."""
    return PossessionSchema.from_model(_get_session(game_id).advance_ball())


@router.post("/{game_id}/possession/retreat", response_model=PossessionSchema)
async def retreat_ball(game_id: str) -> PossessionSchema:
    return PossessionSchema.from_model(_get_session(game_id).retreat_ball())


@router.post("/{game_id}/possession/change", response_model=PossessionSchema)
async def change_possession(game_id: str, request: ChangePossessionRequest) -> PossessionSchema:
    """Hand the ball to the other side, crediting time of possession."""
    session = _get_session(game_id)
    state = session.change_possession(
        new_field_position=request.new_field_position,
        preserve_direction=request.preserve_direction,
        override_clock=request.override_clock,
    )
    return PossessionSchema.from_model(state)


@router.post("/{game_id}/possession/swap-direction", response_model=PossessionSchema)
async def swap_direction(game_id: str) -> PossessionSchema:
    return PossessionSchema.from_model(_get_session(game_id).swap_direction())


@router.post("/{game_id}/possession/down", response_model=PossessionSchema)
async def set_down_and_distance(game_id: str, request: DownAndDistanceRequest) -> PossessionSchema:
    session = _get_session(game_id)
    state = session.set_down_and_distance(request.down, request.yards_to_go)
    return PossessionSchema.from_model(state)
