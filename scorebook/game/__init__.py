"""Live game state: recompute pipeline, clock, possession and the scoring session.

Core components:
- recalc: full-log recompute of scores and stats (add / edit / undo)
- clock: countdown state and its asyncio-driven timer
- possession: field position, downs and time of possession
- ScoringSession: owns one game's snapshot, clock and possession
"""

from scorebook.game.clock import (
    ClockState,
    GameClockTimer,
    adjust_time,
    format_clock,
    reset_clock,
    start_clock,
    stop_clock,
    tick,
)
from scorebook.game.possession import (
    PossessionState,
    advance_ball,
    change_possession,
    record_possession_time,
    restart_possession_clock,
    retreat_ball,
    set_down_and_distance,
    swap_direction,
    time_of_possession,
)
from scorebook.game.recalc import (
    add_play,
    compute_score,
    edit_play_and_recalc,
    points_for_play,
    recalculate,
    score_timeline,
    undo_last_play,
)
from scorebook.game.session import ScoringSession

__all__ = [
    "ClockState",
    "GameClockTimer",
    "PossessionState",
    "ScoringSession",
    "add_play",
    "adjust_time",
    "advance_ball",
    "change_possession",
    "compute_score",
    "edit_play_and_recalc",
    "format_clock",
    "points_for_play",
    "recalculate",
    "record_possession_time",
    "reset_clock",
    "restart_possession_clock",
    "retreat_ball",
    "score_timeline",
    "set_down_and_distance",
    "start_clock",
    "stop_clock",
    "swap_direction",
    "tick",
    "time_of_possession",
    "undo_last_play",
]
