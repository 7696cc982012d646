"""
Ball possession and time of possession.

`PossessionState` uses the scorer's view of the field: 0 is the left goal
line and 100 the right one. The home side attacks toward 100 when its
direction is left-to-right; the away side attacks toward 100 when its
direction is right-to-left.

Time of possession is only credited when possession changes hands
through `change_possession` (or `record_possession_time`). The engine
does not infer turnovers from the play log.
"""

from dataclasses import dataclass, replace
from typing import Optional

from scorebook.core.enums import FieldDirection, TeamSide

FIELD_MIN = 0
FIELD_MAX = 100


def _clamp(value: int, low: int = FIELD_MIN, high: int = FIELD_MAX) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class PossessionState:
    """Who has the ball, where, and how long each side has held it."""

    possession_side: TeamSide = TeamSide.HOME
    field_position: int = 25
    down: int = 1
    yards_to_go: int = 10
    attack_direction: FieldDirection = FieldDirection.LEFT_TO_RIGHT
    home_top_seconds: int = 0
    away_top_seconds: int = 0
    possession_clock_start: int = 12 * 60

    @property
    def attacks_toward_max(self) -> bool:
        """Whether moving forward increases field_position."""
        return (self.possession_side is TeamSide.HOME) == (
            self.attack_direction is FieldDirection.LEFT_TO_RIGHT
        )

    @property
    def down_display(self) -> str:
        """Display string like '3rd & 7'."""
        names = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th"}
        return f"{names.get(self.down, f'{self.down}th')} & {self.yards_to_go}"

    def top_for(self, side: TeamSide) -> int:
        return self.home_top_seconds if side is TeamSide.HOME else self.away_top_seconds

    def to_dict(self) -> dict:
        return {
            "possession_side": self.possession_side.value,
            "field_position": self.field_position,
            "down": self.down,
            "yards_to_go": self.yards_to_go,
            "attack_direction": self.attack_direction.value,
            "home_top_seconds": self.home_top_seconds,
            "away_top_seconds": self.away_top_seconds,
            "possession_clock_start": self.possession_clock_start,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PossessionState":
        return cls(
            possession_side=TeamSide(data.get("possession_side", "home")),
            field_position=data.get("field_position", 25),
            down=data.get("down", 1),
            yards_to_go=data.get("yards_to_go", 10),
            attack_direction=FieldDirection(data.get("attack_direction", "left-to-right")),
            home_top_seconds=data.get("home_top_seconds", 0),
            away_top_seconds=data.get("away_top_seconds", 0),
            possession_clock_start=data.get("possession_clock_start", 12 * 60),
        )


def advance_ball(state: PossessionState) -> PossessionState:
    """Move the ball one yard toward the attacking side's goal line."""
    step = 1 if state.attacks_toward_max else -1
    return replace(state, field_position=_clamp(state.field_position + step))


def retreat_ball(state: PossessionState) -> PossessionState:
    """Move the ball one yard back toward the attacking side's own goal line."""
    step = -1 if state.attacks_toward_max else 1
    return replace(state, field_position=_clamp(state.field_position + step))


def record_possession_time(state: PossessionState, current_clock: int) -> PossessionState:
    """
    Credit clock time since the possession started to the side holding the
    ball, and restart the possession clock at `current_clock`.
    """
    delta = max(0, state.possession_clock_start - current_clock)
    if state.possession_side is TeamSide.HOME:
        state = replace(state, home_top_seconds=state.home_top_seconds + delta)
    else:
        state = replace(state, away_top_seconds=state.away_top_seconds + delta)
    return replace(state, possession_clock_start=current_clock)


def change_possession(
    state: PossessionState,
    current_clock: int,
    new_field_position: Optional[int] = None,
    preserve_direction: bool = False,
    override_clock: Optional[int] = None,
) -> PossessionState:
    """
    Hand the ball to the other side.

    The departing side is credited with its time of possession, the
    attack direction flips unless `preserve_direction` is set, and the new
    series starts at 1st & 10. The ball stays where it is unless
    `new_field_position` is given. `override_clock` replaces
    `current_clock` when the change is entered after the fact.
    """
    clock = override_clock if override_clock is not None else current_clock
    state = record_possession_time(state, clock)

    direction = state.attack_direction if preserve_direction else state.attack_direction.flipped
    field_position = (
        _clamp(new_field_position) if new_field_position is not None else state.field_position
    )
    return replace(
        state,
        possession_side=state.possession_side.opposite,
        attack_direction=direction,
        down=1,
        yards_to_go=10,
        field_position=field_position,
        possession_clock_start=clock,
    )


def swap_direction(state: PossessionState) -> PossessionState:
    """Flip the attack direction without changing possession (end of quarter)."""
    return replace(state, attack_direction=state.attack_direction.flipped)


def set_down_and_distance(state: PossessionState, down: int, yards_to_go: int) -> PossessionState:
    if not 1 <= down <= 4:
        raise ValueError(f"Down must be 1-4, got {down}")
    if yards_to_go < 0:
        raise ValueError(f"Yards to go cannot be negative, got {yards_to_go}")
    return replace(state, down=down, yards_to_go=yards_to_go)


def restart_possession_clock(state: PossessionState, clock: int) -> PossessionState:
    """
    Start timing the current possession from `clock`.

    Used when the clock is reset for a new quarter; credit the old quarter
    first with `record_possession_time`.
    """
    return replace(state, possession_clock_start=clock)


def time_of_possession(state: PossessionState) -> dict[TeamSide, int]:
    return {TeamSide.HOME: state.home_top_seconds, TeamSide.AWAY: state.away_top_seconds}
