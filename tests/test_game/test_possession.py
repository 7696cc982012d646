"""Tests for possession, field position and time of possession."""

import pytest

from scorebook.core.enums import FieldDirection, TeamSide
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


class TestFieldPosition:
    """Tests for moving the ball."""

    def test_home_left_to_right_advances_up(self):
        state = PossessionState(field_position=25)
        assert advance_ball(state).field_position == 26
        assert retreat_ball(state).field_position == 24

    def test_home_right_to_left_advances_down(self):
        state = PossessionState(field_position=25, attack_direction=FieldDirection.RIGHT_TO_LEFT)
        assert advance_ball(state).field_position == 24

    def test_away_right_to_left_advances_up(self):
        state = PossessionState(
            possession_side=TeamSide.AWAY,
            field_position=40,
            attack_direction=FieldDirection.RIGHT_TO_LEFT,
        )
        assert advance_ball(state).field_position == 41
        assert retreat_ball(state).field_position == 39

    def test_clamped_to_field(self):
        assert advance_ball(PossessionState(field_position=100)).field_position == 100
        assert retreat_ball(PossessionState(field_position=0)).field_position == 0

    def test_repeated_advance_stops_at_goal_line(self):
        state = PossessionState(field_position=95)
        for _ in range(20):
            state = advance_ball(state)
        assert state.field_position == 100


class TestTimeOfPossession:
    """Tests for crediting possession time."""

    def test_change_credits_departing_side(self):
        state = PossessionState(possession_clock_start=600)
        state = change_possession(state, current_clock=580)
        assert state.home_top_seconds == 20
        assert state.away_top_seconds == 0
        assert state.possession_side is TeamSide.AWAY
        assert state.possession_clock_start == 580

    def test_alternating_possessions_accumulate(self):
        state = PossessionState(possession_clock_start=720)
        state = change_possession(state, 700)
        state = change_possession(state, 650)
        state = change_possession(state, 640)
        assert time_of_possession(state) == {TeamSide.HOME: 30, TeamSide.AWAY: 50}

    def test_clock_moved_up_credits_nothing(self):
        state = record_possession_time(PossessionState(possession_clock_start=500), 520)
        assert state.home_top_seconds == 0
        assert state.possession_clock_start == 520

    def test_override_clock(self):
        state = change_possession(PossessionState(possession_clock_start=600), 500, override_clock=590)
        assert state.home_top_seconds == 10
        assert state.possession_clock_start == 590

    def test_restart_possession_clock_credits_nothing(self):
        state = restart_possession_clock(PossessionState(possession_clock_start=100), 720)
        assert state.possession_clock_start == 720
        assert state.home_top_seconds == 0


class TestChangePossession:
    def test_flips_direction_and_resets_series(self):
        state = PossessionState(down=3, yards_to_go=4, field_position=60)
        state = change_possession(state, 700)
        assert state.attack_direction is FieldDirection.RIGHT_TO_LEFT
        assert (state.down, state.yards_to_go) == (1, 10)
        assert state.field_position == 60

    def test_preserve_direction(self):
        state = change_possession(PossessionState(), 700, preserve_direction=True)
        assert state.attack_direction is FieldDirection.LEFT_TO_RIGHT

    def test_new_field_position_is_clamped(self):
        assert change_possession(PossessionState(), 700, new_field_position=35).field_position == 35
        assert change_possession(PossessionState(), 700, new_field_position=130).field_position == 100

    def test_advance_after_flipped_change(self):
        """Away attacking right-to-left moves toward 100, like home left-to-right."""
        state = change_possession(PossessionState(field_position=50), 700)
        assert state.attacks_toward_max
        assert advance_ball(state).field_position == 51


class TestDownAndDirection:
    def test_swap_direction(self):
        state = swap_direction(PossessionState())
        assert state.attack_direction is FieldDirection.RIGHT_TO_LEFT
        assert state.possession_side is TeamSide.HOME

    def test_set_down_and_distance(self):
        state = set_down_and_distance(PossessionState(), 3, 7)
        assert state.down_display == "3rd & 7"

    @pytest.mark.parametrize("down,yards", [(0, 10), (5, 10), (2, -1)])
    def test_set_down_and_distance_rejects_bad_values(self, down, yards):
        with pytest.raises(ValueError):
            set_down_and_distance(PossessionState(), down, yards)

    def test_dict_round_trip(self):
        state = PossessionState(possession_side=TeamSide.AWAY, field_position=12, home_top_seconds=90)
        assert PossessionState.from_dict(state.to_dict()) == state
