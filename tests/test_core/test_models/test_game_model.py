"""Tests for game snapshot and rules models."""

import pytest

from scorebook.core.enums import PlayType, TackleMode, TeamSide
from scorebook.core.models.game import Game, GameRules, RosterSnapshot, ScoringConfig
from scorebook.core.models.play import Play
from scorebook.core.models.player import Player


class TestScoringConfig:
    """Tests for point values."""

    @pytest.mark.parametrize(
        "play_type,points",
        [
            (PlayType.RUSH_TD, 6),
            (PlayType.PASS_TD, 6),
            (PlayType.FIELD_GOAL_MADE, 3),
            (PlayType.EXTRA_POINT_KICK_MADE, 1),
            (PlayType.TWO_POINT_CONVERSION_MADE, 2),
            (PlayType.SAFETY, 2),
            (PlayType.RUSH, 0),
            (PlayType.FIELD_GOAL_MISSED, 0),
            (PlayType.KICKOFF_RETURN, 0),
        ],
    )
    def test_default_points(self, play_type, points):
        assert ScoringConfig().points_for(play_type) == points

    def test_unknown_type_scores_nothing(self):
        assert ScoringConfig().points_for("onside_kick") == 0

    def test_custom_values(self):
        scoring = ScoringConfig(extra_point_kick=2, extra_point_conversion=1)
        assert scoring.points_for(PlayType.EXTRA_POINT_KICK_MADE) == 2
        assert scoring.points_for(PlayType.TWO_POINT_CONVERSION_MADE) == 1


class TestGameRules:
    def test_defaults(self):
        rules = GameRules()
        assert rules.quarter_length_minutes == 12
        assert rules.quarter_length_seconds == 720
        assert rules.tackle_mode is TackleMode.EQUAL
        assert rules.follow_nfhs

    def test_dict_round_trip(self):
        rules = GameRules(quarter_length_minutes=10, tackle_mode=TackleMode.WEIGHTED,
                          scoring=ScoringConfig(safety=3))
        assert GameRules.from_dict(rules.to_dict()) == rules


class TestRosterSnapshot:
    def test_get_player(self, home_roster):
        assert home_roster.get_player("P1").name == "Sam Reed"
        assert home_roster.get_player("nobody") is None

    def test_roster_list_is_stored_as_tuple(self):
        snapshot = RosterSnapshot(roster=[Player(id="P1", name="Sam Reed")])
        assert isinstance(snapshot.roster, tuple)


class TestGame:
    """Tests for the Game snapshot."""

    def test_new_game_is_empty(self):
        game = Game()
        assert game.plays == ()
        assert game.home_score == 0
        assert game.opp_score == 0
        assert game.last_play is None

    def test_find_play(self):
        play = Play(id="p1", type=PlayType.RUSH, yards=4)
        game = Game(plays=(play,))
        assert game.find_play("p1") is play
        assert game.find_play("p2") is None
        assert game.last_play is play

    def test_roster_and_stats_for_side(self, empty_game):
        assert empty_game.roster_for(TeamSide.HOME) is empty_game.my_team_snapshot
        assert empty_game.roster_for(TeamSide.AWAY) is empty_game.opponent_snapshot
        assert empty_game.stats_for(TeamSide.AWAY) is empty_game.opponent_stats

    def test_score_display(self):
        assert Game(home_score=14, opp_score=3).score_display == "14 - 3"

    def test_dict_round_trip(self, empty_game, scoring_drive):
        game = Game(
            id=empty_game.id,
            plays=tuple(scoring_drive),
            my_team_snapshot=empty_game.my_team_snapshot,
            opponent_snapshot=empty_game.opponent_snapshot,
        )
        assert Game.from_dict(game.to_dict()) == game
