"""Tests for player credit resolution."""

import pytest

from conftest import make_play, participants
from scorebook.core.enums import ParticipantRole, PlayType
from scorebook.stats.attribution import (
    FALLBACK_ROLES,
    fallback_role,
    resolve_credits,
    resolve_defenders,
    resolve_role,
)


class TestFallbackRoles:
    """Tests for the player_id fallback table."""

    @pytest.mark.parametrize(
        "play_type,role",
        [
            (PlayType.RUSH, ParticipantRole.RUSHER),
            (PlayType.RUSH_TD, ParticipantRole.RUSHER),
            (PlayType.KNEEL, ParticipantRole.RUSHER),
            (PlayType.PASS_COMPLETE, ParticipantRole.PASSER),
            (PlayType.PASS_INCOMPLETE, ParticipantRole.PASSER),
            (PlayType.INTERCEPTION, ParticipantRole.PASSER),
            (PlayType.SACK, ParticipantRole.PASSER),
            (PlayType.PUNT, ParticipantRole.KICKER),
            (PlayType.EXTRA_POINT_KICK_MISSED, ParticipantRole.KICKER),
            (PlayType.PUNT_RETURN, ParticipantRole.RETURNER),
        ],
    )
    def test_table(self, play_type, role):
        assert fallback_role(play_type) is role

    def test_defensive_types_have_no_fallback(self):
        for play_type in (PlayType.TACKLE, PlayType.FUMBLE_RECOVERY, PlayType.PASS_DEFENSED):
            assert play_type not in FALLBACK_ROLES

    def test_unknown_type(self):
        assert fallback_role("onside_kick") is None


class TestResolveRole:
    """Tests for explicit-then-fallback resolution."""

    def test_fallback_player_id(self):
        play = make_play(PlayType.RUSH, 7, player_id="P1")
        assert resolve_role(play, ParticipantRole.RUSHER) == ["P1"]

    def test_fallback_only_for_mapped_role(self):
        play = make_play(PlayType.RUSH, 7, player_id="P1")
        assert resolve_role(play, ParticipantRole.RECEIVER) == []

    def test_explicit_participants_win(self):
        play = make_play(
            PlayType.RUSH, 7, player_id="P9", participants=participants(("P3", "rusher"))
        )
        assert resolve_role(play, ParticipantRole.RUSHER) == ["P3"]

    def test_fallback_used_when_no_participant_has_the_role(self):
        play = make_play(
            PlayType.PASS_COMPLETE,
            12,
            player_id="P1",
            participants=participants(("P2", "receiver")),
        )
        assert resolve_role(play, ParticipantRole.PASSER) == ["P1"]
        assert resolve_role(play, ParticipantRole.RECEIVER) == ["P2"]

    def test_multiple_players_keep_order(self):
        play = make_play(
            PlayType.RUSH, 2, participants=participants(("P3", "rusher"), ("P1", "rusher"))
        )
        assert resolve_role(play, ParticipantRole.RUSHER) == ["P3", "P1"]

    def test_nobody(self):
        assert resolve_role(make_play(PlayType.RUSH, 2), ParticipantRole.RUSHER) == []


class TestResolveDefenders:
    def test_tacklers_only(self):
        play = make_play(
            PlayType.TACKLE, participants=participants(("D1", "tackler"), ("D2", "assist"))
        )
        assert resolve_defenders(play) == ["D1"]

    def test_all_participants_without_tacklers(self):
        play = make_play(
            PlayType.FUMBLE_RECOVERY, participants=participants(("D2", "other"), ("D1", "assist"))
        )
        assert resolve_defenders(play) == ["D2", "D1"]

    def test_player_id_is_not_used(self):
        assert resolve_defenders(make_play(PlayType.TACKLE, player_id="D1")) == []


class TestResolveCredits:
    def test_all_roles(self):
        play = make_play(
            PlayType.PASS_TD, 25, participants=participants(("P1", "passer"), ("P2", "receiver"))
        )
        assert resolve_credits(play) == {
            ParticipantRole.PASSER: ["P1"],
            ParticipantRole.RECEIVER: ["P2"],
        }

    def test_selected_roles(self):
        play = make_play(PlayType.PUNT, 40, player_id="K1")
        assert resolve_credits(play, [ParticipantRole.KICKER, ParticipantRole.RETURNER]) == {
            ParticipantRole.KICKER: ["K1"]
        }
