"""Shared pytest fixtures for Scorebook tests."""

import pytest

from scorebook.config import ScorebookConfig, set_config
from scorebook.core.enums import ParticipantRole, PlayType, TeamSide
from scorebook.core.models import Game, Play, PlayParticipant, Player, RosterSnapshot


# =============================================================================
# Config
# =============================================================================


@pytest.fixture(autouse=True)
def reset_config():
    """Fresh config per test so env-driven values never leak between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def fast_config() -> ScorebookConfig:
    """Config with a clock that ticks every few milliseconds."""
    config = ScorebookConfig(quarter_minutes=12, tick_interval=0.001)
    set_config(config)
    return config


# =============================================================================
# Roster Fixtures
# =============================================================================


@pytest.fixture
def home_roster() -> RosterSnapshot:
    return RosterSnapshot(
        team_id="eagles",
        season_id="2026",
        roster=(
            Player(id="P1", name="Sam Reed", jersey_number=12, position="QB"),
            Player(id="P2", name="Cole Hart", jersey_number=81, position="WR"),
            Player(id="P3", name="Eli Brooks", jersey_number=22, position="RB"),
            Player(id="K1", name="Max Lee", jersey_number=3, position="K"),
            Player(id="D1", name="Owen Price", jersey_number=44, position="LB"),
            Player(id="D2", name="Ty Moss", jersey_number=55, position="DE"),
        ),
    )


@pytest.fixture
def away_roster() -> RosterSnapshot:
    return RosterSnapshot(
        team_id="hawks",
        roster=(
            Player(id="A1", name="Jon Vance", jersey_number=10, position="QB"),
            Player(id="A2", name="Ray Cobb", jersey_number=28, position="RB"),
        ),
    )


@pytest.fixture
def empty_game(home_roster, away_roster) -> Game:
    """Game with rosters and no plays."""
    return Game(
        id="game-1",
        my_team_id="eagles",
        opponent_name="Hawks",
        my_team_snapshot=home_roster,
        opponent_snapshot=away_roster,
    )


# =============================================================================
# Play Fixtures
# =============================================================================


def make_play(play_type, yards=0, side=TeamSide.HOME, play_id=None, **kwargs) -> Play:
    """Build a play with a readable id."""
    if play_id is None:
        return Play.create(play_type, yards=yards, team_side=side, **kwargs)
    return Play(id=play_id, type=play_type, yards=yards, team_side=side, **kwargs)


def participants(*pairs) -> tuple:
    """participants(("P1", "passer"), ("P2", "receiver"))"""
    return tuple(PlayParticipant(pid, ParticipantRole(role)) for pid, role in pairs)


@pytest.fixture
def scoring_drive() -> list[Play]:
    """Home touchdown drive plus a PAT and an away field goal."""
    return [
        make_play(PlayType.RUSH, 7, player_id="P3", play_id="p1"),
        make_play(
            PlayType.PASS_COMPLETE,
            12,
            play_id="p2",
            participants=participants(("P1", "passer"), ("P2", "receiver")),
        ),
        make_play(
            PlayType.PASS_TD,
            25,
            play_id="p3",
            participants=participants(("P1", "passer"), ("P2", "receiver")),
        ),
        make_play(PlayType.EXTRA_POINT_KICK_MADE, player_id="K1", play_id="p4"),
        make_play(PlayType.RUSH, 3, side=TeamSide.AWAY, player_id="A2", play_id="p5"),
        make_play(
            PlayType.TACKLE,
            3,
            side=TeamSide.AWAY,
            play_id="p6",
            participants=participants(("D1", "tackler")),
        ),
        make_play(PlayType.FIELD_GOAL_MADE, 32, side=TeamSide.AWAY, play_id="p7"),
    ]
