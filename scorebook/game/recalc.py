"""
Recalculation Engine - rebuild a game snapshot from its play log.

Every mutation of the log (append, edit, undo) replays the entire log
through the tally engine and returns a new Game. Nothing is patched
incrementally, so a snapshot depends only on its ordered plays and rules.
"""

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping

from scorebook.core.enums import PlayType, TeamSide
from scorebook.core.models.game import Game, RosterSnapshot, ScoringConfig
from scorebook.core.models.play import Play
from scorebook.core.models.stats import GameStatsReport, TeamGameStats
from scorebook.stats.tally import compute_game_stats

logger = logging.getLogger(__name__)


def points_for_play(play: Play, scoring: ScoringConfig) -> tuple[TeamSide, int]:
    """
    Side credited with a play's points, and how many.

    A safety is recorded against the offense that was tackled in its end
    zone, so its points go to the other side.
    """
    points = scoring.points_for(play.type)
    if play.type == PlayType.SAFETY:
        return play.team_side.opposite, points
    return play.team_side, points


def score_timeline(plays: Iterable[Play], scoring: ScoringConfig) -> list[tuple[int, int]]:
    """Running (home, opp) score after each play."""
    timeline = []
    home = opp = 0
    for play in plays:
        side, points = points_for_play(play, scoring)
        if side == TeamSide.HOME:
            home += points
        else:
            opp += points
        timeline.append((home, opp))
    return timeline


def compute_score(plays: Iterable[Play], scoring: ScoringConfig) -> tuple[int, int]:
    """Final (home, opp) score for a play log."""
    timeline = score_timeline(plays, scoring)
    return timeline[-1] if timeline else (0, 0)


def _apply_report(snapshot: RosterSnapshot, report: GameStatsReport) -> RosterSnapshot:
    """Roster copy where every player carries a freshly derived bucket."""
    roster = []
    for player in snapshot.roster:
        stats = report.player_stats.get(player.id) or TeamGameStats()
        roster.append(player.with_stats(stats.to_stat_bucket()))
    return replace(snapshot, roster=tuple(roster))


def recalculate(game: Game) -> Game:
    """
    Full recompute of scores, team stats and roster stats.

    Pure: the input game is left untouched and a new snapshot returned.
    Running it on its own output yields an equal game.
    """
    home_report = compute_game_stats(game.plays, TeamSide.HOME)
    away_report = compute_game_stats(game.plays, TeamSide.AWAY)
    home_score, opp_score = compute_score(game.plays, game.rules.scoring)

    logger.debug(
        "Recalculated game %s over %d plays: %d-%d",
        game.id,
        len(game.plays),
        home_score,
        opp_score,
    )

    return replace(
        game,
        home_score=home_score,
        opp_score=opp_score,
        my_team_snapshot=_apply_report(game.my_team_snapshot, home_report),
        opponent_snapshot=_apply_report(game.opponent_snapshot, away_report),
        home_stats=home_report.team_stats,
        opponent_stats=away_report.team_stats,
    )


def add_play(game: Game, play: Play) -> Game:
    """Append a play to the log and recompute."""
    return recalculate(replace(game, plays=game.plays + (play,)))


def undo_last_play(game: Game) -> Game:
    """
    Remove the most recent play and recompute.

    An empty log is left alone and the same game is returned.
    """
    if not game.plays:
        logger.warning("Undo requested on game %s with an empty play log", game.id)
        return game
    return recalculate(replace(game, plays=game.plays[:-1]))


def edit_play_and_recalc(game: Game, play_id: str, updates: Mapping[str, Any]) -> Game:
    """
    Merge `updates` into the play with `play_id` and recompute.

    The play keeps its position in the log. If no play has that id the
    same game is returned unchanged.
    """
    for index, play in enumerate(game.plays):
        if play.id == play_id:
            edited = play.with_updates(**dict(updates))
            plays = game.plays[:index] + (edited,) + game.plays[index + 1:]
            return recalculate(replace(game, plays=plays))

    logger.warning("Edit ignored: play %s not found in game %s", play_id, game.id)
    return game
