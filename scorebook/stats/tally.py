"""
Tally Engine - accumulate team and player counters from a play log.

Counts one side of a game. Plays executed by that side go through the
offensive table (rushing, passing, receiving, kicking, returns,
penalties); plays executed by the other side go through the defensive
table (tackles, sacks made, takeaways, ...). Play types neither table
knows about count for nothing.

Usage:
    report = compute_game_stats(game.plays, TeamSide.HOME)
    report.team_stats.rushing_yards
    report.player_stats["p-12"].tackles
"""

from typing import Callable, Iterable, Optional

from scorebook.core.enums import ParticipantRole, PlayType, TeamSide
from scorebook.core.models.play import Play
from scorebook.core.models.stats import GameStatsReport, TeamGameStats
from scorebook.stats.attribution import resolve_defenders, resolve_role

StatUpdate = Callable[[TeamGameStats], None]


# =============================================================================
# Stat line updates
# =============================================================================


def _add_rush(stats: TeamGameStats, play: Play) -> None:
    stats.rushing_attempts += 1
    stats.rushing_yards += play.yards
    if play.yards > 0:
        stats.rushing_yards_positive += play.yards
    else:
        stats.rushing_yards_negative += abs(play.yards)
    stats.rushing_longest = max(stats.rushing_longest, play.yards)
    if play.type == PlayType.RUSH_TD:
        stats.rushing_tds += 1


def _add_completion(stats: TeamGameStats, play: Play) -> None:
    stats.passing_attempts += 1
    stats.completions += 1
    stats.passing_yards += play.yards
    stats.passing_longest = max(stats.passing_longest, play.yards)
    if play.type == PlayType.PASS_TD:
        stats.passing_tds += 1


def _add_reception(stats: TeamGameStats, play: Play) -> None:
    # Targets only count incompletions and drops
    stats.receptions += 1
    stats.receiving_yards += play.yards
    if play.yards > 0:
        stats.receiving_yards_positive += play.yards
    else:
        stats.receiving_yards_negative += abs(play.yards)
    stats.receiving_longest = max(stats.receiving_longest, play.yards)
    if play.type == PlayType.PASS_TD:
        stats.receiving_tds += 1


def _add_sack_taken(stats: TeamGameStats, play: Play) -> None:
    # High school and college scoring charge the sack to rushing
    stats.sacks += 1
    stats.sack_yards += abs(play.yards)
    stats.rushing_attempts += 1
    stats.rushing_yards += play.yards
    stats.rushing_yards_negative += abs(play.yards)


def _add_kickoff_return(stats: TeamGameStats, play: Play) -> None:
    stats.kickoff_returns += 1
    stats.kickoff_return_yards += play.yards
    stats.kickoff_return_longest = max(stats.kickoff_return_longest, play.yards)
    if play.scored_touchdown:
        stats.kickoff_return_tds += 1


def _add_punt_return(stats: TeamGameStats, play: Play) -> None:
    stats.punt_returns += 1
    stats.punt_return_yards += play.yards
    stats.punt_return_longest = max(stats.punt_return_longest, play.yards)
    if play.scored_touchdown:
        stats.punt_return_tds += 1


def _add_field_goal(stats: TeamGameStats, play: Play) -> None:
    stats.field_goals_attempted += 1
    if play.type == PlayType.FIELD_GOAL_MADE:
        stats.field_goals_made += 1
        stats.field_goal_longest = max(stats.field_goal_longest, play.yards)
    elif play.type == PlayType.BLOCKED_FIELD_GOAL:
        stats.field_goals_blocked += 1


def _add_extra_point(stats: TeamGameStats, play: Play) -> None:
    stats.extra_points_attempted += 1
    if play.type == PlayType.EXTRA_POINT_KICK_MADE:
        stats.extra_points_made += 1
    elif play.type == PlayType.BLOCKED_PAT:
        stats.extra_points_blocked += 1


def _add_kickoff(stats: TeamGameStats, play: Play) -> None:
    stats.kickoffs += 1
    stats.kickoff_yards += play.yards


def _add_punt(stats: TeamGameStats, play: Play) -> None:
    stats.punts += 1
    if play.type == PlayType.BLOCKED_PUNT:
        stats.punts_blocked += 1
        return
    stats.punt_yards += play.yards
    stats.punt_longest = max(stats.punt_longest, play.yards)


def _add_two_point_try(stats: TeamGameStats, play: Play) -> None:
    stats.two_point_attempts += 1
    if play.type == PlayType.TWO_POINT_CONVERSION_MADE:
        stats.two_point_conversions += 1


def _add_penalty(stats: TeamGameStats, play: Play) -> None:
    stats.penalties += 1
    stats.penalty_yards += play.yards


def _add_takeaway_touchdown(stats: TeamGameStats, play: Play) -> None:
    if play.scored_touchdown:
        stats.defensive_tds += 1


# =============================================================================
# Tally
# =============================================================================


class StatTally:
    """
    Accumulates one side's statistics over a play log.

    Every update is applied once to the team bucket and once to each
    credited player's bucket, so team totals never depend on how many
    players were tagged.
    """

    def __init__(self, side: TeamSide) -> None:
        self.side = side
        self.report = GameStatsReport()

        self._offense: dict[PlayType, Callable[[Play], None]] = {
            PlayType.RUSH: self._process_rush,
            PlayType.RUSH_TD: self._process_rush,
            PlayType.KNEEL: self._process_rush,
            PlayType.PASS_COMPLETE: self._process_completion,
            PlayType.PASS_TD: self._process_completion,
            PlayType.PASS_INCOMPLETE: self._process_incompletion,
            PlayType.INTERCEPTION: self._process_interception_thrown,
            PlayType.SACK: self._process_sack_taken,
            PlayType.DROP: self._process_drop,
            PlayType.KICKOFF_RETURN: self._process_kickoff_return,
            PlayType.PUNT_RETURN: self._process_punt_return,
            PlayType.FIELD_GOAL_MADE: self._process_field_goal,
            PlayType.FIELD_GOAL_MISSED: self._process_field_goal,
            PlayType.BLOCKED_FIELD_GOAL: self._process_field_goal,
            PlayType.EXTRA_POINT_KICK_MADE: self._process_extra_point,
            PlayType.EXTRA_POINT_KICK_MISSED: self._process_extra_point,
            PlayType.BLOCKED_PAT: self._process_extra_point,
            PlayType.KICKOFF: self._process_kickoff,
            PlayType.PUNT: self._process_punt,
            PlayType.BLOCKED_PUNT: self._process_punt,
            PlayType.TWO_POINT_CONVERSION_MADE: self._process_two_point_try,
            PlayType.TWO_POINT_CONVERSION_FAILED: self._process_two_point_try,
            PlayType.PENALTY: self._process_penalty,
        }
        self._defense: dict[PlayType, Callable[[TeamGameStats, Play], None]] = {
            PlayType.TACKLE: _tackle,
            PlayType.TACKLE_FOR_LOSS: _tackle_for_loss,
            PlayType.SACK: _sack_made,
            PlayType.INTERCEPTION: _interception_made,
            PlayType.FUMBLE_RECOVERY: _fumble_recovered,
            PlayType.FORCED_FUMBLE: _forced_fumble,
            PlayType.PASS_DEFENSED: _pass_breakup,
            PlayType.MISSED_TACKLE: _missed_tackle,
            PlayType.SAFETY: _safety,
        }

    @property
    def team(self) -> TeamGameStats:
        return self.report.team_stats

    def process_play(self, play: Play) -> None:
        """Route one play through the offensive or defensive table."""
        if play.team_side == self.side:
            handler = self._offense.get(play.type)
            if handler is not None:
                handler(play)
        else:
            update = self._defense.get(play.type)
            if update is not None:
                self._process_defense(play, update)

    def process_plays(self, plays: Iterable[Play]) -> "StatTally":
        for play in plays:
            self.process_play(play)
        return self

    def finish(self) -> GameStatsReport:
        """Fill in derived rates and return the report."""
        self.team.update_passer_rating()
        for stats in self.report.player_stats.values():
            if stats.passing_attempts > 0:
                stats.update_passer_rating()
        return self.report

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _credit(self, play: Play, role: ParticipantRole, update: StatUpdate) -> None:
        for player_id in resolve_role(play, role):
            update(self.report.player(player_id))

    def _apply(
        self,
        play: Play,
        add: Callable[[TeamGameStats, Play], None],
        role: Optional[ParticipantRole],
    ) -> None:
        """Apply `add` to the team and to every player credited under `role`."""
        add(self.team, play)
        if role is not None:
            self._credit(play, role, lambda stats: add(stats, play))

    # -------------------------------------------------------------------------
    # Offense
    # -------------------------------------------------------------------------

    def _process_rush(self, play: Play) -> None:
        self._apply(play, _add_rush, ParticipantRole.RUSHER)

    def _process_completion(self, play: Play) -> None:
        _add_completion(self.team, play)
        _add_reception(self.team, play)
        self._credit(play, ParticipantRole.PASSER, lambda s: _add_completion(s, play))
        self._credit(play, ParticipantRole.RECEIVER, lambda s: _add_reception(s, play))

    def _process_incompletion(self, play: Play) -> None:
        self.team.passing_attempts += 1
        self.team.receiving_attempts += 1

        def passer(stats: TeamGameStats) -> None:
            stats.passing_attempts += 1

        def target(stats: TeamGameStats) -> None:
            stats.receiving_attempts += 1

        self._credit(play, ParticipantRole.PASSER, passer)
        self._credit(play, ParticipantRole.RECEIVER, target)

    def _process_interception_thrown(self, play: Play) -> None:
        def thrown(stats: TeamGameStats) -> None:
            stats.passing_attempts += 1
            stats.interceptions += 1

        thrown(self.team)
        self._credit(play, ParticipantRole.PASSER, thrown)

    def _process_sack_taken(self, play: Play) -> None:
        self._apply(play, _add_sack_taken, ParticipantRole.PASSER)

    def _process_drop(self, play: Play) -> None:
        self.team.drops += 1
        self.team.receiving_attempts += 1
        self.team.passing_attempts += 1

        def dropped(stats: TeamGameStats) -> None:
            stats.drops += 1
            stats.receiving_attempts += 1

        def passer(stats: TeamGameStats) -> None:
            stats.passing_attempts += 1

        self._credit(play, ParticipantRole.RECEIVER, dropped)
        self._credit(play, ParticipantRole.PASSER, passer)

    def _process_kickoff_return(self, play: Play) -> None:
        self._apply(play, _add_kickoff_return, ParticipantRole.RETURNER)

    def _process_punt_return(self, play: Play) -> None:
        self._apply(play, _add_punt_return, ParticipantRole.RETURNER)

    def _process_field_goal(self, play: Play) -> None:
        self._apply(play, _add_field_goal, ParticipantRole.KICKER)

    def _process_extra_point(self, play: Play) -> None:
        self._apply(play, _add_extra_point, ParticipantRole.KICKER)

    def _process_kickoff(self, play: Play) -> None:
        self._apply(play, _add_kickoff, ParticipantRole.KICKER)

    def _process_punt(self, play: Play) -> None:
        self._apply(play, _add_punt, ParticipantRole.KICKER)

    def _process_two_point_try(self, play: Play) -> None:
        _add_two_point_try(self.team, play)
        credited = []
        for role in (ParticipantRole.RUSHER, ParticipantRole.PASSER, ParticipantRole.RECEIVER):
            for participant in play.participants_with_role(role):
                if participant.player_id not in credited:
                    credited.append(participant.player_id)
        for player_id in credited:
            _add_two_point_try(self.report.player(player_id), play)

    def _process_penalty(self, play: Play) -> None:
        _add_penalty(self.team, play)
        key = play.penalty_type or "Other"
        self.team.penalty_breakdown[key] = self.team.penalty_breakdown.get(key, 0) + 1
        if play.player_id:
            _add_penalty(self.report.player(play.player_id), play)

    # -------------------------------------------------------------------------
    # Defense
    # -------------------------------------------------------------------------

    def _process_defense(self, play: Play, update: Callable[[TeamGameStats, Play], None]) -> None:
        update(self.team, play)
        for player_id in resolve_defenders(play):
            update(self.report.player(player_id), play)


def _tackle(stats: TeamGameStats, play: Play) -> None:
    stats.tackles += 1


def _tackle_for_loss(stats: TeamGameStats, play: Play) -> None:
    stats.tackles += 1
    stats.tackles_for_loss += 1
    stats.tackle_for_loss_yards += abs(play.yards)


def _sack_made(stats: TeamGameStats, play: Play) -> None:
    stats.sacks_made += 1
    stats.sack_yards_made += abs(play.yards)


def _interception_made(stats: TeamGameStats, play: Play) -> None:
    stats.interceptions_made += 1
    stats.interception_return_yards += play.yards
    _add_takeaway_touchdown(stats, play)


def _fumble_recovered(stats: TeamGameStats, play: Play) -> None:
    stats.fumbles_recovered += 1
    stats.fumble_return_yards += play.yards
    _add_takeaway_touchdown(stats, play)


def _forced_fumble(stats: TeamGameStats, play: Play) -> None:
    stats.forced_fumbles += 1


def _pass_breakup(stats: TeamGameStats, play: Play) -> None:
    stats.pass_breakups += 1


def _missed_tackle(stats: TeamGameStats, play: Play) -> None:
    stats.missed_tackles += 1


def _safety(stats: TeamGameStats, play: Play) -> None:
    stats.safeties += 1


def compute_game_stats(plays: Iterable[Play], side: TeamSide) -> GameStatsReport:
    """Tally a full play log from the point of view of `side`."""
    return StatTally(side).process_plays(plays).finish()
