"""
Live scoring session.

Holds the state of one game being scored: the current Game snapshot, the
clock and the possession tracker. Play mutations go through the pure
functions in scorebook.game.recalc; the resulting snapshot replaces the
old one and is handed to the persistence callback.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from scorebook.config import get_config
from scorebook.core.models.game import Game
from scorebook.core.models.play import Play
from scorebook.events import (
    ClockExpiredEvent,
    EventBus,
    GameEvent,
    PlayEditedEvent,
    PlayRecordedEvent,
    PlayUndoneEvent,
    PossessionChangedEvent,
    SnapshotAppliedEvent,
)
from scorebook.game import possession as poss
from scorebook.game.clock import GameClockTimer
from scorebook.game.recalc import add_play, edit_play_and_recalc, recalculate, undo_last_play

logger = logging.getLogger(__name__)

SaveCallback = Callable[[Game], None]


class ScoringSession:
    """
    One live scoring session for one game.

    Args:
        game: Starting snapshot. It is recomputed once so stats and scores
            match the log even if the stored values drifted.
        save: Called with every new snapshot (the persistence layer).
        event_bus: Bus to announce changes on; a private one by default.
        tick_interval: Seconds per clock tick, from config by default.
    """

    def __init__(
        self,
        game: Game,
        save: Optional[SaveCallback] = None,
        event_bus: Optional[EventBus] = None,
        tick_interval: Optional[float] = None,
    ) -> None:
        config = get_config()
        self._game = recalculate(game)
        self._save = save
        self.event_bus = event_bus or EventBus()

        quarter_seconds = game.rules.quarter_length_seconds
        self.clock = GameClockTimer(
            initial_time=quarter_seconds,
            on_expire=self._on_clock_expired,
            tick_interval=tick_interval if tick_interval is not None else config.tick_interval,
        )
        self.possession = poss.PossessionState(possession_clock_start=quarter_seconds)
        self._closed = False

        logger.info("Scoring session opened for game %s", self._game.id)

    @property
    def game(self) -> Game:
        return self._game

    @property
    def game_id(self) -> str:
        return self._game.id

    @property
    def is_closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # Play log
    # -------------------------------------------------------------------------

    def record_play(self, play: Play) -> Game:
        """Append a play, recompute and persist."""
        self._commit(add_play(self._game, play))
        self._emit(PlayRecordedEvent(play=play))
        return self._game

    def undo(self) -> Game:
        """Remove the last play. Nothing happens on an empty log."""
        removed = self._game.last_play
        updated = undo_last_play(self._game)
        if updated is self._game:
            return self._game
        self._commit(updated)
        self._emit(PlayUndoneEvent(play=removed))
        return self._game

    def edit_play(self, play_id: str, updates: Mapping[str, Any]) -> Game:
        """Edit a play in place. Unknown ids leave the game unchanged."""
        updated = edit_play_and_recalc(self._game, play_id, updates)
        if updated is self._game:
            return self._game
        self._commit(updated)
        self._emit(PlayEditedEvent(play=self._game.find_play(play_id)))
        return self._game

    def apply_snapshot(self, game: Game) -> Game:
        """
        Adopt a snapshot delivered by the persistence subscription.

        The snapshot is recomputed rather than trusted, and not saved back.
        Clock and possession are session-local and stay as they are.
        """
        self._game = recalculate(game)
        self._emit(SnapshotAppliedEvent(play_count=len(self._game.plays)))
        return self._game

    # -------------------------------------------------------------------------
    # Clock
    # -------------------------------------------------------------------------

    def start_clock(self) -> None:
        self.clock.start()

    def stop_clock(self) -> None:
        self.clock.stop()

    def reset_clock(self, new_time: Optional[int] = None) -> None:
        """
        Stop and set the clock, e.g. at the start of a quarter.

        Time of possession up to this point is credited first, and the
        possession clock restarts at the new time.
        """
        if new_time is None:
            new_time = self._game.rules.quarter_length_seconds
        elapsed_to = self.clock.time_remaining
        self.clock.reset(new_time)
        self.possession = poss.record_possession_time(self.possession, elapsed_to)
        self.possession = poss.restart_possession_clock(self.possession, new_time)

    def adjust_time(self, delta: int) -> None:
        self.clock.adjust_time(delta)

    # -------------------------------------------------------------------------
    # Possession
    # -------------------------------------------------------------------------

    def advance_ball(self) -> poss.PossessionState:
        self.possession = poss.advance_ball(self.possession)
        return self.possession

    def retreat_ball(self) -> poss.PossessionState:
        self.possession = poss.retreat_ball(self.possession)
        return self.possession

    def swap_direction(self) -> poss.PossessionState:
        self.possession = poss.swap_direction(self.possession)
        return self.possession

    def set_down_and_distance(self, down: int, yards_to_go: int) -> poss.PossessionState:
        self.possession = poss.set_down_and_distance(self.possession, down, yards_to_go)
        return self.possession

    def change_possession(
        self,
        new_field_position: Optional[int] = None,
        preserve_direction: bool = False,
        override_clock: Optional[int] = None,
    ) -> poss.PossessionState:
        """Hand the ball over, timing the departing possession on the live clock."""
        before = self.possession
        departing = before.possession_side
        self.possession = poss.change_possession(
            before,
            self.clock.time_remaining,
            new_field_position=new_field_position,
            preserve_direction=preserve_direction,
            override_clock=override_clock,
        )
        credited = self.possession.top_for(departing) - before.top_for(departing)
        logger.debug(
            "Possession to %s, %ds credited to %s",
            self.possession.possession_side.value,
            credited,
            departing.value,
        )
        self._emit(
            PossessionChangedEvent(
                new_side=self.possession.possession_side,
                seconds_credited=credited,
                possession=self.possession,
            )
        )
        return self.possession

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """End the session and cancel the clock task."""
        if self._closed:
            return
        self.clock.close()
        self._closed = True
        logger.info("Scoring session closed for game %s", self._game.id)

    def _commit(self, game: Game) -> None:
        self._game = game
        if self._save is not None:
            self._save(game)

    def _emit(self, event: GameEvent) -> None:
        event.game_id = self._game.id
        event.home_score = self._game.home_score
        event.opp_score = self._game.opp_score
        self.event_bus.emit(event)

    def _on_clock_expired(self) -> None:
        self._emit(ClockExpiredEvent())
