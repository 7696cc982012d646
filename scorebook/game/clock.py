"""
Game clock.

`ClockState` is a plain value and the functions below are its only
transitions. `GameClockTimer` wraps one state with a single cancellable
asyncio task that ticks once per interval while the clock runs.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_QUARTER_SECONDS = 12 * 60


@dataclass(frozen=True)
class ClockState:
    """Countdown clock for the current quarter."""

    time_remaining: int = DEFAULT_QUARTER_SECONDS
    running: bool = False

    @property
    def minutes(self) -> int:
        return self.time_remaining // 60

    @property
    def seconds(self) -> int:
        return self.time_remaining % 60

    @property
    def display(self) -> str:
        """Display time as M:SS."""
        return format_clock(self.time_remaining)

    def to_dict(self) -> dict:
        return {"time_remaining": self.time_remaining, "running": self.running}

    @classmethod
    def from_dict(cls, data: dict) -> "ClockState":
        return cls(
            time_remaining=data.get("time_remaining", DEFAULT_QUARTER_SECONDS),
            running=data.get("running", False),
        )


def format_clock(seconds: int) -> str:
    """Format seconds as M:SS, e.g. 725 -> '12:05'."""
    return f"{seconds // 60}:{seconds % 60:02d}"


def start_clock(state: ClockState) -> ClockState:
    if state.running:
        return state
    return replace(state, running=True)


def stop_clock(state: ClockState) -> ClockState:
    if not state.running:
        return state
    return replace(state, running=False)


def reset_clock(state: ClockState, new_time: int = DEFAULT_QUARTER_SECONDS) -> ClockState:
    """Stop the clock and set the time remaining."""
    if new_time < 0:
        raise ValueError(f"Clock time cannot be negative, got {new_time}")
    return ClockState(time_remaining=new_time, running=False)


def adjust_time(state: ClockState, delta: int) -> ClockState:
    """Add `delta` seconds (negative to take time off), never below zero."""
    return replace(state, time_remaining=max(0, state.time_remaining + delta))


def tick(state: ClockState) -> tuple[ClockState, bool]:
    """
    Advance a running clock by one second.

    Returns the new state and whether this tick expired the clock. The
    tick that reaches zero also stops the clock, so expiry is reported
    once per run down to zero.
    """
    if not state.running:
        return state, False
    if state.time_remaining <= 1:
        return ClockState(time_remaining=0, running=False), True
    return replace(state, time_remaining=state.time_remaining - 1), False


class GameClockTimer:
    """
    Live clock owned by one scoring session.

    At most one ticking task exists at a time. It is cancelled on stop,
    reset and close, and ends by itself when the clock expires.

    Example:
        timer = GameClockTimer(initial_time=720, on_expire=end_quarter)
        timer.start()        # inside a running event loop
        ...
        timer.stop()
    """

    def __init__(
        self,
        initial_time: int = DEFAULT_QUARTER_SECONDS,
        on_expire: Optional[Callable[[], None]] = None,
        tick_interval: float = 1.0,
    ) -> None:
        self._state = ClockState(time_remaining=initial_time)
        self._on_expire = on_expire
        self._tick_interval = tick_interval
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def time_remaining(self) -> int:
        return self._state.time_remaining

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def has_active_task(self) -> bool:
        return self._task is not None and not self._task.done()

    def set_expire_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_expire = callback

    def start(self) -> None:
        """Start the countdown. Must be called from a running event loop."""
        if self._state.running:
            return
        loop = asyncio.get_running_loop()
        self._state = start_clock(self._state)
        self._task = loop.create_task(self._run())

    def stop(self) -> None:
        self._cancel_task()
        self._state = stop_clock(self._state)

    def reset(self, new_time: int = DEFAULT_QUARTER_SECONDS) -> None:
        state = reset_clock(self._state, new_time)
        self._cancel_task()
        self._state = state

    def adjust_time(self, delta: int) -> None:
        """Change the time remaining without touching the run state."""
        self._state = adjust_time(self._state, delta)

    def close(self) -> None:
        """Tear down: cancel any pending tick and stop."""
        self.stop()

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while self._state.running:
            await asyncio.sleep(self._tick_interval)
            self._state, expired = tick(self._state)
            if expired:
                self._task = None
                logger.info("Game clock expired")
                if self._on_expire:
                    try:
                        self._on_expire()
                    except Exception:
                        logger.exception("Clock expiry callback failed")
                return
