"""Countdown timer state machine with a single background countdown task."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from .exceptions import CountdownActiveError

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 25 * 60
TICK_SECONDS = 1.0


class TimerState(str, Enum):
    """Lifecycle of a countdown timer."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


TimerListener = Callable[["CountdownTimer"], None]


def format_time(total_seconds: int) -> str:
    """Format a number of seconds as MM:SS."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class CountdownTimer:
    """Pomodoro countdown that ticks once per second while running.

    Owns at most one countdown task at a time. Leaving the running state
    cancels that task and waits for it to finish before the transition
    returns, so a paused or reset timer can never be decremented by a
    stale tick.

    All methods must be called from the event loop that runs the countdown.
    """

    def __init__(
        self,
        duration_seconds: int = DEFAULT_DURATION_SECONDS,
        tick_seconds: float = TICK_SECONDS,
    ):
        if duration_seconds < 0:
            raise ValueError("duration_seconds must be non-negative")
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")

        self.duration_seconds = duration_seconds
        self.tick_seconds = tick_seconds
        self.remaining_seconds = duration_seconds
        self.state = TimerState.IDLE

        self._listeners: list[TimerListener] = []
        self._task: asyncio.Task | None = None
        self._lock = asyncio.Lock()

    def __repr__(self) -> str:
        return (
            f"CountdownTimer(state={self.state.value}, "
            f"remaining={format_time(self.remaining_seconds)})"
        )

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def has_active_task(self) -> bool:
        """Whether the countdown task slot holds a live task."""
        return self._task is not None and not self._task.done()

    def subscribe(self, listener: TimerListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def toggle(self) -> TimerState:
        """Start or resume when idle/paused, pause when running."""
        async with self._lock:
            if self.state is TimerState.RUNNING:
                self.state = TimerState.PAUSED
                await self._stop_countdown()
                logger.debug("timer paused at %s", format_time(self.remaining_seconds))
            else:
                previous = self.state
                self.state = TimerState.RUNNING
                self._start_countdown()
                logger.debug(
                    "timer started from %s at %s",
                    previous.value,
                    format_time(self.remaining_seconds),
                )
            self._notify()
            return self.state

    async def reset(self) -> None:
        """Stop any countdown and return to idle with the full duration."""
        async with self._lock:
            await self._stop_countdown()
            self.state = TimerState.IDLE
            self.remaining_seconds = self.duration_seconds
            logger.debug("timer reset to %s", format_time(self.remaining_seconds))
            self._notify()

    async def aclose(self) -> None:
        """Cancel the countdown task, leaving a running timer paused."""
        async with self._lock:
            was_running = self.state is TimerState.RUNNING
            if was_running:
                self.state = TimerState.PAUSED
            await self._stop_countdown()
            if was_running:
                self._notify()

    def _start_countdown(self) -> None:
        if self.has_active_task:
            raise CountdownActiveError("A countdown task is already active")
        self._task = asyncio.create_task(
            self._run_countdown(), name="pomodoro-countdown"
        )

    async def _stop_countdown(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        # Join without re-raising the task's CancelledError into the caller.
        await asyncio.wait({task})

    async def _run_countdown(self) -> None:
        try:
            while self.remaining_seconds > 0:
                await asyncio.sleep(self.tick_seconds)
                if self.state is not TimerState.RUNNING:
                    return
                self.remaining_seconds = max(0, self.remaining_seconds - 1)
                self._notify()

            self.state = TimerState.IDLE
            logger.info("countdown finished")
            self._notify()
        finally:
            if self._task is asyncio.current_task():
                self._task = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("timer listener %r failed", listener)
