"""Application session: the timer and task list behind the window."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .task_list import TaskList
from .timer import CountdownTimer, TimerState, format_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of everything the window renders."""

    remaining_seconds: int
    state: TimerState
    tasks: tuple[str, ...]

    @property
    def display_time(self) -> str:
        return format_time(self.remaining_seconds)

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING


RenderCallback = Callable[[SessionSnapshot], None]


class PomodoroSession:
    """Owns one countdown timer and one task list.

    The presentation layer dispatches user intents here and re-renders
    from the snapshot passed to its render callbacks. Timer and task list
    never reference each other.
    """

    def __init__(
        self,
        timer: CountdownTimer | None = None,
        tasks: TaskList | None = None,
    ):
        self.timer = timer if timer is not None else CountdownTimer()
        self.tasks = tasks if tasks is not None else TaskList()
        self._renderers: list[RenderCallback] = []
        self._unsubscribe_timer = self.timer.subscribe(self._on_timer_change)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            remaining_seconds=self.timer.remaining_seconds,
            state=self.timer.state,
            tasks=self.tasks.items,
        )

    def subscribe(self, render: RenderCallback) -> Callable[[], None]:
        """Register a render callback. Returns a callable that removes it."""
        self._renderers.append(render)

        def unsubscribe() -> None:
            if render in self._renderers:
                self._renderers.remove(render)

        return unsubscribe

    async def toggle(self) -> TimerState:
        return await self.timer.toggle()

    async def reset(self) -> None:
        await self.timer.reset()

    def add_task(self, text: str) -> str | None:
        entry = self.tasks.add_task(text)
        if entry is not None:
            self._render()
        return entry

    def remove_task_at(self, index: int) -> str:
        entry = self.tasks.remove_task_at(index)
        self._render()
        return entry

    async def aclose(self) -> None:
        """Stop the countdown and detach every render callback."""
        await self.timer.aclose()
        self._unsubscribe_timer()
        self._renderers.clear()
        logger.debug("session closed")

    def _on_timer_change(self, _timer: CountdownTimer) -> None:
        self._render()

    def _render(self) -> None:
        snapshot = self.snapshot()
        for render in list(self._renderers):
            render(snapshot)
