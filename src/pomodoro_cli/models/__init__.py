"""Timer and task list models for Pomodoro CLI."""

from .exceptions import CountdownActiveError, PomodoroError, TaskIndexError
from .session import PomodoroSession, SessionSnapshot
from .task_list import TaskList
from .timer import (
    DEFAULT_DURATION_SECONDS,
    TICK_SECONDS,
    CountdownTimer,
    TimerState,
    format_time,
)

__all__ = [
    "DEFAULT_DURATION_SECONDS",
    "TICK_SECONDS",
    "CountdownActiveError",
    "CountdownTimer",
    "PomodoroError",
    "PomodoroSession",
    "SessionSnapshot",
    "TaskIndexError",
    "TaskList",
    "TimerState",
    "format_time",
]
