"""Exceptions raised by the Pomodoro models."""


class PomodoroError(Exception):
    """Base class for Pomodoro errors."""


class TaskIndexError(PomodoroError, IndexError):
    """Raised when a task position does not exist in the current list."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Task index {index} out of range (list has {size} items)")
        self.index = index
        self.size = size


class CountdownActiveError(PomodoroError, RuntimeError):
    """Raised when a second countdown would start while one is still live."""
