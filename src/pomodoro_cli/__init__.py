"""Pomodoro CLI - a single-window Pomodoro timer with a task list."""

__version__ = "0.1.0"
