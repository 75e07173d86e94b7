"""Output formatters shared by the window and the CLI commands."""

import json
from typing import Any

from rich.console import Console

from pomodoro_cli.models.timer import TimerState

console = Console()

STATE_LABELS = {
    TimerState.IDLE: "Ready",
    TimerState.RUNNING: "Focusing",
    TimerState.PAUSED: "Paused",
}


def timer_style(
    state: TimerState,
    remaining_seconds: int,
    warning_threshold: int = 300,
    critical_threshold: int = 60,
) -> str:
    """Pick the color for the timer face."""
    if state is TimerState.PAUSED:
        return "yellow"
    if state is TimerState.IDLE:
        return "green" if remaining_seconds == 0 else "cyan"
    if remaining_seconds < critical_threshold:
        return "red"
    if remaining_seconds < warning_threshold:
        return "yellow"
    return "cyan"


def state_label(state: TimerState) -> str:
    return STATE_LABELS[state]


def toggle_label(state: TimerState) -> str:
    """Label of the start/pause button for the given state."""
    return "Pause" if state is TimerState.RUNNING else "Start"


def format_json(data: Any) -> None:
    """Print data as pretty JSON."""
    console.print_json(json.dumps(data))


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
