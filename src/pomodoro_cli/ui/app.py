"""Textual window: timer face, controls and the task list.

The window holds no timer or task state of its own. It dispatches user
intents to a ``PomodoroSession`` and redraws from the snapshot the session
hands to its render callback.
"""

from __future__ import annotations

import logging

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Input, Label, Static

from pomodoro_cli.config import AppConfig
from pomodoro_cli.models.session import PomodoroSession, SessionSnapshot
from pomodoro_cli.ui.formatters import state_label, timer_style, toggle_label

logger = logging.getLogger(__name__)


class TaskRow(Horizontal):
    """One task entry with its delete button."""

    def __init__(self, position: int, entry: str):
        super().__init__(classes="task-row")
        self.position = position
        self.entry = entry

    def compose(self) -> ComposeResult:
        yield Label(self.entry, markup=False, classes="task-text")
        yield Button("Delete", variant="error", classes="delete-task")


class PomodoroApp(App):
    """Single-window Pomodoro timer with a task list."""

    CSS = """
    Screen {
        align: center top;
        padding: 1 2;
    }

    #timer-face {
        width: 100%;
        height: 5;
        content-align: center middle;
        text-style: bold;
        border: round $primary;
    }

    #timer-state {
        width: 100%;
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }

    #controls {
        width: 100%;
        height: auto;
        align: center middle;
        margin: 1 0;
    }

    #controls Button {
        margin: 0 2;
    }

    #task-list {
        width: 100%;
        height: 1fr;
        border: solid $accent;
    }

    .task-row {
        height: auto;
        padding: 0 1;
    }

    .task-text {
        width: 1fr;
        padding: 1 0;
    }

    .empty-hint {
        color: $text-muted;
        padding: 1;
    }

    #add-row {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    #new-task {
        width: 1fr;
    }
    """

    BINDINGS = [
        ("ctrl+s", "toggle_timer", "Start/Pause"),
        ("ctrl+r", "reset_timer", "Reset"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: PomodoroSession | None = None,
        config: AppConfig | None = None,
    ):
        super().__init__()
        self.session = session if session is not None else PomodoroSession()
        self.config = config if config is not None else AppConfig()
        self.title = self.config.ui.title
        self._unsubscribe = None
        self._rendered_tasks: tuple[str, ...] | None = None

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        with Vertical():
            yield Static("", id="timer-face")
            yield Static("", id="timer-state")
            with Horizontal(id="controls"):
                yield Button("Start", variant="success", id="toggle")
                yield Button("Reset", variant="error", id="reset")
            yield VerticalScroll(id="task-list")
            with Horizontal(id="add-row"):
                yield Input(placeholder="New task", id="new-task")
                yield Button("Add", variant="primary", id="add-task")
        if self.config.ui.show_key_hints:
            yield Footer()

    def on_mount(self) -> None:
        """Attach to the session and draw the initial state."""
        self._unsubscribe = self.session.subscribe(self.render_snapshot)
        self.render_snapshot(self.session.snapshot())
        self.query_one("#new-task", Input).focus()
        logger.debug("window mounted")

    async def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self.session.aclose()
        logger.debug("window unmounted")

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        """Redraw every widget that depends on session state."""
        ui = self.config.ui
        color = timer_style(
            snapshot.state,
            snapshot.remaining_seconds,
            ui.warning_threshold,
            ui.critical_threshold,
        )
        face = self.query_one("#timer-face", Static)
        face.update(f"[bold {color}]{snapshot.display_time}[/]")
        self.query_one("#timer-state", Static).update(state_label(snapshot.state))
        self.query_one("#toggle", Button).label = toggle_label(snapshot.state)

        if snapshot.tasks != self._rendered_tasks:
            self._rendered_tasks = snapshot.tasks
            self._rebuild_task_rows(snapshot.tasks)

    def _rebuild_task_rows(self, tasks: tuple[str, ...]) -> None:
        container = self.query_one("#task-list", VerticalScroll)
        container.remove_children()
        if not tasks:
            container.mount(Static("No tasks yet", classes="empty-hint"))
            return
        container.mount_all(TaskRow(position, entry) for position, entry in enumerate(tasks))

    async def action_toggle_timer(self) -> None:
        await self.session.toggle()

    async def action_reset_timer(self) -> None:
        await self.session.reset()

    @on(Button.Pressed, "#toggle")
    async def handle_toggle(self) -> None:
        await self.action_toggle_timer()

    @on(Button.Pressed, "#reset")
    async def handle_reset(self) -> None:
        await self.action_reset_timer()

    @on(Button.Pressed, "#add-task")
    @on(Input.Submitted, "#new-task")
    def handle_add(self) -> None:
        """Add the typed task; keep the text when it was blank."""
        task_input = self.query_one("#new-task", Input)
        if self.session.add_task(task_input.value) is not None:
            task_input.value = ""

    def delete_row(self, row: TaskRow) -> bool:
        """Remove the entry a row was rendered for.

        Returns False when the row no longer matches the list, which happens
        when a click lands on a row that is being replaced.
        """
        tasks = self.session.tasks
        if row.position >= len(tasks) or tasks[row.position] != row.entry:
            logger.warning("ignoring delete of stale task row %d", row.position)
            return False
        self.session.remove_task_at(row.position)
        return True

    @on(Button.Pressed, ".delete-task")
    def handle_delete(self, event: Button.Pressed) -> None:
        row = event.button.parent
        if isinstance(row, TaskRow):
            self.delete_row(row)
