"""Tests for the Textual window, driven through ``App.run_test``."""

from __future__ import annotations

import pytest
from textual.widgets import Button, Footer, Input, Label, Static

from pomodoro_cli.config import AppConfig, UIConfig
from pomodoro_cli.models.session import PomodoroSession
from pomodoro_cli.models.timer import CountdownTimer, TimerState
from pomodoro_cli.ui.app import PomodoroApp, TaskRow

SIZE = (80, 40)


def _make_app(duration: int = 1500, tick: float = 0.05, **ui) -> PomodoroApp:
    session = PomodoroSession(
        timer=CountdownTimer(duration_seconds=duration, tick_seconds=tick)
    )
    return PomodoroApp(session=session, config=AppConfig(ui=UIConfig(**ui)))


def _face(app: PomodoroApp) -> str:
    return str(app.query_one("#timer-face", Static).content)


def _toggle_label(app: PomodoroApp) -> str:
    return str(app.query_one("#toggle", Button).label)


class TestInitialRender:
    @pytest.mark.asyncio
    async def test_shows_full_duration_and_start(self):
        app = _make_app()
        async with app.run_test(size=SIZE):
            assert "25:00" in _face(app)
            assert _toggle_label(app) == "Start"
            assert str(app.query_one("#timer-state", Static).content) == "Ready"
            assert len(app.query(TaskRow)) == 0

    @pytest.mark.asyncio
    async def test_title_and_footer_follow_config(self):
        app = _make_app(title="Deep work", show_key_hints=False)
        async with app.run_test(size=SIZE):
            assert app.title == "Deep work"
            assert len(app.query(Footer)) == 0

    @pytest.mark.asyncio
    async def test_input_has_focus(self):
        app = _make_app()
        async with app.run_test(size=SIZE):
            assert app.focused is app.query_one("#new-task", Input)

    def test_keeps_injected_session(self):
        session = PomodoroSession()
        assert len(session.tasks) == 0
        assert PomodoroApp(session=session).session is session


class TestTimerControls:
    @pytest.mark.asyncio
    async def test_toggle_button_starts_and_pauses(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.pause()
            assert app.session.timer.state is TimerState.RUNNING
            assert _toggle_label(app) == "Pause"

            await pilot.click("#toggle")
            await pilot.pause()
            assert app.session.timer.state is TimerState.PAUSED
            assert _toggle_label(app) == "Start"

    @pytest.mark.asyncio
    async def test_running_timer_updates_face(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.pause(0.3)
            assert "25:00" not in _face(app)

    @pytest.mark.asyncio
    async def test_reset_button(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.pause(0.2)
            await pilot.click("#reset")
            await pilot.pause()
            assert app.session.timer.state is TimerState.IDLE
            assert "25:00" in _face(app)
            assert not app.session.timer.has_active_task

    @pytest.mark.asyncio
    async def test_key_bindings(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.press("ctrl+s")
            await pilot.pause()
            assert app.session.timer.state is TimerState.RUNNING

            await pilot.press("ctrl+r")
            await pilot.pause()
            assert app.session.timer.state is TimerState.IDLE

    @pytest.mark.asyncio
    async def test_expiry_returns_window_to_ready(self):
        app = _make_app(duration=2, tick=0.02)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.pause(0.3)
            assert app.session.timer.state is TimerState.IDLE
            assert "00:00" in _face(app)
            assert _toggle_label(app) == "Start"

    @pytest.mark.asyncio
    async def test_closing_window_cancels_countdown(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.pause()
            assert app.session.timer.has_active_task

        assert not app.session.timer.has_active_task
        assert app.session.timer.state is TimerState.PAUSED


class TestTaskList:
    @pytest.mark.asyncio
    async def test_add_button_trims_and_clears_input(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            task_input = app.query_one("#new-task", Input)
            task_input.value = "  Buy milk  "
            await pilot.click("#add-task")
            await pilot.pause()

            assert app.session.tasks.items == ("Buy milk",)
            assert task_input.value == ""
            rows = list(app.query(TaskRow))
            assert [row.entry for row in rows] == ["Buy milk"]

    @pytest.mark.asyncio
    async def test_enter_submits(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#new-task", Input).value = "Write report"
            await pilot.press("enter")
            await pilot.pause()
            assert app.session.tasks.items == ("Write report",)

    @pytest.mark.asyncio
    async def test_blank_input_is_kept_and_ignored(self):
        app = _make_app()
        async with app.run_test(size=SIZE) as pilot:
            task_input = app.query_one("#new-task", Input)
            task_input.value = "   "
            await pilot.click("#add-task")
            await pilot.pause()

            assert app.session.tasks.items == ()
            assert task_input.value == "   "

    @pytest.mark.asyncio
    async def test_delete_button_removes_its_row(self):
        app = _make_app()
        for entry in ("A", "B", "C"):
            app.session.add_task(entry)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            rows = list(app.query(TaskRow))
            assert [row.entry for row in rows] == ["A", "B", "C"]

            rows[1].query_one(Button).press()
            await pilot.pause()
            await pilot.pause()

            assert app.session.tasks.items == ("A", "C")
            assert [row.entry for row in app.query(TaskRow)] == ["A", "C"]

    @pytest.mark.asyncio
    async def test_delete_row_removes_matching_entry(self):
        app = _make_app()
        for entry in ("A", "B"):
            app.session.add_task(entry)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            rows = list(app.query(TaskRow))
            assert app.delete_row(rows[0]) is True
            assert app.session.tasks.items == ("B",)

    @pytest.mark.asyncio
    async def test_stale_row_does_not_delete_neighbour(self):
        app = _make_app()
        for entry in ("A", "B", "C"):
            app.session.add_task(entry)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            rows = list(app.query(TaskRow))

            # The list shifts before the click on "B" is handled.
            app.session.remove_task_at(0)

            assert app.delete_row(rows[1]) is False
            assert app.session.tasks.items == ("B", "C")

    @pytest.mark.asyncio
    async def test_stale_row_past_the_end_is_ignored(self):
        app = _make_app()
        for entry in ("A", "B"):
            app.session.add_task(entry)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            rows = list(app.query(TaskRow))
            app.session.remove_task_at(1)

            assert app.delete_row(rows[1]) is False
            assert app.session.tasks.items == ("A",)

    @pytest.mark.asyncio
    async def test_task_markup_is_not_interpreted(self):
        app = _make_app()
        app.session.add_task("[bold]not bold[/bold]")
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            (row,) = app.query(TaskRow)
            assert str(row.query_one(Label).content) == "[bold]not bold[/bold]"

    @pytest.mark.asyncio
    async def test_tasks_survive_timer_reset(self):
        app = _make_app()
        app.session.add_task("A")
        async with app.run_test(size=SIZE) as pilot:
            await pilot.click("#toggle")
            await pilot.click("#reset")
            await pilot.pause()
            assert app.session.tasks.items == ("A",)
