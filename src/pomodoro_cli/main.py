"""Main entry point for Pomodoro CLI."""

import typer
from rich.console import Console

from pomodoro_cli import __version__
from pomodoro_cli.commands import config
from pomodoro_cli.commands.decorators import command_wrapper
from pomodoro_cli.config import get_config_manager
from pomodoro_cli.models.session import PomodoroSession

app = typer.Typer(
    name="pomodoro",
    help="A single-window Pomodoro timer with a task list",
    no_args_is_help=True,
)

console = Console()

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
@command_wrapper
def run() -> None:
    """Open the Pomodoro window."""
    from pomodoro_cli.ui.app import PomodoroApp

    app_config = get_config_manager().config
    PomodoroApp(session=PomodoroSession(), config=app_config).run()


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
