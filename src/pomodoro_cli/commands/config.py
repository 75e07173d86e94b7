"""Configuration management commands."""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from pomodoro_cli.commands.decorators import AppError, command_wrapper
from pomodoro_cli.config import get_config_manager
from pomodoro_cli.ui.formatters import format_error, format_json, format_success
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

app = typer.Typer(help="Configuration management commands")
console = Console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config_manager = get_config_manager()
    format_json(config_manager.config.model_dump())


@app.command("path")
@command_wrapper
def config_path() -> None:
    """Print the location of the configuration file."""
    console.print(str(get_config_manager().config_file))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.title)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., logging.level)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager()
    try:
        # Raw string; pydantic coerces it to the field type.
        config_manager.set(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for '{key}': {e.errors()[0]['msg']}", ERROR_INVALID_ARGS
        ) from e
    format_success(f"Configuration '{key}' set to '{config_manager.get(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager().reset(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
