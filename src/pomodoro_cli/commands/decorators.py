"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.models.exceptions import PomodoroError
from pomodoro_cli.ui.formatters import format_error
from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    get_exit_code_name,
)
from pomodoro_cli.utils.logger import configure_logging


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(_func: Callable | None = None):
    """Decorator to wrap command functions with logging and error mapping."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logging_config = get_config_manager().config.logging
            logger = configure_logging(logging_config.enabled, logging_config.level)
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except AppError as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) %s - %s",
                    cmd,
                    elapsed,
                    get_exit_code_name(e.exit_code),
                    str(e),
                )
                format_error(str(e))
                raise typer.Exit(code=e.exit_code) from e

            except PomodoroError as e:
                elapsed = time.monotonic() - start
                logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
                format_error(str(e))
                raise typer.Exit(code=ERROR_INVALID_ARGS) from e

            except typer.Exit:
                # Re-raise Typer's own exits (like --help or explicit Exit(0))
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                # Generic fallback for unexpected crashes
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=ERROR_GENERAL) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
