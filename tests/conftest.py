"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real config and log directories.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from pomodoro_cli.models.session import PomodoroSession
from pomodoro_cli.models.timer import CountdownTimer

FAST_TICK = 0.02


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* and reset the process-wide singletons."""
    from pomodoro_cli import config as config_module
    from pomodoro_cli.utils import logger as logger_module

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    config_module.get_config_manager.cache_clear()
    logger_module._logger = None
    with patch.object(config_module, "user_config_dir", return_value=str(config_dir)):
        with patch.object(logger_module, "user_log_dir", return_value=str(log_dir)):
            yield tmp_path

    package_logger = logging.getLogger("pomodoro_cli")
    for handler in list(package_logger.handlers):
        # Leave pytest's own capture handlers in place.
        if isinstance(handler, (RotatingFileHandler, logging.NullHandler)):
            handler.close()
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    logger_module._logger = None
    config_module.get_config_manager.cache_clear()


# ---------------------------------------------------------------------------
# Model helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def fast_timer() -> CountdownTimer:
    """A full-length timer that ticks every FAST_TICK seconds."""
    return CountdownTimer(tick_seconds=FAST_TICK)


@pytest.fixture()
def session(fast_timer) -> PomodoroSession:
    return PomodoroSession(timer=fast_timer)
