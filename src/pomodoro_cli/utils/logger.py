"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_cli"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _file_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


def get_logger(level: str | int | None = None) -> logging.Logger:
    """Return the package logger, initialising it on first call.

    Modules log through ``logging.getLogger(__name__)``; their records
    propagate up to this logger and its rotating file handler.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not _file_handlers(logger):
            log_dir = Path(user_log_dir(_APP_NAME))
            log_dir.mkdir(parents=True, exist_ok=True)

            handler = logging.handlers.RotatingFileHandler(
                log_dir / _LOG_FILE,
                maxBytes=_MAX_BYTES,
                backupCount=_BACKUP_COUNT,
                encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                    datefmt="%Y-%m-%dT%H:%M:%S",
                )
            )
            logger.addHandler(handler)
        _logger = logger

    if level is not None:
        _logger.setLevel(level)
    return _logger


def disable_logging() -> logging.Logger:
    """Detach the log file and drop every record from the package tree.

    Child loggers propagate straight to the parent's handlers, so the file
    handler is closed and removed rather than the parent being disabled.
    """
    global _logger
    logger = logging.getLogger(_APP_NAME)
    for handler in _file_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
    logger.propagate = False
    _logger = None
    return logger


def configure_logging(enabled: bool = True, level: str | int = "INFO") -> logging.Logger:
    """Apply the logging section of the configuration."""
    if not enabled:
        return disable_logging()
    return get_logger(level)
