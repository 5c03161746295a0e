"""Diagnostic logging for the client.

The terminal UI owns stdout and stderr while it runs, so records go to a
rotating file by default. The console handler is only for commands that
print plain output, such as the CLI.
"""
from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "tuneview.log"


def resolve_log_dir(settings: Settings) -> Path:
    """TUNEVIEW_LOG_DIR as an absolute path; relative values hang off the project root."""
    log_dir = settings.TUNEVIEW_LOG_DIR
    if log_dir.is_absolute():
        return log_dir
    return Path(__file__).resolve().parents[1] / log_dir


def setup_logging(settings: Settings, *, console: bool = False) -> Path:
    """Send log records to a daily-rotated file and return its path.

    Repeated calls replace the root handlers instead of stacking them.
    """
    log_dir = resolve_log_dir(settings)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    level_name = settings.TUNEVIEW_LOG_LEVEL.upper().strip()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [
        TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            backupCount=max(0, settings.TUNEVIEW_LOG_BACKUP_COUNT),
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("tuneview").info("Logging to %s at %s", log_file, logging.getLevelName(level))
    return log_file
