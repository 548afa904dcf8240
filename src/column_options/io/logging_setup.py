"""Logging bootstrap: one rotating log file, never the terminal the TUI draws on.

// [LAW:single-enforcer] Only configure() attaches handlers to the column_options logger.

The file lives at $COLUMN_OPTIONS_LOG_FILE, or
$XDG_STATE_HOME/column-options/column-options.log. The level comes from
$COLUMN_OPTIONS_LOG_LEVEL (default INFO).
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "column_options"
LOG_FILE_ENV = "COLUMN_OPTIONS_LOG_FILE"
LOG_LEVEL_ENV = "COLUMN_OPTIONS_LOG_LEVEL"

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def log_path() -> Path:
    override = os.environ.get(LOG_FILE_ENV)
    if override:
        return Path(override)
    state_home = os.environ.get("XDG_STATE_HOME", os.path.expanduser("~/.local/state"))
    return Path(state_home) / "column-options" / "column-options.log"


def log_level() -> int:
    """Level named by the environment; unknown names mean INFO."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def configure() -> Path:
    """Route column_options records to the log file and return its path.

    Idempotent: a second call only re-reads the level.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        path = log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        _handler = RotatingFileHandler(path, maxBytes=1024 * 1024, backupCount=1, encoding="utf-8")
        _handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False
    logger.setLevel(log_level())
    return Path(_handler.baseFilename)


def reset() -> None:
    """Detach the file handler (tests)."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
