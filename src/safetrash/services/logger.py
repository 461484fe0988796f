# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging setup for Safe Trash. Every invocation appends a full DEBUG record to a
#              rotating file in the user log directory; only warnings and above reach stderr
#              unless TRASH_LOG_LEVEL asks for more.

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Final

from .config import DEFAULT_LOG_LEVEL, ensure_app_dirs

LOG_FILENAME: Final = "safetrash.log"
_LOG_FORMAT: Final = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
_MAX_BYTES: Final = 2 * 1024 * 1024
_BACKUP_COUNT: Final = 5


def _get_log_path() -> Path:
    # Return the rotating log file inside the per-user log directory.
    dirs = ensure_app_dirs()
    return Path(dirs.user_log_dir) / LOG_FILENAME


def _level_for(name: str) -> int:
    # Map a level name to its number; unknown names fall back to WARNING.
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def _trash_log_handler(path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _stderr_handler(level: int) -> logging.Handler:
    # stdout stays clean; log records share stderr with the status messages.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    return handler


def configure(*, log_level: str = DEFAULT_LOG_LEVEL, log_path: Path | None = None) -> Path:
    """Route all ``safetrash`` logging to the log file and stderr.

    Replaces any handlers already on the root logger so calling this twice
    does not duplicate output. Returns the log file in use.
    """
    path = log_path or _get_log_path()
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

    handlers = [_trash_log_handler(path), _stderr_handler(_level_for(log_level))]
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    return path
