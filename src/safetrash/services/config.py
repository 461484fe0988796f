# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers for Safe Trash. Builds the protected-path deny-list and
#              reads runtime settings such as dry-run mode and log level from the environment.

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from platformdirs import PlatformDirs

APP_NAME = "SafeTrash"
ORG_NAME = "Rich Lewis"

ENV_DRY_RUN: Final = "TRASH_DRY_RUN"
ENV_PROHIBITED: Final = "TRASH_PROHIBITED"
ENV_LOG_LEVEL: Final = "TRASH_LOG_LEVEL"

# "~" is expanded from HOME when the deny-list is built.
DEFAULT_PROHIBITED: Final[tuple[str, ...]] = ("/", "~", "~/Desktop")

DEFAULT_LOG_LEVEL: Final = "WARNING"
_LOG_LEVELS: Final = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def ensure_app_dirs() -> PlatformDirs:
    # Ensure the config, log, and data directories exist and return their locations.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    for path in (dirs.user_config_dir, dirs.user_log_dir, dirs.user_data_dir):
        Path(path).mkdir(parents=True, exist_ok=True)
    return dirs


def normalize_entry(entry: str) -> str:
    # Drop trailing slashes so "X" and "X/" describe the same deny-list entry.
    return entry.rstrip("/") or "/"


def expand_entry(entry: str, home: str) -> str:
    # Expand a leading "~" against ``home`` and resolve symlinks, as the resolver does.
    if entry == "~" or entry.startswith("~/"):
        entry = home + entry[1:]
    return normalize_entry(os.path.realpath(entry))


def default_prohibited(home: str) -> tuple[str, ...]:
    # Expand DEFAULT_PROHIBITED against ``home``.
    return _merge_entries((), DEFAULT_PROHIBITED, home)


def _merge_entries(
    existing: Iterable[str], extra: Iterable[str], home: str
) -> tuple[str, ...]:
    # Append extra entries after the existing ones, skipping blanks and duplicates.
    items = list(existing)
    for raw in extra:
        if not raw.strip():
            continue
        entry = expand_entry(raw.strip(), home)
        if entry not in items:
            items.append(entry)
    return tuple(items)


@dataclass(frozen=True, slots=True)
class TrashSettings:
    # Settings for one invocation; never changed once loaded.

    prohibited: tuple[str, ...]
    dry_run: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> TrashSettings:
    """Build settings from ``environ`` (defaults to ``os.environ``).

    ``TRASH_DRY_RUN`` enables dry-run mode only when it is exactly ``"true"``.
    ``TRASH_PROHIBITED`` appends ``os.pathsep``-separated entries to the
    default deny-list, with "~" expanded and symlinks resolved like the
    defaults. Unknown ``TRASH_LOG_LEVEL`` values fall back to WARNING.
    """
    env = os.environ if environ is None else environ

    home = env.get("HOME") or str(Path.home())
    prohibited = _merge_entries(
        default_prohibited(home),
        env.get(ENV_PROHIBITED, "").split(os.pathsep),
        home,
    )

    log_level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL

    return TrashSettings(
        prohibited=prohibited,
        dry_run=env.get(ENV_DRY_RUN) == "true",
        log_level=log_level,
    )


__all__ = [
    "APP_NAME",
    "DEFAULT_PROHIBITED",
    "ORG_NAME",
    "TrashSettings",
    "default_prohibited",
    "ensure_app_dirs",
    "expand_entry",
    "load_settings",
    "normalize_entry",
]
