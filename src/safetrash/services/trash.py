# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Utilities for safely moving files to system trash. Wraps the send2trash library
#              and reports the outcome as a status code instead of raising. Symlinks on
#              freedesktop systems go through ``gio trash`` so the link itself is moved.

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from send2trash import send2trash

logger = logging.getLogger(__name__)

_NON_FREEDESKTOP = ("darwin", "win32", "cygwin")


def _uses_gio(path: Path) -> bool:
    # send2trash checks existence and permissions through the link, so a dangling
    # symlink on a freedesktop system cannot be handed to it.
    return sys.platform not in _NON_FREEDESKTOP and os.path.islink(path)


def _gio_trash(path: Path) -> int:
    # Ask GIO to trash ``path`` without following it; returns gio's exit status.
    gio = shutil.which("gio")
    if gio is None:
        logger.warning("Cannot trash symlink %s: the gio command is not installed", path)
        return 1

    result = subprocess.run(
        [gio, "trash", "--", str(path)],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        logger.warning("gio trash failed for %s: %s", path, result.stderr.strip())
    return result.returncode


def send_path_to_trash(path: Path) -> int:
    # Move a file, directory, or symlink to the system Trash; 0 on success.
    if _uses_gio(path):
        status = _gio_trash(path)
    else:
        try:
            send2trash(str(path))
        except OSError as exc:
            logger.warning("send2trash failed for %s: %s", path, exc)
            return 1
        status = 0

    if status == 0:
        logger.info("Moved %s to the trash", path)
    return status
