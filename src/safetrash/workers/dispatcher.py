# Filename: dispatcher.py
# Author: Rich Lewis @RichLewis007
# Description: Executes a validated trash request. Either reports what would be trashed in
#              dry-run mode or hands the path to the OS trash and wraps its status.

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from safetrash.models.outcomes import (
    DryRunReport,
    ExecutionResult,
    Rejected,
    Rejection,
    RejectionKind,
    Success,
)
from safetrash.services.formatting import split_name
from safetrash.services.trash import send_path_to_trash

logger = logging.getLogger(__name__)

Trasher = Callable[[Path], int]


class Dispatcher:
    # Moves one resolved path to the Trash, or describes it in dry-run mode.

    def __init__(self, trasher: Trasher | None = None) -> None:
        self._trasher = trasher or send_path_to_trash

    def execute(self, resolved: str, target: str, *, dry_run: bool) -> ExecutionResult:
        # Dispatch ``resolved``; the trash call's status is passed through unchanged.
        if dry_run:
            return self.preview(resolved, target)

        logger.debug("Sending %s to the trash", resolved)
        status = self._trasher(Path(resolved))
        if status == 0:
            return Success(path=resolved)

        logger.info("Trash call for %s returned status %d", resolved, status)
        return Rejected(
            rejection=Rejection(kind=RejectionKind.TRASH_FAILURE, subject=resolved),
            status=status,
        )

    def preview(self, resolved: str, target: str) -> DryRunReport:
        # Build the dry-run report without touching the filesystem.
        name, extension = split_name(os.path.basename(resolved))
        logger.debug("Dry run for %s", resolved)
        return DryRunReport(target=target, name=name, extension=extension, path=resolved)
