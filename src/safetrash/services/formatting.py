# Filename: formatting.py
# Author: Rich Lewis @RichLewis007
# Description: Formatting helpers for user-facing text. Renders the usage document, rejection
#              messages, success confirmations, and dry-run reports written to stderr.

from __future__ import annotations

from typing import Final

from ..models.outcomes import (
    DryRunReport,
    ExecutionResult,
    Rejected,
    Rejection,
    RejectionKind,
    Success,
)

PROG_NAME: Final = "safetrash"

USAGE: Final = f"""\
Usage: {PROG_NAME} <path>
       {PROG_NAME} -h | --help

Move a single file, directory, or symlink to the system Trash instead of
deleting it permanently. Symlinks are trashed themselves, never their targets.
Use '--' before a path that starts with '-'.

Refuses to trash:
  - a path that does not exist (dangling symlinks are allowed)
  - the filesystem root, your home directory, or ~/Desktop
  - any directory that contains the current working directory

Environment:
  TRASH_DRY_RUN=true    validate and report what would be trashed, change nothing
  TRASH_PROHIBITED      extra protected paths, separated by ':'
  TRASH_LOG_LEVEL       stderr log level (default: WARNING)

All messages are written to stderr. Exit status is 0 on success, 1 otherwise.
"""


def split_name(leaf: str) -> tuple[str, str]:
    """Split a final path component at its first dot into (name, extension).

    ``archive.tar.gz`` becomes ``("archive", "tar.gz")`` and a name without a
    dot has an empty extension.
    """
    name, _, extension = leaf.partition(".")
    return name, extension


def format_rejection(rejection: Rejection) -> str:
    # Return the one-line message explaining why nothing was trashed.
    subject = rejection.subject
    if rejection.kind is RejectionKind.MISSING_TARGET:
        return f"{PROG_NAME}: no path given (try '{PROG_NAME} --help')"
    if rejection.kind is RejectionKind.NOT_FOUND:
        return f"{PROG_NAME}: {subject}: no such file or directory"
    if rejection.kind is RejectionKind.PROHIBITED:
        return f"{PROG_NAME}: refusing to trash protected path {subject}"
    if rejection.kind is RejectionKind.PROHIBITED_CWD:
        return (
            f"{PROG_NAME}: refusing to trash {subject}: "
            "it contains the current working directory"
        )
    return f"{PROG_NAME}: failed to move {subject} to the trash"


def format_dry_run(report: DryRunReport) -> str:
    # Render the dry-run summary as aligned key/value lines.
    rows = (
        ("target", report.target),
        ("name", report.name),
        ("extension", report.extension),
        ("absolute path", report.path),
    )
    width = max(len(label) for label, _ in rows)
    lines = [f"{PROG_NAME}: dry run, nothing was trashed"]
    lines.extend(f"  {label.ljust(width)} : {value}" for label, value in rows)
    return "\n".join(lines)


def format_result(result: ExecutionResult) -> str:
    # Return the stderr message for any execution result.
    if isinstance(result, Success):
        return f"Trashed: {result.path}"
    if isinstance(result, Rejected):
        return format_rejection(result.rejection)
    return format_dry_run(result)


__all__ = [
    "PROG_NAME",
    "USAGE",
    "format_dry_run",
    "format_rejection",
    "format_result",
    "split_name",
]
