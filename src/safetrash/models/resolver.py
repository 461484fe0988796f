# Filename: resolver.py
# Author: Rich Lewis @RichLewis007
# Description: Path resolution for trash targets. Turns a user-supplied, possibly relative
#              path into an absolute one with every directory symlink resolved while the
#              final component is left untouched, so a symlink is trashed rather than its target.

from __future__ import annotations

import os
from pathlib import Path


class ResolutionError(OSError):
    """Raised when the directory holding a target cannot be entered."""

    def __init__(self, target: str, reason: str = "") -> None:
        message = f"Cannot resolve {target!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target


def split_target(target: str) -> tuple[str, str]:
    """Split ``target`` into its parent directory and final component.

    Mirrors ``dirname``/``basename``: trailing slashes are ignored, a path made
    only of slashes splits into ``("/", "/")`` and a bare name has ``.`` as its
    parent.
    """
    stripped = target.rstrip("/")
    if not stripped:
        return "/", "/"

    head, sep, leaf = stripped.rpartition("/")
    if not sep:
        return ".", leaf

    parent = head.rstrip("/") or "/"
    return parent, leaf


class PathResolver:
    # Resolves trash targets against the live filesystem without modifying it.

    def resolve(self, target: str) -> str:
        # Return the absolute form of ``target`` without dereferencing its last component.
        if not target:
            raise ResolutionError(target, "empty path")
        if os.path.isdir(target) and not os.path.islink(target):
            return self._enter(target, target)

        parent, leaf = split_target(target)
        if parent == "/" and leaf == "/":
            return "/"
        if parent == "/":
            return f"/{leaf}"

        resolved_parent = self._enter(parent, target)
        if resolved_parent == "/":
            return f"/{leaf}"
        return f"{resolved_parent}/{leaf}"

    def _enter(self, directory: str, target: str) -> str:
        # Return the symlink-free absolute path of a directory we could change into.
        try:
            resolved = Path(directory).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise ResolutionError(target, str(exc)) from exc

        if not resolved.is_dir():
            raise ResolutionError(target, f"{directory} is not a directory")
        if not os.access(resolved, os.X_OK):
            raise ResolutionError(target, f"permission denied: {directory}")
        return str(resolved)


_DEFAULT_RESOLVER = PathResolver()


def resolve(target: str) -> str:
    # Resolve ``target`` with the shared default resolver.
    return _DEFAULT_RESOLVER.resolve(target)


__all__ = ["PathResolver", "ResolutionError", "resolve", "split_target"]
