# Filename: safety_gate.py
# Author: Rich Lewis @RichLewis007
# Description: Safety checks run before anything is trashed. Rejects missing targets,
#              protected paths from the deny-list, and paths that contain the current
#              working directory.

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence

from .outcomes import GateDecision, Rejection, RejectionKind
from .resolver import PathResolver, ResolutionError

logger = logging.getLogger(__name__)


def _physical_cwd() -> str:
    return os.path.realpath(os.getcwd())


def contains_cwd(resolved: str, cwd: str) -> bool:
    """Return True when ``cwd`` is ``resolved`` or lies somewhere beneath it.

    Containment is checked on path boundaries, so ``/work/proj`` does not
    contain ``/work/projects``.
    """
    if resolved == "/":
        return True
    base = resolved.rstrip("/")
    return cwd == base or cwd.startswith(base + "/")


class SafetyGate:
    # Validates a raw target and returns its resolved path or the first rejection.

    def __init__(
        self,
        prohibited: Sequence[str],
        *,
        resolver: PathResolver | None = None,
        cwd: Callable[[], str] | None = None,
    ) -> None:
        self.prohibited = tuple(prohibited)
        self._resolver = resolver or PathResolver()
        self._cwd = cwd or _physical_cwd

    def check(self, target: str) -> GateDecision:
        # Run the checks in order; the first failing one wins.
        if not target:
            return self._reject(RejectionKind.MISSING_TARGET, target)

        try:
            resolved = self._resolver.resolve(target)
        except ResolutionError as exc:
            logger.debug("%s", exc)
            return self._reject(RejectionKind.NOT_FOUND, target)

        # lexists keeps dangling symlinks eligible for trashing.
        if not os.path.lexists(resolved):
            return self._reject(RejectionKind.NOT_FOUND, target)

        if self.is_prohibited(resolved):
            return self._reject(RejectionKind.PROHIBITED, resolved)

        if contains_cwd(resolved, self._cwd()):
            return self._reject(RejectionKind.PROHIBITED_CWD, resolved)

        logger.debug("Target %r resolved to %s and passed all checks", target, resolved)
        return GateDecision(resolved=resolved)

    def is_prohibited(self, resolved: str) -> bool:
        # Exact match against a deny-list entry, with or without a trailing slash.
        return any(resolved in (entry, entry + "/") for entry in self.prohibited)

    def _reject(self, kind: RejectionKind, subject: str) -> GateDecision:
        logger.info("Rejected %s: %s", kind.value, subject)
        return GateDecision(rejection=Rejection(kind=kind, subject=subject))


__all__ = ["SafetyGate", "contains_cwd"]
