# Filename: outcomes.py
# Author: Rich Lewis @RichLewis007
# Description: Result types for a single trash invocation. Defines the rejection taxonomy,
#              the safety gate decision, and the tagged execution result union.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RejectionKind(Enum):
    # Reasons a trash request can be refused or fail.

    MISSING_TARGET = "missing-target"
    NOT_FOUND = "not-found"
    PROHIBITED = "prohibited"
    PROHIBITED_CWD = "prohibited-cwd"
    TRASH_FAILURE = "trash-failure"


@dataclass(frozen=True, slots=True)
class Rejection:
    # A refusal, carrying the raw target or resolved path it refers to.

    kind: RejectionKind
    subject: str = ""


@dataclass(frozen=True, slots=True)
class GateDecision:
    # Outcome of running a target through the safety gate.

    resolved: str | None = None
    rejection: Rejection | None = None

    @property
    def allowed(self) -> bool:
        return self.rejection is None and self.resolved is not None


@dataclass(frozen=True, slots=True)
class Success:
    # The path was handed to the OS trash and the call reported success.

    path: str
    status: int = 0

    @property
    def exit_code(self) -> int:
        return self.status


@dataclass(frozen=True, slots=True)
class Rejected:
    # The request was refused by the gate or the trash call failed.

    rejection: Rejection
    status: int = 1

    @property
    def exit_code(self) -> int:
        return self.status


@dataclass(frozen=True, slots=True)
class DryRunReport:
    # Informational summary produced instead of trashing anything.

    target: str
    name: str
    extension: str
    path: str

    @property
    def exit_code(self) -> int:
        return 0


ExecutionResult = Union[Success, Rejected, DryRunReport]


__all__ = [
    "DryRunReport",
    "ExecutionResult",
    "GateDecision",
    "Rejected",
    "Rejection",
    "RejectionKind",
    "Success",
]
