# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line entry point for Safe Trash. Parses the single path argument,
#              runs it through the safety gate, and dispatches it to the system Trash.

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from typing import NoReturn, TextIO

from .models.outcomes import ExecutionResult, Rejected, Rejection, RejectionKind
from .models.safety_gate import SafetyGate
from .services import config as config_service
from .services import logger as logger_service
from .services.formatting import PROG_NAME, USAGE, format_result
from .workers.dispatcher import Dispatcher, Trasher


class _ArgumentParser(argparse.ArgumentParser):
    # Argument parser that reports usage errors with exit status 1.

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = _ArgumentParser(prog=PROG_NAME, add_help=False)
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("target", nargs="?", default="")
    return parser


def _emit(message: str, stream: TextIO) -> None:
    print(message, file=stream)


def run(
    target: str,
    settings: config_service.TrashSettings,
    *,
    trasher: Trasher | None = None,
) -> ExecutionResult:
    # Validate ``target`` and either trash it or report what would be trashed.
    gate = SafetyGate(settings.prohibited)
    decision = gate.check(target)
    if decision.rejection is not None:
        return Rejected(rejection=decision.rejection)
    if decision.resolved is None:
        return Rejected(rejection=Rejection(kind=RejectionKind.NOT_FOUND, subject=target))

    dispatcher = Dispatcher(trasher)
    return dispatcher.execute(decision.resolved, target, dry_run=settings.dry_run)


def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    trasher: Trasher | None = None,
) -> int:
    # Entry point for the CLI utility.
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_help:
        _emit(USAGE.rstrip("\n"), sys.stderr)
        return 0

    settings = config_service.load_settings(environ)
    logger_service.configure(log_level=settings.log_level)
    logger = logging.getLogger(__name__)
    logger.debug("Starting with argv=%s dry_run=%s", argv, settings.dry_run)

    result = run(args.target, settings, trasher=trasher)
    _emit(format_result(result), sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
