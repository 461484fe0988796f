"""Automation sessions for linting, type checking, and tests of Safe Trash."""

from __future__ import annotations

import nox

PYTHON_VERSIONS = ["3.11", "3.12"]
nox.options.sessions = ["lint", "typecheck", "tests"]


def _install_dev(session: nox.Session) -> None:
    session.install("uv")
    session.run("uv", "pip", "install", ".[dev]")


@nox.session(python=PYTHON_VERSIONS[0])
def lint(session: nox.Session) -> None:
    """Run Ruff lint and format checks."""
    _install_dev(session)
    session.run("ruff", "check", "src", "tests", "noxfile.py")
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")


@nox.session(python=PYTHON_VERSIONS[0])
def typecheck(session: nox.Session) -> None:
    """Run static type checking."""
    _install_dev(session)
    session.run("mypy", "src/safetrash", "tests")
    session.run("pyright", "src", "tests")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run unit and integration tests with coverage."""
    _install_dev(session)
    session.run(
        "pytest",
        "--cov=safetrash",
        "--cov-report=term-missing",
        "--cov-report=xml",
        *session.posargs,
    )
