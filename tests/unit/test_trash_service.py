import subprocess
from pathlib import Path

import pytest

from safetrash.services import trash as trash_service


@pytest.fixture(name="freedesktop")
def fixture_freedesktop(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(trash_service.sys, "platform", "linux")


def test_send_path_to_trash_returns_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(trash_service, "send2trash", calls.append)

    status = trash_service.send_path_to_trash(Path("/work/notes.txt"))

    assert status == 0
    assert calls == ["/work/notes.txt"]


def test_send_path_to_trash_reports_os_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(path: str) -> None:
        raise PermissionError(f"cannot trash {path}")

    monkeypatch.setattr(trash_service, "send2trash", fail)

    assert trash_service.send_path_to_trash(Path("/work/notes.txt")) == 1


def test_symlinks_are_trashed_with_gio(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, freedesktop: None
) -> None:
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "gone")
    commands: list[list[str]] = []

    def fake_run(command: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        commands.append(command)
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    def no_send2trash(path: str) -> None:
        raise AssertionError("symlinks must not reach send2trash")

    monkeypatch.setattr(trash_service.shutil, "which", lambda name: "/usr/bin/gio")
    monkeypatch.setattr(trash_service.subprocess, "run", fake_run)
    monkeypatch.setattr(trash_service, "send2trash", no_send2trash)

    assert trash_service.send_path_to_trash(link) == 0
    assert commands == [["/usr/bin/gio", "trash", "--", str(link)]]


def test_gio_status_is_passed_through(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, freedesktop: None
) -> None:
    link = tmp_path / "link"
    link.symlink_to(tmp_path)

    def fake_run(command: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(command, 2, stdout="", stderr="no trash")

    monkeypatch.setattr(trash_service.shutil, "which", lambda name: "/usr/bin/gio")
    monkeypatch.setattr(trash_service.subprocess, "run", fake_run)

    assert trash_service.send_path_to_trash(link) == 2


def test_symlink_without_gio_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, freedesktop: None
) -> None:
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "gone")
    monkeypatch.setattr(trash_service.shutil, "which", lambda name: None)

    assert trash_service.send_path_to_trash(link) == 1
    assert link.is_symlink()
