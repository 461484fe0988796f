import os
from pathlib import Path

import pytest

from safetrash.models.resolver import PathResolver, ResolutionError, resolve, split_target


@pytest.fixture(name="root")
def fixture_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # tmp_path may itself sit behind a symlink (macOS /var -> /private/var).
    real = Path(os.path.realpath(tmp_path))
    monkeypatch.chdir(real)
    return real


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("notes.txt", (".", "notes.txt")),
        ("dir/", (".", "dir")),
        ("a/b/c", ("a/b", "c")),
        ("a/b/", ("a", "b")),
        ("/", ("/", "/")),
        ("///", ("/", "/")),
        ("/etc", ("/", "etc")),
        ("//etc", ("/", "etc")),
        ("a//b", ("a", "b")),
    ],
)
def test_split_target(target: str, expected: tuple[str, str]) -> None:
    assert split_target(target) == expected


def test_existing_directory_has_no_trailing_slash(root: Path) -> None:
    (root / "photos").mkdir()

    assert resolve("photos/") == str(root / "photos")
    assert resolve(str(root / "photos") + "/") == str(root / "photos")


def test_intermediate_symlinks_are_resolved(root: Path) -> None:
    (root / "actual" / "sub").mkdir(parents=True)
    (root / "actual" / "sub" / "file.txt").write_text("data")
    (root / "alias").symlink_to(root / "actual", target_is_directory=True)

    assert resolve("alias/sub") == str(root / "actual" / "sub")
    assert resolve("alias/sub/file.txt") == str(root / "actual" / "sub" / "file.txt")


def test_final_symlink_is_not_dereferenced(root: Path) -> None:
    (root / "target.txt").write_text("data")
    (root / "link").symlink_to(root / "target.txt")

    resolved = resolve("link")

    assert resolved == str(root / "link")
    assert resolved.endswith("/link")


def test_symlink_to_directory_is_not_dereferenced(root: Path) -> None:
    (root / "real_dir").mkdir()
    (root / "dir_link").symlink_to(root / "real_dir", target_is_directory=True)

    assert resolve("dir_link") == str(root / "dir_link")


def test_root_resolves_to_root() -> None:
    assert resolve("/") == "/"


def test_direct_child_of_root_has_single_slash() -> None:
    assert resolve("/no-such-entry-for-safetrash") == "/no-such-entry-for-safetrash"
    assert resolve("//no-such-entry-for-safetrash") == "/no-such-entry-for-safetrash"


def test_relative_name_in_root_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir("/")

    assert resolve("no-such-entry-for-safetrash") == "/no-such-entry-for-safetrash"


def test_missing_leaf_resolves_structurally(root: Path) -> None:
    assert resolve("./ghost.spooky") == str(root / "ghost.spooky")


def test_missing_parent_raises(root: Path) -> None:
    with pytest.raises(ResolutionError):
        resolve("nowhere/ghost.spooky")


def test_file_as_parent_raises(root: Path) -> None:
    (root / "plain.txt").write_text("data")

    with pytest.raises(ResolutionError):
        resolve("plain.txt/child")


def test_empty_target_raises() -> None:
    with pytest.raises(ResolutionError):
        PathResolver().resolve("")


def test_resolve_does_not_change_cwd(root: Path) -> None:
    (root / "inner").mkdir()
    before = os.getcwd()

    resolve("inner")
    resolve("inner/missing")

    assert os.getcwd() == before
