"""Tests for shared filesystem helpers."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from omyb.platform.filesystem import ensure_directory, write_text_atomic

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")


@pytest.fixture
def umask_022() -> Iterator[None]:
    previous = os.umask(0o022)
    try:
        yield None
    finally:
        _ = os.umask(previous)


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_write_text_atomic_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "SUMMARY.md"
    _ = target.write_text("old\n", encoding="utf-8")

    write_text_atomic(target, "- [A](a.md)\n")

    assert target.read_text(encoding="utf-8") == "- [A](a.md)\n"
    assert [child.name for child in tmp_path.iterdir()] == ["SUMMARY.md"]


@posix_only
def test_new_file_follows_umask(tmp_path: Path, umask_022: None) -> None:
    target = tmp_path / "SUMMARY.md"

    write_text_atomic(target, "text\n")

    assert _mode(target) == 0o644


@posix_only
def test_existing_file_keeps_its_mode(tmp_path: Path, umask_022: None) -> None:
    target = tmp_path / "SUMMARY.md"
    _ = target.write_text("old\n", encoding="utf-8")
    target.chmod(0o640)

    write_text_atomic(target, "new\n")

    assert _mode(target) == 0o640


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    blocker = tmp_path / "notes.txt"
    _ = blocker.write_text("", encoding="utf-8")

    assert ensure_directory(tmp_path / "a" / "b") == tmp_path / "a" / "b"
    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(blocker)
