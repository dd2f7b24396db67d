"""Filesystem adapter for outline use cases."""

from __future__ import annotations

from pathlib import Path

from ...usecases.ports import TreeReader


class LocalTreeReader(TreeReader):
    """Thin wrapper around the local filesystem."""

    def list_directory(self, path: Path) -> list[Path]:
        return list(path.iterdir())

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()


__all__ = ["LocalTreeReader"]
