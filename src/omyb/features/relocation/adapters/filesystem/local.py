"""Filesystem adapter for relocation use cases."""

from __future__ import annotations

import shutil
from pathlib import Path

from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_directory(self, path: Path) -> list[Path]:
        return list(path.iterdir())

    def rename(self, source: Path, destination: Path) -> None:
        _ = shutil.move(str(source), str(destination))


__all__ = ["LocalFileSystemGateway"]
