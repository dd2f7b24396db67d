"""Ports for the relocation feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the use cases."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""

        ...

    def is_file(self, path: Path) -> bool:
        """Return True when the path points to a regular file."""

        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when the path points to a directory."""

        ...

    def list_directory(self, path: Path) -> list[Path]:
        """Return the immediate entries within ``path``; raises ``OSError`` when unreadable."""

        ...

    def rename(self, source: Path, destination: Path) -> None:
        """Move or rename the source to the destination."""

        ...
