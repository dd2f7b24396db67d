"""Ports for the outline feature.

Where: features/outline/usecases.
What: Protocol describing the read-only filesystem access the projector needs.
Why: Keep the tree walk testable without binding it to ``pathlib`` calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TreeReader(Protocol):
    """Read access to a directory tree."""

    def list_directory(self, path: Path) -> list[Path]:
        """Return the immediate children of ``path`` in any order; raises ``OSError``."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when ``path`` is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True when ``path`` is a regular file."""
        ...
