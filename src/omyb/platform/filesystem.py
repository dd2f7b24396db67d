"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        _ = os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in a single rename.

    The text is written to a temporary file beside ``path`` and moved over it
    with ``os.replace`` so readers never observe a half-written document. The
    result keeps the mode of an existing ``path``, otherwise it gets the mode a
    plain ``open`` would give under the current umask.

    Args:
        path: Destination file; its parent directory must exist.
        content: Full text to store.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """

    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            _ = handle.write(content)
        os.chmod(temp_name, _target_mode(path))
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


__all__ = ["ensure_directory", "write_text_atomic"]
