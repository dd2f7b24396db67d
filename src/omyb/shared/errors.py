"""Error taxonomy shared by the outline and relocation features.

Where: shared/errors.py
What: Exceptions raised by domain and use-case layers and reported by the CLI.
Why: Give every abort reason a distinct type so callers can react precisely.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from omyb.features.relocation.domain.models import RenameStep


class OmybError(Exception):
    """Base class for all errors raised by OMYB."""


class PathError(OmybError):
    """A required path is missing or is not the expected kind."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class GapError(OmybError):
    """Numbered siblings do not form a contiguous 1..N run."""

    def __init__(self, expected: int, actual: int, path: Path) -> None:
        super().__init__(
            f"Numbering gap: expected prefix {expected} but found {actual} at {path}"
        )
        self.expected = expected
        self.actual = actual
        self.path = path


class RangeError(OmybError):
    """A requested 1-based position falls outside ``[1, count + 1]``."""

    def __init__(self, index: int, maximum: int | None, directory: Path) -> None:
        bounds = f"1..{maximum}" if maximum is not None else "at least 1"
        super().__init__(f"Index {index} is out of range for {directory}: expected {bounds}")
        self.index = index
        self.maximum = maximum
        self.directory = directory


class MoveError(OmybError):
    """A rename failed while applying a relocation plan.

    Renames already performed are listed in ``applied`` and are not rolled back.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: OSError | None = None,
        applied: Sequence["RenameStep"] = (),
    ) -> None:
        detail = f"{message}: {cause}" if cause is not None else message
        super().__init__(detail)
        self.cause = cause
        self.applied = tuple(applied)


__all__ = ["GapError", "MoveError", "OmybError", "PathError", "RangeError"]
