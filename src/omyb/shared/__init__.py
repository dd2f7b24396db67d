"""Shared cross-cutting types exposed at the package level."""

from .errors import GapError, MoveError, OmybError, PathError, RangeError

__all__ = ["GapError", "MoveError", "OmybError", "PathError", "RangeError"]
