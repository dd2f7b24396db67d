"""Local filesystem adapter for the outline feature."""

from .local import LocalTreeReader

__all__ = ["LocalTreeReader"]
