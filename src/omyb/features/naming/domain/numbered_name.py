"""
Summary: Parse and format the ``<prefix>_<base_name>`` naming convention.
Why: The numeric prefix in a file or directory name is the persisted ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

PREFIX_SEPARATOR: Final[str] = "_"

_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


@dataclass(slots=True, frozen=True)
class NumberedName:
    """A name split into its optional numeric prefix and the remaining base name."""

    prefix: int | None
    base_name: str

    @property
    def is_numbered(self) -> bool:
        return self.prefix is not None


def decode(name: str) -> NumberedName:
    """Split ``name`` on its first underscore.

    The left part counts as a prefix only when it is a non-empty run of ASCII
    digits; otherwise the whole name is the base name. Never raises.

    Args:
        name: A single path component such as ``"01_intro.md"``.

    Returns:
        NumberedName: ``NumberedName(1, "intro.md")`` for the example above.
    """
    head, separator, tail = name.partition(PREFIX_SEPARATOR)
    if separator and _DIGITS.fullmatch(head):
        return NumberedName(prefix=int(head), base_name=tail)
    return NumberedName(prefix=None, base_name=name)


def encode(prefix: int, base_name: str, width: int) -> str:
    """Build ``<prefix zero-padded to width>_<base_name>``.

    A prefix with more digits than ``width`` is written in full.

    Raises:
        ValueError: If ``prefix`` is negative or ``width`` is below one.
    """
    if prefix < 0:
        raise ValueError(f"prefix must be non-negative, got {prefix}")
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    return f"{prefix:0{width}d}{PREFIX_SEPARATOR}{base_name}"


__all__ = ["NumberedName", "PREFIX_SEPARATOR", "decode", "encode"]
