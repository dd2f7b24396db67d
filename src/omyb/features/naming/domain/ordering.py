"""
Summary: Model numbered siblings and check the contiguity of their prefixes.
Why: Positions map onto prefixes only while siblings are numbered 1..N without gaps.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from omyb.shared.errors import GapError

from .numbered_name import PREFIX_SEPARATOR, NumberedName, decode


class EntryKind(str, Enum):
    """Kind of filesystem entry taking part in ordering."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(slots=True, frozen=True)
class NumberedEntry:
    """A path together with its decoded name and kind."""

    path: Path
    name: NumberedName
    kind: EntryKind

    @classmethod
    def from_path(cls, path: Path, kind: EntryKind) -> "NumberedEntry":
        return cls(path=path, name=decode(path.name), kind=kind)

    @property
    def prefix(self) -> int | None:
        return self.name.prefix

    @property
    def base_name(self) -> str:
        return self.name.base_name

    @property
    def prefix_digits(self) -> int:
        """Number of digits the prefix is written with, 0 when unnumbered."""

        if self.prefix is None:
            return 0
        return len(self.path.name.partition(PREFIX_SEPARATOR)[0])


def validate(entries: Iterable[NumberedEntry]) -> list[NumberedEntry]:
    """Sort numbered entries by prefix and check that each follows its predecessor.

    The first prefix is the baseline; every later prefix must equal the
    previous one plus one, so duplicates and gaps are both rejected.

    Args:
        entries: Entries that all carry a prefix.

    Returns:
        list[NumberedEntry]: The entries in ascending prefix order.

    Raises:
        GapError: On the first pair that breaks the sequence.
        ValueError: If an entry has no prefix.
    """
    ordered = sorted(entries, key=_prefix_key)
    for previous, current in zip(ordered, ordered[1:]):
        expected = _prefix_key(previous) + 1
        actual = _prefix_key(current)
        if actual != expected:
            raise GapError(expected=expected, actual=actual, path=current.path)
    return ordered


def _prefix_key(entry: NumberedEntry) -> int:
    if entry.prefix is None:
        raise ValueError(f"Entry has no numeric prefix: {entry.path}")
    return entry.prefix


@dataclass(slots=True, frozen=True)
class OrderedSiblingSet:
    """Numbered entries found directly inside one directory."""

    directory: Path
    entries: tuple[NumberedEntry, ...]

    @classmethod
    def from_entries(cls, directory: Path, entries: Iterable[NumberedEntry]) -> "OrderedSiblingSet":
        """Keep only the numbered entries of ``directory``."""

        return cls(
            directory=directory,
            entries=tuple(entry for entry in entries if entry.prefix is not None),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def without(self, path: Path) -> "OrderedSiblingSet":
        """Return a copy that no longer contains the entry at ``path``."""

        return OrderedSiblingSet(
            directory=self.directory,
            entries=tuple(entry for entry in self.entries if entry.path != path),
        )

    def validated(self) -> list[NumberedEntry]:
        """Return entries sorted by prefix, requiring the run to be exactly 1..N.

        Raises:
            GapError: If the prefixes do not start at 1 or are not contiguous.
        """
        ordered = validate(self.entries)
        if ordered and ordered[0].prefix != 1:
            first = ordered[0]
            raise GapError(expected=1, actual=_prefix_key(first), path=first.path)
        return ordered


__all__ = ["EntryKind", "NumberedEntry", "OrderedSiblingSet", "validate"]
