"""Data structures describing a generated outline document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

INDENT_UNIT: Final[str] = "\t"


@dataclass(slots=True, frozen=True)
class OutlineLine:
    """One nested link entry of the outline."""

    depth: int
    title: str
    target: str

    def render(self) -> str:
        return f"{INDENT_UNIT * self.depth}- [{self.title}]({self.target})\n"


@dataclass(slots=True, frozen=True)
class OutlineDocument:
    """Ordered outline lines produced by a single generation pass."""

    lines: tuple[OutlineLine, ...] = ()

    @classmethod
    def concat(cls, documents: Iterable["OutlineDocument"]) -> "OutlineDocument":
        """Join several documents in order, e.g. one per source root."""

        return cls(lines=tuple(line for document in documents for line in document.lines))

    def __len__(self) -> int:
        return len(self.lines)

    def render(self) -> str:
        return "".join(line.render() for line in self.lines)


@dataclass(slots=True, frozen=True)
class ProjectionOptions:
    """Inclusion rules applied while walking a book tree.

    ``ignore`` holds canonical paths skipped together with their descendants.
    When ``link_base`` is set, link targets are written relative to it.
    """

    ignore: frozenset[Path] = field(default_factory=frozenset)
    include_unnumbered_directories: bool = False
    include_directory_content_without_section: bool = False
    link_base: Path | None = None


__all__ = ["INDENT_UNIT", "OutlineDocument", "OutlineLine", "ProjectionOptions"]
