"""Data structures that describe relocation plans and their outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True)
class RenameStep:
    """A single planned rename of one entry."""

    source: Path
    target: Path


@dataclass(slots=True, frozen=True)
class RelocationRequest:
    """Inputs required to move an entry to a 1-based position in a directory.

    Without ``prefix_width`` each directory keeps the width its prefixes
    already use.
    """

    source_path: Path
    destination_dir: Path
    target_index: int
    prefix_width: int | None = None
    dry_run: bool = False


@dataclass(slots=True, frozen=True)
class RelocationPlan:
    """Every rename needed by one relocation, computed before any is applied.

    ``destination_steps`` shift existing destination entries, ``moved`` places
    the relocated entry, and ``source_steps`` renumber the directory the entry
    left so that it is contiguous again.
    """

    destination_dir: Path
    source_parent: Path
    moved: RenameStep | None
    destination_steps: tuple[RenameStep, ...] = ()
    source_steps: tuple[RenameStep, ...] = ()
    final_path: Path | None = None

    @property
    def steps(self) -> tuple[RenameStep, ...]:
        moved = (self.moved,) if self.moved is not None else ()
        return (*self.destination_steps, *moved, *self.source_steps)

    @property
    def is_noop(self) -> bool:
        return not self.steps


@dataclass(slots=True)
class RelocationResult:
    """Capture the outcome of executing a plan."""

    plan: RelocationPlan
    dry_run: bool
    applied: list[RenameStep] = field(default_factory=list)


__all__ = ["RelocationPlan", "RelocationRequest", "RelocationResult", "RenameStep"]
