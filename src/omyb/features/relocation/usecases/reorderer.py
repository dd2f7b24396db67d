"""
Summary: Move a file or directory to a numbered position and renumber its old and new siblings.
Why: Relocations must leave every touched directory numbered 1..N without gaps.
"""

from __future__ import annotations

import uuid
from logging import Logger, getLogger
from pathlib import Path

from omyb.config.settings import INDEX_FILE_NAME, PREFIX_WIDTH
from omyb.features.naming import EntryKind, NumberedEntry, OrderedSiblingSet, decode, encode
from omyb.shared.errors import MoveError, PathError, RangeError

from ..domain.models import RelocationPlan, RelocationRequest, RelocationResult, RenameStep
from .ports import FileSystemGateway


class Reorderer:
    """Plan and apply relocations through an injected filesystem gateway."""

    _filesystem: FileSystemGateway
    _index_file_name: str
    _default_width: int
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystemGateway,
        index_file_name: str = INDEX_FILE_NAME,
        default_width: int = PREFIX_WIDTH,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._index_file_name = index_file_name
        self._default_width = default_width
        self._logger = logger or getLogger(__name__)

    def run(self, request: RelocationRequest) -> RelocationResult:
        """Plan and execute a relocation in a single call."""

        plan = self.build_plan(request)
        return self.execute(plan, dry_run=request.dry_run)

    def build_plan(self, request: RelocationRequest) -> RelocationPlan:
        """Check preconditions and compute every rename for ``request``.

        Nothing on disk changes here, so any error leaves the tree untouched.

        Raises:
            PathError: If the source or destination is missing or of the wrong kind.
            RangeError: If the target index is outside ``[1, count + 1]``.
            GapError: If the destination or the source's parent is not numbered 1..N.
            MoveError: If a planned target is already taken by an unrelated entry.
        """
        source = request.source_path
        destination = request.destination_dir
        target_index = request.target_index

        if not self._filesystem.exists(source):
            raise PathError("Source path does not exist", source)
        if not self._filesystem.exists(destination):
            raise PathError("Destination directory does not exist", destination)
        if not self._filesystem.is_dir(destination):
            raise PathError("Destination is not a directory", destination)
        if target_index < 1:
            raise RangeError(target_index, None, destination)

        if self._filesystem.is_dir(source):
            kind = EntryKind.DIRECTORY
        elif self._filesystem.is_file(source):
            kind = EntryKind.FILE
        else:
            raise PathError("Source is neither a file nor a directory", source)

        if source.name == self._index_file_name:
            raise PathError("Index files are never numbered and cannot be relocated", source)
        if kind is EntryKind.DIRECTORY and (destination == source or source in destination.parents):
            raise PathError("Cannot move a directory into itself", destination)

        source_parent = source.parent
        same_directory = source_parent == destination

        destination_entries = self._load_siblings(destination).validated()
        siblings = [entry for entry in destination_entries if entry.path != source]
        source_entries: list[NumberedEntry] = []
        if not same_directory:
            source_entries = self._load_siblings(source_parent).validated()
        remaining = [entry for entry in source_entries if entry.path != source]

        width = self._width_for(request.prefix_width, destination_entries)
        source_width = self._width_for(request.prefix_width, source_entries)

        maximum = len(siblings) + 1
        if target_index > maximum:
            raise RangeError(target_index, maximum, destination)

        final_path = destination / encode(target_index, decode(source.name).base_name, width)
        moved = RenameStep(source=source, target=final_path) if final_path != source else None

        if target_index == maximum and not same_directory:
            destination_steps: list[RenameStep] = []
        else:
            destination_steps = self._shift_steps(siblings, target_index, width)
        source_steps = self._renumber_steps(remaining, source_width)

        plan = RelocationPlan(
            destination_dir=destination,
            source_parent=source_parent,
            moved=moved,
            destination_steps=tuple(destination_steps),
            source_steps=tuple(source_steps),
            final_path=final_path,
        )
        self._check_collisions(plan)
        return plan

    def execute(self, plan: RelocationPlan, *, dry_run: bool = False) -> RelocationResult:
        """Apply ``plan`` unless ``dry_run``.

        Every entry is first renamed to a unique temporary name in its own
        directory and then to its final name, so renames inside one directory
        cannot collide.

        Raises:
            MoveError: When a rename fails. Renames already performed are kept
                and listed on the error.
        """
        result = RelocationResult(plan=plan, dry_run=dry_run)
        steps = plan.steps
        total = len(steps)

        if dry_run:
            for sequence, step in enumerate(steps, start=1):
                self._log_step(step, sequence, total, dry_run=True)
            return result

        staged: list[tuple[Path, RenameStep]] = []
        for step in steps:
            temporary = step.source.with_name(f".omyb-{uuid.uuid4().hex}")
            self._rename(step.source, temporary, result)
            staged.append((temporary, step))

        for sequence, (temporary, step) in enumerate(staged, start=1):
            self._rename(temporary, step.target, result)
            self._log_step(step, sequence, total, dry_run=False)

        self._logger.info(
            "Relocation complete",
            extra={
                "relocation_event": "relocation.complete",
                "target_path": str(plan.final_path),
                "applied": total,
            },
        )
        return result

    def _rename(self, source: Path, target: Path, result: RelocationResult) -> None:
        try:
            self._filesystem.rename(source, target)
        except OSError as exc:
            self._logger.error(
                "Rename failed for %s → %s: %s",
                source,
                target,
                exc,
                extra={
                    "relocation_event": "relocation.error",
                    "source_path": str(source),
                    "target_path": str(target),
                    "error_message": str(exc),
                },
            )
            raise MoveError(
                f"Failed to rename {source} to {target}",
                cause=exc,
                applied=result.applied,
            ) from exc
        result.applied.append(RenameStep(source=source, target=target))

    def _width_for(self, explicit: int | None, entries: list[NumberedEntry]) -> int:
        """Use ``explicit`` when given, else the widest prefix among ``entries``."""

        if explicit is not None:
            return explicit
        return max((entry.prefix_digits for entry in entries), default=self._default_width)

    def _load_siblings(self, directory: Path) -> OrderedSiblingSet:
        try:
            children = self._filesystem.list_directory(directory)
        except OSError as exc:
            raise PathError(f"Cannot read directory ({exc})", directory) from exc

        entries: list[NumberedEntry] = []
        for child in children:
            if self._filesystem.is_dir(child):
                entries.append(NumberedEntry.from_path(child, EntryKind.DIRECTORY))
            elif self._filesystem.is_file(child):
                entries.append(NumberedEntry.from_path(child, EntryKind.FILE))
        return OrderedSiblingSet.from_entries(directory, entries)

    @staticmethod
    def _shift_steps(
        siblings: list[NumberedEntry],
        target_index: int,
        width: int,
    ) -> list[RenameStep]:
        """Renumber destination siblings around the slot taken by the moved entry."""

        steps: list[RenameStep] = []
        position = 1
        for entry in siblings:
            if position == target_index:
                position += 1
            if entry.prefix != position:
                new_path = entry.path.with_name(encode(position, entry.base_name, width))
                steps.append(RenameStep(source=entry.path, target=new_path))
            position += 1
        return steps

    @staticmethod
    def _renumber_steps(entries: list[NumberedEntry], width: int) -> list[RenameStep]:
        """Re-encode every entry with a fresh 1..M sequence in its current order."""

        steps: list[RenameStep] = []
        for position, entry in enumerate(entries, start=1):
            new_path = entry.path.with_name(encode(position, entry.base_name, width))
            if new_path != entry.path:
                steps.append(RenameStep(source=entry.path, target=new_path))
        return steps

    def _check_collisions(self, plan: RelocationPlan) -> None:
        sources = {step.source for step in plan.steps}
        targets: set[Path] = set()
        for step in plan.steps:
            if step.target in targets:
                raise MoveError(f"Two entries would be renamed to {step.target}")
            targets.add(step.target)
            if step.target not in sources and self._filesystem.exists(step.target):
                raise MoveError(f"Target already exists: {step.target}")

    def _log_step(self, step: RenameStep, sequence: int, total: int, *, dry_run: bool) -> None:
        prefix = "Dry run: would rename" if dry_run else "Renamed"
        self._logger.info(
            "%s %s → %s",
            prefix,
            step.source,
            step.target,
            extra={
                "relocation_event": "relocation.rename",
                "source_path": str(step.source),
                "target_path": str(step.target),
                "sequence": sequence,
                "total_steps": total,
                "dry_run": dry_run,
            },
        )


__all__ = ["Reorderer"]
