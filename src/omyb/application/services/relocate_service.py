"""Application service to move entries between numbered directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from omyb.features.naming import EntryKind
from omyb.features.relocation import RelocationRequest, RelocationResult, Reorderer
from omyb.features.relocation.adapters.filesystem import LocalFileSystemGateway
from omyb.features.relocation.usecases.ports import FileSystemGateway
from omyb.shared.errors import PathError

from .outline_service import OutlineResult, OutlineService, OutlineServiceRequest


@dataclass(slots=True)
class RelocateServiceRequest:
    """Parameters describing a relocation run.

    ``expected_kind`` restricts the source to files or directories. When
    ``outline_root`` is set, its outline is regenerated after the move,
    skipping ``ignore`` the same way ``create`` does. A ``prefix_width`` of
    None keeps the width already used in each directory.
    """

    source_path: Path
    destination_dir: Path
    target_index: int
    prefix_width: int | None = None
    dry_run: bool = False
    expected_kind: EntryKind | None = None
    outline_root: Path | None = None
    ignore: list[Path] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class RelocateOutcome:
    """Result of the relocation and of the optional outline refresh."""

    relocation: RelocationResult
    outline: OutlineResult | None = None


@final
class RelocateService:
    """Application façade wiring adapters into the relocation use case."""

    _filesystem: FileSystemGateway
    _reorderer: Reorderer
    _outline_service: OutlineService
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystemGateway | None = None,
        outline_service: OutlineService | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or getLogger(__name__)
        self._filesystem = filesystem or LocalFileSystemGateway()
        self._reorderer = Reorderer(filesystem=self._filesystem, logger=self._logger)
        self._outline_service = outline_service or OutlineService(logger=self._logger)

    def run(self, request: RelocateServiceRequest) -> RelocateOutcome:
        """Relocate the source entry, then refresh the outline when requested."""

        source = request.source_path.absolute()
        source = source.parent.resolve() / source.name
        destination = request.destination_dir.resolve()

        self._check_kind(source, request.expected_kind)

        domain_request = RelocationRequest(
            source_path=source,
            destination_dir=destination,
            target_index=request.target_index,
            prefix_width=request.prefix_width,
            dry_run=request.dry_run,
        )
        plan = self._reorderer.build_plan(domain_request)
        relocation = self._reorderer.execute(plan, dry_run=request.dry_run)

        outline: OutlineResult | None = None
        if request.outline_root is not None and not request.dry_run:
            outline = self._outline_service.generate(
                OutlineServiceRequest(
                    source_roots=[request.outline_root],
                    output_dir=request.outline_root,
                    ignore=request.ignore,
                )
            )
        return RelocateOutcome(relocation=relocation, outline=outline)

    def _check_kind(self, source: Path, expected: EntryKind | None) -> None:
        if expected is None or not self._filesystem.exists(source):
            return
        if expected is EntryKind.FILE and not self._filesystem.is_file(source):
            raise PathError("Expected a file", source)
        if expected is EntryKind.DIRECTORY and not self._filesystem.is_dir(source):
            raise PathError("Expected a directory", source)
