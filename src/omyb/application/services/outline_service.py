"""Application service that writes the outline document for a book tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from omyb.config.settings import OUTLINE_FILE_NAME
from omyb.features.outline import OutlineDocument, ProjectionOptions, TreeProjector
from omyb.features.outline.adapters.filesystem import LocalTreeReader
from omyb.features.outline.usecases.ports import TreeReader
from omyb.platform.filesystem import ensure_directory, write_text_atomic
from omyb.shared.errors import PathError


@dataclass(slots=True)
class OutlineServiceRequest:
    """Parameters describing an outline generation run."""

    source_roots: list[Path]
    output_dir: Path
    ignore: list[Path] = field(default_factory=list)
    include_unnumbered_directories: bool = False
    include_directory_content_without_section: bool = False
    relative_links: bool = False


@dataclass(slots=True, frozen=True)
class OutlineResult:
    """Where the outline was written and what it contains."""

    output_path: Path
    document: OutlineDocument


@final
class OutlineService:
    """Application façade wiring the tree reader into the projector."""

    _projector: TreeProjector
    _logger: Logger

    def __init__(
        self,
        *,
        reader: TreeReader | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or getLogger(__name__)
        self._projector = TreeProjector(reader=reader or LocalTreeReader(), logger=self._logger)

    def build(self, request: OutlineServiceRequest) -> OutlineDocument:
        """Project every source root in order without writing anything."""

        roots: list[Path] = []
        for root in request.source_roots:
            if not root.is_dir():
                raise PathError("Source directory does not exist", root)
            roots.append(root.resolve())

        options = ProjectionOptions(
            ignore=frozenset(path.resolve() for path in request.ignore),
            include_unnumbered_directories=request.include_unnumbered_directories,
            include_directory_content_without_section=request.include_directory_content_without_section,
            link_base=request.output_dir.resolve() if request.relative_links else None,
        )
        return OutlineDocument.concat(self._projector.project(root, options) for root in roots)

    def generate(self, request: OutlineServiceRequest) -> OutlineResult:
        """Walk every source root and replace the outline file in ``output_dir``.

        The document is written only after all roots were walked successfully.
        """
        document = self.build(request)

        try:
            output_dir = ensure_directory(request.output_dir)
        except NotADirectoryError as exc:
            raise PathError("Output path is not a directory", request.output_dir) from exc
        output_path = output_dir.resolve() / OUTLINE_FILE_NAME
        write_text_atomic(output_path, document.render())

        self._logger.info(
            "Wrote %s (%d lines)",
            output_path,
            len(document),
            extra={
                "outline_event": "outline.written",
                "target_path": str(output_path),
                "line_count": len(document),
            },
        )
        return OutlineResult(output_path=output_path, document=document)
