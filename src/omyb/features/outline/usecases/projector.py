"""
Summary: Project a numbered directory tree onto a nested outline document.
Why: SUMMARY.md is derived entirely from names and index files on disk.
"""

from __future__ import annotations

import os
from logging import Logger, getLogger
from pathlib import Path

from omyb.config.settings import DOCUMENT_EXTENSION, INDEX_FILE_NAME
from omyb.features.naming import decode, directory_title, file_title
from omyb.shared.errors import PathError

from ..domain.models import OutlineDocument, OutlineLine, ProjectionOptions
from .ports import TreeReader


class TreeProjector:
    """Walk a book tree depth-first and collect outline lines.

    A directory becomes a section when it is numbered (or unnumbered
    directories are allowed) and holds an index file. Its numbered documents
    are listed when it qualifies and either has an index file or content
    without a section is allowed. Child directories are always walked unless
    ignored.
    """

    _reader: TreeReader
    _index_file_name: str
    _document_extension: str
    _logger: Logger

    def __init__(
        self,
        *,
        reader: TreeReader,
        index_file_name: str = INDEX_FILE_NAME,
        document_extension: str = DOCUMENT_EXTENSION,
        logger: Logger | None = None,
    ) -> None:
        self._reader = reader
        self._index_file_name = index_file_name
        self._document_extension = document_extension
        self._logger = logger or getLogger(__name__)

    def project(self, root: Path, options: ProjectionOptions) -> OutlineDocument:
        """Build the outline for ``root``.

        Raises:
            PathError: If ``root`` is not a directory or cannot be listed.
        """
        if not self._reader.is_dir(root):
            raise PathError("Source directory does not exist", root)
        try:
            children = self._reader.list_directory(root)
        except OSError as exc:
            raise PathError(f"Cannot read source directory ({exc})", root) from exc

        lines = self._project_directory(root, 0, options, children=children)
        return OutlineDocument(lines=tuple(lines))

    def _project_directory(
        self,
        directory: Path,
        depth: int,
        options: ProjectionOptions,
        *,
        children: list[Path] | None = None,
    ) -> list[OutlineLine]:
        if directory in options.ignore:
            self._log_skip("outline.skip.ignored", directory, options)
            return []

        if children is None:
            try:
                children = self._reader.list_directory(directory)
            except OSError as exc:
                self._log_skip("outline.skip.unreadable", directory, options, error=exc)
                return []

        qualifies = decode(directory.name).is_numbered or options.include_unnumbered_directories
        index_path = directory / self._index_file_name
        has_index = self._reader.is_file(index_path)

        lines: list[OutlineLine] = []
        child_depth = depth
        if qualifies and has_index:
            title = directory_title(directory.name)
            lines.append(OutlineLine(depth=depth, title=title, target=self._link(index_path, options)))
            self._logger.debug(
                "Section %s",
                title,
                extra={"outline_event": "outline.section", "source_path": str(directory), "title": title},
            )
            child_depth += 1

        content_eligible = qualifies and (has_index or options.include_directory_content_without_section)

        for child in sorted(children, key=lambda path: path.name):
            if self._reader.is_dir(child):
                lines.extend(self._project_directory(child, child_depth, options))
                continue
            if not content_eligible or not self._is_outline_document(child):
                continue
            if child in options.ignore:
                self._log_skip("outline.skip.ignored", child, options)
                continue
            lines.append(
                OutlineLine(
                    depth=child_depth,
                    title=file_title(child.name, self._document_extension),
                    target=self._link(child, options),
                )
            )

        return lines

    def _is_outline_document(self, path: Path) -> bool:
        name = path.name
        return (
            name != self._index_file_name
            and name.endswith(self._document_extension)
            and decode(name).is_numbered
        )

    @staticmethod
    def _link(path: Path, options: ProjectionOptions) -> str:
        if options.link_base is None:
            return str(path)
        return Path(os.path.relpath(path, options.link_base)).as_posix()

    def _log_skip(
        self,
        event: str,
        path: Path,
        options: ProjectionOptions,
        *,
        error: OSError | None = None,
    ) -> None:
        extra: dict[str, object] = {"outline_event": event, "source_path": str(path)}
        if options.link_base is not None:
            extra["base_path"] = str(options.link_base)
        if error is None:
            self._logger.info("Skipping ignored path %s", path, extra=extra)
            return
        extra["error_message"] = str(error)
        self._logger.warning("Skipping unreadable directory %s: %s", path, error, extra=extra)


__all__ = ["TreeProjector"]
