"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CreateArgs:
    """Command line arguments for the ``create`` subcommand."""

    command: Literal["create"]
    source_dirs: list[Path]
    output_dir: Path
    ignore: list[Path]
    include_unnumbered_directories: bool
    include_directory_content_without_section: bool
    relative_links: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MoveArgs:
    """Command line arguments for the ``mv`` and ``mv-dir`` subcommands."""

    command: Literal["mv", "mv-dir"]
    source_path: Path
    destination_dir: Path
    index: int
    width: int | None
    dry_run: bool
    book_root: Path
    update_summary: bool
    ignore: list[Path]
    verbose: bool
    quiet: bool


CLIArgs = CreateArgs | MoveArgs

__all__ = ["CLIArgs", "CreateArgs", "MoveArgs"]
