"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from omyb.config.config import Config
from omyb.config.settings import DEFAULT_IGNORE, INDEX_FILE_NAME, OUTLINE_FILE_NAME, PREFIX_WIDTH
from omyb.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from omyb.ui.cli.args.options import CLIArgs, CreateArgs, MoveArgs


_CREATE_DESCRIPTION = f"""\
Generate {OUTLINE_FILE_NAME} from a tree of numbered Markdown files and directories.

Order comes from the numeric prefix of each name (for example "01_intro.md").
Files and directories without a prefix are left out, though directories are
still searched for numbered descendants. A numbered directory holding a
{INDEX_FILE_NAME} becomes a section titled after its name with the prefix and
underscores removed; nesting follows directory depth. {INDEX_FILE_NAME} itself
is never numbered.
"""

_MOVE_DESCRIPTION = f"""\
Move a file to a 1-based position inside another directory.

Entries already at or after that position shift down by one, and the directory
the file left is renumbered so its prefixes stay contiguous. {INDEX_FILE_NAME}
is never numbered. {OUTLINE_FILE_NAME} in the book root is regenerated
afterwards unless --do-not-update-summary is given.
"""

_MOVE_DIR_DESCRIPTION = """\
Works in the same way as 'mv', except it moves directories instead of files.
"""


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="omyb",
            description="OMYB (Organize My Book) - tools for keeping a numbered Markdown book in order.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        create_parser = subparsers.add_parser(
            "create",
            help=f"Generate {OUTLINE_FILE_NAME} from the numbered tree",
            description=_CREATE_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = create_parser.add_argument(
            "-s",
            "--source-dir",
            dest="source_dirs",
            action="append",
            type=str,
            metavar="SOURCE_DIR",
            help="Directory to read Markdown files from; repeat for several roots (default: .)",
        )
        _ = create_parser.add_argument(
            "-o",
            "--output-dir",
            type=str,
            default=".",
            metavar="OUTPUT_DIR",
            help=f"Directory to place {OUTLINE_FILE_NAME} in (default: .)",
        )
        _ = create_parser.add_argument(
            "-i",
            "--ignore",
            action="append",
            default=[],
            type=str,
            metavar="PATH",
            help="File or directory (with its descendants) to leave out; may be repeated",
        )
        _ = create_parser.add_argument(
            "--include-unnumbered-directories",
            action="store_true",
            help="Treat directories without a number like numbered ones, in name order",
        )
        _ = create_parser.add_argument(
            "--include-directory-content-without-section",
            action="store_true",
            help=f"List the files of directories that have no {INDEX_FILE_NAME}",
        )
        _ = create_parser.add_argument(
            "--relative-links",
            action="store_true",
            help="Write links relative to the output directory instead of absolute paths",
        )
        ArgumentParser._add_verbosity(create_parser)

        mv_parser = subparsers.add_parser(
            "mv",
            help="Move a file to a numbered position in a directory",
            description=_MOVE_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ArgumentParser._configure_move_parser(mv_parser, source_label="FROM_FILE", source_kind="file")

        mv_dir_parser = subparsers.add_parser(
            "mv-dir",
            help="Move a directory to a numbered position in a directory",
            description=_MOVE_DIR_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ArgumentParser._configure_move_parser(mv_dir_parser, source_label="FROM_DIR", source_kind="directory")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "create":
            return ArgumentParser._process_create(parsed_args)

        if command in {"mv", "mv-dir"}:
            return ArgumentParser._process_move(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _configure_move_parser(
        parser: argparse.ArgumentParser,
        *,
        source_label: str,
        source_kind: str,
    ) -> None:
        """Apply shared configuration for the move subparsers."""

        _ = parser.add_argument(
            "source_path",
            type=str,
            metavar=source_label,
            help=f"The {source_kind} to move",
        )
        _ = parser.add_argument(
            "destination_dir",
            type=str,
            metavar="TO_DIR",
            help="The directory to move into",
        )
        _ = parser.add_argument(
            "index",
            type=int,
            metavar="INDEX",
            help=f"Position in the new directory, starting at 1 ({INDEX_FILE_NAME} is never numbered)",
        )
        _ = parser.add_argument(
            "--width",
            type=int,
            default=None,
            help=(
                "Digits used for numeric prefixes (default: the widest prefix already in "
                f"each directory, or {PREFIX_WIDTH} when it has none)"
            ),
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show the planned renames without changing anything",
        )
        _ = parser.add_argument(
            "--book-root",
            type=str,
            default=".",
            metavar="BOOK_ROOT",
            help=f"Book directory whose {OUTLINE_FILE_NAME} is regenerated afterwards (default: .)",
        )
        _ = parser.add_argument(
            "--do-not-update-summary",
            action="store_true",
            help=f"Leave {OUTLINE_FILE_NAME} untouched",
        )
        ArgumentParser._add_verbosity(parser)

    @staticmethod
    def _process_create(parsed_args: argparse.Namespace) -> CreateArgs:
        source_dirs = [Path(raw) for raw in (parsed_args.source_dirs or ["."])]
        for source_dir in source_dirs:
            if not source_dir.is_dir():
                logger.error("Source directory does not exist: %s", source_dir)
                sys.exit(1)

        output_dir = Path(parsed_args.output_dir)
        if output_dir.exists() and not output_dir.is_dir():
            logger.error("Output path is not a directory: %s", output_dir)
            sys.exit(1)

        ignore = [*DEFAULT_IGNORE, *(Path(raw) for raw in parsed_args.ignore)]

        return CreateArgs(
            command="create",
            source_dirs=source_dirs,
            output_dir=output_dir,
            ignore=ignore,
            include_unnumbered_directories=parsed_args.include_unnumbered_directories,
            include_directory_content_without_section=parsed_args.include_directory_content_without_section,
            relative_links=parsed_args.relative_links,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_move(parsed_args: argparse.Namespace) -> MoveArgs:
        width: int | None = parsed_args.width
        if width is not None and width < 1:
            logger.error("Width must be a positive integer; received %s", width)
            sys.exit(1)

        book_root = Path(parsed_args.book_root)
        update_summary = not parsed_args.do_not_update_summary
        if update_summary and not parsed_args.dry_run and not book_root.is_dir():
            logger.error("Book root does not exist or is not a directory: %s", book_root)
            sys.exit(1)

        return MoveArgs(
            command=parsed_args.command,
            source_path=Path(parsed_args.source_path),
            destination_dir=Path(parsed_args.destination_dir),
            index=parsed_args.index,
            width=width,
            dry_run=parsed_args.dry_run,
            book_root=book_root,
            update_summary=update_summary,
            ignore=list(DEFAULT_IGNORE),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
