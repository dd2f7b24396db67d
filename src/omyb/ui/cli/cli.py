"""Command line interface for OMYB."""

import sys
from typing import final

from omyb.platform.logging import logger
from omyb.shared.errors import MoveError, OmybError
from omyb.ui.cli.args import ArgumentParser
from omyb.ui.cli.args.options import CLIArgs, CreateArgs
from omyb.ui.cli.commands import CreateCommand, MoveCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CreateArgs):
                _ = CreateCommand(args).execute()
                return

            _ = MoveCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except MoveError as e:
            logger.error("%s", e)
            if e.applied:
                logger.error("%d rename(s) were applied and not rolled back:", len(e.applied))
                for step in e.applied:
                    logger.error("  %s → %s", step.source, step.target)
            sys.exit(1)
        except OmybError as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("Filesystem error: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
