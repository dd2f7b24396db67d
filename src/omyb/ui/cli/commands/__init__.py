"""Command execution package for CLI."""

from omyb.ui.cli.commands.create import CreateCommand
from omyb.ui.cli.commands.move import MoveCommand

__all__ = ["CreateCommand", "MoveCommand"]
