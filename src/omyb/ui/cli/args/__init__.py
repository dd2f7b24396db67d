"""Command line argument handling package."""

from omyb.ui.cli.args.parser import ArgumentParser
from omyb.ui.cli.args.options import CLIArgs, CreateArgs, MoveArgs

__all__ = ["ArgumentParser", "CLIArgs", "CreateArgs", "MoveArgs"]
