"""Command line interface for OMYB."""

from omyb.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
