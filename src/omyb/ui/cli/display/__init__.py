"""Display management for CLI interface."""

from omyb.ui.cli.display.result import OutlineResultDisplay, RelocationResultDisplay

__all__ = ["OutlineResultDisplay", "RelocationResultDisplay"]
