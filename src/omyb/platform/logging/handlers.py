"""Rich console handler for OMYB log output.

Where: platform/logging/handlers.py
What: Render outline and relocation events with icons and compact paths.
Why: Keep console output readable when deep book trees produce long paths.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WhitePathRichHandler(RichHandler):
    """Custom Rich handler that displays file paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "outline.section": ("📖", "cyan"),
        "outline.skip.ignored": ("↪️", "yellow"),
        "outline.skip.unreadable": ("⚠️", "yellow"),
        "outline.written": ("✅", "green"),
        "relocation.rename": ("📦", "magenta"),
        "relocation.complete": ("✅", "green"),
        "relocation.error": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "outline.section": "Section ",
        "outline.skip.ignored": "Ignored ",
        "outline.skip.unreadable": "Unreadable ",
        "outline.written": "Wrote ",
        "relocation.rename": "Renaming ",
        "relocation.complete": "Relocation complete",
        "relocation.error": "Relocation failed",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        display_path = self._to_pure_path(path)
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative_path = display_path.relative_to(base_path)
            except ValueError:
                relative_path = None
            if relative_path is not None and str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        if truncated:
            rendered = "…" + separator + separator.join(body_parts)
        elif anchor:
            rendered = (anchor.rstrip("\\/") + separator if is_windows else separator) + separator.join(body_parts)
        else:
            rendered = separator.join(body_parts) or "."

        return self._style_path_string(rendered, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator, "/"}
        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured outline/relocation events with dedicated styling."""

        event = getattr(record, "outline_event", None) or getattr(record, "relocation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total_steps = getattr(record, "total_steps", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_steps, int) and total_steps > 0:
                _ = body.append(f"[{sequence}/{total_steps}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_LABELS.get(event, ""))

        base = getattr(record, "base_path", None)
        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=base))
        if target_path:
            if source_path:
                _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path), base=base))

        details: list[str] = []
        title = getattr(record, "title", None)
        if title:
            details.append(f'"{title}"')
        line_count = getattr(record, "line_count", None)
        if isinstance(line_count, int):
            details.append(f"lines={line_count}")
        applied = getattr(record, "applied", None)
        if isinstance(applied, int):
            details.append(f"renamed={applied}")
        if getattr(record, "dry_run", False):
            details.append("dry-run")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for structured events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["WhitePathRichHandler"]
