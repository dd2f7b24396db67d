"""Tests for the ``WhitePathRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from omyb.platform.logging import WhitePathRichHandler, setup_logger


def _make_handler() -> WhitePathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return WhitePathRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with event extras for testing."""

    record = logging.LogRecord(
        name="omyb",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="plain message",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_absolute_paths() -> None:
    """Deep absolute paths should keep only their trailing segments."""

    handler = _make_handler()
    record = _build_record(
        relocation_event="relocation.rename",
        sequence=2,
        total_steps=5,
        source_path="/home/writer/books/guide/01_part/02_chapter/03_section.md",
        target_path="/home/writer/books/guide/01_part/02_chapter/04_section.md",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert plain.startswith("📦 [2/5] Renaming ")
    assert "…/guide/01_part/02_chapter/03_section.md → …/guide/01_part/02_chapter/04_section.md" in plain


def test_render_message_relativizes_paths_to_base_directory() -> None:
    handler = _make_handler()
    base = "/home/writer/books/guide"

    record = _build_record(
        outline_event="outline.skip.ignored",
        source_path=f"{base}/99_drafts",
        base_path=base,
    )

    plain = handler.render_message(record, "").plain
    assert plain.endswith(" Ignored 99_drafts")
    assert "/home" not in plain


def test_render_message_lists_details() -> None:
    handler = _make_handler()

    written = _build_record(
        outline_event="outline.written",
        target_path="/book/SUMMARY.md",
        line_count=7,
    )
    assert handler.render_message(written, "").plain == "✅ Wrote /book/SUMMARY.md (lines=7)"

    dry = _build_record(
        relocation_event="relocation.rename",
        sequence=1,
        source_path="a.md",
        target_path="01_a.md",
        dry_run=True,
    )
    assert handler.render_message(dry, "").plain == "📦 [1] Renaming a.md → 01_a.md (dry-run)"

    failed = _build_record(
        relocation_event="relocation.error",
        source_path="a.md",
        target_path="b.md",
        error_message="Permission denied",
    )
    assert "(Permission denied)" in handler.render_message(failed, "").plain


def test_section_event_shows_title() -> None:
    handler = _make_handler()
    record = _build_record(outline_event="outline.section", source_path="01_intro", title="Intro")

    assert handler.render_message(record, "").plain == '📖 Section 01_intro ("Intro")'


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "omyb.log"

    configured = setup_logger(log_file=log_file, console_level=logging.WARNING)
    try:
        handler_types = [type(handler) for handler in configured.handlers]
        assert WhitePathRichHandler in handler_types
        assert logging.handlers.RotatingFileHandler in handler_types
        assert log_file.parent.is_dir()

        configured.info("hello file")
        for handler in configured.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger(log_file=None)


def test_setup_logger_console_only_by_default() -> None:
    configured = setup_logger(log_file=None)

    assert len(configured.handlers) == 1
    assert isinstance(configured.handlers[0], WhitePathRichHandler)
