"""Where: src/omyb/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - The on-disk naming contract (index file, extension) is fixed.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from pathlib import Path

from omyb.config.config import PREFIX_WIDTH_DEFAULT, config as app_config

# On-disk naming contract -----------------------------------------------------

# Index file that turns a directory into a section; never carries a prefix.
INDEX_FILE_NAME: str = "README.md"

# Only files with this suffix are projected into the outline.
DOCUMENT_EXTENSION: str = ".md"

# Outline document written by ``create``.
OUTLINE_FILE_NAME: str = "SUMMARY.md"


# Numbering -------------------------------------------------------------------

_prefix_width = getattr(app_config, "prefix_width", PREFIX_WIDTH_DEFAULT)
PREFIX_WIDTH: int = (
    _prefix_width
    if isinstance(_prefix_width, int) and _prefix_width > 0
    else PREFIX_WIDTH_DEFAULT
)


# Outline generation ----------------------------------------------------------

DEFAULT_IGNORE: tuple[Path, ...] = tuple(getattr(app_config, "ignore", []) or ())


__all__ = [
    "DEFAULT_IGNORE",
    "DOCUMENT_EXTENSION",
    "INDEX_FILE_NAME",
    "OUTLINE_FILE_NAME",
    "PREFIX_WIDTH",
]
