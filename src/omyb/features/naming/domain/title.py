"""
Summary: Derive human-readable outline titles from numbered names.
Why: Section and page titles in SUMMARY.md come from names, not file contents.
"""

from __future__ import annotations

from .numbered_name import decode


def format_title(text: str) -> str:
    """Turn ``"getting_started  guide"`` into ``"Getting Started Guide"``.

    Underscores become spaces and the first character of every word is
    upper-cased; the rest of each word is left untouched.
    """
    words = text.replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def directory_title(name: str) -> str:
    """Title for a directory name, with its numeric prefix removed."""

    return format_title(decode(name).base_name)


def file_title(name: str, extension: str) -> str:
    """Title for a document file name.

    The numeric prefix and ``extension`` are removed, then one further leading
    numeric prefix is stripped if present (``01_02_setup.md`` -> ``Setup``).
    """
    stem = decode(name).base_name
    if extension and stem.endswith(extension):
        stem = stem[: -len(extension)]
    return format_title(decode(stem).base_name)


__all__ = ["directory_title", "file_title", "format_title"]
