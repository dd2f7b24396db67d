"""
Summary: Public surface for numbered-name parsing, titles and ordering checks.
Why: Let outline and relocation features share one naming contract.
"""

from .domain.numbered_name import NumberedName, decode, encode
from .domain.ordering import EntryKind, NumberedEntry, OrderedSiblingSet, validate
from .domain.title import directory_title, file_title, format_title

__all__ = [
    "EntryKind",
    "NumberedEntry",
    "NumberedName",
    "OrderedSiblingSet",
    "decode",
    "directory_title",
    "encode",
    "file_title",
    "format_title",
    "validate",
]
