"""Shared pytest fixtures for building book trees on disk."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Union

import pytest

TreeLayout = Mapping[str, Union[str, "TreeLayout"]]


def build_tree(root: Path, layout: TreeLayout) -> Path:
    """Create files (string values) and directories (mapping values) under ``root``."""

    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        target = root / name
        if isinstance(content, str):
            _ = target.write_text(content, encoding="utf-8")
        else:
            _ = build_tree(target, content)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Return a builder that lays out a tree inside ``tmp_path / "book"``."""

    def _make(layout: TreeLayout) -> Path:
        return build_tree(tmp_path / "book", layout)

    return _make
