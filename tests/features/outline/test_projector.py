"""
Summary: Tests for projecting a numbered tree onto outline lines.
Why: Inclusion rules decide which directories and files reach SUMMARY.md.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from omyb.features.outline import OutlineLine, ProjectionOptions, TreeProjector
from omyb.features.outline.adapters.filesystem import LocalTreeReader
from omyb.shared.errors import PathError


@pytest.fixture
def projector() -> TreeProjector:
    return TreeProjector(reader=LocalTreeReader())


def _rows(lines: tuple[OutlineLine, ...], root: Path) -> list[tuple[int, str, str]]:
    return [(line.depth, line.title, str(Path(line.target).relative_to(root))) for line in lines]


def test_numbered_section_lists_files_in_prefix_order(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    """A numbered directory with README.md becomes a section over its documents."""

    root = make_tree({"01_basics": {"README.md": "", "02_b.md": "", "01_a.md": ""}})

    document = projector.project(root, ProjectionOptions())

    assert _rows(document.lines, root) == [
        (0, "Basics", "01_basics/README.md"),
        (1, "A", "01_basics/01_a.md"),
        (1, "B", "01_basics/02_b.md"),
    ]


def test_unnumbered_root_is_not_a_section(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    """Files directly in an unnumbered root are left out by default."""

    root = make_tree({"README.md": "", "01_top.md": "", "01_part": {"README.md": ""}})

    document = projector.project(root, ProjectionOptions())

    assert _rows(document.lines, root) == [(0, "Part", "01_part/README.md")]


def test_include_unnumbered_directories(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree({"appendix": {"README.md": "", "01_glossary.md": ""}})

    document = projector.project(root, ProjectionOptions(include_unnumbered_directories=True))

    assert _rows(document.lines, root) == [
        (0, "Appendix", "appendix/README.md"),
        (1, "Glossary", "appendix/01_glossary.md"),
    ]


def test_unnumbered_directory_descendants_still_reachable(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    """An unnumbered directory is walked even though it never becomes a section."""

    root = make_tree(
        {
            "drafts": {
                "README.md": "",
                "01_ignored_file.md": "",
                "01_chapter": {"README.md": "", "01_page.md": ""},
            }
        }
    )

    document = projector.project(root, ProjectionOptions())

    assert _rows(document.lines, root) == [
        (0, "Chapter", "drafts/01_chapter/README.md"),
        (1, "Page", "drafts/01_chapter/01_page.md"),
    ]


def test_numbered_directory_without_index_keeps_depth(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    """Without README.md a directory emits nothing itself and nests nothing."""

    root = make_tree(
        {
            "01_part": {
                "01_loose.md": "",
                "01_chapter": {"README.md": "", "01_page.md": ""},
            }
        }
    )

    document = projector.project(root, ProjectionOptions())

    assert _rows(document.lines, root) == [
        (0, "Chapter", "01_part/01_chapter/README.md"),
        (1, "Page", "01_part/01_chapter/01_page.md"),
    ]


def test_include_directory_content_without_section(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree({"01_part": {"01_loose.md": "", "02_other.md": ""}})

    document = projector.project(
        root, ProjectionOptions(include_directory_content_without_section=True)
    )

    assert _rows(document.lines, root) == [
        (0, "Loose", "01_part/01_loose.md"),
        (0, "Other", "01_part/02_other.md"),
    ]


def test_files_without_prefix_or_extension_are_skipped(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree(
        {
            "01_part": {
                "README.md": "",
                "notes.md": "",
                "x_draft.md": "",
                "01_image.png": "",
                "02_text.txt": "",
                "01_kept.md": "",
            }
        }
    )

    document = projector.project(root, ProjectionOptions())

    assert [line.title for line in document.lines] == ["Part", "Kept"]


def test_nested_sections_increase_depth(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree(
        {
            "01_one": {
                "README.md": "",
                "01_intro.md": "",
                "02_two": {
                    "README.md": "",
                    "01_three": {"README.md": "", "01_deep.md": ""},
                },
            },
            "02_four": {"README.md": ""},
        }
    )

    document = projector.project(root, ProjectionOptions())

    assert [(line.depth, line.title) for line in document.lines] == [
        (0, "One"),
        (1, "Intro"),
        (1, "Two"),
        (2, "Three"),
        (3, "Deep"),
        (0, "Four"),
    ]


def test_children_sorted_by_raw_name(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    """Files and directories interleave by their on-disk names."""

    root = make_tree(
        {
            "01_part": {
                "README.md": "",
                "03_c.md": "",
                "01_a.md": "",
                "02_b": {"README.md": ""},
            }
        }
    )

    document = projector.project(root, ProjectionOptions())

    assert [line.title for line in document.lines] == ["Part", "A", "B", "C"]


def test_ignored_paths_are_skipped_with_descendants(
    make_tree: Callable[..., Path], projector: TreeProjector, caplog: pytest.LogCaptureFixture
) -> None:
    root = make_tree(
        {
            "01_part": {"README.md": "", "01_a.md": "", "02_b.md": ""},
            "02_private": {"README.md": "", "01_secret": {"README.md": ""}},
        }
    )
    options = ProjectionOptions(
        ignore=frozenset({root / "02_private", root / "01_part" / "02_b.md"})
    )

    with caplog.at_level(logging.INFO):
        document = projector.project(root, options)

    assert [line.title for line in document.lines] == ["Part", "A"]
    skipped = [getattr(record, "source_path", None) for record in caplog.records]
    assert str(root / "02_private") in skipped


def test_ignored_root_yields_empty_outline(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree({"01_part": {"README.md": ""}})

    document = projector.project(root, ProjectionOptions(ignore=frozenset({root})))

    assert len(document) == 0


def test_relative_links(make_tree: Callable[..., Path], projector: TreeProjector) -> None:
    root = make_tree({"01_part": {"README.md": "", "01_a.md": ""}})

    document = projector.project(root, ProjectionOptions(link_base=root))

    assert [line.target for line in document.lines] == ["01_part/README.md", "01_part/01_a.md"]


def test_missing_root_raises_path_error(tmp_path: Path, projector: TreeProjector) -> None:
    with pytest.raises(PathError):
        _ = projector.project(tmp_path / "missing", ProjectionOptions())


def test_unreadable_root_raises_path_error(tmp_path: Path, mocker: MockerFixture) -> None:
    reader = mocker.Mock()
    reader.is_dir.return_value = True
    reader.list_directory.side_effect = PermissionError("denied")

    with pytest.raises(PathError):
        _ = TreeProjector(reader=reader).project(tmp_path, ProjectionOptions())


def test_unreadable_subdirectory_is_skipped(
    make_tree: Callable[..., Path], mocker: MockerFixture, caplog: pytest.LogCaptureFixture
) -> None:
    """An unreadable directory below the root is logged and contributes nothing."""

    root = make_tree(
        {
            "01_ok": {"README.md": ""},
            "02_locked": {"README.md": "", "01_a.md": ""},
        }
    )
    local = LocalTreeReader()
    locked = root / "02_locked"

    def _list(path: Path) -> list[Path]:
        if path == locked:
            raise PermissionError("denied")
        return local.list_directory(path)

    reader = mocker.Mock(wraps=local)
    reader.list_directory.side_effect = _list

    with caplog.at_level(logging.WARNING):
        document = TreeProjector(reader=reader).project(root, ProjectionOptions())

    assert [line.title for line in document.lines] == ["Ok"]
    assert any(
        getattr(record, "outline_event", None) == "outline.skip.unreadable"
        for record in caplog.records
    )


def test_projection_is_repeatable(
    make_tree: Callable[..., Path], projector: TreeProjector
) -> None:
    root = make_tree({"01_a": {"README.md": "", "01_x.md": "", "02_y.md": ""}})

    first = projector.project(root, ProjectionOptions()).render()
    second = projector.project(root, ProjectionOptions()).render()

    assert first == second
