"""Unit tests for the basename index."""

import pytest

from mdlinks.api.links.FileIndex import FileIndex
from mdlinks.api.links.find_markdown_files import find_markdown_files


@pytest.fixture
def tree(make_tree):
    return make_tree(
        {
            "README.md": "",
            "docs/setup.md": "",
            "docs/Guide.md": "",
            "other/setup.md": "",
            ".mdlinks/reports/BROKEN_LINKS_REPORT.md": "",
        }
    )


def test_groups_locations_in_scan_order(tree):
    index = FileIndex.build(find_markdown_files(tree), tree)
    locations = index.get("setup.md")
    assert [loc.relative_path for loc in locations] == ["docs/setup.md", "other/setup.md"]
    assert locations[0].absolute_path == tree / "docs" / "setup.md"


def test_unknown_basename(tree):
    index = FileIndex.build(find_markdown_files(tree), tree)
    assert index.get("nope.md") == ()
    assert "nope.md" not in index
    assert "setup.md" in index


def test_case_insensitive_lookup(tree):
    index = FileIndex.build(find_markdown_files(tree), tree)
    assert index.get("guide.md") == ()
    (loc,) = index.get_case_insensitive("GUIDE.MD")
    assert loc.relative_path == "docs/Guide.md"


def test_excluded_paths(tree):
    report = tree / ".mdlinks" / "reports" / "BROKEN_LINKS_REPORT.md"
    index = FileIndex.build(find_markdown_files(tree), tree, exclude_paths=[report])
    assert "BROKEN_LINKS_REPORT.md" not in index
    assert len(index) == 4


def test_items_are_ordered_and_read_only(tree):
    index = FileIndex.build(find_markdown_files(tree), tree)
    names = [name for name, _locations in index.items()]
    assert names[0] == "README.md"
    with pytest.raises(TypeError):
        index._entries["new.md"] = ()  # type: ignore[index]
