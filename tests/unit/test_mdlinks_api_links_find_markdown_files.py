"""Unit tests for the markdown scanner."""

from mdlinks.api.config.LinksConfig import DEFAULT_EXCLUDE_DIRNAMES
from mdlinks.api.links.find_markdown_files import find_markdown_files


def _relative(root, paths):
    return [p.relative_to(root).as_posix() for p in paths]


def test_deterministic_order(make_tree):
    root = make_tree(
        {
            "b.md": "",
            "a.md": "",
            "docs/z.md": "",
            "docs/guides/g.md": "",
            "alpha/x.md": "",
        }
    )
    assert _relative(root, find_markdown_files(root)) == [
        "a.md",
        "b.md",
        "alpha/x.md",
        "docs/z.md",
        "docs/guides/g.md",
    ]


def test_excluded_dirnames_pruned_at_any_depth(make_tree):
    root = make_tree(
        {
            "a.md": "",
            "node_modules/pkg/readme.md": "",
            "docs/archive/old.md": "",
            "docs/keep.md": "",
        }
    )
    found = _relative(root, find_markdown_files(root, DEFAULT_EXCLUDE_DIRNAMES))
    assert found == ["a.md", "docs/keep.md"]


def test_extension_filter(make_tree):
    root = make_tree({"a.md": "", "b.txt": "", "c.markdown": ""})
    assert _relative(root, find_markdown_files(root, extension=".markdown")) == ["c.markdown"]


def test_missing_root(tmp_path):
    assert find_markdown_files(tmp_path / "nope") == []


def test_returns_paths_under_root(make_tree):
    root = make_tree({"docs/a.md": ""})
    (path,) = find_markdown_files(root)
    assert path == root / "docs" / "a.md"
