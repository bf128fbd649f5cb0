"""Unit tests for markdown link extraction."""

from pathlib import Path

from mdlinks.api.links.parse_markdown_links import parse_markdown_links
from mdlinks.api.links.SourceFile import SourceFile

SOURCE = SourceFile(absolute_path=Path("/project/docs/a.md"), relative_path="docs/a.md")


def _targets(text: str) -> list[str]:
    return [occ.target for occ in parse_markdown_links(SOURCE, text)]


def test_extracts_relative_links_in_order():
    text = "See [one](one.md) and [two](../two.md#part)."
    assert _targets(text) == ["one.md", "../two.md#part"]


def test_occurrence_fields():
    text = "line 1\nline 2 [Guide](guides/guide.md#setup)\n"
    (occ,) = parse_markdown_links(SOURCE, text)
    assert occ.text == "Guide"
    assert occ.line_number == 2
    assert occ.full_match == "[Guide](guides/guide.md#setup)"
    assert text[occ.offset : occ.offset + len(occ.full_match)] == occ.full_match
    assert occ.path_part == "guides/guide.md"
    assert occ.anchor == "setup"
    assert occ.source is SOURCE


def test_empty_anchor_is_none():
    (occ,) = parse_markdown_links(SOURCE, "[a](b.md#)")
    assert occ.anchor is None
    assert occ.path_part == "b.md"


def test_skips_external_and_anchor_links():
    text = (
        "[web](https://example.com) [plain](http://example.com) [mail](mailto:me@example.com) "
        "[ftp](ftp://host/file) [proto](//cdn.example.com/x.md) [here](#section) [doc](doc.md)"
    )
    assert _targets(text) == ["doc.md"]


def test_skips_site_root_paths():
    assert _targets("[a](/abs/b.md) [b](../b.md) [c](/)") == ["../b.md"]


def test_skips_links_in_fenced_code():
    text = "[before](before.md)\n```\n[inside](inside.md)\n```\n[after](after.md)\n"
    assert _targets(text) == ["before.md", "after.md"]


def test_skips_links_in_inline_code():
    text = "Write `see [x](x.md) here` to link. Real: [y](y.md)"
    assert _targets(text) == ["y.md"]


def test_skips_backtick_wrapped_link():
    text = "Syntax: `[text](target.md)`"
    assert _targets(text) == []


def test_no_links():
    assert _targets("# Title\n\nNo links here.") == []


def test_is_lazy():
    links = parse_markdown_links(SOURCE, "[a](a.md)")
    assert iter(links) is links
