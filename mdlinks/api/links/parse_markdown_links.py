"""Markdown link extractor (UNO: single function)."""

import re
from collections.abc import Iterator

from .is_external_link import is_external_link
from .is_in_code_span import is_in_code_span
from .LinkOccurrence import LinkOccurrence
from .SourceFile import SourceFile

MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def _is_backtick_wrapped(text: str, start: int, end: int) -> bool:
    return start > 0 and end < len(text) and text[start - 1] == "`" and text[end] == "`"


def parse_markdown_links(source: SourceFile, text: str) -> Iterator[LinkOccurrence]:
    """Extract relative file links from markdown text.

    Skips links inside fenced or inline code, links written as literal
    ``[text](target)`` in backticks, external URLs, bare anchors and
    site-root paths such as ``/docs/a.md``.

    Args:
        source: File the text was read from
        text: Markdown content

    Yields:
        LinkOccurrence for each candidate file link, in document order
    """
    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        start, end = match.span()
        if is_in_code_span(text, start):
            continue
        if _is_backtick_wrapped(text, start, end):
            continue

        target = match.group(2)
        if is_external_link(target) or target.startswith(("#", "/")):
            continue

        yield LinkOccurrence(
            source=source,
            text=match.group(1),
            target=target,
            offset=start,
            full_match=match.group(0),
            line_number=text.count("\n", 0, start) + 1,
        )
