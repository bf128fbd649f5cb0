"""Code span detection for link extraction.

Operates on character offsets into the full file text so the extractor can
ask about any match position without re-splitting lines.
"""

import re

from ._constants import CODE_FENCE, INLINE_CODE_WINDOW

_BACKTICK_RUN = re.compile(r"`+")


def is_in_fenced_block(text: str, position: int) -> bool:
    """True when an odd number of ``` fences precede ``position``."""
    return text.count(CODE_FENCE, 0, position) % 2 == 1


def is_in_inline_code(text: str, position: int, window: int = INLINE_CODE_WINDOW) -> bool:
    """True when ``position`` sits between two backticks on the same line.

    Only the nearest backtick before and the nearest backtick after the
    position are considered, and both must fall within ``window`` characters.
    The backtick run before must open a span: an even number of runs earlier
    on the same line means it closes one, as in ``a `b` [c](d) `e` ``.
    """
    start = max(0, position - window)
    end = min(len(text), position + window)

    before = text.rfind("`", start, position)
    if before == -1:
        return False
    after = text.find("`", position + 1, end)
    if after == -1:
        return False
    if "\n" in text[before + 1 : after]:
        return False

    run_start = before
    while run_start > 0 and text[run_start - 1] == "`":
        run_start -= 1
    line_start = text.rfind("\n", 0, run_start) + 1
    runs_before = len(_BACKTICK_RUN.findall(text, line_start, run_start))
    return runs_before % 2 == 0


def is_in_code_span(text: str, position: int) -> bool:
    """True when ``position`` is inside a fenced code block or an inline code span."""
    return is_in_fenced_block(text, position) or is_in_inline_code(text, position)
