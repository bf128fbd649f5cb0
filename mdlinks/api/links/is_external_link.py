"""External link predicate (UNO: single function)."""

from ._constants import EXTERNAL_PREFIXES


def is_external_link(target: str) -> bool:
    """True for URL schemes and protocol-relative links, which never name a local file."""
    return target.startswith(EXTERNAL_PREFIXES)
