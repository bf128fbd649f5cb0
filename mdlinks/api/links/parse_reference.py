"""``path@version`` reference parser (UNO: single function)."""

from typing import Any


def parse_reference(ref: Any) -> tuple[str | None, str | None]:
    """Split a frontmatter reference into path and version on the last ``@``.

    Mappings are read through their ``ref`` key. Anything that is not a
    string gives ``(None, None)``.
    """
    if isinstance(ref, dict):
        ref = ref.get("ref")
    if not isinstance(ref, str):
        return None, None

    path, sep, version = ref.rpartition("@")
    if not sep:
        return ref, None
    return path, version
