"""YAML frontmatter reader (UNO: single function)."""

import re
from typing import Any

import yaml

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def parse_frontmatter(text: str) -> dict[str, Any]:
    """Return the leading ``---`` YAML block of ``text`` as a dict.

    Text without frontmatter, or whose frontmatter is not a mapping, yields
    an empty dict.

    Raises:
        yaml.YAMLError: If the frontmatter block is not valid YAML
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}
    data = yaml.safe_load(match.group(1))
    return data if isinstance(data, dict) else {}
