"""Single frontmatter reference check (UNO: single function)."""

from pathlib import Path
from typing import Any

import yaml

from .calculate_version_severity import calculate_version_severity
from .parse_frontmatter import parse_frontmatter
from .parse_reference import parse_reference


def validate_reference(ref: Any, doc_dir: Path) -> dict[str, Any] | None:
    """Check that a ``path@version`` reference points at an existing, matching document.

    Args:
        ref: Reference value from frontmatter (string or mapping with ``ref``)
        doc_dir: Directory of the document holding the reference

    Returns:
        None when the reference is valid, otherwise an issue dict with
        ``level`` (``error`` or ``warning``) and ``message``
    """
    path, expected = parse_reference(ref)
    if not path:
        return {"type": "invalid_reference", "level": "error", "message": "Invalid reference format"}

    target = doc_dir / path
    if not target.exists():
        return {"type": "invalid_reference", "level": "error", "message": "File not found", "path": path}

    if not expected:
        return None

    try:
        current = parse_frontmatter(target.read_text(encoding="utf-8")).get("version")
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        return {
            "type": "invalid_reference",
            "level": "error",
            "message": "Failed to read target file",
            "path": path,
            "details": str(exc),
        }

    if current is None or current == "":
        return {
            "type": "version",
            "level": "warning",
            "message": "Target file has no version",
            "path": path,
            "expected": expected,
        }

    current = str(current)
    if current != expected:
        return {
            "type": "version",
            "level": "warning",
            "message": "Version mismatch",
            "path": path,
            "expected": expected,
            "current": current,
            "severity": calculate_version_severity(expected, current),
        }
    return None
