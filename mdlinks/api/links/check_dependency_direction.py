"""Dependency direction rule (UNO: single function)."""

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .parse_reference import parse_reference

DIRECTION_SUGGESTION = 'Use "implements_requirements" or "references" field instead'


def document_layer(path: Path, layers: Mapping[str, int], root: Path | None = None) -> str | None:
    """First layer name (in ``layers`` order) that is a directory of ``path`` below ``root``."""
    parent = path.parent
    if root is not None:
        try:
            parent = parent.relative_to(root)
        except ValueError:
            pass
    directories = set(parent.parts)
    for name in layers:
        if name in directories:
            return name
    return None


def check_dependency_direction(
    source: Path,
    refs: Iterable[Any],
    layers: Mapping[str, int],
    root: Path | None = None,
) -> list[dict[str, Any]]:
    """Flag references from a lower document layer to a higher one.

    Args:
        source: Absolute path of the document declaring the references
        refs: Reference values from a dependency field
        layers: Directory name -> level; a lower level must not depend on a higher one
        root: Project root; only directories below it count as layers

    Returns:
        One ``invalid_dependency_direction`` issue per violating reference
    """
    source_layer = document_layer(source, layers, root)
    if source_layer is None:
        return []

    issues = []
    for ref in refs:
        path, _version = parse_reference(ref)
        if not path:
            continue
        target = Path(os.path.normpath(source.parent / path))
        target_layer = document_layer(target, layers, root)
        if target_layer is None:
            continue
        if layers[source_layer] < layers[target_layer]:
            issues.append(
                {
                    "type": "invalid_dependency_direction",
                    "target": path,
                    "source_layer": source_layer,
                    "target_layer": target_layer,
                    "message": f"{source_layer} should not depend on {target_layer}",
                    "suggestion": DIRECTION_SUGGESTION,
                }
            )
    return issues
