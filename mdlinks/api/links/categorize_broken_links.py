"""Broken link categorization (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path

from ._constants import (
    ARCHIVED_SEGMENTS,
    CATEGORIES,
    CATEGORY_AMBIGUOUS,
    CATEGORY_ARCHIVED,
    CATEGORY_AUTO_FIXABLE,
    CATEGORY_DEPRECATED,
    CATEGORY_MISSING,
    DEPRECATED_SEGMENTS,
)
from .Correction import Correction


def _target_segments(target: Path, project_root: Path) -> set[str]:
    try:
        parts = target.relative_to(project_root).parts
    except ValueError:
        parts = target.parts
    return {part.lower() for part in parts}


def _entry(correction: Correction) -> dict[str, object]:
    entry = correction.broken.to_dict()
    entry["candidates"] = [c.location.relative_path for c in correction.candidates]
    entry["suggestion"] = correction.chosen.location.relative_path if correction.chosen else None
    entry["strategy"] = correction.strategy
    return entry


def categorize_broken_links(corrections: Iterable[Correction], project_root: Path) -> dict[str, list[dict]]:
    """Partition unfixed broken links into report categories.

    Precedence: deprecated and archived targets first (by path segment of the
    missing target), then by candidate count: several -> ambiguous, one ->
    auto_fixable, none -> missing.

    Returns:
        Mapping of every category name to its entries (possibly empty)
    """
    categories: dict[str, list[dict]] = {name: [] for name in CATEGORIES}
    for correction in corrections:
        segments = _target_segments(correction.broken.resolved_path, project_root)
        if segments & DEPRECATED_SEGMENTS:
            category = CATEGORY_DEPRECATED
        elif segments & ARCHIVED_SEGMENTS:
            category = CATEGORY_ARCHIVED
        elif correction.is_ambiguous:
            category = CATEGORY_AMBIGUOUS
        elif correction.has_candidates:
            category = CATEGORY_AUTO_FIXABLE
        else:
            category = CATEGORY_MISSING
        categories[category].append(_entry(correction))
    return categories
