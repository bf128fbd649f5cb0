"""Frontmatter reference checker (UNO: single function)."""

from pathlib import Path
from typing import Any

from mdlinks.api.config.RefsConfig import RefsConfig

from .check_dependency_direction import check_dependency_direction
from .parse_frontmatter import parse_frontmatter
from .validate_reference import validate_reference


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (str, dict)):
        return [value]
    if isinstance(value, list):
        return value
    return []


def check_frontmatter_references(
    path: Path,
    config: RefsConfig | None = None,
    project_root: Path | None = None,
) -> tuple[int, list[dict[str, Any]]]:
    """Validate every reference declared in the frontmatter of ``path``.

    Args:
        path: Markdown document to inspect
        config: Which fields hold references and how documents are layered
        project_root: Root for relative paths in issues and for layer detection

    Returns:
        ``(references_checked, issues)``; each issue names its ``file`` and ``field``

    Raises:
        OSError: If ``path`` cannot be read
        yaml.YAMLError: If the frontmatter is not valid YAML
    """
    config = config or RefsConfig()
    frontmatter = parse_frontmatter(path.read_text(encoding="utf-8"))
    try:
        display = path.relative_to(project_root).as_posix() if project_root else path.as_posix()
    except ValueError:
        display = path.as_posix()

    checked = 0
    issues: list[dict[str, Any]] = []
    for field in config.reference_fields:
        refs = _as_list(frontmatter.get(field))
        for ref in refs:
            checked += 1
            issue = validate_reference(ref, path.parent)
            if issue is not None:
                issues.append({"file": display, "field": field, "reference": str(ref), **issue})

        if field in config.dependency_fields:
            for issue in check_dependency_direction(path, refs, config.layers, project_root):
                issues.append({"file": display, "field": field, "level": "error", **issue})
    return checked, issues
