"""Links refs API command.

CLI: mdlc links refs [PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import LinksRefsOutput


def cmd_refs(path: str | Path | None = None, root: str | Path | None = None) -> StageResult:
    """Validate ``path@version`` references in markdown frontmatter.

    Args:
        path: A markdown file or directory to check (defaults to the project root)
        root: Project root used for relative paths and document layers
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        import yaml

        from mdlinks.utils.normalize_path import normalize_path

        from ..config.MdlinksConfig import MdlinksConfig
        from .check_frontmatter_references import check_frontmatter_references
        from .find_markdown_files import find_markdown_files

        project_root = normalize_path(root) if root is not None else Path.cwd()
        target = normalize_path(path) if path is not None else project_root
        errors: list[str] = []
        issues: list[dict] = []
        references_checked = 0
        files: list[Path] = []

        yield (0.1, "Loading configuration...")
        try:
            config = MdlinksConfig.load()
        except ValueError as e:
            config = None
            errors.append(f"Failed to load config: {e}")

        if config is not None:
            if target.is_file():
                files = [target]
            elif target.is_dir():
                files = find_markdown_files(target, config.links.exclude_dirnames, config.links.extension)
            else:
                errors.append(f"Path not found: {path}")

        for i, file_path in enumerate(files):
            yield (0.2 + 0.7 * i / max(len(files), 1), f"Checking {file_path.name}...")
            try:
                checked, found = check_frontmatter_references(file_path, config.refs, project_root)
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                errors.append(f"Cannot read frontmatter of {file_path}: {e}")
                continue
            references_checked += checked
            issues.extend(found)

        warnings = [f"{i['file']}: {i['message']} ({i['reference']})" for i in issues if i["level"] == "warning"]
        is_valid = not issues and not errors
        result_obj.output = LinksRefsOutput(
            errors=errors,
            warnings=warnings,
            project_root=str(project_root),
            files_checked=len(files),
            references_checked=references_checked,
            issues=issues,
            is_valid=is_valid,
        ).model_dump(mode="python")
        result_obj.success = is_valid
        if errors:
            result_obj.result = f"Reference check failed: {errors[0]}"
        elif issues:
            result_obj.result = f"Found {len(issues)} reference issue(s) in {len(files)} files"
        else:
            result_obj.result = f"All {references_checked} references valid ({len(files)} files)"

    return StageResult(
        announce=f"Checking frontmatter references{f' ({path})' if path else ''}...",
        progress_callback=do_work,
    )
