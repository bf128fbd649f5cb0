"""Links check API command.

CLI: mdlc links check [--fix] [--dry-run] [--full-report] [--file PATH] [--root PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import LinksCheckOutput


def cmd_check(
    root: str | Path | None = None,
    file: str | Path | None = None,
    fix: bool = False,
    dry_run: bool = False,
    full_report: bool = False,
    rename_lookup: bool = True,
    fix_ambiguous: bool = False,
) -> StageResult:
    """Find broken relative links and optionally repair them.

    Args:
        root: Project root to scan (defaults to the current directory)
        file: Check only this markdown file (relative paths are taken from ``root``)
        fix: Rewrite links whose new location was found
        dry_run: Show what ``fix`` would change without writing (implies fix)
        full_report: Write the full markdown report under the project root
        rename_lookup: Consult git rename history when nothing else matches
        fix_ambiguous: Also apply the best candidate when several files match
    """

    def _fail(result_obj: StageResult, project_root: Path, message: str) -> None:
        result_obj.output = LinksCheckOutput(
            errors=[message],
            warnings=[],
            project_root=str(project_root),
            mode="dry-run" if dry_run else "fix" if fix else "scan",
            files_checked=0,
            links_checked=0,
            broken_count=0,
            fixed_count=0,
            unresolved_count=0,
            fixes=[],
            categories={},
            notes=[],
            report_path="",
            commit_suggestion={},
            interrupted=False,
        ).model_dump(mode="python")
        result_obj.result = f"Link check failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from mdlinks.utils.normalize_path import normalize_path

        from ..config.MdlinksConfig import MdlinksConfig
        from .LinkAudit import LinkAudit
        from .LinkAuditResult import LinkAuditResult

        project_root = normalize_path(root) if root is not None else Path.cwd()

        yield (0.05, "Loading configuration...")
        try:
            config = MdlinksConfig.load()
        except ValueError as e:
            _fail(result_obj, project_root, f"Failed to load config: {e}")
            return

        if not project_root.is_dir():
            _fail(result_obj, project_root, f"Project root is not a directory: {project_root}")
            return

        links_config = config.links.model_copy(
            update={
                "rename_lookup": config.links.rename_lookup and rename_lookup,
                "fix_ambiguous": config.links.fix_ambiguous or fix_ambiguous,
            }
        )
        audit = LinkAudit(links_config, project_root)
        audit_result = LinkAuditResult(project_root=project_root)
        yield from audit.iter_run(audit_result, file=file, fix=fix, dry_run=dry_run, full_report=full_report)

        result_obj.output = LinksCheckOutput(**audit_result.to_output()).model_dump(mode="python")
        result_obj.success = audit_result.success
        result_obj.result = _result_message(audit_result)

    scope = f" ({file})" if file else ""
    verb = "Planning link fixes" if dry_run else "Fixing links" if fix else "Checking links"
    return StageResult(
        announce=f"{verb}{scope}...",
        progress_callback=do_work,
    )


def _result_message(audit_result) -> str:
    if audit_result.errors and not audit_result.files_checked:
        return f"Link check failed: {audit_result.errors[0]}"
    if audit_result.interrupted:
        return f"Link check interrupted after {audit_result.files_checked} file(s)"
    if not audit_result.broken_count:
        return f"All links valid ({audit_result.links_checked} links in {audit_result.files_checked} files)"
    if audit_result.mode == "scan":
        return f"Found {audit_result.broken_count} broken link(s) in {audit_result.files_checked} files"
    done = "Would fix" if audit_result.mode == "dry-run" else "Fixed"
    return (
        f"{done} {audit_result.fixed_count} of {audit_result.broken_count} broken link(s); "
        f"{audit_result.unresolved_count} need review"
    )
