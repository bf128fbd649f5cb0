"""Scan, correct, fix and report broken markdown links for one project."""

from __future__ import annotations

__all__ = ["LinkAudit"]

from collections.abc import Iterator
from pathlib import Path

from mdlinks.api.config.LinksConfig import LinksConfig
from mdlinks.utils.get_logger import get_logger

from .BrokenLink import BrokenLink
from .build_commit_suggestion import build_commit_suggestion
from .categorize_broken_links import categorize_broken_links
from .CorrectionEngine import CorrectionEngine, StaticResult
from .FileIndex import FileIndex
from .find_markdown_files import find_markdown_files
from .FixRecord import FixRecord
from .GitRenameOracle import GitRenameOracle
from .LinkAuditResult import MODE_DRY_RUN, MODE_FIX, MODE_SCAN, LinkAuditResult
from .LinkRewriter import LinkRewriter
from .parse_markdown_links import parse_markdown_links
from .RenameOracle import NullRenameOracle, RenameOracle
from .resolve_link import resolve_link
from .SourceFile import SourceFile
from .write_full_report import write_full_report

logger = get_logger("links.audit")


class LinkAudit:
    """One link audit over a project tree.

    Owns the file index (built at most once, and only when something is
    broken) and the rename oracle. Phases run in order: scan, correct, fix,
    report. A KeyboardInterrupt during scan, correct or fix stops the
    remaining work; categories and the full report still cover what finished.
    """

    def __init__(self, config: LinksConfig, project_root: Path, oracle: RenameOracle | None = None):
        self.config = config
        self.project_root = project_root
        if oracle is None:
            oracle = (
                GitRenameOracle(project_root, timeout=config.git_timeout)
                if config.rename_lookup
                else NullRenameOracle()
            )
        self.oracle = oracle
        self._all_files: list[Path] | None = None
        self._index: FileIndex | None = None

    @property
    def report_file(self) -> Path:
        return self.project_root / self.config.report_path

    def _tree(self) -> list[Path]:
        if self._all_files is None:
            found = find_markdown_files(self.project_root, self.config.exclude_dirnames, self.config.extension)
            self._all_files = [path for path in found if path != self.report_file]
        return self._all_files

    @property
    def index(self) -> FileIndex:
        if self._index is None:
            self._index = FileIndex.build(self._tree(), self.project_root, exclude_paths=[self.report_file])
            logger.debug(f"Indexed {len(self._index)} files under {self.project_root}")
        return self._index

    def run(
        self,
        file: str | Path | None = None,
        fix: bool = False,
        dry_run: bool = False,
        full_report: bool = False,
    ) -> LinkAuditResult:
        """Run every phase and return the result."""
        result = LinkAuditResult(project_root=self.project_root)
        for _progress in self.iter_run(result, file=file, fix=fix, dry_run=dry_run, full_report=full_report):
            pass
        return result

    def iter_run(
        self,
        result: LinkAuditResult,
        file: str | Path | None = None,
        fix: bool = False,
        dry_run: bool = False,
        full_report: bool = False,
    ) -> Iterator[tuple[float, str]]:
        """Run every phase, filling ``result`` and yielding ``(fraction, message)`` progress.

        Args:
            result: Result to fill in
            file: Check only this file, relative to the project root unless absolute
                (links are still repaired against the whole tree)
            fix: Rewrite broken links that have a usable candidate
            dry_run: Plan fixes without writing anything (implies ``fix``)
            full_report: Write the markdown report of every broken link
        """
        result.mode = MODE_DRY_RUN if dry_run else MODE_FIX if fix else MODE_SCAN
        rewriter = LinkRewriter(dry_run=dry_run)

        try:
            files = self._scope(file, result)
            if files is None:
                return

            yield (0.1, f"Checking {len(files)} markdown file(s)...")
            for i, path in enumerate(files):
                yield (0.1 + 0.4 * i / max(len(files), 1), f"Checking {path.name}...")
                self._check_file(path, result)

            if result.broken:
                yield (0.5, f"Looking for targets of {len(result.broken)} broken link(s)...")
                yield from self._correct(result)

            if result.mode != MODE_SCAN and result.corrections:
                yield (0.8, "Planning fixes..." if dry_run else "Fixing links...")
                rewriter.apply(self._plan_fixes(rewriter, result))
        except KeyboardInterrupt:
            result.interrupted = True
            result.warnings.append("Interrupted by user; results cover completed work only")
            logger.warning("Link audit interrupted")
        finally:
            result.fixes = list(rewriter.applied)
            result.errors.extend(rewriter.errors)

        yield (0.9, "Categorizing broken links...")
        self._report(result, full_report)
        logger.info(
            f"Link audit ({result.mode}) of {self.project_root}: {result.files_checked} files, "
            f"{result.broken_count} broken, {result.fixed_count} fixed"
        )

    # Phases
    def _scope(self, file: str | Path | None, result: LinkAuditResult) -> list[Path] | None:
        if file is None:
            return self._tree()
        path = Path(file).expanduser()
        if not path.is_absolute():
            path = self.project_root / path
        if not path.is_file():
            result.errors.append(f"File not found: {file}")
            return None
        return [path]

    def _check_file(self, path: Path, result: LinkAuditResult) -> None:
        source = SourceFile.from_path(path, self.project_root)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            result.errors.append(f"Cannot read {source.relative_path}: {exc}")
            return

        result.files_checked += 1
        for occurrence in parse_markdown_links(source, text):
            result.links_checked += 1
            resolution = resolve_link(
                occurrence.target,
                source.directory,
                extension=self.config.extension,
                index_names=self.config.index_names,
            )
            if not resolution.exists:
                result.broken.append(BrokenLink(occurrence, resolution.path))
            elif resolution.is_bare_directory:
                result.notes.append(
                    f"{source.relative_path}:{occurrence.line_number}: "
                    f"directory link {occurrence.target} has no index document"
                )

    def _correct(self, result: LinkAuditResult) -> Iterator[tuple[float, str]]:
        engine = CorrectionEngine(self.index, self.config, self.oracle)
        statics: list[StaticResult] = [engine.static_candidates(broken) for broken in result.broken]

        if self.config.rename_lookup:
            unmatched = [broken.filename for broken, (_strategy, found) in zip(result.broken, statics) if not found]
            if unmatched:
                yield (0.6, f"Searching rename history for {len(set(unmatched))} file name(s)...")
                self.oracle.prefetch(unmatched, max_workers=self.config.rename_workers)

        for broken, static in zip(result.broken, statics):
            result.corrections.append(engine.correct(broken, static))

    def _plan_fixes(self, rewriter: LinkRewriter, result: LinkAuditResult) -> list[FixRecord]:
        planned = []
        for correction in result.corrections:
            if correction.chosen is None:
                continue
            if correction.is_ambiguous and not self.config.fix_ambiguous:
                continue
            planned.append(rewriter.build_fix(correction.broken, correction.chosen.location.absolute_path))
        return planned

    def _report(self, result: LinkAuditResult, full_report: bool) -> None:
        fixed = {(fix.source.relative_path, fix.offset) for fix in result.fixes}
        unfixed = [
            correction
            for correction in result.corrections
            if (correction.broken.source.relative_path, correction.broken.occurrence.offset) not in fixed
        ]
        result.categories = categorize_broken_links(unfixed, self.project_root)

        if result.mode == MODE_FIX:
            result.commit_suggestion = build_commit_suggestion(result.fixes)

        if full_report and result.broken:
            try:
                result.report_path = write_full_report(self.report_file, result.broken, result.fixes)
            except OSError as exc:
                result.errors.append(f"Cannot write report {self.report_file}: {exc}")
