"""Rewrite broken links in their source files."""

from __future__ import annotations

__all__ = ["LinkRewriter", "relative_link"]

import os
from collections.abc import Iterable
from pathlib import Path

from mdlinks.utils.get_logger import get_logger

from .BrokenLink import BrokenLink
from .FixRecord import FixRecord
from .SourceFile import SourceFile

logger = get_logger("links.rewriter")


def relative_link(source_dir: Path, target: Path, anchor: str | None = None) -> str:
    """Markdown-ready relative link from ``source_dir`` to ``target``.

    Always forward slashes, always starting with ``./`` or ``../``.
    """
    rel = os.path.relpath(target, source_dir).replace(os.sep, "/")
    if not rel.startswith("../") and not rel.startswith("./"):
        rel = f"./{rel}"
    if anchor:
        rel = f"{rel}#{anchor}"
    return rel


class LinkRewriter:
    """Turn corrections into FixRecords and apply them, one write per file."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.errors: list[str] = []
        self.applied: list[FixRecord] = []

    def build_fix(self, broken: BrokenLink, target: Path) -> FixRecord:
        occurrence = broken.occurrence
        return FixRecord(
            source=occurrence.source,
            link_text=occurrence.text,
            old_target=occurrence.target,
            new_target=relative_link(occurrence.source.directory, target, occurrence.anchor),
            anchor=occurrence.anchor,
            offset=occurrence.offset,
            old_markdown=occurrence.full_match,
        )

    @staticmethod
    def merge(text: str, fixes: Iterable[FixRecord]) -> tuple[str, list[FixRecord]]:
        """Apply fixes to ``text`` back to front so earlier offsets stay valid.

        A fix whose recorded substring is no longer at its offset is skipped.

        Returns:
            The new text and the fixes that were applied
        """
        applied: list[FixRecord] = []
        for fix in sorted(fixes, key=lambda f: f.offset, reverse=True):
            end = fix.offset + len(fix.old_markdown)
            if text[fix.offset : end] != fix.old_markdown:
                logger.warning(f"{fix.source.relative_path}: link moved since scan, skipping {fix.old_target}")
                continue
            text = text[: fix.offset] + fix.new_markdown + text[end:]
            applied.append(fix)
        applied.reverse()
        return text, applied

    def apply(self, fixes: Iterable[FixRecord]) -> list[FixRecord]:
        """Apply fixes grouped by source file.

        Each source file is read once and written at most once. In dry-run
        mode nothing is written and every fix is returned unchanged. When a
        file cannot be read or written, its fixes are dropped and recorded in
        ``errors``. Everything that took effect is also accumulated in
        ``applied``, which survives an interrupted call.

        Returns:
            The fixes that took effect (or would, in dry-run mode), grouped by source file
        """
        by_source: dict[SourceFile, list[FixRecord]] = {}
        for fix in fixes:
            by_source.setdefault(fix.source, []).append(fix)

        if self.dry_run:
            planned = [fix for group in by_source.values() for fix in group]
            self.applied.extend(planned)
            return planned

        done: list[FixRecord] = []
        for source, group in by_source.items():
            path = source.absolute_path
            try:
                original = path.read_text(encoding="utf-8")
                updated, applied = self.merge(original, group)
                if applied:
                    path.write_text(updated, encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                message = f"Failed to rewrite {source.relative_path}: {exc}"
                logger.warning(message)
                self.errors.append(message)
                continue
            for fix in applied:
                logger.info(f"Fixed {source.relative_path}: {fix.old_target} -> {fix.new_target}")
            done.extend(applied)
            self.applied.extend(applied)
        return done
