"""LinkAuditResult model (UNO: single model)."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ._constants import CATEGORIES
from .BrokenLink import BrokenLink
from .Correction import Correction
from .FixRecord import FixRecord

MODE_SCAN = "scan"
MODE_FIX = "fix"
MODE_DRY_RUN = "dry-run"


@dataclass
class LinkAuditResult:
    """Everything one audit run found, fixed and reported.

    Filled in phase by phase; an interrupted run keeps whatever the completed
    phases produced.
    """

    project_root: Path
    mode: str = MODE_SCAN
    files_checked: int = 0
    links_checked: int = 0
    broken: list[BrokenLink] = field(default_factory=list)
    corrections: list[Correction] = field(default_factory=list)
    fixes: list[FixRecord] = field(default_factory=list)
    categories: dict[str, list[dict]] = field(default_factory=lambda: {name: [] for name in CATEGORIES})
    notes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    report_path: Path | None = None
    commit_suggestion: dict[str, Any] = field(default_factory=dict)
    interrupted: bool = False

    @property
    def broken_count(self) -> int:
        return len(self.broken)

    @property
    def fixed_count(self) -> int:
        return len(self.fixes)

    @property
    def unresolved_count(self) -> int:
        if self.mode == MODE_SCAN:
            return self.broken_count
        return self.broken_count - self.fixed_count

    @property
    def success(self) -> bool:
        return self.unresolved_count == 0 and not self.errors and not self.interrupted

    def to_output(self) -> dict[str, Any]:
        """Structured output matching the ``links check`` schema."""
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "project_root": str(self.project_root),
            "mode": self.mode,
            "files_checked": self.files_checked,
            "links_checked": self.links_checked,
            "broken_count": self.broken_count,
            "fixed_count": self.fixed_count,
            "unresolved_count": self.unresolved_count,
            "fixes": [fix.to_dict() for fix in self.fixes],
            "categories": self.categories,
            "notes": list(self.notes),
            "report_path": str(self.report_path) if self.report_path else "",
            "commit_suggestion": self.commit_suggestion,
            "interrupted": self.interrupted,
        }
