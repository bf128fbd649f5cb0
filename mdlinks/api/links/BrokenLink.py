"""BrokenLink model (UNO: single model)."""

import posixpath
from dataclasses import dataclass
from pathlib import Path

from .LinkOccurrence import LinkOccurrence
from .SourceFile import SourceFile


@dataclass(frozen=True)
class BrokenLink:
    """A link occurrence whose target does not exist after applying conventions."""

    occurrence: LinkOccurrence
    resolved_path: Path

    @property
    def source(self) -> SourceFile:
        return self.occurrence.source

    @property
    def link_path(self) -> str:
        """Raw link target, anchor included."""
        return self.occurrence.target

    @property
    def filename(self) -> str:
        """Basename of the link target without its anchor."""
        return posixpath.basename(self.occurrence.path_part.replace("\\", "/"))

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source.relative_path,
            "line": self.occurrence.line_number,
            "text": self.occurrence.text,
            "link": self.link_path,
            "target": str(self.resolved_path),
        }
