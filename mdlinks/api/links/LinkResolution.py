"""LinkResolution model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkResolution:
    """Where a link target lands on disk."""

    target: str
    path: Path
    exists: bool
    is_directory: bool = False
    has_index: bool = False

    @property
    def is_bare_directory(self) -> bool:
        """Existing directory without an index document (valid, but worth a note)."""
        return self.exists and self.is_directory and not self.has_index
