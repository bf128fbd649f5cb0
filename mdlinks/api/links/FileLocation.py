"""FileLocation model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileLocation:
    """One place a basename lives in the tree."""

    absolute_path: Path
    relative_path: str
