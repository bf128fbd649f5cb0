"""SourceFile model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """A markdown file discovered by the scanner."""

    absolute_path: Path
    relative_path: str

    @classmethod
    def from_path(cls, path: Path, project_root: Path) -> "SourceFile":
        try:
            relative = path.relative_to(project_root).as_posix()
        except ValueError:
            relative = path.as_posix()
        return cls(absolute_path=path, relative_path=relative)

    @property
    def directory(self) -> Path:
        return self.absolute_path.parent
