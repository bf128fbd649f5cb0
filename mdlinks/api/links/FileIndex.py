"""Basename -> locations index over the scanned tree."""

from __future__ import annotations

__all__ = ["FileIndex"]

from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from .FileLocation import FileLocation
from .SourceFile import SourceFile


class FileIndex:
    """Read-only map from basename to every location sharing it.

    Built once per run. Lookups return tuples and iteration follows scan
    order, so tie-breaking by "first seen" is stable across runs.
    """

    def __init__(self, entries: dict[str, tuple[FileLocation, ...]]):
        self._entries = MappingProxyType(dict(entries))
        self._lower: dict[str, str] = {}
        for name in self._entries:
            self._lower.setdefault(name.lower(), name)

    @classmethod
    def build(
        cls,
        files: Iterable[Path],
        project_root: Path,
        exclude_paths: Iterable[Path] = (),
    ) -> FileIndex:
        """Index scanned files by basename.

        Args:
            files: Scanner output, in scan order
            project_root: Root used for relative paths
            exclude_paths: Files to leave out (e.g. the previous full report)
        """
        excluded = {Path(p) for p in exclude_paths}
        grouped: dict[str, list[FileLocation]] = {}
        for path in files:
            if path in excluded:
                continue
            source = SourceFile.from_path(path, project_root)
            grouped.setdefault(path.name, []).append(FileLocation(path, source.relative_path))
        return cls({name: tuple(locations) for name, locations in grouped.items()})

    def get(self, basename: str) -> tuple[FileLocation, ...]:
        return self._entries.get(basename, ())

    def get_case_insensitive(self, basename: str) -> tuple[FileLocation, ...]:
        """First indexed basename equal to ``basename`` ignoring case."""
        name = self._lower.get(basename.lower())
        return self._entries[name] if name is not None else ()

    def items(self) -> Iterator[tuple[str, tuple[FileLocation, ...]]]:
        yield from self._entries.items()

    def __contains__(self, basename: object) -> bool:
        return basename in self._entries

    def __len__(self) -> int:
        return sum(len(locations) for locations in self._entries.values())
