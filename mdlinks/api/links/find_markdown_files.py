"""Markdown scanner (UNO: single function)."""

import os
from collections.abc import Iterable
from pathlib import Path


def find_markdown_files(root: Path, exclude_dirnames: Iterable[str] = (), extension: str = ".md") -> list[Path]:
    """Recursively collect markdown files under ``root`` in a stable order.

    Excluded directory names are pruned before descent, so their subtrees are
    never listed. Unreadable directories are skipped and the walk continues.
    A missing root yields an empty list.

    Args:
        root: Directory to scan
        exclude_dirnames: Directory basenames never descended into
        extension: Markdown file extension, with leading dot

    Returns:
        Absolute paths, files of a directory (by name) before its subdirectories
    """
    if not root.is_dir():
        return []

    excluded = set(exclude_dirnames)
    files: list[Path] = []
    # onerror=None: os.walk silently skips directories it cannot list
    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=None):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        base = Path(dirpath)
        files.extend(base / name for name in sorted(filenames) if name.endswith(extension))
    return files
