"""Link resolver (UNO: single function)."""

import os
from collections.abc import Sequence
from pathlib import Path

from .LinkResolution import LinkResolution


def _has_index(directory: Path, index_names: Sequence[str]) -> bool:
    return any((directory / name).is_file() for name in index_names)


def resolve_link(
    target: str,
    source_dir: Path,
    extension: str = ".md",
    index_names: Sequence[str] = ("index.md", "README.md"),
) -> LinkResolution:
    """Resolve a relative link target against the directory of the linking file.

    Tries, in order: the path as written, the path with ``extension``
    appended, and the path as a directory holding an index document.
    Resolution is lexical; symlinks in the tree are not followed.

    Args:
        target: Raw link target, possibly with a ``#anchor``
        source_dir: Directory of the file containing the link
        extension: Markdown extension appended for extensionless links
        index_names: Index documents tried for directory links

    Returns:
        LinkResolution; ``path`` is the as-written location when nothing exists
    """
    path_part = target.split("#", 1)[0]
    resolved = Path(os.path.normpath(os.path.join(source_dir, path_part)))

    if resolved.exists():
        if resolved.is_dir():
            return LinkResolution(
                target=target,
                path=resolved,
                exists=True,
                is_directory=True,
                has_index=_has_index(resolved, index_names),
            )
        return LinkResolution(target=target, path=resolved, exists=True)

    if resolved.name:
        with_extension = resolved.with_name(resolved.name + extension)
        if with_extension.is_file():
            return LinkResolution(target=target, path=with_extension, exists=True)

    for name in index_names:
        as_index = resolved / name
        if as_index.is_file():
            return LinkResolution(target=target, path=as_index, exists=True, has_index=True)

    return LinkResolution(target=target, path=resolved, exists=False)
