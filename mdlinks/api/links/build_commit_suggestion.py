"""Git commit suggestion for applied fixes (UNO: single function)."""

import shlex
from collections.abc import Sequence

from .FixRecord import FixRecord


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def build_commit_suggestion(fixes: Sequence[FixRecord]) -> dict[str, object]:
    """Describe how to commit the files a fix run modified. Nothing is executed.

    Returns:
        ``{"files", "commands", "message"}``, or an empty dict when nothing was fixed
    """
    if not fixes:
        return {}

    files = sorted({fix.source.relative_path for fix in fixes})
    message = (
        f"docs: fix {_plural(len(fixes), 'broken markdown link')} across {_plural(len(files), 'file')}\n"
        "\n"
        "- Validated and fixed broken relative links\n"
        "- Updated paths to reflect current file locations"
    )
    commands = [f"git add {shlex.quote(path)}" for path in files]
    commands.append(f"git commit -m {shlex.quote(message)}")
    return {"files": files, "commands": commands, "message": message}
