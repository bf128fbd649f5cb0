"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format stored by the root callback.

    Commands invoked through a sub-app alone (no root callback) get yaml.

    Raises:
        RuntimeError: If no Typer context is active
    """
    import typer
    from typer._click.globals import get_current_context

    context: typer.Context | None = get_current_context(silent=True)
    if context is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current: typer.Context | None = context
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, summary_renderer: Callable[[dict], str] | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result, preceded by the human summary when a renderer is given (stderr)
    4. Output (stdout, JSON or YAML)

    The wrapped call exits the process with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from mdlinks.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(), summary_renderer)

    return wrapper  # type: ignore[return-value]
