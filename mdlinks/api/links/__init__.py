"""Links API module."""

from .._output_schemas.links import LinksCheckOutput, LinksRefsOutput

__all__ = [
    "LinksCheckOutput",
    "LinksRefsOutput",
]
