"""Output schemas for links commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinksCheckOutput(BaseOutputSchema):
    """Output schema for links check command.

    Output structure:
    - project_root: str - directory the scan was rooted at
    - mode: str - "scan", "fix" or "dry-run"
    - files_checked: int - markdown files read
    - links_checked: int - relative links classified
    - broken_count: int - broken links found
    - fixed_count: int - broken links fixed (or planned in dry-run)
    - unresolved_count: int - broken links left after the requested operation
    - fixes: list[dict] - one entry per FixRecord
    - categories: dict[str, list[dict]] - unfixed links by category
    - notes: list[str] - informational notes (directory links without index)
    - report_path: str - full report path, empty string if not written
    - commit_suggestion: dict - modified files and commit message, empty if none
    - interrupted: bool - run stopped by user interrupt
    """

    project_root: str = Field(..., description="Directory the scan was rooted at")
    mode: str = Field(..., description="scan, fix or dry-run")
    files_checked: int = Field(..., description="Markdown files read")
    links_checked: int = Field(..., description="Relative links classified")
    broken_count: int = Field(..., description="Broken links found")
    fixed_count: int = Field(..., description="Broken links fixed or planned")
    unresolved_count: int = Field(..., description="Broken links left unresolved")
    fixes: list[dict[str, Any]] = Field(..., description="Applied or planned fixes")
    categories: dict[str, list[dict[str, Any]]] = Field(..., description="Unfixed links by category")
    notes: list[str] = Field(..., description="Informational notes")
    report_path: str = Field(..., description="Full report path, empty if not written")
    commit_suggestion: dict[str, Any] = Field(..., description="Suggested git add/commit, empty if none")
    interrupted: bool = Field(..., description="Run stopped by user interrupt")


class LinksRefsOutput(BaseOutputSchema):
    """Output schema for links refs command."""

    project_root: str = Field(..., description="Directory the scan was rooted at")
    files_checked: int = Field(..., description="Markdown files inspected")
    references_checked: int = Field(..., description="Frontmatter references validated")
    issues: list[dict[str, Any]] = Field(..., description="Invalid references and direction violations")
    is_valid: bool = Field(..., description="True when no issue was found")


register_output_schema("links", "check", LinksCheckOutput)
register_output_schema("links", "refs", LinksRefsOutput)
