"""Link check and repair configuration."""

from __future__ import annotations

__all__ = ["DEFAULT_EXCLUDE_DIRNAMES", "LinksConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXCLUDE_DIRNAMES = [
    "node_modules",
    ".git",
    "archive",
    "deprecated",
    "temp",
    "dist",
    "build",
    "public",
    ".next",
    "out",
    "hydra-config",
    "site",
    "__pycache__",
]


class LinksConfig(BaseModel):
    """Settings for scanning, resolving and repairing markdown links."""

    model_config = ConfigDict(extra="forbid")

    extension: str = Field(".md", description="Markdown file extension, with leading dot")
    index_names: list[str] = Field(
        default_factory=lambda: ["index.md", "README.md"],
        description="Index documents that let a directory link resolve, in lookup order",
    )
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Directory names pruned from the scan",
    )
    report_path: str = Field(
        ".mdlinks/reports/BROKEN_LINKS_REPORT.md",
        description="Full report location, relative to the project root",
    )
    rename_lookup: bool = Field(True, description="Query git history for renames when nothing else matches")
    git_timeout: float = Field(5.0, gt=0, description="Seconds before a git rename query counts as no match")
    rename_workers: int = Field(4, ge=1, description="Concurrent git rename queries")
    id_prefixes: list[str] = Field(
        default_factory=lambda: ["req"],
        description="Filename prefixes whose numeric token identifies the document",
    )
    fix_ambiguous: bool = Field(False, description="Apply the best-scored candidate when several match")

    @field_validator("extension")
    @classmethod
    def _dotted_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"extension must start with '.', got {v!r}")
        return v
