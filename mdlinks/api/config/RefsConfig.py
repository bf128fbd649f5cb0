"""Frontmatter reference check configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RefsConfig(BaseModel):
    """Which frontmatter fields hold references and how documents are layered."""

    model_config = ConfigDict(extra="forbid")

    reference_fields: list[str] = Field(
        default_factory=lambda: [
            "dependencies",
            "compliance_requirements",
            "architecture",
            "related",
            "implements_requirements",
            "created_from_template",
        ],
        description="Frontmatter keys whose values are path@version references",
    )
    dependency_fields: list[str] = Field(
        default_factory=lambda: ["dependencies", "compliance_requirements"],
        description="Reference fields subject to the dependency direction rule",
    )
    layers: dict[str, int] = Field(
        default_factory=lambda: {
            "compliance": 0,
            "requirements": 1,
            "architecture": 2,
            "guides": 3,
            "docs": 3,
        },
        description="Path segment -> layer level; lower levels must not depend on higher ones",
    )
