"""Top-level mdlinks configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .RefsConfig import RefsConfig


class MdlinksConfig(BaseModel):
    """Top-level configuration. Every section has defaults, so no file is required."""

    model_config = ConfigDict(extra="forbid")

    links: LinksConfig = Field(default_factory=LinksConfig)
    refs: RefsConfig = Field(default_factory=RefsConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mdlinks home directory based on MDLINKS_HOME or default to ~/.mdlinks."""
        home_env = os.environ.get("MDLINKS_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".mdlinks"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "MdlinksConfig":
        """Load and validate config from file, falling back to defaults when absent.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "links": self.links.model_dump(),
            "refs": self.refs.model_dump(),
            "log": self.log.model_dump(),
        }
