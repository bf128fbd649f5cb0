"""Configuration models."""

from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .MdlinksConfig import MdlinksConfig
from .RefsConfig import RefsConfig

__all__ = ["LinksConfig", "LogConfig", "MdlinksConfig", "RefsConfig"]
