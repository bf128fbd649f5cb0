"""Utility helpers shared across mdlinks."""

from .get_logger import get_logger
from .normalize_path import normalize_path
from .now_iso import now_iso
from .render_template import render_template

__all__ = ["get_logger", "normalize_path", "now_iso", "render_template"]
