"""Markdown link integrity checker and repair tool."""

__version__ = "0.3.0"
