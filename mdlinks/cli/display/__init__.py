"""CLI display implementation."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]
