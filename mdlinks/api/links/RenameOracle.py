"""Rename history lookup interface."""

from __future__ import annotations

__all__ = ["NullRenameOracle", "RenameOracle"]

from abc import ABC, abstractmethod
from collections.abc import Iterable


class RenameOracle(ABC):
    """Answers "where did a file with this name move to?" from history."""

    @abstractmethod
    def find_rename(self, filename: str) -> str | None:
        """Destination path of the most recent rename of ``filename``, or None.

        Implementations never raise for lookup failures; they return None.
        """

    def prefetch(self, filenames: Iterable[str], max_workers: int = 1) -> dict[str, str | None]:  # noqa: ARG002
        """Look up several filenames. The base implementation is sequential."""
        return {name: self.find_rename(name) for name in dict.fromkeys(filenames)}


class NullRenameOracle(RenameOracle):
    """Oracle used when rename lookup is disabled."""

    def find_rename(self, filename: str) -> str | None:  # noqa: ARG002
        return None
