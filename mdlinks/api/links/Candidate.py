"""Candidate model (UNO: single model)."""

from dataclasses import dataclass, replace

from .FileLocation import FileLocation


@dataclass(frozen=True)
class Candidate:
    """A proposed repair target with its disambiguation score."""

    location: FileLocation
    score: float = 0.0

    def with_score(self, score: float) -> "Candidate":
        return replace(self, score=score)
