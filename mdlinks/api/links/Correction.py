"""Correction model (UNO: single model)."""

from dataclasses import dataclass

from .BrokenLink import BrokenLink
from .Candidate import Candidate


@dataclass(frozen=True)
class Correction:
    """Outcome of the strategy cascade for one broken link."""

    broken: BrokenLink
    candidates: tuple[Candidate, ...]
    strategy: str | None
    chosen: Candidate | None

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1

    @property
    def has_candidates(self) -> bool:
        return bool(self.candidates)
