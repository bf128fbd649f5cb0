"""Candidate disambiguation (UNO: single function)."""

import os
from collections.abc import Sequence
from pathlib import Path

from ._constants import PROXIMITY_WEIGHT, SEGMENT_OVERLAP_BONUS
from .BrokenLink import BrokenLink
from .Candidate import Candidate


def path_distance(from_dir: Path, to_path: Path) -> int:
    """Number of ``..`` hops in the relative path from ``from_dir`` to ``to_path``."""
    try:
        rel = os.path.relpath(to_path, from_dir)
    except ValueError:
        # Different drives on Windows: no relative path exists
        return len(Path(from_dir).parts)
    return sum(1 for segment in Path(rel).parts if segment == "..")


def link_segments(link_path: str) -> list[str]:
    """Meaningful path segments of a link, without anchor, ``.`` or ``..``."""
    path_part = link_path.split("#", 1)[0].replace("\\", "/")
    return [s for s in path_part.split("/") if s and s not in (".", "..")]


def score_candidate(broken: BrokenLink, candidate: Candidate) -> float:
    distance = path_distance(broken.source.directory, candidate.location.absolute_path)
    score = PROXIMITY_WEIGHT / (distance + 1)

    candidate_segments = candidate.location.relative_path.split("/")
    for segment in link_segments(broken.link_path):
        if segment in candidate_segments:
            score += SEGMENT_OVERLAP_BONUS
    return score


def choose_best_candidate(broken: BrokenLink, candidates: Sequence[Candidate]) -> Candidate:
    """Pick the most plausible candidate for a broken link.

    Closer directory trees score higher, and every original link segment that
    reappears in the candidate path adds a bonus. Ties go to the earliest
    candidate, i.e. index (scan) order.

    Raises:
        ValueError: If ``candidates`` is empty
    """
    if not candidates:
        raise ValueError("choose_best_candidate needs at least one candidate")

    best: Candidate | None = None
    for candidate in candidates:
        scored = candidate.with_score(score_candidate(broken, candidate))
        if best is None or scored.score > best.score:
            best = scored
    assert best is not None
    return best
