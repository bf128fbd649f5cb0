"""Strategy cascade that proposes repair targets for broken links."""

from __future__ import annotations

__all__ = ["CorrectionEngine"]

import posixpath
from collections.abc import Callable

from mdlinks.api.config.LinksConfig import LinksConfig
from mdlinks.utils.get_logger import get_logger

from ._constants import (
    STRATEGY_CASE_INSENSITIVE,
    STRATEGY_EXACT,
    STRATEGY_EXTENSION,
    STRATEGY_PATH_PATTERN,
    STRATEGY_RENAME,
    STRATEGY_STRUCTURAL,
    STRUCTURAL_MATCH_THRESHOLD,
    STRUCTURAL_MIN_PARTS,
    STRUCTURAL_PREFIX_PARTS,
)
from .BrokenLink import BrokenLink
from .Candidate import Candidate
from .choose_best_candidate import choose_best_candidate, link_segments
from .Correction import Correction
from .FileIndex import FileIndex
from .FileLocation import FileLocation
from .RenameOracle import NullRenameOracle, RenameOracle
from .structural_score import structural_score

logger = get_logger("links.correction")

StaticResult = tuple[str | None, tuple[FileLocation, ...]]


class CorrectionEngine:
    """Find where a broken link's target went.

    Strategies run in order and the first one producing candidates wins:
    exact basename, extension completion, case-insensitive basename,
    structural similarity, path pattern, then rename history.
    """

    def __init__(self, index: FileIndex, config: LinksConfig | None = None, oracle: RenameOracle | None = None):
        self.index = index
        self.config = config or LinksConfig()
        self.oracle = oracle or NullRenameOracle()
        self._strategies: list[tuple[str, Callable[[BrokenLink], tuple[FileLocation, ...]]]] = [
            (STRATEGY_EXACT, self._match_exact),
            (STRATEGY_EXTENSION, self._match_extension),
            (STRATEGY_CASE_INSENSITIVE, self._match_case_insensitive),
            (STRATEGY_STRUCTURAL, self._match_structural),
            (STRATEGY_PATH_PATTERN, self._match_path_pattern),
        ]

    def _has_extension(self, filename: str) -> bool:
        return bool(posixpath.splitext(filename)[1])

    def _stem(self, filename: str) -> str:
        return posixpath.splitext(filename)[0]

    # Strategies
    def _match_exact(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        return self.index.get(broken.filename)

    def _match_extension(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        if self._has_extension(broken.filename):
            return ()
        return self.index.get(broken.filename + self.config.extension)

    def _match_case_insensitive(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        found = self.index.get_case_insensitive(broken.filename)
        if not found and not self._has_extension(broken.filename):
            found = self.index.get_case_insensitive(broken.filename + self.config.extension)
        return found

    def _match_structural(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        parts = self._stem(broken.filename).split("-")
        if len(parts) < STRUCTURAL_MIN_PARTS:
            return ()

        best: tuple[FileLocation, ...] = ()
        best_score = 0.0
        for name, locations in self.index.items():
            score = structural_score(
                parts,
                self._stem(name).split("-"),
                id_prefixes=self.config.id_prefixes,
                prefix_parts=STRUCTURAL_PREFIX_PARTS,
            )
            if score > best_score:
                best_score = score
                best = locations

        if best_score > STRUCTURAL_MATCH_THRESHOLD:
            return best
        return ()

    def _match_path_pattern(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        ext = self.config.extension
        wanted = link_segments(broken.link_path)
        if not wanted:
            return ()

        matches: list[FileLocation] = []
        for _name, locations in self.index.items():
            for location in locations:
                segments = set(location.relative_path.split("/"))
                if all(s in segments or s + ext in segments for s in wanted):
                    matches.append(location)
        return tuple(matches)

    def _match_rename(self, broken: BrokenLink) -> tuple[FileLocation, ...]:
        destination = self.oracle.find_rename(broken.filename)
        if not destination:
            return ()
        return self.index.get(posixpath.basename(destination))

    # Public API
    def static_candidates(self, broken: BrokenLink) -> StaticResult:
        """Run the filesystem strategies only (no version-control lookup)."""
        for name, strategy in self._strategies:
            locations = strategy(broken)
            if locations:
                return name, locations
        return None, ()

    def correct(self, broken: BrokenLink, static: StaticResult | None = None) -> Correction:
        """Propose a repair target for ``broken``.

        Args:
            broken: The broken link
            static: Result of :meth:`static_candidates` when already computed

        Returns:
            Correction with every candidate and the chosen one (None if no candidate)
        """
        strategy, locations = static if static is not None else self.static_candidates(broken)
        if not locations and self.config.rename_lookup:
            locations = self._match_rename(broken)
            strategy = STRATEGY_RENAME if locations else None

        candidates = tuple(Candidate(location) for location in locations)
        if not candidates:
            return Correction(broken=broken, candidates=(), strategy=None, chosen=None)

        chosen = candidates[0] if len(candidates) == 1 else choose_best_candidate(broken, candidates)
        logger.debug(
            f"{broken.source.relative_path}: {broken.link_path} -> {chosen.location.relative_path} "
            f"({strategy}, {len(candidates)} candidate(s))"
        )
        return Correction(broken=broken, candidates=candidates, strategy=strategy, chosen=chosen)
