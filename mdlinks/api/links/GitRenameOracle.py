"""Git-backed rename history lookup."""

from __future__ import annotations

__all__ = ["GitRenameOracle"]

import subprocess
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from mdlinks.utils.get_logger import get_logger

from .RenameOracle import RenameOracle

logger = get_logger("links.git")


class GitRenameOracle(RenameOracle):
    """Find renamed files with ``git log --follow --diff-filter=R``.

    ``--follow`` takes a single pathspec, so only files inside a subdirectory
    (``*/name``) are followed.

    Every failure mode (git not installed, not a repository, timeout, no
    rename recorded) is answered with None. Results are cached per filename,
    so a name referenced from many files costs one git call.
    """

    def __init__(self, repo_root: Path, timeout: float = 5.0):
        self.repo_root = repo_root
        self.timeout = timeout
        self._cache: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def _run_git_log(self, filename: str) -> str:
        result = subprocess.run(
            [
                "git",
                "log",
                "--follow",
                "--name-status",
                "--diff-filter=R",
                "--pretty=format:",
                "--",
                f"*/{filename}",
            ],
            cwd=self.repo_root,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.strip() or f"git log exited with {result.returncode}")
        return result.stdout

    @staticmethod
    def parse_rename(output: str, filename: str) -> str | None:
        """Destination of the first (most recent) rename whose source is ``filename``.

        Lines look like ``R100<TAB>old/path/file.md<TAB>new/path/file.md``.
        """
        for line in output.splitlines():
            if not line.startswith("R"):
                continue
            parts = line.split("\t")
            if len(parts) < 3:
                parts = line.split()
            if len(parts) < 3:
                continue
            old_path, new_path = parts[1], parts[2]
            if old_path.rsplit("/", 1)[-1] == filename:
                return new_path
        return None

    def find_rename(self, filename: str) -> str | None:
        with self._lock:
            if filename in self._cache:
                return self._cache[filename]

        try:
            destination = self.parse_rename(self._run_git_log(filename), filename)
        except subprocess.TimeoutExpired:
            logger.debug(f"git rename lookup timed out for {filename!r}")
            destination = None
        except (OSError, RuntimeError) as exc:
            logger.debug(f"git rename lookup failed for {filename!r}: {exc}")
            destination = None

        with self._lock:
            self._cache[filename] = destination
        return destination

    def prefetch(self, filenames: Iterable[str], max_workers: int = 4) -> dict[str, str | None]:
        """Run lookups concurrently, bounded by ``max_workers`` git processes.

        An interrupt cancels every lookup that has not started and returns
        without waiting for the running ones.
        """
        unique = list(dict.fromkeys(filenames))
        results: dict[str, str | None] = {}
        if not unique:
            return results

        executor = ThreadPoolExecutor(max_workers=max(1, max_workers))
        try:
            futures = {executor.submit(self.find_rename, name): name for name in unique}
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown(wait=True)
        return results
