"""Unit tests for git rename history lookups."""

import subprocess
import threading

import pytest

from mdlinks.api.links.GitRenameOracle import GitRenameOracle
from mdlinks.api.links.RenameOracle import NullRenameOracle

LOG_OUTPUT = (
    "\n"
    "R100\tdocs/old/guide.md\tdocs/guides/guide.md\n"
    "\n"
    "R087\tdocs/older/guide.md\tdocs/old/guide.md\n"
)


def _completed(stdout: str = "", returncode: int = 0, stderr: str = ""):
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_parse_rename_takes_most_recent():
    assert GitRenameOracle.parse_rename(LOG_OUTPUT, "guide.md") == "docs/guides/guide.md"


def test_parse_rename_requires_matching_source_name():
    output = "R100\tdocs/my-guide.md\tdocs/guides/my-guide.md\n"
    assert GitRenameOracle.parse_rename(output, "guide.md") is None


def test_parse_rename_ignores_other_status_lines():
    output = "M\tdocs/a.md\nA\tdocs/b.md\n"
    assert GitRenameOracle.parse_rename(output, "a.md") is None


def test_find_rename_runs_git_in_repo_root(tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return _completed(LOG_OUTPUT)

    monkeypatch.setattr(subprocess, "run", fake_run)
    oracle = GitRenameOracle(tmp_path, timeout=2.5)
    assert oracle.find_rename("guide.md") == "docs/guides/guide.md"

    cmd, kwargs = calls[0]
    assert cmd[:2] == ["git", "log"]
    assert "--diff-filter=R" in cmd
    assert cmd[-1] == "*/guide.md"
    assert kwargs["cwd"] == tmp_path
    assert kwargs["timeout"] == 2.5


def test_find_rename_is_cached(tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return _completed(LOG_OUTPUT)

    monkeypatch.setattr(subprocess, "run", fake_run)
    oracle = GitRenameOracle(tmp_path)
    oracle.find_rename("guide.md")
    oracle.find_rename("guide.md")
    assert len(calls) == 1


@pytest.mark.parametrize(
    "failure",
    [
        subprocess.TimeoutExpired(cmd="git", timeout=5),
        FileNotFoundError("git"),
    ],
)
def test_failures_mean_no_match(tmp_path, monkeypatch, failure):
    def fake_run(cmd, **kwargs):
        raise failure

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert GitRenameOracle(tmp_path).find_rename("guide.md") is None


def test_nonzero_exit_means_no_match(tmp_path, monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", lambda cmd, **kwargs: _completed(returncode=128, stderr="fatal: not a git repository")
    )
    assert GitRenameOracle(tmp_path).find_rename("guide.md") is None


def test_prefetch_runs_each_name_once_concurrently(tmp_path, monkeypatch):
    seen = []
    lock = threading.Lock()

    def fake_run(cmd, **kwargs):
        name = cmd[-1].split("/", 1)[1]
        with lock:
            seen.append(name)
        return _completed(f"R100\told/{name}\tnew/{name}\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    oracle = GitRenameOracle(tmp_path)
    results = oracle.prefetch(["a.md", "b.md", "a.md", "c.md"], max_workers=3)

    assert results == {"a.md": "new/a.md", "b.md": "new/b.md", "c.md": "new/c.md"}
    assert sorted(seen) == ["a.md", "b.md", "c.md"]
    assert oracle.find_rename("b.md") == "new/b.md"
    assert len(seen) == 3


def test_prefetch_empty(tmp_path):
    assert GitRenameOracle(tmp_path).prefetch([]) == {}


def test_null_oracle():
    oracle = NullRenameOracle()
    assert oracle.find_rename("guide.md") is None
    assert oracle.prefetch(["a.md", "a.md"]) == {"a.md": None}


def test_prefetch_interrupt_cancels_queued_lookups(tmp_path, monkeypatch):
    started = []
    release = threading.Event()

    def fake_run(cmd, **kwargs):
        name = cmd[-1].split("/", 1)[1]
        started.append(name)
        if name == "a.md":
            raise KeyboardInterrupt
        release.wait(timeout=5)
        return _completed()

    monkeypatch.setattr(subprocess, "run", fake_run)
    names = ["a.md"] + [f"n{i}.md" for i in range(20)]
    with pytest.raises(KeyboardInterrupt):
        GitRenameOracle(tmp_path).prefetch(names, max_workers=1)
    started_at_interrupt = list(started)
    release.set()

    # At most the lookup already picked up by the worker ran
    assert started_at_interrupt[0] == "a.md"
    assert len(started_at_interrupt) <= 2
