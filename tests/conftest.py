"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    # Module-level loggers configure file logging on import, before any fixture runs
    os.environ["MDLINKS_HOME"] = tempfile.mkdtemp(prefix="mdlinks-test-")
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "smoke: end-to-end tests through the CLI entry point")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def mdlinks_home(tmp_path_factory, monkeypatch) -> Path:
    """Point MDLINKS_HOME at an empty directory so no user config leaks into tests."""
    home = tmp_path_factory.mktemp("mdlinks_home")
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    return home


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write ``{relative_path: content}`` under a fresh project root and return the root."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes]]:
    """Map every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}

    return _snapshot


@pytest.fixture
def run_cmd() -> Callable:
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
