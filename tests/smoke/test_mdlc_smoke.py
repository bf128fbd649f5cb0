"""CLI Smoke Tests.

These tests run the installed `mdlc` command the way a user would.
"""

import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

pytestmark = pytest.mark.timeout(120)


def _find_mdlc_command() -> str:
    """Find the installed mdlc command.

    Prefers the one next to the running interpreter, otherwise searches PATH.
    """
    beside = Path(sys.executable).parent / "mdlc"
    if beside.exists():
        return str(beside)
    found = shutil.which("mdlc")
    if found:
        return found
    pytest.skip("mdlc command not found. Install the package: pip install -e .")


@pytest.fixture
def smoke_env(tmp_path):
    env = os.environ.copy()
    env["MDLINKS_HOME"] = str(tmp_path / "home")
    return env


def _run(args, env, cwd):
    return subprocess.run(
        [_find_mdlc_command(), *args],
        env=env,
        cwd=cwd,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_version(smoke_env, tmp_path):
    result = _run(["--version"], smoke_env, tmp_path)
    assert result.returncode == 0
    assert result.stdout.startswith("mdlc ")


def test_check_then_fix(smoke_env, make_tree):
    root = make_tree(
        {
            "README.md": "See [intro](docs/intro.md) and [setup](setup.md).\n",
            "docs/intro.md": "# Intro\n",
            "docs/guides/setup.md": "# Setup\n",
        }
    )

    scan = _run(["-d", "json", "links", "check", "--no-renames"], smoke_env, root)
    assert scan.returncode == 1
    output = json.loads(scan.stdout)
    assert output["broken_count"] == 1
    assert output["categories"]["auto_fixable"][0]["suggestion"] == "docs/guides/setup.md"
    assert "LINK VALIDATION REPORT" in scan.stderr

    fix = _run(["links", "check", "--fix", "--no-renames"], smoke_env, root)
    assert fix.returncode == 0
    assert yaml.safe_load(fix.stdout)["fixed_count"] == 1
    assert "[setup](./docs/guides/setup.md)" in (root / "README.md").read_text()

    again = _run(["links", "check", "--no-renames"], smoke_env, root)
    assert again.returncode == 0


def test_full_report_written(smoke_env, make_tree):
    root = make_tree({"a.md": "[gone](gone.md)\n"})
    result = _run(["links", "check", "--full-report", "--no-renames"], smoke_env, root)
    assert result.returncode == 1
    report = root / ".mdlinks" / "reports" / "BROKEN_LINKS_REPORT.md"
    assert report.is_file()
    assert "`gone.md`" in report.read_text(encoding="utf-8")
