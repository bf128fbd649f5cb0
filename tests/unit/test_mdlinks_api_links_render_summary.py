"""Unit tests for the console summary and the full report."""

from pathlib import Path

from mdlinks.api.links.BrokenLink import BrokenLink
from mdlinks.api.links.build_commit_suggestion import build_commit_suggestion
from mdlinks.api.links.FixRecord import FixRecord
from mdlinks.api.links.LinkOccurrence import LinkOccurrence
from mdlinks.api.links.render_summary import render_summary
from mdlinks.api.links.SourceFile import SourceFile
from mdlinks.api.links.write_full_report import write_full_report


def _output(**overrides) -> dict:
    output = {
        "mode": "scan",
        "files_checked": 3,
        "broken_count": 0,
        "fixed_count": 0,
        "unresolved_count": 0,
        "report_path": "",
        "commit_suggestion": {},
        "categories": {name: [] for name in ("deprecated", "archived", "ambiguous", "auto_fixable", "missing")},
    }
    output.update(overrides)
    return output


def _entry(source: str, link: str, candidates=(), suggestion=None) -> dict:
    return {
        "source": source,
        "line": 1,
        "text": "t",
        "link": link,
        "target": f"/p/{link}",
        "candidates": list(candidates),
        "suggestion": suggestion,
        "strategy": None,
    }


def test_clean_summary():
    text = render_summary(_output())
    assert "No broken links found" in text
    assert "Manual Review Required" not in text


def test_counts_and_auto_fix_hint():
    categories = _output()["categories"]
    categories["auto_fixable"] = [_entry("docs/a.md", "guide.md", ["docs/guides/guide.md"], "docs/guides/guide.md")]
    text = render_summary(_output(broken_count=1, unresolved_count=1, categories=categories))
    assert "Found 1 broken link in 3 files." in text
    assert "docs/a.md (1 link)" in text
    assert "mdlc links check --fix --dry-run" in text
    assert "Run with --full-report" in text


def test_missing_preview_limits():
    categories = _output()["categories"]
    categories["missing"] = [_entry(f"docs/s{i}.md", "gone.md") for i in range(5)] + [
        _entry("docs/a.md", f"gone-{i}.md") for i in range(20)
    ]
    text = render_summary(_output(broken_count=25, unresolved_count=25, categories=categories))
    assert "Links to MISSING files (25)" in text
    assert "... and 2 more files" in text
    assert "... and 6 more missing files" in text
    assert "Manual Review Required" in text


def test_ambiguous_preview_limits():
    candidates = [f"dir{i}/setup.md" for i in range(6)]
    categories = _output()["categories"]
    categories["ambiguous"] = [_entry("docs/a.md", "setup.md", candidates, "dir0/setup.md")]
    text = render_summary(_output(broken_count=1, unresolved_count=1, categories=categories))
    assert '"setup.md" (6 copies found)' in text
    assert "+ dir3/setup.md" in text
    assert "+ dir4/setup.md" not in text
    assert "... and 2 more" in text
    assert "best match: dir0/setup.md" in text


def test_fix_mode_mentions_commit_suggestion():
    source = SourceFile(Path("/p/docs/a.md"), "docs/a.md")
    fix = FixRecord(source, "g", "guide.md", "./guides/guide.md", None, 0, "[g](guide.md)")
    text = render_summary(
        _output(mode="fix", broken_count=1, fixed_count=1, commit_suggestion=build_commit_suggestion([fix]))
    )
    assert "Fixed 1, 0 left for review." in text
    assert "git add docs/a.md" in text


def test_commit_suggestion_message():
    source = SourceFile(Path("/p/docs/a.md"), "docs/a.md")
    fixes = [
        FixRecord(source, "g", "guide.md", "./guides/guide.md", None, 0, "[g](guide.md)"),
        FixRecord(source, "h", "h.md", "./x/h.md", None, 20, "[h](h.md)"),
    ]
    suggestion = build_commit_suggestion(fixes)
    assert suggestion["files"] == ["docs/a.md"]
    assert suggestion["message"].startswith("docs: fix 2 broken markdown links across 1 file\n")
    assert build_commit_suggestion([]) == {}


def test_full_report(tmp_path):
    root = tmp_path
    a = SourceFile(root / "docs" / "a.md", "docs/a.md")
    b = SourceFile(root / "b.md", "b.md")
    broken = [
        BrokenLink(LinkOccurrence(b, "x", "x.md", 0, "[x](x.md)", 1), root / "x.md"),
        BrokenLink(LinkOccurrence(a, "g", "guide.md#s", 5, "[g](guide.md#s)", 1), root / "docs" / "guide.md"),
    ]
    fix = FixRecord(a, "g", "guide.md#s", "./guides/guide.md#s", "s", 5, "[g](guide.md#s)")
    report_path = root / ".mdlinks" / "reports" / "BROKEN_LINKS_REPORT.md"

    written = write_full_report(report_path, broken, [fix])

    assert written == report_path
    text = report_path.read_text(encoding="utf-8")
    assert text.startswith("# Broken Links Report\n")
    assert "**Total**: 2 broken links (1 fixed)" in text
    assert text.index("## [b.md](../../b.md)") < text.index("## [docs/a.md](../../docs/a.md)")
    assert "- `x.md`\n" in text
    assert "- `guide.md#s` -> `./guides/guide.md#s` (fixed)" in text
