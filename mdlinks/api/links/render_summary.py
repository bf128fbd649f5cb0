"""Human-readable categorized summary of a link check."""

import posixpath
from collections import Counter
from typing import Any

from mdlinks.utils.render_template import render_template

from ._constants import (
    MAX_AMBIGUOUS_CANDIDATES,
    MAX_AMBIGUOUS_REFERRERS,
    MAX_AMBIGUOUS_TARGETS,
    MAX_AUTO_FIXABLE_FILES,
    MAX_MISSING_REFERRERS,
    MAX_MISSING_TARGETS,
)

_RULE = "=" * 70

SUMMARY_TEMPLATE = """\
LINK VALIDATION REPORT
{{ rule }}
{% if broken_count == 0 %}
No broken links found. All links are valid.
{% else %}
Found {{ broken_count }} broken link{{ 's' if broken_count != 1 else '' }} in {{ files_checked }} file{{ 's' if files_checked != 1 else '' }}.
{% if mode != 'scan' %}
{{ 'Would fix' if mode == 'dry-run' else 'Fixed' }} {{ fixed_count }}, {{ unresolved_count }} left for review.
{% endif %}
{% if not report_path %}
Run with --full-report to write the complete list.
{% else %}
Full report: {{ report_path }}
{% endif %}
{% if ambiguous.count %}

Links with MULTIPLE CANDIDATES ({{ ambiguous.count }}):
   These files exist in multiple locations.
{% for target in ambiguous.targets %}
   "{{ target.name }}" ({{ target.candidates | length }} copies found):
{% for path in target.candidates[:max_candidates] %}
      + {{ path }}
{% endfor %}
{% if target.candidates | length > max_candidates %}
      ... and {{ target.candidates | length - max_candidates }} more
{% endif %}
{% if target.suggestion %}
      best match: {{ target.suggestion }}
{% endif %}
      Referenced by:
{% for source in target.sources[:max_ambiguous_referrers] %}
      -> {{ source }}
{% endfor %}
{% if target.sources | length > max_ambiguous_referrers %}
      ... and {{ target.sources | length - max_ambiguous_referrers }} more files
{% endif %}
{% endfor %}
{% if ambiguous.overflow %}
   ... and {{ ambiguous.overflow }} more ambiguous files
{% endif %}
   Recommended Action:
      1. Consolidate duplicates - keep one canonical version
      2. Update references to use the canonical path
      3. Re-run with --fix --fix-ambiguous to apply the best matches
{% endif %}
{% if deprecated.count %}

Links to DEPRECATED files ({{ deprecated.count }}):
   These files are deprecated and should not be referenced.
{% for file, count in deprecated.files %}
   {{ file }} ({{ count }} link{{ 's' if count != 1 else '' }})
{% endfor %}
   Recommended Action:
      1. Review each file and remove or update deprecated references
      2. Add deprecation notices if keeping the links
{% endif %}
{% if archived.count %}

Links to ARCHIVED files ({{ archived.count }}):
   These files are archived and probably outdated.
{% for file, count in archived.files %}
   {{ file }} ({{ count }} link{{ 's' if count != 1 else '' }})
{% endfor %}
   Recommended Action:
      1. Review and remove references to archived content
      2. Point to replacement documentation if available
{% endif %}
{% if missing.count %}

Links to MISSING files ({{ missing.count }}):
   These files don't exist anywhere in the project.
{% for target in missing.targets %}
   "{{ target.name }}"
{% for source in target.sources[:max_missing_referrers] %}
      -> {{ source }}
{% endfor %}
{% if target.sources | length > max_missing_referrers %}
      ... and {{ target.sources | length - max_missing_referrers }} more files
{% endif %}
{% endfor %}
{% if missing.overflow %}
   ... and {{ missing.overflow }} more missing files
{% endif %}
   Recommended Action:
      1. Remove stale references
      2. Create missing files if they're actually needed
      3. Update links to point to correct locations
{% endif %}
{% if auto_fixable.count %}

Links that CAN be auto-fixed ({{ auto_fixable.count }}):
   These files exist but have wrong relative paths.
{% for file, count in auto_fixable.files[:max_auto_fixable] %}
   {{ file }} ({{ count }} link{{ 's' if count != 1 else '' }})
{% endfor %}
{% if auto_fixable.files | length > max_auto_fixable %}
   ... and {{ auto_fixable.files | length - max_auto_fixable }} more files
{% endif %}
   Command to auto-fix these:
      mdlc links check --fix
   Preview changes first:
      mdlc links check --fix --dry-run
{% endif %}
{% if commit_suggestion %}

Git Commit Suggestion:
   Fixed broken links in {{ commit_suggestion.files | length }} file{{ 's' if commit_suggestion.files | length != 1 else '' }}:
{% for command in commit_suggestion.commands %}
   {{ command }}
{% endfor %}
{% endif %}
{{ rule }}
{% if deprecated.count or archived.count or missing.count or ambiguous.count %}
Manual Review Required:
   Links to deprecated/archived/missing/ambiguous files need human judgment.
   Review each file and decide whether to:
   - Remove the broken link
   - Add a deprecation/archive notice
   - Point to replacement content
{% endif %}
{% endif %}
"""


def _target_name(entry: dict[str, Any]) -> str:
    return posixpath.basename(str(entry["link"]).split("#", 1)[0])


def _by_target(entries: list[dict[str, Any]], limit: int) -> dict[str, Any]:
    targets: dict[str, dict[str, Any]] = {}
    for entry in entries:
        name = _target_name(entry)
        group = targets.setdefault(name, {"name": name, "sources": [], "candidates": [], "suggestion": None})
        if entry["source"] not in group["sources"]:
            group["sources"].append(entry["source"])
        for path in entry.get("candidates") or []:
            if path not in group["candidates"]:
                group["candidates"].append(path)
        group["suggestion"] = group["suggestion"] or entry.get("suggestion")
    groups = list(targets.values())
    return {"count": len(entries), "targets": groups[:limit], "overflow": max(0, len(groups) - limit)}


def _by_file(entries: list[dict[str, Any]]) -> dict[str, Any]:
    counts = Counter(entry["source"] for entry in entries)
    return {"count": len(entries), "files": list(counts.items())}


def render_summary(output: dict[str, Any]) -> str:
    """Render the console summary for a ``links check`` output dict."""
    categories = output["categories"]
    context = {
        "rule": _RULE,
        "mode": output["mode"],
        "files_checked": output["files_checked"],
        "broken_count": output["broken_count"],
        "fixed_count": output["fixed_count"],
        "unresolved_count": output["unresolved_count"],
        "report_path": output["report_path"],
        "commit_suggestion": output["commit_suggestion"],
        "ambiguous": _by_target(categories.get("ambiguous", []), MAX_AMBIGUOUS_TARGETS),
        "missing": _by_target(categories.get("missing", []), MAX_MISSING_TARGETS),
        "deprecated": _by_file(categories.get("deprecated", [])),
        "archived": _by_file(categories.get("archived", [])),
        "auto_fixable": _by_file(categories.get("auto_fixable", [])),
        "max_candidates": MAX_AMBIGUOUS_CANDIDATES,
        "max_ambiguous_referrers": MAX_AMBIGUOUS_REFERRERS,
        "max_missing_referrers": MAX_MISSING_REFERRERS,
        "max_auto_fixable": MAX_AUTO_FIXABLE_FILES,
    }
    return render_template(SUMMARY_TEMPLATE, context)
