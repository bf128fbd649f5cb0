"""Full broken-link report writer (UNO: single function)."""

import os
from collections.abc import Iterable
from pathlib import Path

from mdlinks.utils.now_iso import now_iso
from mdlinks.utils.render_template import render_template

from .BrokenLink import BrokenLink
from .FixRecord import FixRecord

REPORT_TEMPLATE = """\
# Broken Links Report

**Generated**: {{ generated }}

**Total**: {{ total }} broken link{{ 's' if total != 1 else '' }}{% if fixed %} ({{ fixed }} fixed){% endif %}


{% for file in files %}
## [{{ file.name }}]({{ file.href }})

{% for link in file.links %}
- `{{ link.target }}`{% if link.fixed_to %} -> `{{ link.fixed_to }}` (fixed){% endif %}

{% endfor %}

{% endfor %}
"""


def write_full_report(
    report_path: Path,
    broken: Iterable[BrokenLink],
    fixes: Iterable[FixRecord] = (),
) -> Path:
    """Write every broken link, grouped by source file, as a markdown report.

    Args:
        report_path: Absolute path of the report file (parents are created)
        broken: All broken links found by the run
        fixes: Fixes applied (or planned) by the run; their links are annotated

    Returns:
        The path written
    """
    fixed_to = {(fix.source.relative_path, fix.offset): fix.new_target for fix in fixes}
    report_dir = report_path.parent

    grouped: dict[str, list[BrokenLink]] = {}
    for link in broken:
        grouped.setdefault(link.source.relative_path, []).append(link)

    files = []
    for relative in sorted(grouped):
        links = sorted(grouped[relative], key=lambda b: b.occurrence.offset)
        source = links[0].source
        files.append(
            {
                "name": relative,
                "href": os.path.relpath(source.absolute_path, report_dir).replace(os.sep, "/"),
                "links": [
                    {
                        "target": link.link_path,
                        "fixed_to": fixed_to.get((relative, link.occurrence.offset)),
                    }
                    for link in links
                ],
            }
        )

    content = render_template(
        REPORT_TEMPLATE,
        {
            "generated": now_iso(),
            "total": sum(len(f["links"]) for f in files),
            "fixed": sum(1 for f in files for link in f["links"] if link["fixed_to"]),
            "files": files,
        },
    )
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(content, encoding="utf-8")
    return report_path
