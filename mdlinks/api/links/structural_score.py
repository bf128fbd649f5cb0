"""Structural filename similarity (UNO: single function)."""

from collections.abc import Sequence


def _numeric_token(parts: Sequence[str]) -> int | None:
    for i, part in enumerate(parts):
        if part.isdigit():
            return i
    return None


def _leading_matches(source: Sequence[str], candidate: Sequence[str]) -> int:
    count = 0
    for mine, theirs in zip(source, candidate):
        if mine != theirs:
            break
        count += 1
    return count


def structural_score(
    target_parts: Sequence[str],
    candidate_parts: Sequence[str],
    id_prefixes: Sequence[str] = ("req",),
    prefix_parts: int = 3,
) -> float:
    """Score how well an abbreviated hyphenated name matches a full one.

    Identifier-prefixed names (``req-020-medical-csv``) must share the numeric
    token; the score is the fraction of the parts after it that match
    consecutively. Other names must share the first ``prefix_parts`` parts;
    the score is the fraction of leading parts that match.

    Examples:
        ``req-020-medical-csv`` vs ``req-infra-020-medical-csv-compliance-system`` -> 1.0
        ``comp-fda-001-csv`` vs ``comp-fda-001-computer-system-validation`` -> 0.75

    Returns:
        Score in [0, 1]; 0 when the names are not comparable
    """
    if not target_parts or not candidate_parts:
        return 0.0

    if target_parts[0] in id_prefixes and candidate_parts[0] == target_parts[0]:
        mine = _numeric_token(target_parts)
        theirs = _numeric_token(candidate_parts)
        if mine is None or theirs is None or target_parts[mine] != candidate_parts[theirs]:
            return 0.0
        rest = target_parts[mine + 1 :]
        if not rest:
            return 0.0
        return _leading_matches(rest, candidate_parts[theirs + 1 :]) / len(rest)

    if len(candidate_parts) <= prefix_parts:
        return 0.0
    if list(candidate_parts[:prefix_parts]) != list(target_parts[:prefix_parts]):
        return 0.0
    return _leading_matches(target_parts, candidate_parts) / len(target_parts)
