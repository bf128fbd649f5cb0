"""Unit tests for structural filename similarity."""

import pytest

from mdlinks.api.links.structural_score import structural_score


def _score(target: str, candidate: str, **kwargs) -> float:
    return structural_score(target.split("-"), candidate.split("-"), **kwargs)


def test_identifier_prefixed_name_matches_on_numeric_token():
    assert _score("req-020-medical-csv", "req-infra-020-medical-csv-compliance-system") == 1.0


def test_identifier_prefixed_partial_match():
    assert _score("req-020-medical-csv", "req-020-medical-records") == 0.5


def test_identifier_numeric_token_must_match():
    assert _score("req-020-medical-csv", "req-021-medical-csv") == 0.0


def test_identifier_without_tail_scores_zero():
    assert _score("req-020", "req-020-anything") == 0.0


def test_custom_identifier_prefixes():
    assert _score("adr-007-storage-layer", "adr-core-007-storage-layer", id_prefixes=("adr",)) == 1.0
    assert _score("adr-007-storage-layer", "adr-core-007-storage-layer") == 0.0


def test_prefix_match_for_plain_names():
    assert _score("comp-fda-001-csv", "comp-fda-001-computer-system-validation") == pytest.approx(0.75)


def test_prefix_must_cover_first_three_parts():
    assert _score("comp-fda-001-csv", "comp-eu-001-csv-extra") == 0.0


def test_candidate_needs_more_than_prefix():
    assert _score("comp-fda-001-csv", "comp-fda-001") == 0.0


def test_empty_parts():
    assert structural_score([], ["a"]) == 0.0
    assert structural_score(["a"], []) == 0.0
