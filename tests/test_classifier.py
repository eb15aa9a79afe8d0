"""Tests for tier classification and per-test markers."""

import pytest

from devskill.client import GradingOutcome
from devskill.panel import Tier, case_outcome, classify, summarize


@pytest.mark.parametrize(
    "score, tier",
    [
        (100, Tier.SUCCESS),
        (99, Tier.PARTIAL),
        (50, Tier.PARTIAL),
        (1, Tier.PARTIAL),
        (0, Tier.FAIL),
    ],
)
def test_successful_runs_are_tiered_by_score(score, tier):
    assert classify(GradingOutcome(success=True, score=score)) == tier


def test_every_score_maps_to_exactly_one_tier():
    tiers = [classify(GradingOutcome(success=True, score=s)) for s in range(101)]

    assert tiers[0] == Tier.FAIL
    assert set(tiers[1:100]) == {Tier.PARTIAL}
    assert tiers[100] == Tier.SUCCESS


@pytest.mark.parametrize("score", [0, 1, 50, 100])
def test_unsuccessful_run_is_fail_regardless_of_score(score):
    assert classify(GradingOutcome(success=False, score=score)) == Tier.FAIL


def test_synthetic_failure_is_fail():
    outcome = GradingOutcome.failure("Server responded with status 500")

    assert classify(outcome) == Tier.FAIL
    assert outcome.message == "Server responded with status 500"


@pytest.mark.parametrize(
    "line, passed",
    [
        ("PASS add(1, 2) == 3", True),
        ("pass: lowercase marker", True),
        ("  PASS leading whitespace", True),
        ("✓ add works", True),
        ("FAIL add(1, 2) expected 3 got 4", False),
        ("✗ add broken", False),
        ("ERROR timeout", False),
        ("add(1, 2) PASS", False),
        ("", False),
    ],
)
def test_case_status_comes_from_leading_marker(line, passed):
    result = case_outcome(line)

    assert result.passed is passed
    assert result.text == line


def test_summarize_counts_passed_cases():
    outcome = GradingOutcome(
        success=True,
        score=66,
        test_results=("PASS a", "FAIL b", "PASS c"),
    )

    assert summarize(outcome) == (2, 3)
    assert summarize(GradingOutcome(success=False)) == (0, 0)
