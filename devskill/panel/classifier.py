"""Severity tiers for grading outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..client.models import GradingOutcome


PASS_MARKERS = ("PASS", "✓", "✔")


class Tier(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAIL = "fail"


def classify(outcome: GradingOutcome) -> Tier:
    """
    Map a grading outcome to its tier.
    A successful run with score 0 is treated the same as a failed run.
    """
    if not outcome.success:
        return Tier.FAIL
    if outcome.score == 100:
        return Tier.SUCCESS
    if outcome.score > 0:
        return Tier.PARTIAL
    return Tier.FAIL


@dataclass(frozen=True)
class CaseOutcome:
    """One per-test line with its status."""

    passed: bool
    text: str


def case_outcome(line: str) -> CaseOutcome:
    """Derive pass/fail from the leading marker of a per-test line."""
    head = line.lstrip().upper()
    # Unknown markers count as failures
    passed = head.startswith(PASS_MARKERS)
    return CaseOutcome(passed=passed, text=line)


def summarize(outcome: GradingOutcome) -> Tuple[int, int]:
    """Return (passed, total) over the outcome's per-test lines."""
    results = [case_outcome(line) for line in outcome.test_results]
    return sum(1 for r in results if r.passed), len(results)
