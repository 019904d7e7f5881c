"""Grader — percentage score and letter grade for a result set.

The grade table is fixed and descending; each band includes its lower
edge, so exactly 90% is an ``A`` and 89% an ``A-``. An empty result set
scores 0 and grades ``F``.
"""

from __future__ import annotations

from typing import Sequence

from specgrade.domain.models.result import Report, RuleResult

# (minimum score, letter), highest band first
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (95, "A+"),
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
    (50, "D"),
)

FAILING_GRADE = "F"

# Every letter the grader can emit, best first
GRADES: tuple[str, ...] = tuple(letter for _, letter in GRADE_THRESHOLDS) + (FAILING_GRADE,)


def grade_for_score(score: int) -> str:
    """Map an integer percentage onto the grade table."""
    for minimum, letter in GRADE_THRESHOLDS:
        if score >= minimum:
            return letter
    return FAILING_GRADE


class DefaultGrader:
    """Standard pass-ratio grader."""

    def calculate_score(self, results: Sequence[RuleResult]) -> int:
        """``round(100 * passed / total)``, rounding halves up; 0 when empty."""
        total = len(results)
        if total == 0:
            return 0
        passed = sum(1 for r in results if r.passed)
        # integer arithmetic keeps the half-up rounding exact
        return (200 * passed + total) // (2 * total)

    def grade(self, results: Sequence[RuleResult]) -> str:
        if not results:
            return FAILING_GRADE
        return grade_for_score(self.calculate_score(results))

    def build_report(self, version: str, results: Sequence[RuleResult]) -> Report:
        """Assemble the immutable ``Report`` for one run."""
        return Report(
            version=version,
            score=self.calculate_score(results),
            grade=self.grade(results),
            rules=tuple(results),
        )
