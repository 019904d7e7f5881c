"""Tests for the grader and the CI exit policy."""

from __future__ import annotations

import pytest

from specgrade.domain.errors import ConfigurationError
from specgrade.domain.models import RuleResult
from specgrade.engine import GRADES, DefaultGrader, ExitPolicy, grade_for_score


def _results(passed: int, total: int) -> list[RuleResult]:
    return [
        RuleResult(rule_id=f"RULE{i}", passed=i < passed, detail="failed" if i >= passed else "")
        for i in range(total)
    ]


# ═══════════════════════════════════════════════════════════════════════════
# DefaultGrader
# ═══════════════════════════════════════════════════════════════════════════


class TestDefaultGrader:
    def setup_method(self) -> None:
        self.grader = DefaultGrader()

    @pytest.mark.parametrize(
        ("passed", "total", "grade", "score"),
        [
            (0, 0, "F", 0),
            (3, 3, "A+", 100),
            (9, 10, "A", 90),
            (3, 4, "B", 75),
            (1, 2, "D", 50),
            (0, 2, "F", 0),
        ],
    )
    def test_grade_and_score(self, passed, total, grade, score) -> None:
        results = _results(passed, total)
        assert self.grader.grade(results) == grade
        assert self.grader.calculate_score(results) == score

    @pytest.mark.parametrize(
        ("passed", "grade"),
        [
            (95, "A+"),
            (94, "A"),
            (90, "A"),
            (89, "A-"),
            (85, "A-"),
            (84, "B+"),
            (80, "B+"),
            (79, "B"),
            (75, "B"),
            (74, "B-"),
            (70, "B-"),
            (69, "C+"),
            (65, "C+"),
            (64, "C"),
            (60, "C"),
            (59, "C-"),
            (55, "C-"),
            (54, "D"),
            (50, "D"),
            (49, "F"),
        ],
    )
    def test_boundaries(self, passed, grade) -> None:
        assert self.grader.grade(_results(passed, 100)) == grade

    def test_rounds_half_up(self) -> None:
        # 1/8 = 12.5%, 7/8 = 87.5%
        assert self.grader.calculate_score(_results(1, 8)) == 13
        assert self.grader.calculate_score(_results(7, 8)) == 88

    def test_rounds_down_below_half(self) -> None:
        # 2/3 = 66.67%, 1/3 = 33.33%
        assert self.grader.calculate_score(_results(2, 3)) == 67
        assert self.grader.calculate_score(_results(1, 3)) == 33

    @pytest.mark.parametrize("total", range(1, 25))
    def test_score_in_range_and_grade_known(self, total) -> None:
        for passed in range(total + 1):
            results = _results(passed, total)
            assert 0 <= self.grader.calculate_score(results) <= 100
            assert self.grader.grade(results) in GRADES

    def test_build_report(self) -> None:
        results = _results(3, 4)
        report = self.grader.build_report("3.1.0", results)
        assert report.version == "3.1.0"
        assert report.score == 75
        assert report.grade == "B"
        assert list(report.rules) == results


class TestGradeTable:
    def test_letters(self) -> None:
        assert GRADES == ("A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D", "F")

    def test_grade_for_score_extremes(self) -> None:
        assert grade_for_score(100) == "A+"
        assert grade_for_score(0) == "F"


# ═══════════════════════════════════════════════════════════════════════════
# ExitPolicy
# ═══════════════════════════════════════════════════════════════════════════


class TestExitPolicy:
    def test_meets_threshold(self) -> None:
        policy = ExitPolicy("B")
        assert policy.exit_code("B") == 0
        assert policy.exit_code("A+") == 0

    def test_below_threshold(self) -> None:
        policy = ExitPolicy("B")
        assert policy.exit_code("B-") == 1
        assert policy.exit_code("F") == 1

    def test_case_insensitive(self) -> None:
        policy = ExitPolicy("a-")
        assert policy.threshold == "A-"
        assert policy.exit_code("a") == 0

    def test_unknown_grade_fails(self) -> None:
        assert ExitPolicy("F").exit_code("Z") == 1

    def test_unknown_threshold_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ExitPolicy("E")

    def test_f_threshold_accepts_everything(self) -> None:
        policy = ExitPolicy("F")
        assert all(policy.exit_code(g) == 0 for g in GRADES)
