"""CI exit policy — map a grade to a process exit status."""

from __future__ import annotations

from specgrade.domain.errors import ConfigurationError
from specgrade.engine.grader import GRADES

EXIT_OK = 0
EXIT_BELOW_THRESHOLD = 1

# Higher is better; F ranks lowest
GRADE_RANK: dict[str, int] = {letter: rank for rank, letter in enumerate(reversed(GRADES))}


def normalize_grade(grade: str) -> str:
    return grade.strip().upper()


def is_known_grade(grade: str) -> bool:
    return normalize_grade(grade) in GRADE_RANK


class ExitPolicy:
    """Fail the build when a grade falls below *fail_threshold*."""

    def __init__(self, fail_threshold: str = "B") -> None:
        threshold = normalize_grade(fail_threshold)
        if threshold not in GRADE_RANK:
            raise ConfigurationError(
                f"Unknown fail threshold '{fail_threshold}'. Expected one of: {', '.join(GRADES)}"
            )
        self._threshold = threshold

    @property
    def threshold(self) -> str:
        return self._threshold

    def passes(self, grade: str) -> bool:
        rank = GRADE_RANK.get(normalize_grade(grade))
        return rank is not None and rank >= GRADE_RANK[self._threshold]

    def exit_code(self, grade: str) -> int:
        """0 when *grade* meets the threshold, 1 otherwise (or if unknown)."""
        return EXIT_OK if self.passes(grade) else EXIT_BELOW_THRESHOLD
