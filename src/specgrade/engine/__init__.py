"""Rule evaluation engine — registry, runner, grader and exit policy."""

from specgrade.engine.exit_policy import ExitPolicy
from specgrade.engine.grader import GRADES, DefaultGrader, grade_for_score
from specgrade.engine.registry import RuleRegistry
from specgrade.engine.runner import RuleRunner

__all__ = [
    "GRADES",
    "DefaultGrader",
    "ExitPolicy",
    "RuleRegistry",
    "RuleRunner",
    "grade_for_score",
]
