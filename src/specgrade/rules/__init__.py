"""Built-in SpecGrade rules.

``builtin_rules()`` returns fresh instances in the canonical registration
order, which is also the order results appear in a report.
"""

from specgrade.rules.base import BaseRule, RuleCategory
from specgrade.rules.info import InfoTitleRule, InfoVersionRule
from specgrade.rules.operations import (
    ErrorResponseRule,
    OperationDescriptionRule,
    OperationIdUniqueRule,
)
from specgrade.rules.paths import PathsExistRule
from specgrade.rules.schema_examples import SchemaExampleConsistencyRule
from specgrade.rules.security import SecuritySchemeRule


def builtin_rules() -> list[BaseRule]:
    """Factory for the standard rule set."""
    return [
        # Basic structure
        InfoTitleRule(),
        InfoVersionRule(),
        PathsExistRule(),
        OperationIdUniqueRule(),
        # Quality
        SchemaExampleConsistencyRule(),
        OperationDescriptionRule(),
        ErrorResponseRule(),
        SecuritySchemeRule(),
    ]


__all__ = [
    "BaseRule",
    "ErrorResponseRule",
    "InfoTitleRule",
    "InfoVersionRule",
    "OperationDescriptionRule",
    "OperationIdUniqueRule",
    "PathsExistRule",
    "RuleCategory",
    "SchemaExampleConsistencyRule",
    "SecuritySchemeRule",
    "builtin_rules",
]
