"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from specgrade.domain.models.document import (
    HTTP_METHODS,
    Components,
    Document,
    ExampleKind,
    ExampleValue,
    Info,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
    SecurityScheme,
)
from specgrade.domain.models.result import (
    Report,
    RuleLocation,
    RuleResult,
    Severity,
    Suggestion,
)

__all__ = [
    # Document
    "HTTP_METHODS",
    "Components",
    "Document",
    "ExampleKind",
    "ExampleValue",
    "Info",
    "Operation",
    "Parameter",
    "PathItem",
    "Response",
    "Schema",
    "SecurityScheme",
    # Results
    "Report",
    "RuleLocation",
    "RuleResult",
    "Severity",
    "Suggestion",
]
