"""Base interface for SpecGrade rules and shared helpers.

Every rule follows the same contract:
  1. Identifies itself with a stable, globally unique ID
  2. Declares which OpenAPI versions it applies to
  3. Receives a read-only ``Document`` and returns exactly one ``RuleResult``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleLocation, RuleResult, Severity, Suggestion


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


class RuleCategory(str, Enum):
    """Broad category a rule belongs to."""

    DOCUMENTATION = "documentation"
    STRUCTURE = "structure"
    SCHEMA = "schema"
    ERROR_HANDLING = "error_handling"
    SECURITY = "security"


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------


class BaseRule(ABC):
    """Abstract base for every rule in the registry.

    Subclasses must implement ``id``, ``description``, ``category`` and
    ``evaluate(document, version) -> RuleResult``. Rules hold no state:
    ``evaluate`` must not mutate the document and must not raise on a
    document that merely lacks optional sections.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable identifier used by skip-lists and registry lookups."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Static human-readable text."""

    @property
    @abstractmethod
    def category(self) -> RuleCategory:
        """Category of findings this rule reports."""

    def applies_to(self, version: str) -> bool:
        """Built-in rules cover OpenAPI 3.x only."""
        return version.startswith("3.")

    @abstractmethod
    def evaluate(self, document: Document, version: str) -> RuleResult:
        """Evaluate *document* and return a ``RuleResult``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    # Convenience helpers used by concrete rules
    def _pass(self, detail: str, **metadata: str) -> RuleResult:
        return RuleResult(
            rule_id=self.id,
            passed=True,
            detail=detail,
            severity=Severity.INFO,
            category=self.category.value,
            metadata=metadata,
        )

    def _fail(
        self,
        detail: str,
        *,
        severity: Severity = Severity.ERROR,
        location: Optional[RuleLocation] = None,
        suggestion: Optional[Suggestion] = None,
        **metadata: str,
    ) -> RuleResult:
        return RuleResult(
            rule_id=self.id,
            passed=False,
            detail=detail,
            severity=severity,
            category=self.category.value,
            location=location,
            suggestion=suggestion,
            metadata=metadata,
        )
