"""Rule outcome models — RuleResult and Report.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (enum, typing)
- Pydantic (pragmatic exception for validation and JSON dumping)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Severity(str, Enum):
    """Severity level for a rule result."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# ---------------------------------------------------------------------------
# Result details
# ---------------------------------------------------------------------------


class RuleLocation(BaseModel):
    """Where in the API description a finding applies."""

    model_config = ConfigDict(frozen=True)

    path: str = Field("", description="JSON path, e.g. $.info.title")
    component: str = ""
    file: str = ""
    file_ref: str = ""
    spec_section: str = ""


class Suggestion(BaseModel):
    """An actionable fix attached to a failing result."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    example: str = ""
    schema_ref: str = ""
    references: tuple[str, ...] = ()


class RuleResult(BaseModel):
    """Outcome of evaluating one rule against one document."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., min_length=1)
    passed: bool
    detail: str = ""
    severity: Severity = Severity.ERROR
    category: str = ""
    location: Optional[RuleLocation] = None
    suggestion: Optional[Suggestion] = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _failure_needs_detail(self) -> RuleResult:
        if not self.passed and not self.detail:
            raise ValueError(f"Failing result for '{self.rule_id}' must carry a detail")
        return self

    @property
    def icon(self) -> str:
        if self.passed:
            return "✅"
        return "❌" if self.severity == Severity.ERROR else "⚠️"


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


class Report(BaseModel):
    """Terminal artifact of a grading run."""

    model_config = ConfigDict(frozen=True)

    version: str
    score: int = Field(..., ge=0, le=100)
    grade: str
    rules: tuple[RuleResult, ...] = ()

    @property
    def total(self) -> int:
        return len(self.rules)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.rules if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> list[RuleResult]:
        return [r for r in self.rules if not r.passed]

    def to_json(self) -> str:
        """Serialize to JSON, omitting absent optional fields."""
        return self.model_dump_json(indent=2, exclude_none=True)
