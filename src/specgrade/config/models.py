"""Pydantic models for SpecGrade configuration.

These models validate and type the ``specgrade.yaml`` file that supplies
defaults for a grading run. Command-line flags override them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from specgrade.domain.versions import DEFAULT_VERSION
from specgrade.engine.exit_policy import is_known_grade, normalize_grade
from specgrade.engine.grader import GRADES


class OutputFormat(str, Enum):
    """Report output formats."""

    CLI = "cli"
    JSON = "json"
    MARKDOWN = "markdown"


class SpecGradeConfig(BaseModel):
    """Complete run configuration."""

    spec_version: str = Field(DEFAULT_VERSION, description="OpenAPI version to grade against")
    input_dir: Optional[str] = Field(None, description="File or directory holding the spec")
    fail_threshold: str = Field("B", description="Minimum acceptable grade")
    output_format: OutputFormat = OutputFormat.CLI
    skip_rules: list[str] = Field(default_factory=list, description="Rule IDs to ignore")

    @field_validator("spec_version", "input_dir", mode="before")
    @classmethod
    def _numbers_as_text(cls, v: object) -> object:
        # unquoted ``3.1`` arrives from YAML as a float
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v

    @field_validator("fail_threshold", mode="before")
    @classmethod
    def _validate_threshold(cls, v: str) -> str:
        """Normalise to upper case and reject unknown letters."""
        v = str(v)
        if not is_known_grade(v):
            raise ValueError(f"Unknown grade '{v}'. Expected one of: {', '.join(GRADES)}")
        return normalize_grade(v)

    @field_validator("output_format", mode="before")
    @classmethod
    def _lower_output_format(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    @field_validator("skip_rules", mode="before")
    @classmethod
    def _split_skip_rules(cls, v: object) -> object:
        """Accept ``"a, b"`` as well as a list of IDs."""
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v
