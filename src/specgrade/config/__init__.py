"""SpecGrade configuration package."""

from specgrade.config.loader import load_config, merge_overrides
from specgrade.config.models import OutputFormat, SpecGradeConfig

__all__ = ["OutputFormat", "SpecGradeConfig", "load_config", "merge_overrides"]
