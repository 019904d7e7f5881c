"""Domain errors — custom exceptions for SpecGrade.

These exceptions are raised while loading, configuring or wiring the
engine. Rule evaluation itself never raises: problems found inside a
document are reported as failing ``RuleResult`` objects.
"""


class SpecGradeError(Exception):
    """Base exception for all SpecGrade errors."""


class SpecLoadError(SpecGradeError):
    """Raised when an API description cannot be read, parsed or resolved."""


class ConfigurationError(SpecGradeError):
    """Raised when configuration is invalid or missing."""


class DuplicateRuleError(SpecGradeError):
    """Raised when a rule ID is registered more than once."""


class UnsupportedVersionError(SpecGradeError):
    """Raised when an OpenAPI version is not in the supported table."""
