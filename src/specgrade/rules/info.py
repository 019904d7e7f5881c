"""Info section rules — title and version presence."""

from __future__ import annotations

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleLocation, RuleResult, Severity, Suggestion
from specgrade.rules.base import BaseRule, RuleCategory

_INFO_OBJECT_URL = "https://spec.openapis.org/oas/v3.1.0#info-object"

# Titles shorter than this pass the presence check but earn a warning
MIN_TITLE_LENGTH = 5

_MISSING_INFO_SUGGESTION = Suggestion(
    title="Add info section",
    description="OpenAPI descriptions must include an info section with basic metadata",
    example='info:\n  title: "My API"\n  version: "1.0.0"',
    schema_ref=_INFO_OBJECT_URL,
    references=(_INFO_OBJECT_URL, "https://swagger.io/specification/#info-object"),
)


class InfoTitleRule(BaseRule):
    """The info section must carry a descriptive title."""

    @property
    def id(self) -> str:
        return "info-title"

    @property
    def description(self) -> str:
        return "OpenAPI spec must have a title in the info section"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.DOCUMENTATION

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if document.info is None:
            return self._fail(
                "Missing info section",
                location=RuleLocation(path="$.info", component="info", spec_section="info"),
                suggestion=_MISSING_INFO_SUGGESTION,
                required_fields="title, version",
                fix_priority="high",
            )

        title = document.info.title
        if not title:
            return self._fail(
                "Missing title in info section",
                location=RuleLocation(path="$.info.title", component="info.title"),
                suggestion=Suggestion(
                    title="Add a title",
                    description="Add a descriptive title to the info section",
                    example='info:\n  title: "My API"\n  version: "1.0.0"',
                    schema_ref=_INFO_OBJECT_URL,
                    references=(_INFO_OBJECT_URL,),
                ),
                field_name="title",
                fix_priority="high",
            )

        if len(title) < MIN_TITLE_LENGTH:
            return self._fail(
                f"Title too short: '{title}' "
                f"(minimum {MIN_TITLE_LENGTH} characters recommended)",
                severity=Severity.WARNING,
                location=RuleLocation(path="$.info.title", component="info.title"),
                suggestion=Suggestion(
                    title="Use a more descriptive title",
                    description="Use a title that clearly explains the API's purpose",
                    example=f"# Instead of: '{title}'\n# Consider: '{title} Management API'",
                    schema_ref=_INFO_OBJECT_URL,
                ),
                current_length=str(len(title)),
                recommended_min=str(MIN_TITLE_LENGTH),
                fix_priority="medium",
            )

        return self._pass(f"Title present: '{title}'", title_length=str(len(title)))


class InfoVersionRule(BaseRule):
    """The info section must carry the API's own version."""

    @property
    def id(self) -> str:
        return "info-version"

    @property
    def description(self) -> str:
        return "OpenAPI spec must have a version in the info section"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.DOCUMENTATION

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if document.info is None:
            return self._fail(
                "Missing info section",
                location=RuleLocation(path="$.info", component="info", spec_section="info"),
                suggestion=_MISSING_INFO_SUGGESTION,
            )

        if not document.info.version:
            return self._fail(
                "Missing version in info section",
                location=RuleLocation(path="$.info.version", component="info.version"),
            )

        return self._pass("Version present")
