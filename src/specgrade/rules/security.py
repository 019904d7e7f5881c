"""Security rule — the API should declare how clients authenticate."""

from __future__ import annotations

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleLocation, RuleResult, Suggestion
from specgrade.rules.base import BaseRule, RuleCategory


class SecuritySchemeRule(BaseRule):
    @property
    def id(self) -> str:
        return "oas3-security-defined"

    @property
    def description(self) -> str:
        return "API should define security schemes for authentication"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.SECURITY

    def evaluate(self, document: Document, version: str) -> RuleResult:
        schemes = document.components.security_schemes if document.components else {}
        if not schemes:
            return self._fail(
                "No security schemes defined",
                location=RuleLocation(
                    path="$.components.securitySchemes",
                    component="components.securitySchemes",
                    spec_section="components",
                ),
                suggestion=Suggestion(
                    title="Declare a security scheme",
                    description="Describe how clients authenticate, e.g. bearer tokens or API keys",
                    example=(
                        "components:\n"
                        "  securitySchemes:\n"
                        "    bearerAuth:\n"
                        "      type: http\n"
                        "      scheme: bearer"
                    ),
                    references=("https://spec.openapis.org/oas/v3.1.0#security-scheme-object",),
                ),
            )

        return self._pass(
            f"{len(schemes)} security schemes defined", schemes=", ".join(schemes)
        )
