"""Operation-level rules.

All three rules walk every ``(path, method)`` operation of the document
and aggregate counts rather than reporting one result per operation, so
each still produces exactly one ``RuleResult``.
"""

from __future__ import annotations

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleLocation, RuleResult, Severity, Suggestion
from specgrade.rules.base import BaseRule, RuleCategory

NO_PATHS_DETAIL = "No paths to check"

# Descriptions shorter than this (after trimming) are not "meaningful"
MIN_DESCRIPTION_LENGTH = 10

REQUIRED_ERROR_CODES: tuple[str, ...] = ("400", "500")

_PATHS_LOCATION = RuleLocation(path="$.paths", component="operations", spec_section="paths")


# ---------------------------------------------------------------------------
# Operation IDs
# ---------------------------------------------------------------------------


class OperationIdUniqueRule(BaseRule):
    """Every operation needs an ``operationId`` and no two may share one."""

    @property
    def id(self) -> str:
        return "operation-operationId-unique"

    @property
    def description(self) -> str:
        return "All operations should have unique operation IDs"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.STRUCTURE

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if not document.paths:
            return self._pass(NO_PATHS_DETAIL)

        seen: set[str] = set()
        missing = 0
        duplicates = 0

        for _path, _method, op in document.operations():
            if not op.operation_id:
                missing += 1
            elif op.operation_id in seen:
                duplicates += 1
            else:
                seen.add(op.operation_id)

        if missing == 0 and duplicates == 0:
            return self._pass("All operations have unique operation IDs")

        issues = []
        if missing:
            issues.append(f"{missing} operations missing operation ID")
        if duplicates:
            issues.append(f"{duplicates} duplicate operation IDs")

        return self._fail(
            ", ".join(issues),
            location=_PATHS_LOCATION,
            suggestion=Suggestion(
                title="Add unique operation IDs",
                description="Give every operation an operationId that is unique across the API",
                example="get:\n  operationId: listUsers",
                references=("https://spec.openapis.org/oas/v3.1.0#operation-object",),
            ),
            missing=str(missing),
            duplicates=str(duplicates),
        )


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


class OperationDescriptionRule(BaseRule):
    """Every operation should explain itself in at least a short sentence."""

    @property
    def id(self) -> str:
        return "operation-description"

    @property
    def description(self) -> str:
        return "All operations should have meaningful descriptions"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.DOCUMENTATION

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if not document.paths:
            return self._pass(NO_PATHS_DETAIL)

        total = 0
        missing = 0
        short = 0

        for _path, _method, op in document.operations():
            total += 1
            if not op.description:
                missing += 1
            elif len(op.description.strip()) < MIN_DESCRIPTION_LENGTH:
                short += 1

        if missing == 0 and short == 0:
            return self._pass(
                "All operations have meaningful descriptions", total_operations=str(total)
            )

        issues = []
        if missing:
            issues.append(f"{missing} missing descriptions")
        if short:
            issues.append(f"{short} too short (< {MIN_DESCRIPTION_LENGTH} chars)")

        return self._fail(
            f"Description issues: {', '.join(issues)}",
            severity=Severity.WARNING,
            location=_PATHS_LOCATION,
            missing=str(missing),
            too_short=str(short),
            total_operations=str(total),
        )


# ---------------------------------------------------------------------------
# Error responses
# ---------------------------------------------------------------------------


class ErrorResponseRule(BaseRule):
    """Operations should document 400 and 500 responses."""

    @property
    def id(self) -> str:
        return "operation-success-response"

    @property
    def description(self) -> str:
        return "Operations should define proper error responses (400, 500)"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.ERROR_HANDLING

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if not document.paths:
            return self._pass(NO_PATHS_DETAIL)

        total = 0
        missing = dict.fromkeys(REQUIRED_ERROR_CODES, 0)

        for _path, _method, op in document.operations():
            total += 1
            responses = op.responses or {}
            for code in REQUIRED_ERROR_CODES:
                if code not in responses:
                    missing[code] += 1

        if not any(missing.values()):
            return self._pass(
                "All operations define proper error responses", total_operations=str(total)
            )

        parts = [f"{count} missing {code} responses" for code, count in missing.items() if count]
        return self._fail(
            f"Missing error responses: {', '.join(parts)}",
            severity=Severity.WARNING,
            location=_PATHS_LOCATION,
            suggestion=Suggestion(
                title="Add Error Response Definitions",
                description=(
                    "Define proper error responses to help API consumers "
                    "handle failures gracefully"
                ),
                example=(
                    "responses:\n"
                    "  '400':\n"
                    "    description: Bad Request - Invalid input\n"
                    "  '500':\n"
                    "    description: Internal Server Error"
                ),
                schema_ref="https://spec.openapis.org/oas/v3.1.0#responses-object",
                references=(
                    "https://spec.openapis.org/oas/v3.1.0#responses-object",
                    "https://tools.ietf.org/html/rfc7231#section-6",
                ),
            ),
            missing_400=str(missing["400"]),
            missing_500=str(missing["500"]),
            total_operations=str(total),
        )
