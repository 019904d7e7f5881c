"""Schema example consistency — examples must match their declared types.

Walks every named schema in ``components.schemas`` together with its
nested ``properties`` and compares each node's ``example`` against its
``type``. Schema graphs may be cyclic; the walk keeps the set of nodes
on the current path and refuses to re-enter one of them, and it stops
descending past ``MAX_DEPTH`` levels regardless.
"""

from __future__ import annotations

import logging

from specgrade.domain.models.document import Document, ExampleKind, ExampleValue, Schema
from specgrade.domain.models.result import RuleLocation, RuleResult, Suggestion
from specgrade.rules.base import BaseRule, RuleCategory

logger = logging.getLogger(__name__)

MAX_DEPTH = 10

# Number of individual mismatches quoted in a failing detail
MAX_REPORTED_ISSUES = 3

_ACCEPTED_KINDS: dict[str, frozenset[ExampleKind]] = {
    "string": frozenset({ExampleKind.STRING}),
    "integer": frozenset({ExampleKind.INTEGER}),
    "number": frozenset({ExampleKind.INTEGER, ExampleKind.FLOAT}),
    "boolean": frozenset({ExampleKind.BOOL}),
    "array": frozenset({ExampleKind.SEQUENCE}),
    "object": frozenset({ExampleKind.MAPPING}),
}


def is_example_valid_for_type(example: ExampleValue, schema_type: str) -> bool:
    """Return ``True`` if *example* is acceptable for *schema_type*.

    Unknown or empty types accept anything. An ``integer`` schema also
    accepts a float with no fractional part (``3.0``).
    """
    accepted = _ACCEPTED_KINDS.get(schema_type)
    if accepted is None:
        return True
    if example.kind in accepted:
        return True
    if schema_type == "integer" and example.kind is ExampleKind.FLOAT:
        return float(example.value).is_integer()
    return False


class SchemaExampleConsistencyRule(BaseRule):
    """Examples in component schemas must match their declared types."""

    @property
    def id(self) -> str:
        return "oas3-valid-schema-example"

    @property
    def description(self) -> str:
        return "Schema examples must match their declared types"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.SCHEMA

    def evaluate(self, document: Document, version: str) -> RuleResult:
        issues: list[str] = []
        schemas = document.components.schemas if document.components else {}

        for name, schema in schemas.items():
            issues.extend(self.check_schema(name, schema))

        if not issues:
            return self._pass(
                "All schema examples match their declared types", schema_count=str(len(schemas))
            )

        quoted = "; ".join(issues[:MAX_REPORTED_ISSUES])
        return self._fail(
            f"Found {len(issues)} type/example mismatches: {quoted}",
            location=RuleLocation(
                path="$.components.schemas",
                component="components.schemas",
                spec_section="components",
            ),
            suggestion=Suggestion(
                title="Align examples with schema types",
                description="Change each example so it is a valid instance of its declared type",
                example="properties:\n  age:\n    type: integer\n    example: 42",
                references=("https://spec.openapis.org/oas/v3.1.0#schema-object",),
            ),
            mismatch_count=str(len(issues)),
        )

    # -- Traversal -------------------------------------------------------

    def check_schema(self, name: str, schema: Schema) -> list[str]:
        """Collect mismatch messages for *schema* and everything below it."""
        issues: list[str] = []
        self._walk(schema, name, depth=0, on_path=set(), issues=issues)
        return issues

    def _walk(
        self,
        schema: Schema,
        path: str,
        depth: int,
        on_path: set[Schema],
        issues: list[str],
    ) -> None:
        if depth > MAX_DEPTH:
            logger.debug("Depth limit reached at %s", path)
            return
        if schema in on_path:
            return

        on_path.add(schema)
        try:
            example = schema.example
            if schema.type and example is not None:
                if not is_example_valid_for_type(example, schema.type):
                    issues.append(
                        f"{path}: {schema.type} example {example} "
                        f"doesn't match type {schema.type}"
                    )

            for prop_name, prop in schema.properties.items():
                self._walk(prop, f"{path}.{prop_name}", depth + 1, on_path, issues)
        finally:
            on_path.discard(schema)
