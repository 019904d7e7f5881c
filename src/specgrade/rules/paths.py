"""Paths rule — the description must expose at least one path."""

from __future__ import annotations

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleLocation, RuleResult
from specgrade.rules.base import BaseRule, RuleCategory


class PathsExistRule(BaseRule):
    @property
    def id(self) -> str:
        return "paths-exist"

    @property
    def description(self) -> str:
        return "OpenAPI spec must have at least one path defined"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.STRUCTURE

    def evaluate(self, document: Document, version: str) -> RuleResult:
        if not document.paths:
            return self._fail(
                "No paths defined",
                location=RuleLocation(path="$.paths", component="paths", spec_section="paths"),
            )
        count = len(document.paths)
        return self._pass(f"{count} paths defined", path_count=str(count))
