"""Rule runner — applies the registry's rules to one document.

The runner fetches ``rules_for_version(version)``, drops any rule whose
ID is in the skip set, and evaluates the rest in registration order. A
rule that raises is turned into a failing result instead of aborting the
run, so ``run`` always returns one result per evaluated rule.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import RuleResult, Severity
from specgrade.engine.registry import RuleRegistry
from specgrade.rules.base import BaseRule

logger = logging.getLogger(__name__)


class RuleRunner:
    """Evaluate registered rules against a document.

    Usage::

        runner = RuleRunner(registry, skip_ids={"oas3-security-defined"})
        results = runner.run(document, "3.1.0")
    """

    def __init__(self, registry: RuleRegistry, skip_ids: Iterable[str] = ()) -> None:
        self._registry = registry
        self._skip_ids: frozenset[str] = frozenset(skip_ids)

    @property
    def skip_ids(self) -> frozenset[str]:
        return self._skip_ids

    # -- Public API ------------------------------------------------------

    def run(
        self,
        document: Document,
        version: str,
        skip_ids: Iterable[str] = (),
    ) -> list[RuleResult]:
        """Evaluate every applicable, non-skipped rule.

        *skip_ids* is merged with the skip set given at construction.
        Results are returned in registration order.
        """
        skipped = self._skip_ids | frozenset(skip_ids)
        rules = self._registry.rules_for_version(version)
        logger.debug("%d rule(s) apply to version %s", len(rules), version)

        results: list[RuleResult] = []
        for rule in rules:
            if rule.id in skipped:
                logger.debug("Skipping rule %s", rule.id)
                continue
            results.append(self._evaluate(rule, document, version))

        return results

    def run_rule(self, document: Document, version: str, rule_id: str) -> Optional[RuleResult]:
        """Evaluate a single rule by ID.

        Returns ``None`` when the rule is unknown or does not apply to
        *version*.
        """
        rule = self._registry.get_rule(rule_id)
        if rule is None or not rule.applies_to(version):
            return None
        return self._evaluate(rule, document, version)

    # -- Internals -------------------------------------------------------

    @staticmethod
    def _evaluate(rule: BaseRule, document: Document, version: str) -> RuleResult:
        try:
            result = rule.evaluate(document, version)
        except Exception as exc:
            logger.warning("Rule %s raised during evaluation: %s", rule.id, exc)
            return RuleResult(
                rule_id=rule.id,
                passed=False,
                detail=f"Rule raised {type(exc).__name__}: {exc}",
                severity=Severity.ERROR,
                category="engine",
            )

        if result.rule_id != rule.id:
            logger.warning(
                "Rule %s produced a result for %s; correcting the ID", rule.id, result.rule_id
            )
            result = result.model_copy(update={"rule_id": rule.id})

        logger.debug("%s: %s", rule.id, "passed" if result.passed else "failed")
        return result
