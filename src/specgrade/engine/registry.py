"""Rule registry — ordered collection of rules with version filtering."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from specgrade.domain.errors import DuplicateRuleError
from specgrade.rules.base import BaseRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Holds rule instances in registration order.

    Registration order is the order results appear in a report. Rule IDs
    are unique: registering an ID twice raises ``DuplicateRuleError``.

    Usage::

        registry = RuleRegistry(builtin_rules())
        registry.register(MyCustomRule())
        rules = registry.rules_for_version("3.1.0")
    """

    def __init__(self, rules: Optional[Iterable[BaseRule]] = None) -> None:
        self._rules: list[BaseRule] = []
        for rule in rules or ():
            self.register(rule)

    # -- Registration ----------------------------------------------------

    def register(self, rule: BaseRule) -> None:
        """Append *rule* to the registry."""
        if self.get_rule(rule.id) is not None:
            raise DuplicateRuleError(f"Rule already registered: {rule.id}")
        self._rules.append(rule)
        logger.debug("Registered rule %s", rule.id)

    # -- Lookup ----------------------------------------------------------

    def rules_for_version(self, version: str) -> list[BaseRule]:
        """Every rule that applies to *version*, in registration order."""
        return [rule for rule in self._rules if rule.applies_to(version)]

    def get_rule(self, rule_id: str) -> Optional[BaseRule]:
        """Exact-match lookup; ``None`` if no rule has *rule_id*."""
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def all_rules(self) -> list[BaseRule]:
        return list(self._rules)

    @property
    def rule_ids(self) -> list[str]:
        """IDs of the registered rules, in order."""
        return [r.id for r in self._rules]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[BaseRule]:
        return iter(list(self._rules))

    def __contains__(self, rule_id: object) -> bool:
        return isinstance(rule_id, str) and self.get_rule(rule_id) is not None
