"""Tests for the rule registry and runner."""

from __future__ import annotations

import pytest

from specgrade.domain.errors import DuplicateRuleError
from specgrade.domain.models import Document, Info, Operation, PathItem, RuleResult
from specgrade.engine import RuleRegistry, RuleRunner
from specgrade.rules import BaseRule, RuleCategory, builtin_rules

VERSION = "3.1.0"

BUILTIN_ORDER = [
    "info-title",
    "info-version",
    "paths-exist",
    "operation-operationId-unique",
    "oas3-valid-schema-example",
    "operation-description",
    "operation-success-response",
    "oas3-security-defined",
]


class _StubRule(BaseRule):
    """Configurable rule for engine tests."""

    def __init__(self, rule_id: str, prefix: str = "3.", passed: bool = True) -> None:
        self._id = rule_id
        self._prefix = prefix
        self._passed = passed
        self.calls = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        return f"Stub {self._id}"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.STRUCTURE

    def applies_to(self, version: str) -> bool:
        return version.startswith(self._prefix)

    def evaluate(self, document: Document, version: str) -> RuleResult:
        self.calls += 1
        return self._pass("ok") if self._passed else self._fail("nope")


class _ExplodingRule(_StubRule):
    def evaluate(self, document: Document, version: str) -> RuleResult:
        raise KeyError("boom")


class _MislabelledRule(_StubRule):
    def evaluate(self, document: Document, version: str) -> RuleResult:
        return RuleResult(rule_id="someone-else", passed=True)


def _sample_doc() -> Document:
    return Document(
        info=Info(title="", version="1.0.0"),
        paths={"/pets": PathItem(get=Operation(description="short"))},
    )


# ═══════════════════════════════════════════════════════════════════════════
# RuleRegistry
# ═══════════════════════════════════════════════════════════════════════════


class TestRuleRegistry:
    def setup_method(self) -> None:
        self.registry = RuleRegistry(builtin_rules())

    def test_all_builtins_in_registration_order(self) -> None:
        assert [r.id for r in self.registry.rules_for_version("3.1.0")] == BUILTIN_ORDER

    def test_swagger_2_gets_no_rules(self) -> None:
        assert self.registry.rules_for_version("2.0") == []

    def test_unknown_major_gets_no_rules(self) -> None:
        assert self.registry.rules_for_version("4.0.0") == []

    def test_get_rule(self) -> None:
        assert self.registry.get_rule("paths-exist").id == "paths-exist"

    def test_get_rule_not_found(self) -> None:
        assert self.registry.get_rule("no-such-rule") is None

    def test_duplicate_rejected(self) -> None:
        with pytest.raises(DuplicateRuleError):
            self.registry.register(_StubRule("info-title"))
        assert len(self.registry) == 8

    def test_filter_preserves_order(self) -> None:
        registry = RuleRegistry()
        for rule_id, prefix in [("a", "3."), ("b", "2."), ("c", "3."), ("d", "")]:
            registry.register(_StubRule(rule_id, prefix))
        assert [r.id for r in registry.rules_for_version("3.0.0")] == ["a", "c", "d"]
        assert [r.id for r in registry.rules_for_version("2.0")] == ["b", "d"]

    def test_contains_and_ids(self) -> None:
        assert "info-version" in self.registry
        assert "nope" not in self.registry
        assert self.registry.rule_ids == BUILTIN_ORDER

    def test_iteration_is_a_snapshot(self) -> None:
        for _rule in self.registry:
            pass
        assert len(list(self.registry)) == 8


# ═══════════════════════════════════════════════════════════════════════════
# RuleRunner
# ═══════════════════════════════════════════════════════════════════════════


class TestRuleRunner:
    def setup_method(self) -> None:
        self.registry = RuleRegistry(builtin_rules())
        self.runner = RuleRunner(self.registry)

    def test_empty_document_produces_all_results(self) -> None:
        results = self.runner.run(Document(), VERSION)
        assert [r.rule_id for r in results] == BUILTIN_ORDER

        by_id = {r.rule_id: r for r in results}
        assert not by_id["paths-exist"].passed
        for rule_id in (
            "operation-operationId-unique",
            "operation-description",
            "operation-success-response",
        ):
            assert by_id[rule_id].passed
            assert by_id[rule_id].detail == "No paths to check"

    @pytest.mark.parametrize("rule_id", BUILTIN_ORDER)
    def test_skip_law(self, rule_id) -> None:
        doc = _sample_doc()
        full = self.runner.run(doc, VERSION)
        skipped = self.runner.run(doc, VERSION, {rule_id})
        assert rule_id not in [r.rule_id for r in skipped]
        assert len(skipped) == len(full) - 1

    def test_output_is_subsequence_of_registration_order(self) -> None:
        results = self.runner.run(_sample_doc(), VERSION, {"info-version", "paths-exist"})
        ids = [r.rule_id for r in results]
        assert ids == [i for i in BUILTIN_ORDER if i in ids]

    def test_unknown_skip_id_is_ignored(self) -> None:
        assert len(self.runner.run(_sample_doc(), VERSION, {"not-a-rule"})) == 8

    def test_constructor_and_call_skips_combine(self) -> None:
        runner = RuleRunner(self.registry, skip_ids={"info-title"})
        results = runner.run(_sample_doc(), VERSION, {"info-version"})
        ids = {r.rule_id for r in results}
        assert "info-title" not in ids
        assert "info-version" not in ids
        assert len(results) == 6

    def test_skip_does_not_touch_registry(self) -> None:
        self.runner.run(_sample_doc(), VERSION, {"info-title"})
        assert len(self.registry.rules_for_version(VERSION)) == 8

    def test_no_applicable_rules(self) -> None:
        assert self.runner.run(_sample_doc(), "2.0") == []

    def test_idempotent(self) -> None:
        doc = _sample_doc()
        first = self.runner.run(doc, VERSION)
        second = self.runner.run(doc, VERSION)
        assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]

    def test_skipped_rule_not_evaluated(self) -> None:
        stub = _StubRule("stub")
        runner = RuleRunner(RuleRegistry([stub]))
        runner.run(Document(), VERSION, {"stub"})
        assert stub.calls == 0

    def test_raising_rule_becomes_failure(self) -> None:
        registry = RuleRegistry([_StubRule("before"), _ExplodingRule("bad"), _StubRule("after")])
        results = RuleRunner(registry).run(Document(), VERSION)
        assert [r.rule_id for r in results] == ["before", "bad", "after"]
        assert not results[1].passed
        assert "KeyError" in results[1].detail
        assert results[1].category == "engine"

    def test_result_id_corrected(self) -> None:
        results = RuleRunner(RuleRegistry([_MislabelledRule("mine")])).run(Document(), VERSION)
        assert results[0].rule_id == "mine"

    def test_run_rule(self) -> None:
        r = self.runner.run_rule(_sample_doc(), VERSION, "info-title")
        assert r is not None
        assert r.detail == "Missing title in info section"

    def test_run_rule_unknown_or_inapplicable(self) -> None:
        assert self.runner.run_rule(_sample_doc(), VERSION, "nope") is None
        assert self.runner.run_rule(_sample_doc(), "2.0", "info-title") is None
