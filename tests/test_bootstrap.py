"""Tests for the Container and the grading use case."""

from __future__ import annotations

import logging
from pathlib import Path

from specgrade.bootstrap import Container
from specgrade.config import SpecGradeConfig
from specgrade.domain.models import Document, Info
from specgrade.domain.ports.spec_loader import SpecLoaderPort
from specgrade.rules import PathsExistRule


class FakeLoader(SpecLoaderPort):
    """Returns a canned document and records what it was asked to load."""

    def __init__(self, document: Document) -> None:
        self.document = document
        self.loaded: list[Path] = []

    def load(self, target: Path) -> Document:
        self.loaded.append(target)
        return self.document


class TestContainer:
    def test_wires_builtin_rules(self):
        container = Container(config=SpecGradeConfig())
        assert len(container.registry) == 8

    def test_custom_rules(self):
        container = Container(config=SpecGradeConfig(), rules=[PathsExistRule()])
        assert container.registry.rule_ids == ["paths-exist"]

    def test_registries_are_independent(self):
        a = Container(config=SpecGradeConfig())
        b = Container(config=SpecGradeConfig())
        assert a.registry is not b.registry

    def test_runner_uses_configured_skips(self):
        container = Container(config=SpecGradeConfig(skip_rules=["info-title"]))
        assert container.runner().skip_ids == frozenset({"info-title"})

    def test_exit_policy_uses_threshold(self):
        container = Container(config=SpecGradeConfig(fail_threshold="A"))
        assert container.exit_policy().threshold == "A"

    def test_loads_config_from_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("fail_threshold: C\n", encoding="utf-8")
        assert Container(config_path=path).config.fail_threshold == "C"


class TestGradeDocumentUseCase:
    def test_grades_loaded_document(self):
        loader = FakeLoader(Document(info=Info(title="Tiny API", version="1")))
        container = Container(config=SpecGradeConfig(), loader=loader)

        report = container.grade_document().execute(Path("spec.yaml"), "3.1.0")

        assert loader.loaded == [Path("spec.yaml")]
        assert report.version == "3.1.0"
        assert report.total == 8
        # info-title, info-version, schema examples and the three "No paths" checks
        assert report.passed == 6
        assert (report.score, report.grade) == (75, "B")

    def test_skip_ids_passed_through(self):
        container = Container(config=SpecGradeConfig(), loader=FakeLoader(Document()))
        report = container.grade_document().execute(
            Path("x"), "3.1.0", ["paths-exist", "oas3-security-defined"]
        )
        assert report.total == 6

    def test_configured_skips_apply_without_call_arguments(self):
        container = Container(
            config=SpecGradeConfig(skip_rules=["paths-exist"]), loader=FakeLoader(Document())
        )
        report = container.grade_document().execute(Path("x"), "3.1.0")
        assert report.total == 7
        assert "paths-exist" not in [r.rule_id for r in report.rules]

    def test_unsupported_major_yields_empty_report(self):
        container = Container(config=SpecGradeConfig(), loader=FakeLoader(Document()))
        report = container.grade_document().execute(Path("x"), "2.0")
        assert report.total == 0
        assert report.grade == "F"

    def test_version_mismatch_logged(self, caplog):
        container = Container(
            config=SpecGradeConfig(), loader=FakeLoader(Document(spec_version="2.0"))
        )
        with caplog.at_level(logging.WARNING):
            container.grade_document().execute(Path("x"), "3.1.0")
        assert "declares OpenAPI 2.0" in caplog.text

    def test_full_petstore_run(self, petstore_file):
        report = Container(config=SpecGradeConfig()).grade_document().execute(
            petstore_file, "3.1.0"
        )
        assert all(r.passed for r in report.rules)
        assert (report.score, report.grade) == (100, "A+")
