"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. Each Container owns its own RuleRegistry;
there is no process-wide registry.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from specgrade.application.use_cases.grade_document import GradeDocumentUseCase
from specgrade.config.loader import load_config
from specgrade.config.models import SpecGradeConfig
from specgrade.domain.ports.spec_loader import SpecLoaderPort
from specgrade.engine.exit_policy import ExitPolicy
from specgrade.engine.grader import DefaultGrader
from specgrade.engine.registry import RuleRegistry
from specgrade.engine.runner import RuleRunner
from specgrade.infrastructure.loaders.openapi_loader import OpenAPIFileLoader
from specgrade.rules import BaseRule, builtin_rules


class Container:
    """Simple dependency injection container.

    Wires the registry, runner, grader and loader, and provides
    pre-configured use cases.

    Usage::

        container = Container()
        report = container.grade_document().execute(Path("specs/"), "3.1.0")
        code = container.exit_policy().exit_code(report.grade)
    """

    def __init__(
        self,
        config: Optional[SpecGradeConfig] = None,
        config_path: Optional[Path] = None,
        rules: Optional[Iterable[BaseRule]] = None,
        loader: Optional[SpecLoaderPort] = None,
    ) -> None:
        self._config = config if config is not None else load_config(config_path)

        # -- Engine -----------------------------------------------------------
        self._registry = RuleRegistry(rules if rules is not None else builtin_rules())
        self._grader = DefaultGrader()
        self._loader: SpecLoaderPort = loader or OpenAPIFileLoader()

    # -- Accessors -------------------------------------------------------------

    @property
    def config(self) -> SpecGradeConfig:
        return self._config

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def grader(self) -> DefaultGrader:
        return self._grader

    @property
    def loader(self) -> SpecLoaderPort:
        return self._loader

    # -- Factories -------------------------------------------------------------

    def runner(self) -> RuleRunner:
        """Runner honouring the configured ``skip_rules``."""
        return RuleRunner(self._registry, skip_ids=self._config.skip_rules)

    def exit_policy(self) -> ExitPolicy:
        return ExitPolicy(self._config.fail_threshold)

    def grade_document(self) -> GradeDocumentUseCase:
        return GradeDocumentUseCase(self._loader, self.runner(), self._grader)
