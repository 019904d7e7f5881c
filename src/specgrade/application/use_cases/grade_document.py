"""Use Case: Grade an API Description.

Loads a document through an injected SpecLoaderPort, runs the applicable
rules and assembles the Report.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from specgrade.domain.models.document import Document
from specgrade.domain.models.result import Report
from specgrade.domain.ports.spec_loader import SpecLoaderPort
from specgrade.engine.grader import DefaultGrader
from specgrade.engine.runner import RuleRunner

logger = logging.getLogger(__name__)


class GradeDocumentUseCase:
    """Orchestrate load → run → grade for one API description."""

    def __init__(
        self,
        loader: SpecLoaderPort,
        runner: RuleRunner,
        grader: DefaultGrader,
    ) -> None:
        self._loader = loader
        self._runner = runner
        self._grader = grader

    def execute(self, target: Path, version: str, skip_ids: Iterable[str] = ()) -> Report:
        """Grade the description at *target*.

        Args:
            target: A spec file, or a directory containing one.
            version: OpenAPI version whose rules apply (e.g. ``"3.1.0"``).
            skip_ids: Rule IDs to leave out of the report.

        Returns:
            The immutable Report for this run.

        Raises:
            SpecLoadError: If the description cannot be loaded.
        """
        document = self._loader.load(Path(target))
        return self.grade(document, version, skip_ids)

    def grade(self, document: Document, version: str, skip_ids: Iterable[str] = ()) -> Report:
        """Grade an already-loaded *document*."""
        if document.spec_version and document.spec_version.split(".")[0] != version.split(".")[0]:
            logger.warning(
                "Document declares OpenAPI %s but is graded against %s",
                document.spec_version,
                version,
            )
        results = self._runner.run(document, version, skip_ids)
        report = self._grader.build_report(version, results)
        logger.info("Graded %d rule(s): score %d, grade %s", report.total, report.score, report.grade)
        return report
