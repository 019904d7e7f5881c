"""JSON and Markdown rendering of a grading ``Report``.

Renderers only read the report; they never reach back into the
document that produced it.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from specgrade.domain.models.result import Report
from specgrade.rules.base import BaseRule


def render_json(report: Report) -> str:
    return report.to_json()


def _cell(text: str) -> str:
    """Make *text* safe inside a Markdown table cell."""
    return text.replace("|", "\\|").replace("\n", " ")


def render_markdown(report: Report, target: str = "") -> str:
    """Render *report* as a Markdown document."""
    lines = ["# SpecGrade Validation Report", ""]
    if target:
        lines += [f"**Target:** `{target}`", ""]

    lines += [
        "| Version | Score | Grade | Passed |",
        "|---------|-------|-------|--------|",
        f"| {report.version} | {report.score}% | **{report.grade}** "
        f"| {report.passed}/{report.total} |",
        "",
        "## Rules",
        "",
        "| Status | Rule | Severity | Detail |",
        "|--------|------|----------|--------|",
    ]
    for r in report.rules:
        lines.append(f"| {r.icon} | `{r.rule_id}` | {r.severity.value} | {_cell(r.detail)} |")

    fixes = [r for r in report.failures if r.suggestion is not None]
    if fixes:
        lines += ["", "## Suggested fixes"]
        for r in fixes:
            s = r.suggestion
            lines += ["", f"### `{r.rule_id}`: {s.title or r.detail}", ""]
            if s.description:
                lines += [s.description, ""]
            if s.example:
                lines += ["```yaml", s.example, "```", ""]
            for ref in s.references:
                lines.append(f"- <{ref}>")

    return "\n".join(lines).rstrip() + "\n"


def render_rule_docs(rules: Iterable[BaseRule], versions: Sequence[str]) -> str:
    """Markdown documentation for every rule in *rules*."""
    lines = [
        "# SpecGrade Rules Documentation",
        "",
        "This document describes all available validation rules in SpecGrade.",
        "",
    ]
    for rule in rules:
        applicable = [v for v in versions if rule.applies_to(v)]
        lines += [
            f"## {rule.id}",
            "",
            f"**Description:** {rule.description}",
            "",
            f"**Category:** {rule.category.value}",
            "",
            f"**Applies to:** OpenAPI {', '.join(applicable) if applicable else 'none'}",
            "",
            "---",
            "",
        ]
    return "\n".join(lines).rstrip() + "\n"
