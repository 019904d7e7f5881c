"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about how reports are produced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from specgrade.domain.models.result import Report
    from specgrade.rules.base import BaseRule

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "SpecGrade") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    err_console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active SpecGrade configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Rules listing
# ---------------------------------------------------------------------------


def rules_table(rules: Iterable[BaseRule], versions: Sequence[str]) -> None:
    """Print the registered rules and the versions each applies to."""
    rules = list(rules)
    table = Table(
        title=f"📋 Available Rules ({len(rules)} total)",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description")
    table.add_column("Applies to", style="green")

    for rule in rules:
        applicable = [v for v in versions if rule.applies_to(v)]
        table.add_row(
            rule.id,
            rule.category.value,
            rule.description,
            ", ".join(applicable) if applicable else "—",
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Grading report rendering
# ---------------------------------------------------------------------------


def _grade_color(score: int) -> str:
    return "green" if score >= 80 else "yellow" if score >= 60 else "red"


def report_table(report: Report, target: str = "") -> None:
    """Print a Rich results table plus summary panel."""
    table = Table(
        title=f"📄 {target}" if target else "📄 SpecGrade Report",
        show_header=True,
        border_style="blue",
    )
    table.add_column("", width=3)
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Severity", width=8)
    table.add_column("Detail")

    for r in report.rules:
        style = "green" if r.passed else ("red" if r.severity.value == "error" else "yellow")
        table.add_row(r.icon, f"[{style}]{r.rule_id}[/]", r.severity.value, r.detail)

    console.print(table)

    color = _grade_color(report.score)
    console.print(
        Panel(
            f"🔖 Spec: OpenAPI {report.version}\n"
            f"✅ Passed: {report.passed}/{report.total} rules\n"
            f"🎯 Score: [bold {color}]{report.score}%[/]\n"
            f"🏅 Grade: [bold {color}]{report.grade}[/]",
            title="📊 Summary",
            border_style=color,
        )
    )

    fixes = [r for r in report.failures if r.suggestion is not None]
    for r in fixes:
        s = r.suggestion
        body = s.description
        if s.example:
            body += f"\n\n{s.example}"
        console.print(
            Panel(body, title=f"💡 {r.rule_id}: {s.title or 'Suggested fix'}", border_style="dim")
        )
