"""Thin CLI wrapper — Typer commands that delegate to the Container.

All engine wiring is accessed through the Container (bootstrap.py).
Exit codes: 0 success, 1 grade below threshold, 2 usage/config/load error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from specgrade.presentation.cli.formatters import (
    configure_logging,
    console,
    error_message,
    json_panel,
    report_table,
    rules_table,
    success_panel,
)

EXIT_USAGE_ERROR = 2

app = typer.Typer(
    name="specgrade",
    help="🏅 Grade OpenAPI 3.x descriptions against versioned conformance rules",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for rule discovery
rules_app = typer.Typer(
    name="rules",
    help="📋 List and document validation rules",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(rules_app, name="rules")

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the SpecGrade configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a specgrade.yaml config file"),
]


def _split_skip(skip: Optional[str]) -> Optional[list[str]]:
    if not skip:
        return None
    return [part.strip() for part in skip.split(",") if part.strip()]


# ---------------------------------------------------------------------------
# specgrade grade
# ---------------------------------------------------------------------------


@app.command()
def grade(
    target: Annotated[
        Optional[str],
        typer.Argument(help="Spec file or directory (defaults to input_dir from config)"),
    ] = None,
    spec_version: Annotated[
        Optional[str],
        typer.Option("--spec-version", help="OpenAPI version to validate against (e.g. 3.1.0)"),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option("--output-format", "-o", help="Output format: cli, json or markdown"),
    ] = None,
    fail_threshold: Annotated[
        Optional[str],
        typer.Option("--fail-threshold", help="Minimum acceptable grade (A, B, ...)"),
    ] = None,
    skip: Annotated[
        Optional[str],
        typer.Option("--skip", help="Comma-separated rule IDs to ignore"),
    ] = None,
    config: ConfigOption = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Grade an OpenAPI description and exit non-zero below the threshold."""
    from specgrade.bootstrap import Container
    from specgrade.config import OutputFormat, load_config, merge_overrides
    from specgrade.domain.errors import SpecGradeError, UnsupportedVersionError
    from specgrade.domain.versions import is_supported_version, supported_versions
    from specgrade.infrastructure.reporters import render_json, render_markdown

    configure_logging(verbose)

    try:
        cfg = merge_overrides(
            load_config(Path(config) if config else None),
            spec_version=spec_version,
            input_dir=target,
            output_format=output_format,
            fail_threshold=fail_threshold,
            skip_rules=_split_skip(skip),
        )
        if not cfg.input_dir:
            raise SpecGradeError(
                "A target is required (pass it as an argument or set input_dir in the config)"
            )
        if not is_supported_version(cfg.spec_version):
            raise UnsupportedVersionError(
                f"Unsupported OpenAPI version: {cfg.spec_version} "
                f"(supported: {', '.join(supported_versions())})"
            )

        container = Container(config=cfg)
        report = container.grade_document().execute(Path(cfg.input_dir), cfg.spec_version)
        exit_code = container.exit_policy().exit_code(report.grade)
    except SpecGradeError as e:
        error_message(str(e))
        raise typer.Exit(code=EXIT_USAGE_ERROR)

    if cfg.output_format == OutputFormat.JSON:
        typer.echo(render_json(report))
    elif cfg.output_format == OutputFormat.MARKDOWN:
        typer.echo(render_markdown(report, cfg.input_dir), nl=False)
    else:
        report_table(report, cfg.input_dir)

    if exit_code != 0:
        if cfg.output_format == OutputFormat.CLI:
            error_message(f"Grade {report.grade} is below the threshold {cfg.fail_threshold}")
        raise typer.Exit(code=exit_code)


# ---------------------------------------------------------------------------
# specgrade rules ls / docs
# ---------------------------------------------------------------------------


@rules_app.command("ls")
def rules_ls() -> None:
    """List all available validation rules."""
    from specgrade.bootstrap import Container
    from specgrade.config import SpecGradeConfig
    from specgrade.domain.versions import supported_versions

    container = Container(config=SpecGradeConfig())
    rules_table(container.registry.all_rules(), supported_versions())


@rules_app.command("docs")
def rules_docs() -> None:
    """Print Markdown documentation for every rule."""
    from specgrade.bootstrap import Container
    from specgrade.config import SpecGradeConfig
    from specgrade.domain.versions import supported_versions
    from specgrade.infrastructure.reporters import render_rule_docs

    container = Container(config=SpecGradeConfig())
    typer.echo(render_rule_docs(container.registry.all_rules(), supported_versions()), nl=False)


# ---------------------------------------------------------------------------
# specgrade config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration (formatted)."""
    from specgrade.config import load_config
    from specgrade.domain.errors import ConfigurationError

    try:
        cfg = load_config(Path(config) if config else None)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=EXIT_USAGE_ERROR)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "specgrade.yaml",
    force: Annotated[bool, typer.Option("--force", help="Overwrite without asking")] = False,
) -> None:
    """Copy the default configuration into the current directory for editing."""
    import shutil

    from specgrade.config.loader import DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists() and not force:
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        if not typer.confirm("Overwrite it?"):
            raise typer.Abort()

    shutil.copy2(DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration written to: [bold green]{dest}[/]\n\n"
        "Edit it and run [bold]specgrade grade[/] from this directory,\n"
        f'or pass it explicitly: specgrade grade --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="Path to the config file to validate")],
) -> None:
    """Validate a SpecGrade configuration file."""
    from specgrade.config import load_config
    from specgrade.domain.errors import ConfigurationError
    from specgrade.domain.versions import schema_url

    path = Path(config_file)
    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=EXIT_USAGE_ERROR)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Spec version: [cyan]{cfg.spec_version}[/]\n"
        f"  Schema: [cyan]{schema_url(cfg.spec_version) or 'unsupported version'}[/]\n"
        f"  Fail threshold: [cyan]{cfg.fail_threshold}[/]\n"
        f"  Output format: [cyan]{cfg.output_format.value}[/]\n"
        f"  Skipped rules: [cyan]{len(cfg.skip_rules)}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
