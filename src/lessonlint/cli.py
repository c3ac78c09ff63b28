"""CLI interface for lessonlint using Typer framework."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from lessonlint import __description__, __version__
from lessonlint.config import (
    LessonLintConfig,
    LogLevel,
    create_default_config,
    find_config_file,
    load_config,
)
from lessonlint.report import REPORT_FORMATS, render
from lessonlint.validation import ValidationFramework

app = typer.Typer(
    name="lessonlint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

PathArgument = Annotated[
    Path,
    typer.Argument(help="Module root directory (default: current directory)")
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file path (default: search for .lessonlint.json)")
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level: error, warn, info, debug (default: from config)")
]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"lessonlint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """lessonlint - Structure validation for bilingual Markdown lesson modules."""


def _error(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    return typer.Exit(1)


def _load(path: Path, config: Path | None) -> LessonLintConfig:
    if config is not None:
        if not config.exists():
            raise ValueError(f"Config file not found: {config}")
        return load_config(config)

    config_file = find_config_file(path)
    return load_config(config_file) if config_file else create_default_config()


def _configure_logging(level: str | None, lint_config: LessonLintConfig) -> None:
    name = level or LogLevel(lint_config.logging.level).value
    logging.basicConfig(
        level=LOG_LEVELS[name],
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def _run_check(check: str, path: Path, format: str, config: Path | None, log_level: str | None) -> None:
    """Shared body of every check command; always ends with typer.Exit."""
    if format not in REPORT_FORMATS:
        raise _error(f"Invalid format '{format}'. Must be one of: {', '.join(REPORT_FORMATS)}")

    if log_level is not None and log_level not in LOG_LEVELS:
        raise _error(f"Invalid log level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}")

    try:
        lint_config = _load(path, config)
    except ValueError as e:
        raise _error(str(e))

    _configure_logging(log_level, lint_config)

    framework = ValidationFramework(lint_config)
    try:
        framework.create_rules(check)
    except ValueError as e:
        raise _error(str(e))

    result = framework.run(path)

    if result.fatal:
        raise _error(result.violations[0].message)

    render(result, format, console, title=f"lessonlint {check}: {path.resolve()}")
    raise typer.Exit(result.exit_code)


@app.command()
def check(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Run every check against a module."""
    _run_check("all", path, format, config, log_level)


@app.command()
def structure(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check module layout, lesson naming and bilingual README pairs."""
    _run_check("structure", path, format, config, log_level)


@app.command()
def content(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check parallel headings, language links and required sections."""
    _run_check("content", path, format, config, log_level)


@app.command()
def navigation(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check Previous/Next/Module Home links between lessons."""
    _run_check("navigation", path, format, config, log_level)


@app.command(name="format")
def format_command(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check heading hierarchy, code blocks and list formatting."""
    _run_check("format", path, format, config, log_level)


@app.command()
def links(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check relative links and heading anchors."""
    _run_check("links", path, format, config, log_level)


@app.command()
def exercises(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check exercise instructions, lesson references and criteria."""
    _run_check("exercises", path, format, config, log_level)


@app.command()
def attribution(
    path: PathArgument = Path("."),
    format: FormatOption = "table",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Check that long documents name their sources."""
    _run_check("attribution", path, format, config, log_level)


if __name__ == "__main__":
    app()
