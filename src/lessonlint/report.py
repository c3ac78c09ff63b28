"""Render validation results as a rich table, JSON or Markdown."""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lessonlint.validation import Severity, ValidationResult, ValidationStatus

REPORT_FORMATS = ("table", "json", "markdown")

STATUS_COLORS = {
    ValidationStatus.PASS: "green",
    ValidationStatus.WARN: "yellow",
    ValidationStatus.FAIL: "red",
}

SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


def _summary_rows(result: ValidationResult) -> list[tuple[str, int]]:
    return [
        ("Files checked", len(result.files_checked)),
        ("Files with issues", len(result.files_with_issues)),
        ("Total violations", len(result.violations)),
        ("Errors", len(result.errors)),
        ("Warnings", len(result.warnings)),
    ]


def render_table(result: ValidationResult, console: Console, title: str | None = None) -> None:
    """One section per category, then a summary with PASSED/FAILED per category."""
    if title:
        console.print(f"[bold blue]{escape(title)}[/bold blue]")

    grouped = result.by_category()
    for category in result.categories:
        violations = grouped.get(category, [])
        console.print(f"\n[blue]{category.value}[/blue]")
        if not violations:
            console.print("[green]No issues found[/green]")
            continue

        table = Table()
        table.add_column("File", style="cyan")
        table.add_column("Line", justify="right")
        table.add_column("Severity")
        table.add_column("Message")

        for violation in violations:
            color = SEVERITY_COLORS[violation.severity]
            table.add_row(
                escape(violation.file or ""),
                str(violation.line) if violation.line is not None else "",
                f"[{color}]{violation.severity.value.upper()}[/{color}]",
                escape(violation.message),
            )
        console.print(table)

    console.print("\n[blue]Summary:[/blue]")
    summary = Table()
    summary.add_column("Metric", style="cyan")
    summary.add_column("Count", justify="right")
    for label, value in _summary_rows(result):
        summary.add_row(label, str(value))
    for key, value in sorted(result.counters.items()):
        summary.add_row(key.replace("_", " ").capitalize(), str(value))
    console.print(summary)

    for category in result.categories:
        if result.category_passed(category):
            console.print(f"[green]PASSED[/green] {category.value}")
        else:
            console.print(f"[red]FAILED[/red] {category.value}")

    color = STATUS_COLORS[result.status]
    console.print(f"\n[{color}]Validation Status: {result.status.value.upper()}[/{color}]")


def render_json(result: ValidationResult, console: Console) -> None:
    console.out(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), highlight=False)


def render_markdown(result: ValidationResult, console: Console) -> None:
    lines = [
        "# Validation Report",
        "",
        f"**Status:** {result.status.value}",
        f"**Exit Code:** {result.exit_code}",
        "",
        "## Summary",
        "",
    ]
    lines.extend(f"- {label}: {value}" for label, value in _summary_rows(result))
    lines.extend(["", "## Categories", "", "| Category | Result |", "|---|---|"])
    lines.extend(
        f"| {category.value} | {'PASSED' if result.category_passed(category) else 'FAILED'} |"
        for category in result.categories
    )

    grouped = result.by_category()
    for category in result.categories:
        violations = grouped.get(category, [])
        if not violations:
            continue
        lines.extend(["", f"## {category.value}", ""])
        for violation in violations:
            location = violation.file or ""
            if violation.line is not None:
                location += f":{violation.line}"
            prefix = f"`{location}` " if location else ""
            lines.append(f"- **{violation.severity.value.upper()}** {prefix}{violation.message}")

    console.out("\n".join(lines), highlight=False)


def render(result: ValidationResult, format: str, console: Console, title: str | None = None) -> None:
    """Render in the requested format.

    Raises:
        ValueError: If the format is unknown
    """
    if format == "json":
        render_json(result, console)
    elif format == "markdown":
        render_markdown(result, console)
    elif format == "table":
        render_table(result, console, title)
    else:
        raise ValueError(
            f"Invalid format '{format}'. Must be one of: {', '.join(REPORT_FORMATS)}"
        )
