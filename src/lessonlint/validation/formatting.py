"""Per-file Markdown formatting checks."""

from pathlib import Path

from mdscan import LIST_INDENT_UNIT, MarkdownStructure, scan

from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation


def check_heading_hierarchy(structure: MarkdownStructure, file: str | None = None) -> list[Violation]:
    """Headings never skip a level going deeper; '#' must be followed by a space.

    The first heading may be at any level, and moving back up any number of
    levels is fine.
    """
    violations = [
        Violation(
            Category.HEADING_HIERARCHY,
            Severity.ERROR,
            "Missing space after # symbols",
            file=file,
            line=issue.line_number,
        )
        for issue in structure.issues
        if issue.kind == "heading_missing_space"
    ]

    previous = 0
    for heading in structure.headings:
        if previous > 0 and heading.level > previous + 1:
            violations.append(Violation(
                Category.HEADING_HIERARCHY,
                Severity.ERROR,
                f"Heading level skipped from {previous} to {heading.level}",
                file=file,
                line=heading.line_number,
            ))
        previous = heading.level

    return violations


def check_code_blocks(structure: MarkdownStructure, file: str | None = None) -> list[Violation]:
    """Every fence is closed cleanly; a missing language tag is only a warning."""
    violations = []
    for block in structure.code_blocks:
        if not block.has_language_tag:
            violations.append(Violation(
                Category.CODE_BLOCK,
                Severity.WARNING,
                "Code block without language tag (consider adding for syntax highlighting)",
                file=file,
                line=block.start_line,
            ))
        if not block.is_closed:
            violations.append(Violation(
                Category.CODE_BLOCK,
                Severity.ERROR,
                "Code block opened but never closed",
                file=file,
                line=block.start_line,
            ))
        elif not block.has_clean_closing:
            violations.append(Violation(
                Category.CODE_BLOCK,
                Severity.ERROR,
                "Code block closing fence should be just ```",
                file=file,
                line=block.end_line,
            ))
    return violations


def check_list_formatting(structure: MarkdownStructure, file: str | None = None) -> list[Violation]:
    violations = [
        Violation(
            Category.LIST_FORMATTING,
            Severity.ERROR,
            "Missing space after list marker",
            file=file,
            line=issue.line_number,
        )
        for issue in structure.issues
        if issue.kind == "list_missing_space"
    ]
    for item in structure.list_items:
        if item.indent % LIST_INDENT_UNIT:
            violations.append(Violation(
                Category.LIST_FORMATTING,
                Severity.WARNING,
                f"List indentation should be multiples of {LIST_INDENT_UNIT} spaces "
                f"(found {item.indent})",
                file=file,
                line=item.line_number,
            ))
    return violations


def check_markdown_formatting(content: str, file: str | None = None) -> list[Violation]:
    """All formatting checks for one document, in line order."""
    structure = scan(content)
    return sorted(
        check_heading_hierarchy(structure, file)
        + check_code_blocks(structure, file)
        + check_list_formatting(structure, file),
        key=Violation.sort_key,
    )


def validate_markdown_formatting(
    files: list[Path],
    root: Path,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Run every formatting check on each file."""
    owned = loader is None
    loader = loader or DocumentLoader(root)
    violations: list[Violation] = []

    for path in files:
        structure = loader.structure(path)
        if structure is None:
            continue
        file = loader.display(path)
        violations.extend(check_heading_hierarchy(structure, file))
        violations.extend(check_code_blocks(structure, file))
        violations.extend(check_list_formatting(structure, file))

    return collect(violations, loader, owned)
