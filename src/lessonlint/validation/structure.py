"""Directory convention checks: module layout, lesson naming, bilingual pairs."""

import re
from collections.abc import Iterable
from pathlib import Path

from ..config import LessonLintConfig
from ..utils.walker import list_subdirectories, walk_directories
from .framework import Category, Severity, Violation

DEFAULT_LESSON_PATTERN = r"^\d{2}-[a-z-]+$"
DEFAULT_PRIMARY_FILENAME = "README.md"
DEFAULT_SECONDARY_FILENAME = "README_ID.md"


def validate_basic_structure(root: Path, config: LessonLintConfig) -> list[Violation]:
    """The module root must carry both language READMEs."""
    violations = []
    for variant in config.languages.variants:
        if not (root / variant.filename).is_file():
            violations.append(Violation(
                Category.BASIC_STRUCTURE,
                Severity.ERROR,
                f"Module root is missing {variant.filename}",
                file=variant.filename,
            ))
    return violations


def validate_lesson_naming(
    root: Path,
    excludes: Iterable[str],
    pattern: str = DEFAULT_LESSON_PATTERN,
) -> list[Violation]:
    """Every immediate, non-excluded subdirectory must follow the lesson pattern."""
    compiled = re.compile(pattern)
    violations = []
    for name in list_subdirectories(root, excludes):
        if not compiled.match(name):
            violations.append(Violation(
                Category.LESSON_NAMING,
                Severity.ERROR,
                f"Invalid lesson directory name '{name}'. "
                f"Expected pattern: {pattern} (e.g. \"01-fundamentals\")",
                file=name,
            ))
    return violations


def validate_bilingual_pairs(
    root: Path,
    excludes: Iterable[str],
    primary_filename: str = DEFAULT_PRIMARY_FILENAME,
    secondary_filename: str = DEFAULT_SECONDARY_FILENAME,
) -> list[Violation]:
    """A directory holds both language READMEs or neither of them."""
    violations = []
    for directory in [".", *walk_directories(root, excludes)]:
        full = root / directory
        has_primary = (full / primary_filename).is_file()
        has_secondary = (full / secondary_filename).is_file()
        if has_primary == has_secondary:
            continue

        existing, missing = (
            (primary_filename, secondary_filename) if has_primary
            else (secondary_filename, primary_filename)
        )
        location = missing if directory == "." else f"{directory}/{missing}"
        violations.append(Violation(
            Category.BILINGUAL_PAIR,
            Severity.ERROR,
            f"{directory if directory != '.' else 'root'}: Found {existing} but missing {missing}",
            file=location,
        ))
    return violations
