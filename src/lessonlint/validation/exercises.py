"""Exercise directory checks.

Exercises live in numbered directories under the module's exercises
directory. A module without one has nothing to check.
"""

import re
from pathlib import Path

from ..config import LabelsConfig, LessonLintConfig
from ..discovery import Exercise
from ..labels import SectionId, matches_label
from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation

# Mention of any lesson directory, bare or inside a link
LESSON_REFERENCE_PATTERN = re.compile(r"\d{2}-[a-z-]+")

STARTER_DIR = "starter"
SOLUTION_DIR = "solution"


def validate_exercise_bilingual(
    exercises: list[Exercise],
    config: LessonLintConfig | None = None,
) -> list[Violation]:
    """Every exercise has instructions in both languages."""
    config = config or LessonLintConfig()
    violations = []
    for exercise in exercises:
        for variant in config.languages.variants:
            if not (exercise.path / variant.filename).is_file():
                violations.append(Violation(
                    Category.EXERCISE_BILINGUAL,
                    Severity.ERROR,
                    f"{exercise.name}: Missing {variant.filename}",
                    file=f"{config.lessons.exercises_dir}/{exercise.name}/{variant.filename}",
                ))
    return violations


def validate_exercise_references(
    exercises: list[Exercise],
    root: Path,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Every exercise README points the learner back to at least one lesson."""
    owned = loader is None
    loader = loader or DocumentLoader(root)
    violations: list[Violation] = []

    for exercise in exercises:
        for exercise_file in exercise.files:
            content = loader.text(exercise_file.path)
            if content is None:
                continue
            if not LESSON_REFERENCE_PATTERN.search(content):
                violations.append(Violation(
                    Category.EXERCISE_REFERENCE,
                    Severity.ERROR,
                    f"{exercise.name} ({exercise_file.language}): No lesson references found",
                    file=loader.display(exercise_file.path),
                ))

    return collect(violations, loader, owned)


def has_validation_criteria(content: str, headings: list[str], labels: LabelsConfig) -> bool:
    """Criteria heading (level 2) or any criteria keyword in the text."""
    accepted = labels.section_labels(SectionId.VALIDATION_CRITERIA)
    if any(matches_label(heading, accepted) for heading in headings):
        return True
    folded = content.casefold()
    return any(keyword.casefold() in folded for keyword in labels.criteria_keywords)


def validate_exercise_criteria(
    exercises: list[Exercise],
    root: Path,
    labels: LabelsConfig | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Every exercise README says how a solution is judged."""
    owned = loader is None
    loader = loader or DocumentLoader(root)
    labels = labels or LabelsConfig()
    violations: list[Violation] = []

    for exercise in exercises:
        for exercise_file in exercise.files:
            structure = loader.structure(exercise_file.path)
            if structure is None:
                continue
            content = loader.text(exercise_file.path) or ""
            headings = [h.text for h in structure.headings if h.level == 2]
            if not has_validation_criteria(content, headings, labels):
                violations.append(Violation(
                    Category.EXERCISE_CRITERIA,
                    Severity.ERROR,
                    f"{exercise.name} ({exercise_file.language}): No validation criteria found "
                    f"(expected a \"Validation Criteria\" section or criteria keywords)",
                    file=loader.display(exercise_file.path),
                ))

    return collect(violations, loader, owned)


def validate_exercise_layout(
    exercises: list[Exercise],
    config: LessonLintConfig | None = None,
) -> list[Violation]:
    """Starter and solution directories are expected but not required."""
    config = config or LessonLintConfig()
    violations = []
    for exercise in exercises:
        for directory in (STARTER_DIR, SOLUTION_DIR):
            if not (exercise.path / directory).is_dir():
                violations.append(Violation(
                    Category.EXERCISE_LAYOUT,
                    Severity.WARNING,
                    f"{exercise.name}: Missing {directory} directory",
                    file=f"{config.lessons.exercises_dir}/{exercise.name}",
                ))
    return violations
