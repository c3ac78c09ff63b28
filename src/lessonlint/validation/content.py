"""Bilingual content checks: parallel headings, language links, required sections."""

import logging
from pathlib import Path

from ..config import LabelsConfig
from ..discovery import BilingualPair, LessonFile
from ..labels import (
    ALTERNATIVE_SECTIONS,
    REQUIRED_SECTIONS,
    SECTION_DISPLAY_NAMES,
    matches_label,
)
from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation

logger = logging.getLogger(__name__)

# Required sections are second-level headings
SECTION_HEADING_LEVEL = 2


def validate_parallel_structure(
    pairs: list[BilingualPair],
    root: Path,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Both files of a pair must have the same heading level sequence.

    Heading text is not compared, translations differ. A count mismatch is
    reported once per pair; otherwise every position whose levels differ is
    reported with both headings for diagnosis.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    violations: list[Violation] = []

    for pair in pairs:
        primary = loader.structure(pair.primary_path)
        secondary = loader.structure(pair.secondary_path)
        if primary is None or secondary is None:
            continue

        primary_tag = pair.primary_language.upper()
        secondary_tag = pair.secondary_language.upper()
        file = loader.display(pair.secondary_path)

        if len(primary.headings) != len(secondary.headings):
            violations.append(Violation(
                Category.PARALLEL_STRUCTURE,
                Severity.ERROR,
                f"Heading count mismatch ({primary_tag}: {len(primary.headings)}, "
                f"{secondary_tag}: {len(secondary.headings)})",
                file=file,
            ))
            continue

        for index, (expected, found) in enumerate(zip(primary.headings, secondary.headings)):
            if expected.level == found.level:
                continue
            violations.append(Violation(
                Category.PARALLEL_STRUCTURE,
                Severity.ERROR,
                f"Heading level mismatch at position {index}: expected level {expected.level}, "
                f"found {found.level} ({primary_tag}: \"{expected.text}\" / "
                f"{secondary_tag}: \"{found.text}\")",
                file=file,
                line=found.line_number,
            ))

    return collect(violations, loader, owned)


def validate_language_links(
    pairs: list[BilingualPair],
    root: Path,
    switch_markers: list[str] | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Each file of a pair must link to its counterpart.

    The alternate-language file must also carry a language switch marker.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    markers = switch_markers if switch_markers is not None else LabelsConfig().language_switch
    violations: list[Violation] = []

    for pair in pairs:
        primary_text = loader.text(pair.primary_path)
        secondary_text = loader.text(pair.secondary_path)
        if primary_text is None or secondary_text is None:
            continue

        primary_name = pair.primary_path.name
        secondary_name = pair.secondary_path.name

        if secondary_name not in primary_text:
            violations.append(Violation(
                Category.LANGUAGE_LINK,
                Severity.ERROR,
                f"Missing link to {secondary_name}",
                file=loader.display(pair.primary_path),
            ))

        if primary_name not in secondary_text:
            violations.append(Violation(
                Category.LANGUAGE_LINK,
                Severity.ERROR,
                f"Missing link to {primary_name}",
                file=loader.display(pair.secondary_path),
            ))
        elif not any(marker in secondary_text for marker in markers):
            violations.append(Violation(
                Category.LANGUAGE_LINK,
                Severity.ERROR,
                f"Link to {primary_name} has no language switch marker "
                f"(one of: {', '.join(markers)})",
                file=loader.display(pair.secondary_path),
            ))

    return collect(violations, loader, owned)


def validate_required_sections(
    lesson_files: list[LessonFile],
    root: Path,
    labels: LabelsConfig | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Lessons carry every mandatory section and at least one of the alternatives."""
    owned = loader is None
    loader = loader or DocumentLoader(root)
    labels = labels or LabelsConfig()
    violations: list[Violation] = []

    for lesson_file in lesson_files:
        structure = loader.structure(lesson_file.path)
        if structure is None:
            continue

        titles = [h.text for h in structure.headings if h.level == SECTION_HEADING_LEVEL]
        file = loader.display(lesson_file.path)
        tag = f"{lesson_file.lesson} ({lesson_file.language})"

        def present(section) -> bool:
            accepted = labels.section_labels(section)
            return any(matches_label(title, accepted) for title in titles)

        for section in REQUIRED_SECTIONS:
            if not present(section):
                violations.append(Violation(
                    Category.REQUIRED_SECTION,
                    Severity.ERROR,
                    f"{tag}: Missing \"{SECTION_DISPLAY_NAMES[section]}\" section",
                    file=file,
                ))

        if not any(present(section) for section in ALTERNATIVE_SECTIONS):
            names = " or ".join(f"\"{SECTION_DISPLAY_NAMES[s]}\"" for s in ALTERNATIVE_SECTIONS)
            violations.append(Violation(
                Category.REQUIRED_SECTION,
                Severity.ERROR,
                f"{tag}: Missing {names} section",
                file=file,
            ))

    return collect(violations, loader, owned)
