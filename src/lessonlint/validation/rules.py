"""Validation rules wiring the checkers into a run.

Each rule discovers what it needs under the module root, calls the pure
checker functions and records their violations and counters.
"""

import logging
from pathlib import Path

from ..config import LessonLintConfig
from ..discovery import (
    discover_bilingual_pairs,
    discover_exercises,
    discover_lesson_files,
    discover_lessons,
)
from ..utils.paths import display_path
from ..utils.walker import find_markdown_files, walk_directories
from .attribution import validate_source_attribution
from .content import (
    validate_language_links,
    validate_parallel_structure,
    validate_required_sections,
)
from .documents import DocumentLoader
from .exercises import (
    validate_exercise_bilingual,
    validate_exercise_criteria,
    validate_exercise_layout,
    validate_exercise_references,
)
from .formatting import validate_markdown_formatting
from .framework import Category, ValidationResult, ValidationRule
from .links import validate_internal_links
from .navigation import validate_navigation_completeness, validate_navigation_consistency
from .structure import validate_basic_structure, validate_bilingual_pairs, validate_lesson_naming

logger = logging.getLogger(__name__)


def _documents(root: Path, result: ValidationResult) -> DocumentLoader:
    """The run's shared loader, created when a rule runs on its own."""
    if result.documents is None:
        result.documents = DocumentLoader(root)
    return result.documents


def _markdown_files(root: Path, config: LessonLintConfig) -> list[Path]:
    return find_markdown_files(root, config.scan.exclude, config.scan.skip_hidden)


def _existing_readmes(root: Path, directories: list[str], config: LessonLintConfig) -> list[str]:
    """Display paths of the language READMEs present in the given directories."""
    return [
        display_path(root / directory / variant.filename, root)
        for directory in directories
        for variant in config.languages.variants
        if (root / directory / variant.filename).is_file()
    ]


class BasicStructureRule(ValidationRule):
    """Module root carries both language READMEs."""

    categories = (Category.BASIC_STRUCTURE,)

    @property
    def name(self) -> str:
        return "basic_structure"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        result.extend(validate_basic_structure(root, config))
        result.mark_checked(_existing_readmes(root, ["."], config))


class LessonNamingRule(ValidationRule):
    """Lesson directories follow the NN-name convention."""

    categories = (Category.LESSON_NAMING,)

    @property
    def name(self) -> str:
        return "lesson_naming"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        result.extend(validate_lesson_naming(root, config.naming_excludes, config.lessons.pattern))
        result.increment_counter("lessons", len(discover_lessons(root, config)))


class BilingualPairRule(ValidationRule):
    """No directory holds only one of the two language READMEs."""

    categories = (Category.BILINGUAL_PAIR,)

    @property
    def name(self) -> str:
        return "bilingual_pair"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        result.extend(validate_bilingual_pairs(
            root,
            config.scan.exclude,
            config.languages.primary.filename,
            config.languages.secondary.filename,
        ))
        directories = [".", *walk_directories(root, config.scan.exclude)]
        result.mark_checked(_existing_readmes(root, directories, config))
        result.increment_counter("directories", len(directories))


class ParallelStructureRule(ValidationRule):
    """Both files of a pair share one heading level sequence."""

    categories = (Category.PARALLEL_STRUCTURE,)

    @property
    def name(self) -> str:
        return "parallel_structure"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        pairs = discover_bilingual_pairs(root, config)
        result.extend(validate_parallel_structure(pairs, root, _documents(root, result)))
        result.increment_counter("pairs", len(pairs))


class LanguageLinkRule(ValidationRule):
    """Both files of a pair link to each other."""

    categories = (Category.LANGUAGE_LINK,)

    @property
    def name(self) -> str:
        return "language_link"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        pairs = discover_bilingual_pairs(root, config)
        result.extend(validate_language_links(
            pairs, root, config.labels.language_switch, _documents(root, result),
        ))


class RequiredSectionRule(ValidationRule):
    """Lesson READMEs carry the mandatory sections."""

    categories = (Category.REQUIRED_SECTION,)

    @property
    def name(self) -> str:
        return "required_section"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        lesson_files = discover_lesson_files(root, config)
        result.extend(validate_required_sections(
            lesson_files, root, config.labels, _documents(root, result),
        ))
        result.increment_counter("lesson_files", len(lesson_files))


class NavigationLinkRule(ValidationRule):
    """Lesson READMEs carry Previous/Next/Module Home links."""

    categories = (Category.NAVIGATION_LINK,)

    @property
    def name(self) -> str:
        return "navigation_link"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        lessons = discover_lessons(root, config)
        result.extend(validate_navigation_completeness(
            lessons, root, config, _documents(root, result),
        ))


class NavigationConsistencyRule(ValidationRule):
    """Adjacent lessons point at each other."""

    categories = (Category.NAVIGATION_CONSISTENCY,)

    @property
    def name(self) -> str:
        return "navigation_consistency"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        lessons = discover_lessons(root, config)
        result.extend(validate_navigation_consistency(
            lessons, root, config, _documents(root, result),
        ))


class MarkdownFormattingRule(ValidationRule):
    """Heading hierarchy, code fences and list markers in every Markdown file."""

    categories = (Category.HEADING_HIERARCHY, Category.CODE_BLOCK, Category.LIST_FORMATTING)

    @property
    def name(self) -> str:
        return "markdown_formatting"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        files = _markdown_files(root, config)
        result.extend(validate_markdown_formatting(files, root, _documents(root, result)))
        result.increment_counter("markdown_files", len(files))


class InternalLinkRule(ValidationRule):
    """Relative links and anchors resolve."""

    categories = (Category.BROKEN_LINK, Category.MISSING_ANCHOR)

    @property
    def name(self) -> str:
        return "internal_links"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        files = _markdown_files(root, config)
        result.extend(validate_internal_links(files, root, _documents(root, result)))


class ExerciseRule(ValidationRule):
    """Exercise instructions, lesson references, criteria and layout."""

    categories = (
        Category.EXERCISE_BILINGUAL,
        Category.EXERCISE_REFERENCE,
        Category.EXERCISE_CRITERIA,
        Category.EXERCISE_LAYOUT,
    )

    @property
    def name(self) -> str:
        return "exercises"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        exercises = discover_exercises(root, config)
        if not exercises:
            logger.debug(f"No exercises found under {root / config.lessons.exercises_dir}")
            return

        loader = _documents(root, result)
        result.extend(validate_exercise_bilingual(exercises, config))
        result.extend(validate_exercise_references(exercises, root, loader))
        result.extend(validate_exercise_criteria(exercises, root, config.labels, loader))
        result.extend(validate_exercise_layout(exercises, config))
        result.increment_counter("exercises", len(exercises))


class SourceAttributionRule(ValidationRule):
    """Long documents name their sources."""

    categories = (Category.SOURCE_ATTRIBUTION,)

    @property
    def name(self) -> str:
        return "source_attribution"

    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        files = _markdown_files(root, config)
        result.extend(validate_source_attribution(
            files, root, config.labels, config.attribution, _documents(root, result),
        ))


STRUCTURE_RULES = [BasicStructureRule, LessonNamingRule, BilingualPairRule]
CONTENT_RULES = [ParallelStructureRule, LanguageLinkRule, RequiredSectionRule]
NAVIGATION_RULES = [NavigationLinkRule, NavigationConsistencyRule]
FORMAT_RULES = [MarkdownFormattingRule]
LINK_RULES = [InternalLinkRule]
EXERCISE_RULES = [ExerciseRule]
ATTRIBUTION_RULES = [SourceAttributionRule]

# Named check groups, one per CLI command
CHECK_GROUPS: dict[str, list[type[ValidationRule]]] = {
    "structure": STRUCTURE_RULES,
    "content": CONTENT_RULES,
    "navigation": NAVIGATION_RULES,
    "format": FORMAT_RULES,
    "links": LINK_RULES,
    "exercises": EXERCISE_RULES,
    "attribution": ATTRIBUTION_RULES,
    "all": [
        *STRUCTURE_RULES,
        *CONTENT_RULES,
        *NAVIGATION_RULES,
        *FORMAT_RULES,
        *LINK_RULES,
        *EXERCISE_RULES,
        *ATTRIBUTION_RULES,
    ],
}
