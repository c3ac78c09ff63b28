"""Core validation framework for documentation trees.

Rules are pluggable; each one inspects the module root and records
violations on a shared ValidationResult. Checker functions themselves are
pure and return violation lists, the rules only wire them into a run.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..config import LessonLintConfig
from ..utils.walker import RootNotFoundError, ensure_root

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Violation severity. Only errors fail a run."""
    ERROR = "error"
    WARNING = "warning"


class ValidationStatus(str, Enum):
    """Overall run status."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class Category(str, Enum):
    """Violation categories, one per property checked."""
    BASIC_STRUCTURE = "basic-structure"
    LESSON_NAMING = "lesson-naming"
    BILINGUAL_PAIR = "bilingual-pair"
    PARALLEL_STRUCTURE = "parallel-structure"
    LANGUAGE_LINK = "language-link"
    REQUIRED_SECTION = "required-section"
    NAVIGATION_LINK = "navigation-link"
    NAVIGATION_CONSISTENCY = "navigation-consistency"
    HEADING_HIERARCHY = "heading-hierarchy"
    CODE_BLOCK = "code-block"
    LIST_FORMATTING = "list-formatting"
    BROKEN_LINK = "broken-link"
    MISSING_ANCHOR = "missing-anchor"
    EXERCISE_BILINGUAL = "exercise-bilingual"
    EXERCISE_REFERENCE = "exercise-reference"
    EXERCISE_CRITERIA = "exercise-criteria"
    EXERCISE_LAYOUT = "exercise-layout"
    SOURCE_ATTRIBUTION = "source-attribution"
    FILE_READ = "file-read"
    INTERNAL = "internal"
    FATAL = "fatal"


@dataclass(frozen=True)
class Violation:
    """A single deviation from an expected structural or formatting rule."""
    category: Category
    severity: Severity
    message: str
    file: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        location = ""
        if self.file:
            location += f" in {self.file}"
        if self.line is not None:
            location += f" at line {self.line}"
        return f"[{self.severity.value.upper()}] {self.category.value}: {self.message}{location}"

    def sort_key(self) -> tuple:
        return (self.file or "", self.line or 0, self.category.value, self.message)

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "file": self.file,
            "line": self.line,
        }


@dataclass
class ValidationResult:
    """Results of one validation run."""
    status: ValidationStatus = ValidationStatus.PASS
    violations: list[Violation] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)
    files_checked: set[str] = field(default_factory=set)
    categories: list[Category] = field(default_factory=list)
    # Shared DocumentLoader for the run, set by the framework
    documents: object | None = field(default=None, repr=False, compare=False)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass/warn, 1 = fail."""
        return 0 if self.status != ValidationStatus.FAIL else 1

    @property
    def passed(self) -> bool:
        return self.status != ValidationStatus.FAIL

    @property
    def fatal(self) -> bool:
        return any(v.category == Category.FATAL for v in self.violations)

    @property
    def errors(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == Severity.WARNING]

    @property
    def files_with_issues(self) -> set[str]:
        return {v.file for v in self.violations if v.file}

    def add_violation(self, violation: Violation) -> None:
        """Record a violation and update the overall status (fail > warn > pass)."""
        self.violations.append(violation)

        if violation.severity == Severity.ERROR:
            self.status = ValidationStatus.FAIL
        elif violation.severity == Severity.WARNING and self.status == ValidationStatus.PASS:
            self.status = ValidationStatus.WARN

    def extend(self, violations: Iterable[Violation]) -> None:
        for violation in violations:
            self.add_violation(violation)

    def add_issue(self, category: Category, severity: Severity, message: str,
                  file: str | None = None, line: int | None = None) -> None:
        """Add a violation from its parts."""
        self.add_violation(Violation(category, severity, message, file, line))

    def increment_counter(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def mark_checked(self, files: Iterable[str]) -> None:
        self.files_checked.update(files)

    def register_categories(self, categories: Iterable[Category]) -> None:
        for category in categories:
            if category not in self.categories:
                self.categories.append(category)

    def by_category(self) -> dict[Category, list[Violation]]:
        """Violations grouped by category, each group sorted by file and line."""
        grouped: dict[Category, list[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.category, []).append(violation)
        return {
            category: sorted(items, key=Violation.sort_key)
            for category, items in grouped.items()
        }

    def category_passed(self, category: Category) -> bool:
        return not any(
            v.category == category and v.severity == Severity.ERROR for v in self.violations
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "summary": {
                "files_checked": len(self.files_checked),
                "files_with_issues": len(self.files_with_issues),
                "total_violations": len(self.violations),
                "errors": len(self.errors),
                "warnings": len(self.warnings),
            },
            "categories": {
                category.value: "pass" if self.category_passed(category) else "fail"
                for category in self.categories
            },
            "counters": self.counters,
            "violations": [v.to_dict() for v in sorted(self.violations, key=Violation.sort_key)],
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    # Categories this rule can report; shown as PASSED/FAILED in the summary
    categories: tuple[Category, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def validate(self, root: Path, config: LessonLintConfig, result: ValidationResult) -> None:
        """Execute validation rule.

        Args:
            root: Resolved module root directory
            config: lessonlint configuration
            result: Validation result to update with violations/counters
        """
        pass


class ValidationFramework:
    """Runs a set of rules against one module root."""

    def __init__(self, config: LessonLintConfig):
        self.config = config
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def validate(self, root: Path) -> ValidationResult:
        """Run every rule on an already verified root.

        Args:
            root: Module root directory

        Returns:
            ValidationResult with status, violations, and counters
        """
        from .documents import DocumentLoader

        result = ValidationResult()
        loader = DocumentLoader(root)
        result.documents = loader

        logger.info(f"Starting validation of {root}")
        logger.info(f"Running {len(self.rules)} validation rules")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            result.register_categories(rule.categories)
            try:
                rule.validate(root, self.config, result)
            except Exception as e:
                logger.error(f"Rule {rule.name} failed with error: {e}")
                result.register_categories([Category.INTERNAL])
                result.add_issue(
                    Category.INTERNAL,
                    Severity.ERROR,
                    f"Rule {rule.name} execution failed: {e}",
                )

        # Each unreadable file is reported once however many rules wanted it
        if loader.violations:
            result.register_categories([Category.FILE_READ])
            result.extend(loader.violations)
        result.mark_checked(loader.loaded)

        logger.info(f"Validation completed with status: {result.status.value}")
        logger.info(f"Found {len(result.violations)} violations")

        return result

    def run(self, root: Path) -> ValidationResult:
        """Verify the root, then validate it.

        An unusable root yields a result holding exactly one fatal violation
        and nothing else.
        """
        try:
            resolved = ensure_root(root)
        except RootNotFoundError as e:
            logger.error(str(e))
            result = ValidationResult()
            result.register_categories([Category.FATAL])
            result.add_issue(Category.FATAL, Severity.ERROR, str(e), file=str(e.root))
            return result

        return self.validate(resolved)

    def create_rules(self, check: str = "all") -> None:
        """Register the rules for one named check group.

        Raises:
            ValueError: If the check group is unknown
        """
        from .rules import CHECK_GROUPS

        if check not in CHECK_GROUPS:
            raise ValueError(
                f"Unknown check '{check}'. Must be one of: {', '.join(CHECK_GROUPS)}"
            )
        for rule_class in CHECK_GROUPS[check]:
            self.add_rule(rule_class())

    def create_default_rules(self) -> None:
        """Register every rule."""
        self.create_rules("all")
