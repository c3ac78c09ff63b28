"""Validation layer for bilingual lesson modules.

Checkers are pure functions returning violation lists; rules wrap them so
the framework can run any named group of checks against a module root.
"""

from .framework import (
    Category,
    Severity,
    ValidationFramework,
    ValidationResult,
    ValidationRule,
    ValidationStatus,
    Violation,
)
from .rules import (
    CHECK_GROUPS,
    BasicStructureRule,
    BilingualPairRule,
    ExerciseRule,
    InternalLinkRule,
    LanguageLinkRule,
    LessonNamingRule,
    MarkdownFormattingRule,
    NavigationConsistencyRule,
    NavigationLinkRule,
    ParallelStructureRule,
    RequiredSectionRule,
    SourceAttributionRule,
)

__all__ = [
    "Category",
    "Severity",
    "ValidationFramework",
    "ValidationResult",
    "ValidationRule",
    "ValidationStatus",
    "Violation",
    "CHECK_GROUPS",
    "BasicStructureRule",
    "LessonNamingRule",
    "BilingualPairRule",
    "ParallelStructureRule",
    "LanguageLinkRule",
    "RequiredSectionRule",
    "NavigationLinkRule",
    "NavigationConsistencyRule",
    "MarkdownFormattingRule",
    "InternalLinkRule",
    "ExerciseRule",
    "SourceAttributionRule",
]
