"""Lesson navigation checks.

Each lesson README carries labeled links such as

    **Previous**: [Fundamentals](../01-fundamentals/README.md)
    **Next**: [Structs](../03-structs-enums/README.md)
    **Module Home**: [Rust Basics](../README.md)

Labels come from the localized navigation table, so the same extractor
handles every language.
"""

import logging
import posixpath
import re
from dataclasses import dataclass
from pathlib import Path

from mdscan import is_fence

from ..config import LabelsConfig, LessonLintConfig
from ..discovery import Lesson, LessonFile
from ..labels import NAVIGATION_DISPLAY_NAMES, NavLink
from ..utils.paths import normalize_path
from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationLink:
    """One labeled navigation link."""
    text: str
    target: str
    line: int


@dataclass(frozen=True)
class NavigationLinkSet:
    """Navigation links found in one lesson file."""
    previous: NavigationLink | None = None
    next: NavigationLink | None = None
    module_home: NavigationLink | None = None

    def get(self, link: NavLink) -> NavigationLink | None:
        return getattr(self, link.value)


def build_navigation_pattern(labels: list[str]) -> re.Pattern:
    """Regex for `**Label**: [text](target)` accepting any of the labels."""
    alternatives = "|".join(re.escape(label) for label in sorted(labels, key=len, reverse=True))
    return re.compile(
        rf"\*\*(?:{alternatives}):?\*\*:?\s*\[([^\]]+)\]\(([^)\s]+)[^)]*\)",
        re.IGNORECASE,
    )


def extract_navigation_links(
    content: str,
    labels: dict[str, list[str]] | None = None,
) -> NavigationLinkSet:
    """Find the Previous/Next/Module Home links of one lesson file.

    Lines inside fenced code blocks are ignored. When a label occurs more
    than once the last occurrence wins.
    """
    labels = labels if labels is not None else LabelsConfig().navigation
    patterns = {
        link: build_navigation_pattern(labels.get(link.value, []))
        for link in NavLink
        if labels.get(link.value)
    }
    found: dict[str, NavigationLink] = {}
    in_fence = False

    for line_number, line in enumerate(content.splitlines(), start=1):
        if is_fence(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        for link, pattern in patterns.items():
            for match in pattern.finditer(line):
                found[link.value] = NavigationLink(
                    text=match.group(1),
                    target=match.group(2).strip("<>"),
                    line=line_number,
                )

    return NavigationLinkSet(**found)


def link_target_directory(target: str, pattern: re.Pattern) -> str | None:
    """Lesson directory a link target points into, if any.

    `../02-ownership-borrowing/README.md#quiz` -> `02-ownership-borrowing`.
    The last path component matching the lesson pattern is taken.
    """
    path = normalize_path(target).split("#", 1)[0]
    if not path:
        return None
    components = posixpath.normpath(path).split("/")
    candidates = [component for component in components if pattern.match(component)]
    return candidates[-1] if candidates else None


def _load_links(
    loader: DocumentLoader,
    lesson_file: LessonFile,
    labels: dict[str, list[str]],
) -> NavigationLinkSet | None:
    content = loader.text(lesson_file.path)
    if content is None:
        return None
    return extract_navigation_links(content, labels)


def validate_navigation_completeness(
    lessons: list[Lesson],
    root: Path,
    config: LessonLintConfig | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Every lesson file has the navigation links its position requires.

    Module Home is always required. Previous is required on every lesson,
    the first one included, but only checked for the right target when a
    preceding lesson exists. Next is required and checked everywhere but
    on the last lesson.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    config = config or LessonLintConfig()
    pattern = config.lesson_pattern
    violations: list[Violation] = []

    for index, lesson in enumerate(lessons):
        preceding = lessons[index - 1].name if index > 0 else None
        following = lessons[index + 1].name if index < len(lessons) - 1 else None

        for lesson_file in lesson.files:
            links = _load_links(loader, lesson_file, config.labels.navigation)
            if links is None:
                continue
            file = loader.display(lesson_file.path)
            tag = f"{lesson.name} ({lesson_file.language})"

            def missing(link: NavLink) -> None:
                violations.append(Violation(
                    Category.NAVIGATION_LINK,
                    Severity.ERROR,
                    f"{tag}: Missing \"{NAVIGATION_DISPLAY_NAMES[link]}\" link",
                    file=file,
                ))

            def misdirected(link: NavLink, record: NavigationLink, expected: str) -> None:
                violations.append(Violation(
                    Category.NAVIGATION_LINK,
                    Severity.ERROR,
                    f"{tag}: \"{NAVIGATION_DISPLAY_NAMES[link]}\" link should point to "
                    f"{expected}, found {record.target}",
                    file=file,
                    line=record.line,
                ))

            if links.module_home is None:
                missing(NavLink.MODULE_HOME)

            if links.previous is None:
                missing(NavLink.PREVIOUS)
            elif preceding and link_target_directory(links.previous.target, pattern) != preceding:
                misdirected(NavLink.PREVIOUS, links.previous, preceding)

            if following is None:
                continue
            if links.next is None:
                missing(NavLink.NEXT)
            elif link_target_directory(links.next.target, pattern) != following:
                misdirected(NavLink.NEXT, links.next, following)

    return collect(violations, loader, owned)


def validate_navigation_consistency(
    lessons: list[Lesson],
    root: Path,
    config: LessonLintConfig | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Adjacent lessons link to each other, in every language present in both.

    For each adjacent pair (A, B): A's Next must point at B and B's Previous
    must point back at A. A Next link on the last lesson, or a Previous link
    on the first, that names a lesson directory outside the sequence is
    reported as well. Absent links are left to the completeness check.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    config = config or LessonLintConfig()
    pattern = config.lesson_pattern
    labels = config.labels.navigation
    names = {lesson.name for lesson in lessons}
    violations: list[Violation] = []

    def files_by_language(lesson: Lesson) -> dict[str, LessonFile]:
        return {lesson_file.language: lesson_file for lesson_file in lesson.files}

    def report(lesson_file: LessonFile, record: NavigationLink, message: str) -> None:
        violations.append(Violation(
            Category.NAVIGATION_CONSISTENCY,
            Severity.ERROR,
            message,
            file=loader.display(lesson_file.path),
            line=record.line,
        ))

    for current, following in zip(lessons, lessons[1:]):
        current_files = files_by_language(current)
        following_files = files_by_language(following)

        for language in current_files.keys() & following_files.keys():
            current_links = _load_links(loader, current_files[language], labels)
            following_links = _load_links(loader, following_files[language], labels)
            if current_links is None or following_links is None:
                continue

            if current_links.next is not None:
                actual = link_target_directory(current_links.next.target, pattern)
                if actual != following.name:
                    report(
                        current_files[language], current_links.next,
                        f"{current.name} ({language}): Next link points to "
                        f"{actual or current_links.next.target} but {following.name} follows it",
                    )

            if following_links.previous is not None:
                actual = link_target_directory(following_links.previous.target, pattern)
                if actual != current.name:
                    report(
                        following_files[language], following_links.previous,
                        f"{following.name} ({language}): Previous link points to "
                        f"{actual or following_links.previous.target} but {current.name} precedes it",
                    )

    # Edges of the sequence have no neighbour to compare against
    edges = []
    if lessons:
        edges.append((lessons[-1], NavLink.NEXT, "Next"))
        edges.append((lessons[0], NavLink.PREVIOUS, "Previous"))

    for lesson, link, label in edges:
        for lesson_file in lesson.files:
            links = _load_links(loader, lesson_file, labels)
            record = links.get(link) if links is not None else None
            if record is None:
                continue
            actual = link_target_directory(record.target, pattern)
            if actual is not None and actual not in names:
                report(
                    lesson_file, record,
                    f"{lesson.name} ({lesson_file.language}): {label} link points to "
                    f"{actual}, which is not a lesson in this module",
                )

    return collect(violations, loader, owned)
