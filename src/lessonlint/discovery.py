"""Discover lessons, bilingual pairs and exercises under a module root."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from .config import LessonLintConfig
from .utils.walker import list_subdirectories, walk_directories

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class BilingualPair:
    """Default-language and alternate-language file in one directory."""
    directory: str                      # Relative POSIX path, "." for the root
    primary_path: Path
    secondary_path: Path
    primary_language: str = "en"
    secondary_language: str = "id"


@dataclass(frozen=True)
class LessonFile:
    """One language variant of a lesson README."""
    lesson: str
    language: str
    path: Path


@dataclass(frozen=True)
class Lesson:
    """Numbered lesson directory at a position in the sequence."""
    name: str
    path: Path
    index: int = 0
    total: int = 1
    files: tuple[LessonFile, ...] = field(default_factory=tuple)

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    @property
    def position(self) -> str:
        """'first', 'middle', 'last' or 'only' (both first and last)."""
        if self.is_first and self.is_last:
            return "only"
        if self.is_first:
            return "first"
        if self.is_last:
            return "last"
        return "middle"


@dataclass(frozen=True)
class Exercise:
    """Numbered exercise directory."""
    name: str
    path: Path
    files: tuple[LessonFile, ...] = field(default_factory=tuple)


def lesson_sort_key(name: str) -> tuple[float, str]:
    """Order lessons by numeric prefix, then name."""
    match = _NUMERIC_PREFIX.match(name)
    number = float(match.group(1)) if match else float("inf")
    return (number, name)


def _language_files(directory: Path, owner: str, config: LessonLintConfig) -> tuple[LessonFile, ...]:
    files = []
    for variant in config.languages.variants:
        path = directory / variant.filename
        if path.is_file():
            files.append(LessonFile(lesson=owner, language=variant.code, path=path))
    return tuple(files)


def discover_lessons(root: Path, config: LessonLintConfig) -> list[Lesson]:
    """Lesson directories matching the naming pattern, in sequence order."""
    pattern = config.lesson_pattern
    names = [
        name for name in list_subdirectories(root, config.naming_excludes)
        if pattern.match(name)
    ]
    names.sort(key=lesson_sort_key)

    lessons = [
        Lesson(
            name=name,
            path=root / name,
            index=index,
            total=len(names),
            files=_language_files(root / name, name, config),
        )
        for index, name in enumerate(names)
    ]
    logger.debug(f"Discovered {len(lessons)} lessons under {root}")
    return lessons


def discover_lesson_files(root: Path, config: LessonLintConfig) -> list[LessonFile]:
    """Every existing language variant of every lesson README."""
    return [file for lesson in discover_lessons(root, config) for file in lesson.files]


def discover_bilingual_pairs(root: Path, config: LessonLintConfig) -> list[BilingualPair]:
    """Directories (root included) holding both language variants."""
    primary = config.languages.primary
    secondary = config.languages.secondary
    pairs = []

    for directory in [".", *walk_directories(root, config.scan.exclude)]:
        full = root / directory
        primary_path = full / primary.filename
        secondary_path = full / secondary.filename
        if primary_path.is_file() and secondary_path.is_file():
            pairs.append(BilingualPair(
                directory=directory,
                primary_path=primary_path,
                secondary_path=secondary_path,
                primary_language=primary.code,
                secondary_language=secondary.code,
            ))

    return pairs


def discover_exercises(root: Path, config: LessonLintConfig) -> list[Exercise]:
    """Numbered exercise directories, empty when there is no exercises dir."""
    exercises_root = root / config.lessons.exercises_dir
    if not exercises_root.is_dir():
        return []

    pattern = config.lesson_pattern
    names = sorted(
        (name for name in list_subdirectories(exercises_root, config.scan.exclude) if pattern.match(name)),
        key=lesson_sort_key,
    )
    return [
        Exercise(
            name=name,
            path=exercises_root / name,
            files=_language_files(exercises_root / name, name, config),
        )
        for name in names
    ]
