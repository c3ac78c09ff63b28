"""Configuration management for lessonlint using Pydantic models."""

import json
import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lessonlint.labels import (
    DEFAULT_CRITERIA_KEYWORDS,
    DEFAULT_LANGUAGE_SWITCH_MARKERS,
    DEFAULT_NAVIGATION_LABELS,
    DEFAULT_SECTION_LABELS,
    NAVIGATION_LINKS,
    REQUIRED_SECTIONS,
    SectionId,
)

CONFIG_FILENAME = ".lessonlint.json"

DEFAULT_EXCLUDES = [
    "node_modules",
    ".git",
    "validation",
    "solutions",
    "solution",
    "starter",
]


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ScanConfig(BaseModel):
    """Filesystem walking configuration section."""
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    skip_hidden: bool = Field(alias="skipHidden", default=True)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LessonConfig(BaseModel):
    """Lesson directory conventions."""
    pattern: str = r"^\d{2}-[a-z-]+$"
    auxiliary_dirs: list[str] = Field(alias="auxiliaryDirs", default_factory=lambda: ["exercises"])
    exercises_dir: str = Field(alias="exercisesDir", default="exercises")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v):
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"lesson pattern is not a valid regex: {e}")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LanguageVariant(BaseModel):
    """One language of a bilingual pair."""
    code: str
    filename: str

    model_config = ConfigDict(extra="forbid")


class LanguageConfig(BaseModel):
    """Default and alternate language files."""
    primary: LanguageVariant = Field(
        default_factory=lambda: LanguageVariant(code="en", filename="README.md")
    )
    secondary: LanguageVariant = Field(
        default_factory=lambda: LanguageVariant(code="id", filename="README_ID.md")
    )

    @property
    def variants(self) -> list[LanguageVariant]:
        return [self.primary, self.secondary]

    model_config = ConfigDict(extra="forbid")


class LabelsConfig(BaseModel):
    """Localized label tables keyed by canonical identifier."""
    sections: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_SECTION_LABELS.items()}
    )
    navigation: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_NAVIGATION_LABELS.items()}
    )
    language_switch: list[str] = Field(
        alias="languageSwitch", default_factory=lambda: list(DEFAULT_LANGUAGE_SWITCH_MARKERS)
    )
    criteria_keywords: list[str] = Field(
        alias="criteriaKeywords", default_factory=lambda: list(DEFAULT_CRITERIA_KEYWORDS)
    )

    @field_validator("sections")
    @classmethod
    def validate_sections(cls, v):
        missing = [section.value for section in REQUIRED_SECTIONS if section.value not in v]
        if missing:
            raise ValueError(f"section labels missing for: {', '.join(missing)}")
        for optional in (SectionId.BEST_PRACTICES, SectionId.COMMON_MISTAKES,
                         SectionId.VALIDATION_CRITERIA):
            v.setdefault(optional.value, list(DEFAULT_SECTION_LABELS[optional.value]))
        return v

    @field_validator("navigation")
    @classmethod
    def validate_navigation(cls, v):
        missing = [link.value for link in NAVIGATION_LINKS if link.value not in v]
        if missing:
            raise ValueError(f"navigation labels missing for: {', '.join(missing)}")
        return v

    def section_labels(self, section: SectionId) -> list[str]:
        return self.sections.get(section.value, [])

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class AttributionConfig(BaseModel):
    """Source attribution check configuration."""
    min_length: int = Field(alias="minLength", default=500)
    exclude: list[str] = Field(
        default_factory=lambda: ["GLOSSARY.md", "SOURCES.md", "CONTENT_INDEX.md"]
    )

    @field_validator("min_length")
    @classmethod
    def validate_min_length(cls, v):
        if v < 0:
            raise ValueError("min_length must be >= 0")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, extra="forbid")


class LessonLintConfig(BaseModel):
    """Complete lessonlint configuration model."""
    scan: ScanConfig = Field(default_factory=ScanConfig)
    lessons: LessonConfig = Field(default_factory=LessonConfig)
    languages: LanguageConfig = Field(default_factory=LanguageConfig)
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    attribution: AttributionConfig = Field(default_factory=AttributionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    @property
    def lesson_pattern(self) -> re.Pattern:
        return re.compile(self.lessons.pattern)

    @property
    def naming_excludes(self) -> list[str]:
        """Immediate subdirectories exempt from the lesson naming rule."""
        return [*self.scan.exclude, *self.lessons.auxiliary_dirs]


def load_config(config_path: str | Path | None = None) -> LessonLintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .lessonlint.json

    Returns:
        LessonLintConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return LessonLintConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .lessonlint.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def create_default_config() -> LessonLintConfig:
    """Create default configuration (English/Indonesian README pairs)."""
    return LessonLintConfig()
