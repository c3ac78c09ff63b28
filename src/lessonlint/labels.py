"""Localized label tables.

Canonical identifiers map to every accepted label string. Adding a language
means adding strings here (or in .lessonlint.json), never new regexes.
"""

from enum import Enum


class SectionId(str, Enum):
    """Canonical lesson/exercise section identifiers."""
    OVERVIEW = "overview"
    LEARNING_OBJECTIVES = "learning_objectives"
    PREREQUISITES = "prerequisites"
    NEXT_STEPS = "next_steps"
    SOURCE_ATTRIBUTION = "source_attribution"
    BEST_PRACTICES = "best_practices"
    COMMON_MISTAKES = "common_mistakes"
    VALIDATION_CRITERIA = "validation_criteria"


class NavLink(str, Enum):
    """Canonical navigation link identifiers."""
    PREVIOUS = "previous"
    NEXT = "next"
    MODULE_HOME = "module_home"


REQUIRED_SECTIONS = (
    SectionId.OVERVIEW,
    SectionId.LEARNING_OBJECTIVES,
    SectionId.PREREQUISITES,
    SectionId.NEXT_STEPS,
    SectionId.SOURCE_ATTRIBUTION,
)

# At least one of these must be present
ALTERNATIVE_SECTIONS = (
    SectionId.BEST_PRACTICES,
    SectionId.COMMON_MISTAKES,
)

NAVIGATION_LINKS = (NavLink.PREVIOUS, NavLink.NEXT, NavLink.MODULE_HOME)

SECTION_DISPLAY_NAMES = {
    SectionId.OVERVIEW: "Overview",
    SectionId.LEARNING_OBJECTIVES: "Learning Objectives",
    SectionId.PREREQUISITES: "Prerequisites",
    SectionId.NEXT_STEPS: "Next Steps",
    SectionId.SOURCE_ATTRIBUTION: "Source Attribution",
    SectionId.BEST_PRACTICES: "Best Practices",
    SectionId.COMMON_MISTAKES: "Common Mistakes",
    SectionId.VALIDATION_CRITERIA: "Validation Criteria",
}

NAVIGATION_DISPLAY_NAMES = {
    NavLink.PREVIOUS: "Previous",
    NavLink.NEXT: "Next",
    NavLink.MODULE_HOME: "Module Home",
}

DEFAULT_SECTION_LABELS: dict[str, list[str]] = {
    SectionId.OVERVIEW.value: ["Overview", "Ringkasan", "Ikhtisar", "Gambaran Umum"],
    SectionId.LEARNING_OBJECTIVES.value: [
        "Learning Objectives", "Tujuan Pembelajaran", "Objektif Pembelajaran",
    ],
    SectionId.PREREQUISITES.value: ["Prerequisites", "Prasyarat", "Persyaratan"],
    SectionId.NEXT_STEPS.value: ["Next Steps", "Langkah Selanjutnya", "Langkah Berikutnya"],
    SectionId.SOURCE_ATTRIBUTION.value: ["Source Attribution", "Atribusi Sumber", "Sumber Referensi"],
    SectionId.BEST_PRACTICES.value: ["Best Practice", "Praktik Terbaik", "Praktik yang Baik"],
    SectionId.COMMON_MISTAKES.value: [
        "Common Mistakes", "Kesalahan Umum", "Kesalahan yang Sering Terjadi",
    ],
    SectionId.VALIDATION_CRITERIA.value: [
        "Validation Criteria", "Kriteria Validasi",
        "Success Criteria", "Kriteria Keberhasilan",
        "Expected Output", "Output yang Diharapkan",
        "Requirements", "Persyaratan",
    ],
}

DEFAULT_NAVIGATION_LABELS: dict[str, list[str]] = {
    NavLink.PREVIOUS.value: ["Previous", "Sebelumnya"],
    NavLink.NEXT.value: ["Next", "Selanjutnya"],
    NavLink.MODULE_HOME.value: ["Module Home", "Beranda Modul"],
}

# Any of these in the alternate-language file marks a language switcher
DEFAULT_LANGUAGE_SWITCH_MARKERS: list[str] = ["[English]", "[Inggris]", "**Language:**"]

# Phrases that signal exercise success criteria outside a dedicated heading
DEFAULT_CRITERIA_KEYWORDS: list[str] = [
    "validation criteria",
    "kriteria validasi",
    "your solution is correct when",
    "solusi anda benar jika",
    "expected output",
    "output yang diharapkan",
    "should produce",
    "harus menghasilkan",
    "✅",
    "✓",
]


def matches_label(text: str, labels: list[str]) -> bool:
    """Case-insensitive prefix match of heading text against labels."""
    folded = text.strip().casefold()
    return any(folded.startswith(label.casefold()) for label in labels if label)
