"""Source attribution check for long-form content."""

import re
from pathlib import Path

from ..config import AttributionConfig, LabelsConfig
from ..labels import SectionId, matches_label
from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation

ADAPTED_FROM_PATTERN = re.compile(r"(?:adapted|extracted|derived|based)\s+(?:from|on)", re.IGNORECASE)
REPOSITORY_PATTERN = re.compile(r"(?:repository|repo|source):\s*\S", re.IGNORECASE)


def has_source_attribution(content: str, headings: list[str], labels: LabelsConfig) -> bool:
    if any(matches_label(heading, labels.section_labels(SectionId.SOURCE_ATTRIBUTION))
           for heading in headings):
        return True
    return bool(ADAPTED_FROM_PATTERN.search(content) or REPOSITORY_PATTERN.search(content))


def validate_source_attribution(
    files: list[Path],
    root: Path,
    labels: LabelsConfig | None = None,
    settings: AttributionConfig | None = None,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Long Markdown files must say where their material came from.

    Files shorter than the configured minimum length, and excluded file
    names, are not checked.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    labels = labels or LabelsConfig()
    settings = settings or AttributionConfig()
    excluded = set(settings.exclude)
    violations: list[Violation] = []

    for path in files:
        if path.name in excluded:
            continue
        content = loader.text(path)
        if content is None or len(content) < settings.min_length:
            continue
        structure = loader.structure(path)
        headings = [h.text for h in structure.headings] if structure else []
        if not has_source_attribution(content, headings, labels):
            violations.append(Violation(
                Category.SOURCE_ATTRIBUTION,
                Severity.WARNING,
                "Missing source attribution (add a \"Source Attribution\" section "
                "or an \"Adapted from\" note)",
                file=loader.display(path),
            ))

    return collect(violations, loader, owned)
