"""Relative link checks between documents."""

import logging
import os
from pathlib import Path
from urllib.parse import unquote

from mdscan import MarkdownStructure, heading_slug

from ..utils.paths import normalize_path
from .documents import DocumentLoader, collect
from .framework import Category, Severity, Violation

logger = logging.getLogger(__name__)


def heading_anchors(structure: MarkdownStructure) -> set[str]:
    """Anchor ids of every heading; repeated slugs get -1, -2... suffixes."""
    anchors: set[str] = set()
    seen: dict[str, int] = {}
    for heading in structure.headings:
        slug = heading_slug(heading.text)
        count = seen.get(slug, 0)
        anchors.add(slug if count == 0 else f"{slug}-{count}")
        seen[slug] = count + 1
    return anchors


def resolve_link_target(source: Path, target_path: str) -> Path:
    """Filesystem path a relative link points at, symlinks left alone."""
    relative = unquote(normalize_path(target_path))
    return Path(os.path.normpath(source.parent / relative))


def validate_internal_links(
    files: list[Path],
    root: Path,
    loader: DocumentLoader | None = None,
) -> list[Violation]:
    """Relative links must resolve; anchors into Markdown files must exist.

    External links (http, https, mailto, ftp) are not followed. A missing
    file is an error, a missing anchor only a warning.
    """
    owned = loader is None
    loader = loader or DocumentLoader(root)
    violations: list[Violation] = []

    for path in files:
        structure = loader.structure(path)
        if structure is None:
            continue
        file = loader.display(path)

        for link in structure.links:
            if link.is_external:
                continue

            target = resolve_link_target(path, link.path) if link.path else path
            if not target.exists():
                violations.append(Violation(
                    Category.BROKEN_LINK,
                    Severity.ERROR,
                    f"Link target not found: {link.target}",
                    file=file,
                    line=link.line_number,
                ))
                continue

            anchor = link.anchor
            if anchor is None or not target.is_file() or target.suffix.lower() != ".md":
                continue

            target_structure = loader.structure(target)
            if target_structure is None:
                continue
            if unquote(anchor).lower() not in heading_anchors(target_structure):
                violations.append(Violation(
                    Category.MISSING_ANCHOR,
                    Severity.WARNING,
                    f"Anchor #{anchor} not found in {loader.display(target)}",
                    file=file,
                    line=link.line_number,
                ))

    return collect(violations, loader, owned)
