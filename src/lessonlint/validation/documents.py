"""Per-run document cache.

A file that cannot be read is reported once as a file-read warning and then
skipped by every check that wanted it; it never aborts the run.
"""

import logging
from pathlib import Path

from mdscan import MarkdownScanner, MarkdownStructure

from ..utils.paths import display_path
from ..utils.walker import read_markdown
from .framework import Category, Severity, Violation

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Reads and scans Markdown files for one module root."""

    def __init__(self, root: Path):
        self.root = root
        self.violations: list[Violation] = []
        self._scanner = MarkdownScanner()
        self._texts: dict[Path, str | None] = {}
        self._structures: dict[Path, MarkdownStructure] = {}

    def display(self, path: Path) -> str:
        return display_path(path, self.root)

    def text(self, path: Path) -> str | None:
        """File content, or None when it cannot be read."""
        if path not in self._texts:
            try:
                self._texts[path] = read_markdown(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {path}: {e}")
                self._texts[path] = None
                self.violations.append(Violation(
                    Category.FILE_READ,
                    Severity.WARNING,
                    f"Could not read file, skipped: {e}",
                    file=self.display(path),
                ))
        return self._texts[path]

    def structure(self, path: Path) -> MarkdownStructure | None:
        """Scanned structure, or None when the file cannot be read."""
        if path not in self._structures:
            content = self.text(path)
            if content is None:
                return None
            self._structures[path] = self._scanner.scan(content)
        return self._structures[path]

    @property
    def loaded(self) -> list[str]:
        """Display paths of every file that was read successfully."""
        return sorted(self.display(path) for path, text in self._texts.items() if text is not None)


def collect(violations: list[Violation], loader: DocumentLoader, owned: bool) -> list[Violation]:
    """Append the loader's read failures when the caller created the loader."""
    if owned:
        return violations + loader.violations
    return violations
