"""Data models for Markdown structure scanning using only Python stdlib.

All records are produced transiently from file text and never mutated
after a scan completes.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import EXTERNAL_LINK_PREFIXES, FENCE_MARKER


@dataclass(frozen=True)
class Heading:
    """One ATX heading occurrence."""
    level: int                          # 1-6
    text: str
    line_number: int                    # 1-based


@dataclass
class CodeBlock:
    """Fenced code block, possibly unterminated."""
    start_line: int
    language_tag: Optional[str] = None  # Text after the opening fence
    end_line: Optional[int] = None      # None when never closed
    closing_fence: Optional[str] = None # Stripped closing line as written

    @property
    def is_closed(self) -> bool:
        return self.end_line is not None

    @property
    def has_language_tag(self) -> bool:
        return bool(self.language_tag)

    @property
    def has_clean_closing(self) -> bool:
        """True when the closing fence is exactly three backticks."""
        return self.closing_fence == FENCE_MARKER


@dataclass(frozen=True)
class ListItem:
    """List item line (unordered or ordered)."""
    line_number: int
    indent: int
    marker: str                         # '-', '*', '+' or 'N.'
    content: str

    @property
    def ordered(self) -> bool:
        return self.marker.endswith('.')


@dataclass(frozen=True)
class Link:
    """Inline Markdown link `[text](target)`."""
    text: str
    target: str
    line_number: int

    @property
    def is_external(self) -> bool:
        return self.target.lower().startswith(EXTERNAL_LINK_PREFIXES)

    @property
    def path(self) -> str:
        return self.target.split('#', 1)[0]

    @property
    def anchor(self) -> Optional[str]:
        if '#' not in self.target:
            return None
        return self.target.split('#', 1)[1] or None


@dataclass(frozen=True)
class ScanIssue:
    """Malformed line found while scanning.

    kind is one of 'heading_missing_space' or 'list_missing_space'.
    """
    kind: str
    line_number: int
    content: str


@dataclass
class MarkdownStructure:
    """Everything the scanner extracts from one document."""
    headings: List[Heading] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    list_items: List[ListItem] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    issues: List[ScanIssue] = field(default_factory=list)
    total_lines: int = 0

    @property
    def heading_levels(self) -> List[int]:
        return [heading.level for heading in self.headings]
