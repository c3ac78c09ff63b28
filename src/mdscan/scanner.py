"""Line-based Markdown structure scanner.

This module provides the MarkdownScanner class that walks a document top
to bottom once and extracts headings, fenced code blocks, list items and
inline links. Fenced code block interiors are opaque: nothing inside a
fence is ever reported as a heading, list item or link.
"""

from pathlib import Path
from typing import List, Optional

from .matchers import (
    fence_info,
    has_heading_missing_space,
    has_malformed_list_marker,
    is_fence,
    iter_links,
    match_heading,
    match_list_item,
)
from .models import CodeBlock, Heading, Link, ListItem, MarkdownStructure, ScanIssue


class MarkdownScanner:
    """Extract the structural skeleton of a Markdown document."""

    def scan(self, content: str) -> MarkdownStructure:
        """Scan raw document text.

        Args:
            content: Markdown text

        Returns:
            MarkdownStructure with records in document order
        """
        structure = MarkdownStructure()
        lines = content.lstrip('\ufeff').splitlines()
        structure.total_lines = len(lines)

        open_block: Optional[CodeBlock] = None

        for line_number, line in enumerate(lines, start=1):
            if is_fence(line):
                if open_block is None:
                    open_block = CodeBlock(
                        start_line=line_number,
                        language_tag=fence_info(line) or None,
                    )
                    structure.code_blocks.append(open_block)
                else:
                    open_block.end_line = line_number
                    open_block.closing_fence = line.strip()
                    open_block = None
                continue

            if open_block is not None:
                continue

            self._scan_line(line, line_number, structure)

        return structure

    def scan_file(self, file_path: Path) -> MarkdownStructure:
        """Read and scan a file. I/O and decode errors propagate."""
        return self.scan(file_path.read_text(encoding='utf-8'))

    def _scan_line(self, line: str, line_number: int, structure: MarkdownStructure) -> None:
        heading = match_heading(line)
        if heading:
            level, text = heading
            structure.headings.append(Heading(level=level, text=text, line_number=line_number))
        elif has_heading_missing_space(line):
            structure.issues.append(ScanIssue('heading_missing_space', line_number, line.strip()))
        else:
            item = match_list_item(line)
            if item:
                indent, marker, text = item
                structure.list_items.append(
                    ListItem(line_number=line_number, indent=indent, marker=marker, content=text)
                )
            elif has_malformed_list_marker(line):
                structure.issues.append(ScanIssue('list_missing_space', line_number, line.strip()))

        for text, target in iter_links(line):
            structure.links.append(Link(text=text, target=target, line_number=line_number))


_default_scanner = MarkdownScanner()


def scan(content: str) -> MarkdownStructure:
    """Scan content with a shared scanner instance."""
    return _default_scanner.scan(content)


def extract_headings(content: str) -> List[Heading]:
    return scan(content).headings


def extract_code_blocks(content: str) -> List[CodeBlock]:
    return scan(content).code_blocks


def extract_list_items(content: str) -> List[ListItem]:
    return scan(content).list_items


def extract_links(content: str) -> List[Link]:
    return scan(content).links
