"""Standalone Markdown structure scanner.

This package extracts the structural skeleton of Markdown documents
(headings, fenced code blocks, list items, inline links) with zero
external dependencies, using regex-based line scanning.

Basic usage:
    from mdscan import MarkdownScanner

    structure = MarkdownScanner().scan(text)
    print([heading.level for heading in structure.headings])
"""

__version__ = "0.1.0"
__description__ = "Line-based Markdown structure scanner"

from .constants import LIST_INDENT_UNIT
from .matchers import heading_slug, is_fence
from .models import CodeBlock, Heading, Link, ListItem, MarkdownStructure, ScanIssue
from .scanner import (
    MarkdownScanner,
    extract_code_blocks,
    extract_headings,
    extract_links,
    extract_list_items,
    scan,
)

__all__ = [
    '__version__',
    '__description__',
    'LIST_INDENT_UNIT',
    'MarkdownScanner',
    'MarkdownStructure',
    'Heading',
    'CodeBlock',
    'ListItem',
    'Link',
    'ScanIssue',
    'scan',
    'extract_headings',
    'extract_code_blocks',
    'extract_list_items',
    'extract_links',
    'heading_slug',
    'is_fence',
]
