"""Line patterns used by the Markdown structure scanner.

All patterns are line-oriented regexes. Anything that needs more context
than a single line (fence state, list continuity) lives in the scanner.
"""

import re
from typing import Pattern, Tuple

# Fenced code block delimiter (leading whitespace is ignored)
FENCE_MARKER: str = '```'

# ATX heading: 1-6 '#' followed by at least one whitespace character
HEADING_PATTERN: Pattern[str] = re.compile(r'^(#{1,6})\s+(\S.*?)\s*$')

# '#' run glued to its text, e.g. "##Overview"
HEADING_NO_SPACE_PATTERN: Pattern[str] = re.compile(r'^(#{1,6})(?=[^#\s])')

UNORDERED_ITEM_PATTERN: Pattern[str] = re.compile(r'^(\s*)([-*+])\s+(\S.*)$')
ORDERED_ITEM_PATTERN: Pattern[str] = re.compile(r'^(\s*)(\d+\.)\s+(\S.*)$')

# Marker glued to its content. Excludes horizontal rules ("---"), numbers
# ("-5", "1.5") and emphasis ("*word*", "**bold**") which are handled below.
DASH_PLUS_NO_SPACE_PATTERN: Pattern[str] = re.compile(r'^(\s*)([-+])(?=[^\s\-+.\d])')
STAR_NO_SPACE_PATTERN: Pattern[str] = re.compile(r'^(\s*)(\*)(?=[^\s*])')
ORDERED_NO_SPACE_PATTERN: Pattern[str] = re.compile(r'^(\s*)(\d+\.)(?=[A-Za-z])')

INLINE_LINK_PATTERN: Pattern[str] = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
INLINE_CODE_PATTERN: Pattern[str] = re.compile(r'`[^`]*`')

EXTERNAL_LINK_PREFIXES: Tuple[str, ...] = ('http://', 'https://', 'mailto:', 'ftp://')

# Anchor slug rules (GitHub-style, simplified)
SLUG_STRIP_PATTERN: Pattern[str] = re.compile(r'[^\w\s-]')
SLUG_SPACE_PATTERN: Pattern[str] = re.compile(r'\s+')

LIST_INDENT_UNIT: int = 2
