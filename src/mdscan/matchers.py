"""Single-line matchers.

Each function looks at exactly one line and knows nothing about fence
state; the scanner decides which lines are eligible.
"""

from typing import Iterator, Optional, Tuple

from .constants import (
    DASH_PLUS_NO_SPACE_PATTERN,
    FENCE_MARKER,
    HEADING_NO_SPACE_PATTERN,
    HEADING_PATTERN,
    INLINE_CODE_PATTERN,
    INLINE_LINK_PATTERN,
    ORDERED_ITEM_PATTERN,
    ORDERED_NO_SPACE_PATTERN,
    SLUG_SPACE_PATTERN,
    SLUG_STRIP_PATTERN,
    STAR_NO_SPACE_PATTERN,
    UNORDERED_ITEM_PATTERN,
)


def is_fence(line: str) -> bool:
    """Line opens or closes a fenced code block."""
    return line.strip().startswith(FENCE_MARKER)


def fence_info(line: str) -> str:
    """Info string after an opening fence ('' when absent)."""
    return line.strip()[len(FENCE_MARKER):].strip()


def match_heading(line: str) -> Optional[Tuple[int, str]]:
    """Return (level, text) for an ATX heading line."""
    match = HEADING_PATTERN.match(line)
    if not match:
        return None
    return len(match.group(1)), match.group(2)


def has_heading_missing_space(line: str) -> bool:
    return HEADING_NO_SPACE_PATTERN.match(line) is not None


def match_list_item(line: str) -> Optional[Tuple[int, str, str]]:
    """Return (indent, marker, content) for a list item line."""
    match = UNORDERED_ITEM_PATTERN.match(line) or ORDERED_ITEM_PATTERN.match(line)
    if not match:
        return None
    return len(match.group(1)), match.group(2), match.group(3)


def has_malformed_list_marker(line: str) -> bool:
    """List marker directly followed by content, e.g. "-item" or "1.Step".

    A lone leading '*' counts only when the line has no other '*', so
    emphasis such as "*note*" or "**Next**:" is not reported.
    """
    if DASH_PLUS_NO_SPACE_PATTERN.match(line) or ORDERED_NO_SPACE_PATTERN.match(line):
        return True
    return STAR_NO_SPACE_PATTERN.match(line) is not None and line.count('*') == 1


def iter_links(line: str) -> Iterator[Tuple[str, str]]:
    """Yield (text, target) for inline links outside code spans."""
    visible = INLINE_CODE_PATTERN.sub('', line)
    for match in INLINE_LINK_PATTERN.finditer(visible):
        raw_target = match.group(2).strip()
        if not raw_target:
            continue
        # Drop an optional link title: [t](path "title")
        target = raw_target.split()[0].strip('<>')
        yield match.group(1), target


def heading_slug(text: str) -> str:
    """Anchor id generated for a heading."""
    slug = SLUG_STRIP_PATTERN.sub('', text.strip().lower())
    return SLUG_SPACE_PATTERN.sub('-', slug)
