"""Tests for single-line matchers and extractor properties."""

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdscan import heading_slug, scan
from mdscan.matchers import fence_info, is_fence, match_heading, match_list_item


class TestMatchers:
    """Test individual line matchers."""

    def test_is_fence(self):
        assert is_fence("```")
        assert is_fence("   ```python")
        assert not is_fence("`` not a fence")
        assert not is_fence("text ```")

    def test_fence_info(self):
        assert fence_info("```rust") == "rust"
        assert fence_info("```  toml ") == "toml"
        assert fence_info("```") == ""

    def test_match_heading(self):
        assert match_heading("## Next Steps") == (2, "Next Steps")
        assert match_heading("######\tDeep") == (6, "Deep")
        assert match_heading("##Overview") is None
        assert match_heading("#") is None
        assert match_heading("text # not heading") is None

    def test_match_list_item(self):
        assert match_list_item("   - item") == (3, "-", "item")
        assert match_list_item("2. second") == (0, "2.", "second")
        assert match_list_item("-item") is None

    @pytest.mark.parametrize("text,slug", [
        ("Next Steps", "next-steps"),
        ("Source Attribution", "source-attribution"),
        ("What's New?", "whats-new"),
        ("Tujuan  Pembelajaran", "tujuan-pembelajaran"),
        ("1. Setup & Install", "1-setup-install"),
    ])
    def test_heading_slug(self, text, slug):
        assert heading_slug(text) == slug


SAFE_TEXT = "".join(c for c in string.printable if c not in "`\n\r\x0b\x0c")
heading_texts = st.text(alphabet=string.ascii_letters + string.digits + " ", min_size=1).filter(
    lambda s: s.strip()
)
fence_interiors = st.lists(st.text(alphabet=SAFE_TEXT, max_size=40), max_size=10)


class TestExtractorProperties:
    """Property-based tests for the structure extractor."""

    @given(st.lists(st.tuples(st.integers(min_value=1, max_value=6), heading_texts), max_size=20))
    def test_heading_levels_round_trip(self, headings):
        content = "\n".join(f"{'#' * level} {text}" for level, text in headings)
        structure = scan(content)

        assert structure.heading_levels == [level for level, _ in headings]
        assert [h.text for h in structure.headings] == [text.strip() for _, text in headings]

    @given(fence_interiors)
    def test_fence_interiors_are_opaque(self, interior):
        content = "\n".join(["# Outer", "```", *interior, "```", "## After"])
        structure = scan(content)

        assert structure.heading_levels == [1, 2]
        assert structure.list_items == []
        assert structure.links == []
        assert structure.issues == []
        assert len(structure.code_blocks) == 1
        assert structure.code_blocks[0].is_closed

    @given(st.text())
    def test_scan_is_deterministic(self, content):
        assert scan(content) == scan(content)

    @given(st.integers(min_value=0, max_value=10))
    def test_every_balanced_fence_closes(self, count):
        content = "\n".join(["```text", "body", "```"] * count)
        blocks = scan(content).code_blocks

        assert len(blocks) == count
        assert all(block.is_closed and block.has_clean_closing for block in blocks)
