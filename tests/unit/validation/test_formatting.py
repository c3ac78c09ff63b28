"""Tests for Markdown formatting checks."""

from lessonlint.validation.formatting import (
    check_markdown_formatting,
    validate_markdown_formatting,
)
from lessonlint.validation.framework import Category, Severity


def _by_category(violations, category):
    return [v for v in violations if v.category == category]


class TestHeadingHierarchy:
    """Test heading level progression."""

    def test_valid_hierarchy(self):
        content = "# Title\n## A\n### B\n## C\n# Next Part\n### Deep\n"
        violations = check_markdown_formatting(content)
        # The last heading skips from 1 to 3
        assert [(v.line, v.message) for v in violations] == [(6, "Heading level skipped from 1 to 3")]

    def test_first_heading_may_be_any_level(self):
        assert check_markdown_formatting("### Starts deep\n#### Deeper\n") == []

    def test_moving_up_is_allowed(self):
        assert check_markdown_formatting("# A\n## B\n### C\n#### D\n# E\n") == []

    def test_skip(self):
        violations = check_markdown_formatting("# Title\n### Skipped\n", file="README.md")

        assert len(violations) == 1
        violation = violations[0]
        assert violation.category == Category.HEADING_HIERARCHY
        assert violation.severity == Severity.ERROR
        assert violation.file == "README.md"
        assert violation.line == 2

    def test_missing_space_after_hashes(self):
        violations = check_markdown_formatting("# Title\n##Overview\n")
        assert [(v.line, v.message) for v in violations] == [(2, "Missing space after # symbols")]


class TestCodeBlocks:
    """Test fenced code block checks."""

    def test_unterminated_block(self):
        content = "# Title\n\nSome text.\n\n```rust\nfn main() {}\n"
        violations = check_markdown_formatting(content, file="README.md")

        errors = [v for v in violations if v.severity == Severity.ERROR]
        assert len(errors) == 1
        assert errors[0].category == Category.CODE_BLOCK
        assert errors[0].message == "Code block opened but never closed"
        assert errors[0].line == 5

    def test_missing_language_tag_is_a_warning(self):
        violations = check_markdown_formatting("```\nplain\n```\n")

        assert len(violations) == 1
        assert violations[0].severity == Severity.WARNING
        assert violations[0].line == 1

    def test_unclean_closing_fence(self):
        violations = check_markdown_formatting("```rust\ncode\n``` trailing\n")

        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert violations[0].message == "Code block closing fence should be just ```"
        assert violations[0].line == 3

    def test_clean_blocks(self):
        assert check_markdown_formatting("```rust\nlet x = 1;\n```\n\n```toml\n[a]\n```\n") == []


class TestListFormatting:
    """Test list marker checks."""

    def test_missing_space_after_marker(self):
        violations = check_markdown_formatting("-item\n1.Step\n")

        assert [(v.line, v.severity) for v in violations] == [
            (1, Severity.ERROR), (2, Severity.ERROR),
        ]
        assert all(v.message == "Missing space after list marker" for v in violations)

    def test_odd_indentation_is_a_warning(self):
        violations = check_markdown_formatting("- a\n   - b\n  - c\n")

        assert len(violations) == 1
        assert violations[0].severity == Severity.WARNING
        assert violations[0].category == Category.LIST_FORMATTING
        assert violations[0].line == 2

    def test_emphasis_and_rules_are_not_lists(self):
        assert check_markdown_formatting("*Note*: read this\n\n---\n\n**Bold** text\n") == []


class TestValidateMarkdownFormatting:
    """Test the multi-file entry point."""

    def test_clean_module(self, module_root):
        files = sorted(module_root.rglob("*.md"))
        assert validate_markdown_formatting(files, module_root) == []

    def test_reports_relative_file_paths(self, module_root):
        broken = module_root / "01-fundamentals" / "NOTES.md"
        broken.write_text("# Notes\n\n```rust\nunfinished\n", encoding="utf-8")

        violations = validate_markdown_formatting([broken], module_root)

        assert [(v.file, v.line) for v in violations] == [("01-fundamentals/NOTES.md", 3)]

    def test_idempotent(self, module_root):
        broken = module_root / "01-fundamentals" / "NOTES.md"
        broken.write_text("#Bad\n# Ok\n### Skip\n-item\n```\n", encoding="utf-8")

        first = validate_markdown_formatting([broken], module_root)
        second = validate_markdown_formatting([broken], module_root)
        assert first == second
        assert len(first) > 0
