"""Tests for the line grammar."""

from __future__ import annotations

import pytest

from changelog_py.core import grammar


class TestHeaders:
    """Tests for title and release header patterns."""

    def test_title(self):
        """Title captures a single word."""
        match = grammar.TITLE.match("# Changelog")
        assert match is not None
        assert match.group("title") == "Changelog"

    def test_title_does_not_match_release_header(self):
        """A level-2 header is not a title."""
        assert grammar.TITLE.match("## [Unreleased]") is None

    def test_unreleased_header(self):
        """Plain and inline Unreleased headers."""
        assert grammar.UNRELEASED_HEADER.match("## [Unreleased]")
        match = grammar.UNRELEASED_HEADER_INLINE.match(
            "## [Unreleased](https://github.com/o/r/compare/v0.0.1...HEAD)"
        )
        assert match is not None
        assert match.group("url") == "https://github.com/o/r/compare/v0.0.1...HEAD"

    def test_version_header(self):
        """Version header captures version and date."""
        match = grammar.VERSION_HEADER.match("## [1.2.3-rc.1+build.5] - 2021-05-19")
        assert match is not None
        assert match.group("version") == "1.2.3-rc.1+build.5"
        assert match.group("date") == "2021-05-19"
        assert match.group("yanked") is None

    def test_version_header_yanked(self):
        """YANKED suffix is captured."""
        match = grammar.VERSION_HEADER.match("## [0.0.2] - 2021-05-22 [YANKED]")
        assert match is not None
        assert match.group("yanked") is not None

    def test_version_header_inline(self):
        """Inline link variant captures the URL."""
        match = grammar.VERSION_HEADER_INLINE.match(
            "## [0.0.1](https://example.com/v0.0.1) - 2021-05-19"
        )
        assert match is not None
        assert match.group("version") == "0.0.1"
        assert match.group("url") == "https://example.com/v0.0.1"

    @pytest.mark.parametrize(
        "line",
        [
            "## [0.0.1]",
            "## [v0.0.1] - 2021-05-19",
            "## [0.0.1] - 21-05-19",
            "## 0.0.1 - 2021-05-19",
        ],
    )
    def test_version_header_rejects(self, line: str):
        """Malformed version headers are not recognized."""
        assert grammar.VERSION_HEADER.match(line) is None


class TestLinkDefinitions:
    """Tests for reference-style link definitions."""

    def test_unreleased_link(self):
        """Unreleased definition captures URL."""
        match = grammar.UNRELEASED_LINK_DEF.match("[Unreleased]: https://example.com/compare")
        assert match is not None
        assert match.group("url") == "https://example.com/compare"

    def test_version_link(self):
        """Version definition captures version and URL."""
        match = grammar.VERSION_LINK_DEF.match("[0.0.1]: https://example.com/v0.0.1")
        assert match is not None
        assert match.group("version") == "0.0.1"
        assert match.group("url") == "https://example.com/v0.0.1"

    def test_prose_is_not_a_link(self):
        """Text with spaces is not a URL."""
        assert grammar.UNRELEASED_LINK_DEF.match("[Unreleased]: see below") is None


class TestScopesAndEntries:
    """Tests for category headers and entries."""

    @pytest.mark.parametrize(
        ("pattern", "line"),
        [
            (grammar.ADDED_HEADER, "### Added"),
            (grammar.CHANGED_HEADER, "### Changed"),
            (grammar.DEPRECATED_HEADER, "### Deprecated"),
            (grammar.REMOVED_HEADER, "### Removed"),
            (grammar.FIXED_HEADER, "### Fixed"),
            (grammar.SECURITY_HEADER, "### Security"),
        ],
    )
    def test_scope_headers(self, pattern, line: str):
        """Each category header matches its own pattern."""
        assert pattern.match(line)

    def test_scope_header_is_case_sensitive(self):
        """Lowercase category headers are not structural."""
        assert grammar.ADDED_HEADER.match("### added") is None

    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_entry_markers(self, marker: str):
        """All bullet markers start an entry."""
        match = grammar.ENTRY.match(f"{marker} Change 1")
        assert match is not None
        assert match.group("entry") == "Change 1"

    def test_indented_bullet_is_not_an_entry(self):
        """Nested list items are continuation lines."""
        assert grammar.ENTRY.match("  - A") is None


class TestTrimBlankLines:
    """Tests for trim_blank_lines()."""

    def test_trims_both_ends(self):
        """Leading and trailing blanks are removed, inner ones kept."""
        assert grammar.trim_blank_lines(["", " ", "a", "", "b", "\t", ""]) == ["a", "", "b"]

    def test_all_blank(self):
        """All-blank input becomes empty."""
        assert grammar.trim_blank_lines(["", "  "]) == []
