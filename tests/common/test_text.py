"""
Unit Tests for common.text

Whitespace normalization, option-prefix stripping and sanitization.
"""

import pytest

from mcq_toolkit.common.text import (
    clean_option_text,
    normalize_whitespace,
    sanitize_text,
    strip_option_prefix,
)


class TestNormalizeWhitespace:
    """Tests for normalize_whitespace()."""

    def test_normalize_when_runs_of_whitespace_then_collapses(self):
        """Tabs, newlines and repeated spaces become single spaces."""
        assert normalize_whitespace("  What   is\n\t2+2? ") == "What is 2+2?"

    def test_normalize_when_empty_then_returns_empty(self):
        """Empty input stays empty."""
        assert normalize_whitespace("") == ""
        assert normalize_whitespace("   \n ") == ""


class TestStripOptionPrefix:
    """Tests for strip_option_prefix()."""

    @pytest.mark.parametrize("raw, expected", [
        ("(B) Berlin", "Berlin"),
        ("3) Madrid", "Madrid"),
        ("A. Paris", "Paris"),
        ("c: Rome", "Rome"),
        ("12. Oslo", "Oslo"),
        ("(4) Lima", "Lima"),
        ("D)Bern", "Bern"),
    ])
    def test_strip_when_marker_present_then_removes_it(self, raw, expected):
        """Each supported marker form is removed with the following gap."""
        assert strip_option_prefix(raw) == expected

    def test_strip_when_no_marker_then_returns_input_unchanged(self):
        """Text without a marker is returned as given."""
        assert strip_option_prefix("Berlin") == "Berlin"
        assert strip_option_prefix("  Berlin ") == "  Berlin "

    def test_strip_when_two_markers_then_removes_only_first(self):
        """Stripping does not recurse."""
        assert strip_option_prefix("A. 1) x") == "1) x"

    def test_strip_when_word_starts_with_letter_then_keeps_word(self):
        """A letter without punctuation is not a marker."""
        assert strip_option_prefix("Apple") == "Apple"


class TestCleanOptionText:
    """Tests for clean_option_text()."""

    def test_clean_when_marker_and_spacing_then_strips_both(self):
        """Marker is removed and whitespace collapsed."""
        assert clean_option_text("  B)   New   York ") == "New York"

    def test_clean_when_marker_only_then_returns_empty(self):
        """A bare marker leaves no option text."""
        assert clean_option_text("C.") == ""


class TestSanitizeText:
    """Tests for sanitize_text()."""

    def test_sanitize_when_angle_brackets_then_removes_them(self):
        """Angle brackets are dropped, whitespace collapsed."""
        assert sanitize_text("<b>What</b>  is  this?") == "bWhat/b is this?"
