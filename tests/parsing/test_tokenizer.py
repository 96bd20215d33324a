"""
Unit Tests for Row Tokenizing

Tests for split_row, cell, parse_int and is_html.
"""

import doctest

import pytest

from quiz_toolkit.parsing import tokenizer
from quiz_toolkit.parsing.tokenizer import cell, is_html, is_int, parse_int, split_row


class TestSplitRow:
    """Tests for splitting one record into cells."""

    def test_split_when_plain_then_trimmed_cells(self):
        assert split_row(" Title , Essay ,,") == ["Title", "Essay", "", ""]

    def test_split_when_quoted_comma_then_not_split(self):
        assert split_row('Option,100,"Paris, France"') == ["Option", "100", "Paris, France"]

    def test_split_when_escaped_quote_then_literal_quote(self):
        assert split_row('Hint,"He said ""hi"""') == ["Hint", 'He said "hi"']

    def test_split_when_quoted_newline_then_kept(self):
        assert split_row('QuestionText,"a\nb"') == ["QuestionText", "a\nb"]

    def test_split_when_empty_record_then_single_empty_cell(self):
        assert split_row("") == [""]

    def test_split_when_quoted_newline_and_escaped_quote_then_both_kept(self):
        assert split_row('QuestionText,"Say ""hi""\nthen leave",,') == [
            "QuestionText",
            'Say "hi"\nthen leave',
            "",
            "",
        ]


class TestDocExamples:
    """The usage examples in the module docstrings stay accurate."""

    def test_docstring_examples_when_run_then_no_failures(self):
        results = doctest.testmod(tokenizer, verbose=False)

        assert results.attempted > 0
        assert results.failed == 0


class TestCell:
    """Tests for positional cell access."""

    def test_cell_when_present_then_value(self):
        assert cell(["Title", "Essay"], 1) == "Essay"

    def test_cell_when_missing_then_default(self):
        """Short rows are not errors."""
        assert cell(["Title"], 3) == ""
        assert cell(["Title"], 3, None) is None

    def test_cell_when_empty_then_default(self):
        assert cell(["ID", ""], 1, None) is None


class TestParseInt:
    """Tests for lenient integer reading."""

    @pytest.mark.parametrize("value,expected", [
        ("5", 5),
        (" 12 ", 12),
        ("-1", -1),
        ("+3", 3),
        ("3.7", 3),
        ("12abc", 12),
    ])
    def test_parse_when_leading_number_then_number(self, value, expected):
        assert parse_int(value, 99) == expected

    @pytest.mark.parametrize("value", ["", "abc", None, "-", ".5"])
    def test_parse_when_not_a_number_then_default(self, value):
        assert parse_int(value, 7) == 7

    def test_is_int_when_checked_then_matches_parse(self):
        assert is_int("10")
        assert not is_int("ten")
        assert not is_int(None)


class TestIsHtml:
    """Tests for the HTML flag."""

    @pytest.mark.parametrize("value", ["html", "HTML", " Html "])
    def test_is_html_when_marker_then_true(self, value):
        assert is_html(value)

    @pytest.mark.parametrize("value", ["", None, "text", "htm"])
    def test_is_html_when_other_then_false(self, value):
        assert not is_html(value)

    def test_is_html_when_custom_marker_then_used(self):
        assert is_html("markup", marker="MARKUP")
