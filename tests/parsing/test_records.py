"""
Unit Tests for Record Splitting

Tests for iter_records / split_records.
"""

import pytest

from quiz_toolkit.parsing.records import iter_records, normalise_newlines, split_records


class TestNormaliseNewlines:
    """Tests for line ending normalisation."""

    def test_normalise_when_crlf_then_lf(self):
        assert normalise_newlines("a\r\nb\rc") == "a\nb\nc"

    def test_normalise_when_bom_then_dropped(self):
        assert normalise_newlines("\ufeffNewQuestion,WR") == "NewQuestion,WR"


class TestSplitRecords:
    """Tests for splitting a buffer into logical records."""

    def test_split_when_plain_lines_then_one_record_each(self):
        assert split_records("a,1\nb,2\nc,3") == ["a,1", "b,2", "c,3"]

    def test_split_when_quoted_newline_then_kept_in_record(self):
        """A line feed inside quotes does not end the record."""
        text = 'QuestionText,"<p>line one</p>\n<p>line two</p>",,\nPoints,2'

        assert split_records(text) == [
            'QuestionText,"<p>line one</p>\n<p>line two</p>",,',
            "Points,2",
        ]

    def test_split_when_blank_lines_then_skipped(self):
        assert split_records("\n\n  a,1  \n   \n\nb,2\n\n") == ["a,1", "b,2"]

    def test_split_when_escaped_quote_then_quote_state_unchanged(self):
        """A doubled quote is a literal and does not open a quoted span."""
        text = 'Hint,He said ""hi""\nPoints,2'

        assert split_records(text) == ['Hint,He said ""hi""', "Points,2"]

    def test_split_when_escaped_quote_inside_quotes_then_still_quoted(self):
        text = 'Hint,"say ""a\nb"" now"\nPoints,2'

        assert split_records(text) == ['Hint,"say ""a\nb"" now"', "Points,2"]

    def test_split_when_crlf_then_same_as_lf(self):
        assert split_records("a,1\r\nb,2\r\n") == split_records("a,1\nb,2\n")

    def test_split_when_unterminated_quote_then_rest_is_one_record(self):
        """An unterminated quote swallows the rest of the buffer."""
        text = 'Title,"open\nPoints,2\nHint,x'

        assert split_records(text) == ['Title,"open\nPoints,2\nHint,x']

    @pytest.mark.parametrize("text", ["", "   ", "\n\r\n"])
    def test_split_when_empty_input_then_no_records(self, text):
        assert split_records(text) == []

    def test_iter_when_called_then_lazy_generator(self):
        records = iter_records("a\nb")

        assert next(records) == "a"
        assert next(records) == "b"
