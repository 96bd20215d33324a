"""
Unit Tests for the Quiz File Loader

Tests for load_quiz_file / load_quiz_text rejection rules.
"""

import pytest

from quiz_toolkit.loading import LoaderError, RejectionReason, load_quiz_file, load_quiz_text


class TestLoadQuizFile:
    """Tests for reading quiz files from disk."""

    def test_load_when_valid_csv_then_full_text(self, sample_csv_path, sample_csv):
        loaded = load_quiz_file(sample_csv_path)

        assert loaded.text == sample_csv
        assert loaded.source_name == "quiz.csv"
        assert loaded.size_bytes == len(sample_csv.encode("utf-8"))

    def test_load_when_missing_then_not_found(self, tmp_path):
        with pytest.raises(LoaderError) as exc_info:
            load_quiz_file(tmp_path / "missing.csv")

        assert exc_info.value.reason == RejectionReason.NOT_FOUND

    def test_load_when_directory_then_not_found(self, tmp_path):
        folder = tmp_path / "folder.csv"
        folder.mkdir()

        with pytest.raises(LoaderError) as exc_info:
            load_quiz_file(folder)

        assert exc_info.value.reason == RejectionReason.NOT_FOUND

    @pytest.mark.parametrize("name", ["quiz.txt", "quiz.xlsx", "quiz"])
    def test_load_when_wrong_suffix_then_wrong_type(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("NewQuestion,WR", encoding="utf-8")

        with pytest.raises(LoaderError, match="CSV files only") as exc_info:
            load_quiz_file(path)

        assert exc_info.value.reason == RejectionReason.WRONG_TYPE

    def test_load_when_uppercase_suffix_then_accepted(self, tmp_path):
        path = tmp_path / "QUIZ.CSV"
        path.write_text("NewQuestion,WR", encoding="utf-8")

        assert load_quiz_file(path).text == "NewQuestion,WR"

    def test_load_when_over_limit_then_oversize(self, tmp_path):
        path = tmp_path / "big.csv"
        path.write_bytes(b"x" * 101)

        with pytest.raises(LoaderError, match="larger than 100 bytes") as exc_info:
            load_quiz_file(path, max_bytes=100)

        assert exc_info.value.reason == RejectionReason.OVERSIZE

    def test_load_when_exactly_at_limit_then_accepted(self, tmp_path):
        path = tmp_path / "edge.csv"
        path.write_bytes(b"x" * 100)

        assert load_quiz_file(path, max_bytes=100).size_bytes == 100

    def test_load_when_empty_file_then_read_failure(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_bytes(b"")

        with pytest.raises(LoaderError, match="Failed to read file content") as exc_info:
            load_quiz_file(path)

        assert exc_info.value.reason == RejectionReason.READ_FAILURE


class TestLoadQuizText:
    """Tests for decoding uploaded bytes."""

    def test_load_text_when_bom_then_stripped(self):
        loaded = load_quiz_text(b"\xef\xbb\xbfNewQuestion,WR", "upload.csv")

        assert loaded.text == "NewQuestion,WR"

    def test_load_text_when_not_utf8_then_read_failure(self):
        with pytest.raises(LoaderError, match="not valid UTF-8") as exc_info:
            load_quiz_text(b"\xff\xfe\x00bad", "upload.csv")

        assert exc_info.value.reason == RejectionReason.READ_FAILURE

    def test_load_text_when_no_limit_then_any_size(self):
        loaded = load_quiz_text(b"a" * 50, "upload.csv", max_bytes=None)

        assert loaded.size_bytes == 50

    def test_load_text_when_over_limit_then_oversize(self):
        with pytest.raises(LoaderError) as exc_info:
            load_quiz_text(b"a" * 11, "upload.csv", max_bytes=10)

        assert exc_info.value.reason == RejectionReason.OVERSIZE
        assert str(exc_info.value) == "File upload.csv is larger than 10 bytes (11 bytes)"
