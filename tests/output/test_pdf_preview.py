"""
Tests for the PDF Preview Renderer
"""

from pathlib import Path

import pytest
import reportlab
from unittest.mock import patch

from quiz_toolkit.core.models import MCOption, MultipleChoiceQuestion, Quiz, WrittenResponseQuestion
from quiz_toolkit.output import register_ttf_font, render_quiz_pdf


@pytest.fixture
def quiz() -> Quiz:
    return Quiz(questions=(
        WrittenResponseQuestion(title="Essay", question_text="<p>Discuss</p>"),
        MultipleChoiceQuestion(
            title="Capital",
            question_text="Pick",
            options=(MCOption("Paris", 100), MCOption("Berlin", 0)),
        ),
    ))


class TestRenderQuizPdf:
    """Tests for render_quiz_pdf."""

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_called_then_title_set_and_saved(self, mock_canvas, quiz, tmp_path):
        """The canvas gets a title and is saved once."""
        c = mock_canvas.return_value

        pages = render_quiz_pdf(quiz, tmp_path / "preview.pdf", source_name="quiz.csv")

        assert pages == 1
        c.setTitle.assert_called_once_with("Quiz Preview: quiz.csv")
        c.save.assert_called_once()

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_check_mark_then_replaced(self, mock_canvas, quiz, tmp_path):
        """The base fonts have no check mark glyph."""
        c = mock_canvas.return_value

        render_quiz_pdf(quiz, tmp_path / "preview.pdf")

        drawn = [call.args[2] for call in c.drawString.call_args_list]
        assert "( ) Paris (correct)" in drawn
        assert not any("✓" in text for text in drawn)

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_many_questions_then_multiple_pages(self, mock_canvas, tmp_path):
        questions = tuple(
            WrittenResponseQuestion(title=f"Essay {i}", question_text="Discuss") for i in range(40)
        )

        pages = render_quiz_pdf(Quiz(questions=questions), tmp_path / "preview.pdf")

        assert pages > 1
        assert mock_canvas.return_value.showPage.call_count == pages

    def test_render_when_real_canvas_then_pdf_written(self, quiz, tmp_path):
        path = tmp_path / "out" / "preview.pdf"

        render_quiz_pdf(quiz, path)

        assert path.read_bytes().startswith(b"%PDF")


@pytest.fixture
def vera_font() -> Path:
    """TrueType font bundled with reportlab."""
    path = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
    if not path.is_file():
        pytest.skip("reportlab install has no bundled Vera.ttf")
    return path


class TestFonts:
    """Tests for TrueType font support."""

    def test_register_when_missing_file_then_error(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Font file not found"):
            register_ttf_font(tmp_path / "missing.ttf")

    def test_register_when_called_twice_then_same_name(self, vera_font):
        assert register_ttf_font(vera_font) == "Vera"
        assert register_ttf_font(vera_font) == "Vera"

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_font_path_then_every_line_uses_it(self, mock_canvas, quiz, vera_font, tmp_path):
        c = mock_canvas.return_value

        render_quiz_pdf(quiz, tmp_path / "preview.pdf", font_path=vera_font)

        used = {call.args[0] for call in c.setFont.call_args_list}
        assert used == {"Vera"}

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_no_font_path_then_standard_fonts(self, mock_canvas, quiz, tmp_path):
        c = mock_canvas.return_value

        render_quiz_pdf(quiz, tmp_path / "preview.pdf")

        used = {call.args[0] for call in c.setFont.call_args_list}
        assert used <= {"Helvetica", "Helvetica-Bold", "Helvetica-Oblique"}

    def test_render_when_font_path_and_non_latin_text_then_font_embedded(self, vera_font, tmp_path):
        """Characters outside Latin-1 are drawn with the embedded TrueType font."""
        path = tmp_path / "preview.pdf"
        quiz = Quiz(questions=(
            WrittenResponseQuestion(title="Œuvre", question_text="Price: 5 € for “quoted” text"),
        ))

        render_quiz_pdf(quiz, path, font_path=vera_font)

        data = path.read_bytes()
        assert data.startswith(b"%PDF")
        assert b"Vera" in data

    def test_render_when_missing_font_then_nothing_written(self, quiz, tmp_path):
        path = tmp_path / "preview.pdf"

        with pytest.raises(FileNotFoundError):
            render_quiz_pdf(quiz, path, font_path=tmp_path / "missing.ttf")

        assert not path.exists()
