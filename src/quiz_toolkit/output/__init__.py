"""
Module: output

Purpose:
    Read-only previews of a parsed quiz.

Key Functions:
    - render_quiz_text(): Plain-text preview
    - render_quiz_pdf(): A4 PDF preview (reportlab)
"""

from .pdf_preview import register_ttf_font, render_quiz_pdf
from .preview import PreviewLine, display_text, question_lines, quiz_lines
from .text_preview import render_quiz_text

__all__ = [
    "register_ttf_font",
    "render_quiz_pdf",
    "PreviewLine",
    "display_text",
    "question_lines",
    "quiz_lines",
    "render_quiz_text",
]
