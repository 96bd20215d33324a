"""
Module: output.pdf_preview

Purpose:
    Render a parsed quiz as a read-only A4 PDF preview.

Key Functions:
    - render_quiz_pdf(): Write the preview PDF

Dependencies:
    - reportlab: PDF generation and TrueType font registration
    - output.preview: Shared preview lines

Fonts:
    Without ``font_path`` the standard Helvetica fonts are used. They only
    cover Latin-1, so other scripts (CJK, arrows, most symbols) render as
    missing glyphs. Pass a TrueType font that covers the quiz's script to
    render such text.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from quiz_toolkit.core.models import Quiz

from .preview import CHECK_MARK, LineStyle, quiz_lines

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
LINE_HEIGHT = 16
INDENT_PT = 18

# Neither the standard fonts nor most text TTFs have a check mark glyph.
PDF_CHECK_MARK = "(correct)"

_FONTS = {
    LineStyle.TITLE: ("Helvetica-Bold", 12),
    LineStyle.HEADING: ("Helvetica-Bold", 10),
    LineStyle.BODY: ("Helvetica", 10),
    LineStyle.DETAIL: ("Helvetica", 9),
    LineStyle.MUTED: ("Helvetica-Oblique", 9),
}


def register_ttf_font(font_path: Path) -> str:
    """
    Register a TrueType font with reportlab.

    The font is registered under its file stem; registering the same file
    again is a no-op.

    Returns:
        Registered font name

    Raises:
        FileNotFoundError: If the font file does not exist
    """
    if not font_path.is_file():
        raise FileNotFoundError(f"Font file not found: {font_path}")

    name = font_path.stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(font_path)))
        logger.debug(f"Registered PDF font {name} from {font_path}")
    return name


def _font_table(font_name: Optional[str]) -> Dict[LineStyle, Tuple[str, int]]:
    if font_name is None:
        return _FONTS
    # One face for every style; sizes still distinguish titles from body text.
    return {style: (font_name, size) for style, (_, size) in _FONTS.items()}


def render_quiz_pdf(
    quiz: Quiz,
    output_path: Path,
    *,
    source_name: Optional[str] = None,
    font_path: Optional[Path] = None,
) -> int:
    """
    Write a PDF preview of the quiz.

    Lines longer than the printable width are wrapped; a new page starts
    whenever the bottom margin is reached.

    Args:
        quiz: Parsed quiz
        output_path: Path to write the PDF
        source_name: Optional file name shown in the header
        font_path: Optional TrueType font used for all text instead of
            Helvetica, for quizzes written outside Latin-1

    Returns:
        Number of pages written

    Raises:
        FileNotFoundError: If ``font_path`` does not exist

    Example:
        >>> render_quiz_pdf(quiz, Path("output/preview.pdf"), source_name="quiz.csv")
        2
    """
    fonts = _font_table(register_ttf_font(font_path) if font_path else None)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle(f"Quiz Preview{f': {source_name}' if source_name else ''}")

    top = A4_HEIGHT - MARGIN
    y = top
    pages = 1

    for line in quiz_lines(quiz, source_name=source_name):
        font, size = fonts[line.style]
        x = MARGIN + line.indent * INDENT_PT
        width = A4_WIDTH - MARGIN - x
        text = line.text.replace(CHECK_MARK, PDF_CHECK_MARK)

        for chunk in simpleSplit(text, font, size, width) or [""]:
            if y < MARGIN:
                c.showPage()
                pages += 1
                y = top
            c.setFont(font, size)
            c.drawString(x, y, chunk)
            y -= LINE_HEIGHT

    c.showPage()
    c.save()
    logger.info(f"Rendered preview of {len(quiz)} question(s) on {pages} page(s) to {output_path}")
    return pages
