"""
Module: output.text_preview

Purpose:
    Render a parsed quiz as a plain-text preview for the terminal.

Key Functions:
    - render_quiz_text(): Quiz -> preview string
"""

from __future__ import annotations

from typing import Optional

from quiz_toolkit.core.models import Quiz

from .preview import LineStyle, quiz_lines

INDENT = "  "


def render_quiz_text(quiz: Quiz, *, source_name: Optional[str] = None) -> str:
    """
    Render the quiz as text.

    Title lines are underlined; every other line is indented by its level.

    Example:
        >>> render_quiz_text(Quiz()).splitlines()
        ['0 questions loaded.', '===================']
    """
    out = []
    for line in quiz_lines(quiz, source_name=source_name):
        text = f"{INDENT * line.indent}{line.text}"
        out.append(text)
        if line.style == LineStyle.TITLE:
            out.append("=" * len(text))
    return "\n".join(out).rstrip() + "\n"
