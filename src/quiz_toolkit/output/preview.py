"""
Module: output.preview

Purpose:
    Build a read-only preview of a parsed quiz as a list of styled lines.
    Both the text and PDF renderers draw from these lines, so the two
    previews always show the same content.

Key Functions:
    - question_lines(): Preview lines for one question
    - quiz_lines(): Header plus all questions
    - display_text(): Markup-to-plain-text for display

Key Classes:
    - PreviewLine: One line with a style and indent level

Used By:
    - output.text_preview
    - output.pdf_preview

Notes:
    Markup is only flattened for display. It is never validated or
    sanitized, and every optional field may be absent.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from quiz_toolkit.core.models import (
    MatchingQuestion,
    MultipleChoiceQuestion,
    MultiSelectQuestion,
    OrderingQuestion,
    Question,
    QuestionType,
    Quiz,
    ShortAnswerQuestion,
    TrueFalseQuestion,
    WrittenResponseQuestion,
)

CHECK_MARK = "✓"

_BREAK_TAGS = re.compile(r"<\s*(br|/p|/div|/li|/h[1-6])\s*/?\s*>", re.IGNORECASE)
_TAGS = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n\s*\n+")


class LineStyle(str, Enum):
    TITLE = "title"
    HEADING = "heading"
    BODY = "body"
    DETAIL = "detail"
    MUTED = "muted"


@dataclass(frozen=True)
class PreviewLine:
    text: str
    style: LineStyle = LineStyle.BODY
    indent: int = 0


def display_text(value: Optional[str]) -> str:
    """
    Flatten markup for display.

    Block-level closing tags and ``<br>`` become line breaks, other tags
    are dropped and entities are unescaped.
    """
    if not value:
        return ""
    text = _BREAK_TAGS.sub("\n", value)
    text = _TAGS.sub("", text)
    text = html.unescape(text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


def _points_label(points: int) -> str:
    return f"{points} Point{'' if points == 1 else 's'}"


def _text_lines(value: Optional[str], style: LineStyle = LineStyle.BODY, indent: int = 0) -> List[PreviewLine]:
    return [PreviewLine(line, style, indent) for line in display_text(value).splitlines() if line.strip()]


def _feedback_lines(feedback: Optional[str], indent: int) -> List[PreviewLine]:
    return _text_lines(feedback, LineStyle.MUTED, indent)


def question_lines(question: Question, index: int) -> List[PreviewLine]:
    """
    Preview lines for one question.

    Args:
        question: Any question variant
        index: 0-based position in the quiz

    Returns:
        Lines for header, body, type-specific content and footer
    """
    lines = [
        PreviewLine(
            f"Question {index + 1}: {question.title} [{question.type.label}] "
            f"({_points_label(question.points)})",
            LineStyle.TITLE,
        )
    ]
    lines.extend(_text_lines(question.question_text))

    if question.image:
        lines.append(PreviewLine(f"Image placeholder: {question.image}", LineStyle.MUTED))

    lines.extend(_body_lines(question))

    footer: List[PreviewLine] = []
    if question.difficulty:
        footer.append(PreviewLine(f"Difficulty: {question.difficulty}/10", LineStyle.DETAIL))
    if question.hint:
        footer.append(PreviewLine(f"Hint: {display_text(question.hint)}", LineStyle.DETAIL))
    if question.feedback and question.type not in (QuestionType.WR, QuestionType.SA):
        footer.append(
            PreviewLine(f"General Feedback: {display_text(question.feedback)}", LineStyle.DETAIL)
        )
    if question.id:
        footer.append(PreviewLine(f"Question ID: {question.id}", LineStyle.DETAIL))
    lines.extend(footer)
    return lines


def _body_lines(question: Question) -> List[PreviewLine]:
    lines: List[PreviewLine] = []

    if isinstance(question, WrittenResponseQuestion):
        lines.append(PreviewLine("Response:", LineStyle.HEADING))
        lines.extend(_text_lines(question.initial_text or "(empty response box)", LineStyle.MUTED, 1))
        if question.answer_key:
            lines.append(PreviewLine(f"Answer Key: {display_text(question.answer_key)}", LineStyle.DETAIL))

    elif isinstance(question, ShortAnswerQuestion):
        box = question.input_box
        lines.append(PreviewLine(f"Answer box: {box.rows} row(s) x {box.cols} cols", LineStyle.MUTED))
        lines.append(
            PreviewLine(
                f"Correct Answer: {question.best_answer} ({question.evaluation})",
                LineStyle.DETAIL,
            )
        )

    elif isinstance(question, MatchingQuestion):
        lines.append(PreviewLine("Choices:", LineStyle.HEADING))
        for pair in question.pairs:
            lines.append(PreviewLine(f"{pair.choice_no}. {display_text(pair.choice_text)}", indent=1))
        lines.append(PreviewLine("Matches:", LineStyle.HEADING))
        for pair in question.pairs:
            lines.append(PreviewLine(f"{pair.choice_no}. {display_text(pair.match_text)}", indent=1))
        lines.append(PreviewLine(f"Scoring: {question.scoring or '-'}", LineStyle.DETAIL))

    elif isinstance(question, MultipleChoiceQuestion):
        for option in question.options:
            marker = ""
            if option.percent == 100:
                marker = f" {CHECK_MARK}"
            elif option.is_partial:
                marker = f" ({option.percent}%)"
            lines.append(PreviewLine(f"( ) {display_text(option.text)}{marker}", indent=1))
            lines.extend(_feedback_lines(option.feedback, 2))

    elif isinstance(question, TrueFalseQuestion):
        for label, option in (("True", question.true_option), ("False", question.false_option)):
            marker = f" {CHECK_MARK}" if option.credit == 100 else ""
            lines.append(PreviewLine(f"( ) {label}{marker}", indent=1))
            lines.extend(_feedback_lines(option.feedback, 2))

    elif isinstance(question, MultiSelectQuestion):
        for option in question.options:
            marker = f" {CHECK_MARK}" if option.is_correct else ""
            lines.append(PreviewLine(f"[ ] {display_text(option.text)}{marker}", indent=1))
            lines.extend(_feedback_lines(option.feedback, 2))
        lines.append(PreviewLine(f"Scoring: {question.scoring or '-'}", LineStyle.DETAIL))

    elif isinstance(question, OrderingQuestion):
        lines.append(PreviewLine("Items (Correct Order):", LineStyle.HEADING))
        for position, item in enumerate(question.items, 1):
            lines.append(PreviewLine(f"{position}. {display_text(item.text)}", indent=1))
            lines.extend(_feedback_lines(item.feedback, 2))
        lines.append(PreviewLine(f"Scoring: {question.scoring or '-'}", LineStyle.DETAIL))

    return lines


def quiz_lines(quiz: Quiz, *, source_name: Optional[str] = None) -> List[PreviewLine]:
    """Header line plus the lines of every question, separated by blanks."""
    count = len(quiz)
    header = f"{count} question{'' if count == 1 else 's'} loaded."
    if source_name:
        header = f"Quiz Preview: {source_name} - {header}"

    lines = [PreviewLine(header, LineStyle.TITLE), PreviewLine("")]
    for index, question in enumerate(quiz.questions):
        lines.extend(question_lines(question, index))
        lines.append(PreviewLine(""))
    return lines
