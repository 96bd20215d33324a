"""
Module: parsing.parser

Purpose:
    Entry point for parsing a quiz CSV buffer. Wires the record splitter,
    row tokenizer and question assembler together and returns the Quiz
    alongside the diagnostics raised while building it.

Key Functions:
    - parse_quiz_csv(): Text buffer -> ParseResult

Key Classes:
    - ParseResult: Quiz plus ordered diagnostics

Used By:
    - cli
    - tests
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from quiz_toolkit.core.models import Question, Quiz

from .assembler import QuestionAssembler
from .config import ParserConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticsCollector,
    DiagnosticsReport,
    Severity,
)
from .records import iter_records
from .tokenizer import split_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one parse call.

    The parser never raises for bad input: ``quiz`` holds whatever valid
    questions could be assembled (possibly none) and ``diagnostics`` lists
    everything that was skipped, repaired or dropped, in file order.
    Treating an empty quiz as an error is up to the caller.
    """

    quiz: Quiz
    diagnostics: Tuple[Diagnostic, ...] = ()
    source: Optional[str] = None

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self.quiz.questions

    @property
    def warnings(self) -> Tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity != Severity.INFO)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def dropped_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.kind == DiagnosticKind.DROPPED_QUESTION)

    def report(self) -> DiagnosticsReport:
        return DiagnosticsReport.from_diagnostics(self.diagnostics, self.source)


def parse_quiz_csv(
    text: str,
    config: Optional[ParserConfig] = None,
    *,
    source: Optional[str] = None,
) -> ParseResult:
    """
    Parse a complete quiz CSV buffer.

    Process:
    1. Split the buffer into logical records (quoted newlines kept)
    2. Tokenize each record into cells
    3. Feed rows to a fresh QuestionAssembler
    4. Finalize the last question

    The function keeps no state between calls; parsing the same buffer
    twice yields equal results.

    Args:
        text: Whole file content
        config: Parser defaults (ParserConfig() if omitted)
        source: Optional file name recorded on the result

    Returns:
        ParseResult with the Quiz and diagnostics

    Example:
        >>> result = parse_quiz_csv("NewQuestion,WR\\nTitle,Essay\\nQuestionText,Discuss")
        >>> len(result.questions)
        1
    """
    collector = DiagnosticsCollector(source=source)
    assembler = QuestionAssembler(config=config, diagnostics=collector)

    record_count = 0
    for record_index, record in enumerate(iter_records(text), 1):
        record_count = record_index
        assembler.feed(split_row(record), record_index, raw=record)

    quiz = assembler.finish()
    logger.info(
        f"Parsed {len(quiz)} question(s) from {record_count} record(s)"
        f"{f' in {source}' if source else ''} with {collector.issue_count} diagnostic(s)"
    )
    return ParseResult(quiz=quiz, diagnostics=collector.items, source=source)
