"""
Module: parsing

Purpose:
    Tolerant parser for the line-record quiz CSV dialect. Converts a text
    buffer into a Quiz plus diagnostics.

Key Functions:
    - parse_quiz_csv(): Parse a whole buffer
    - split_records(): Record splitter (quoted newlines kept)
    - split_row(): Row tokenizer

Key Classes:
    - QuestionAssembler: Row-driven state machine
    - ParserConfig: Defaults passed into the assembler
    - ParseResult, Diagnostic: Parse outcome

Used By:
    - cli
"""

from .assembler import QuestionAssembler
from .config import DEFAULT_MAX_INPUT_BYTES, ParserConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticsCollector,
    DiagnosticsReport,
    Severity,
)
from .parser import ParseResult, parse_quiz_csv
from .records import iter_records, split_records
from .tokenizer import split_row

__all__ = [
    "QuestionAssembler",
    "DEFAULT_MAX_INPUT_BYTES",
    "ParserConfig",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsCollector",
    "DiagnosticsReport",
    "Severity",
    "ParseResult",
    "parse_quiz_csv",
    "iter_records",
    "split_records",
    "split_row",
]
