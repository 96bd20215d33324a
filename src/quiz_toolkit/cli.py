"""
Preview a Brightspace-style quiz CSV from the command line.

Loads the file, parses it, prints the diagnostics and a text preview, and
optionally writes the parsed quiz as JSON, a PDF preview and a diagnostics
report.

Usage:
    quiz-preview quiz.csv [--json out.json] [--pdf out.pdf [--font font.ttf]]
                          [--report diag.json] [--max-bytes N]

Exit codes:
    0 - at least one question parsed
    1 - no valid questions found
    2 - file rejected before parsing
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from quiz_toolkit import __version__
from quiz_toolkit.core.utils.serialization import save_quiz_json
from quiz_toolkit.loading import LoaderError, load_quiz_file
from quiz_toolkit.output import render_quiz_pdf, render_quiz_text
from quiz_toolkit.parsing import DEFAULT_MAX_INPUT_BYTES, ParserConfig, parse_quiz_csv

logger = logging.getLogger("quiz_preview")

EXIT_OK = 0
EXIT_NO_QUESTIONS = 1
EXIT_REJECTED = 2

NO_QUESTIONS_MESSAGE = (
    "Could not parse any valid questions from the CSV. Please check the file format."
)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-preview",
        description="Parse a quiz CSV and show a read-only preview",
    )
    parser.add_argument("path", type=Path, help="Quiz CSV file")
    parser.add_argument("--json", type=Path, dest="json_path", help="Write parsed quiz as JSON")
    parser.add_argument("--pdf", type=Path, dest="pdf_path", help="Write a PDF preview")
    parser.add_argument("--font", type=Path, dest="font_path",
                        help="TrueType font for the PDF preview (for non-Latin text)")
    parser.add_argument("--report", type=Path, dest="report_path",
                        help="Write a diagnostics report (JSON)")
    parser.add_argument("--max-bytes", type=_positive_int, default=DEFAULT_MAX_INPUT_BYTES,
                        help="Reject files larger than this (default: 5 MiB)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print the preview")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.font_path and not args.font_path.is_file():
        parser.error(f"font file not found: {args.font_path}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(message)s",
    )

    config = ParserConfig(max_input_bytes=args.max_bytes)

    try:
        loaded = load_quiz_file(args.path, max_bytes=config.max_input_bytes)
    except LoaderError as e:
        print(f"File rejected: {e}", file=sys.stderr)
        return EXIT_REJECTED

    result = parse_quiz_csv(loaded.text, config, source=loaded.source_name)

    if args.report_path:
        result.report().save(args.report_path)

    if result.quiz.is_empty:
        print(NO_QUESTIONS_MESSAGE, file=sys.stderr)
        return EXIT_NO_QUESTIONS

    if not args.quiet:
        print(render_quiz_text(result.quiz, source_name=loaded.source_name))

    if result.has_warnings:
        print(f"{len(result.warnings)} warning(s), {result.dropped_count} question(s) dropped",
              file=sys.stderr)

    if args.json_path:
        save_quiz_json(result.quiz, args.json_path, source=loaded.source_name)
        print(f"JSON: {args.json_path}")

    if args.pdf_path:
        render_quiz_pdf(
            result.quiz,
            args.pdf_path,
            source_name=loaded.source_name,
            font_path=args.font_path,
        )
        print(f"PDF: {args.pdf_path}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
