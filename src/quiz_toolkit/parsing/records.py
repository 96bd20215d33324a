"""
Module: parsing.records

Purpose:
    Split a complete CSV text buffer into logical records. A record ends at
    a line feed that is not inside a quoted span, so a quoted rich-text
    field spanning several physical lines stays one record.

Key Functions:
    - iter_records(): Lazily yield trimmed, non-empty records
    - split_records(): Eager list version

Used By:
    - parsing.assembler: parse_quiz_csv()

Known Limitation:
    An unterminated quote swallows the rest of the buffer into one record.
    That mirrors the exporting tool's reader and is kept as-is.
"""

from __future__ import annotations

from typing import Iterator, List

QUOTE = '"'
LINE_FEED = "\n"
BOM = "\ufeff"


def normalise_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF and drop a leading BOM."""
    if text.startswith(BOM):
        text = text[1:]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_records(text: str) -> Iterator[str]:
    """
    Yield logical records from a text buffer.

    Quote state toggles on every ``"`` except a doubled ``""``, which is
    an escaped literal quote and is skipped as a pair. Line feeds seen
    while quoted are kept inside the record.

    Each record is stripped; empty and whitespace-only records are skipped.

    Args:
        text: Complete CSV buffer

    Yields:
        Record strings in file order

    Example:
        >>> list(iter_records('Title,"a\\nb"\\n\\nPoints,2'))
        ['Title,"a\\nb"', 'Points,2']
    """
    text = normalise_newlines(text)
    length = len(text)
    start = 0
    in_quotes = False
    i = 0

    while i < length:
        char = text[i]
        if char == QUOTE:
            if i + 1 < length and text[i + 1] == QUOTE:
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == LINE_FEED and not in_quotes:
            record = text[start:i].strip()
            if record:
                yield record
            start = i + 1
        i += 1

    if start < length:
        record = text[start:].strip()
        if record:
            yield record


def split_records(text: str) -> List[str]:
    """Split a buffer into a list of logical records. See ``iter_records``."""
    return list(iter_records(text))
