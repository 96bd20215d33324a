"""
Module: parsing.tokenizer

Purpose:
    Split one logical record into cell values and read typed values out of
    the resulting row. Quoting support is intentionally minimal: it covers
    what the exporting tool writes (optional double-quote enclosure with
    ``""`` escapes) and nothing more.

Key Functions:
    - split_row(): Record -> list of trimmed, unquoted cells
    - cell(): Safe positional access with a default for missing/empty cells
    - parse_int(): Lenient integer reading with a default
    - is_html(): HTML flag test

Used By:
    - parsing.assembler
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

QUOTE = '"'
DELIMITER = ","

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def split_row(record: str) -> List[str]:
    """
    Split a record into cells.

    Commas inside a quoted span do not split. Enclosing quotes are removed,
    ``""`` inside a quoted span becomes a literal ``"`` and every cell is
    stripped of surrounding whitespace.

    Args:
        record: One logical record (may contain line feeds inside quotes)

    Returns:
        List of cell strings; always at least one element

    Example:
        >>> split_row('Option,100,"Paris, France",,Yes')
        ['Option', '100', 'Paris, France', '', 'Yes']
    """
    cells: List[str] = []
    current: List[str] = []
    in_quotes = False
    length = len(record)
    i = 0

    while i < length:
        char = record[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and record[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    cells.append("".join(current).strip())
    return cells


def cell(row: Sequence[str], index: int, default: Optional[str] = "") -> Optional[str]:
    """
    Get a cell by 0-based index.

    Missing and empty cells both return ``default``; a short row is never
    an error.
    """
    if 0 <= index < len(row) and row[index] != "":
        return row[index]
    return default


def parse_int(value: Optional[str], default: int = 0) -> int:
    """
    Read an integer the way the exporting tool does.

    The leading optional sign and digits are used and anything after them
    is ignored, so ``"3.7"`` reads as 3 and ``"12abc"`` as 12.

    Returns:
        Parsed integer, or ``default`` when the value is empty or does not
        start with a number
    """
    if value is None:
        return default
    match = _INT_PREFIX.match(value)
    if not match:
        return default
    return int(match.group(1))


def is_int(value: Optional[str]) -> bool:
    """Whether ``parse_int`` would read a number rather than fall back."""
    return value is not None and _INT_PREFIX.match(value) is not None


def is_html(value: Optional[str], marker: str = "html") -> bool:
    """Case-insensitive check for the HTML flag cell."""
    return (value or "").strip().lower() == marker.lower()
