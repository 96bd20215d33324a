"""
Module: loading.loader

Purpose:
    Read a quiz CSV file (or uploaded bytes) into a complete text buffer
    before it is handed to the parser. Rejects files that are missing,
    have the wrong type, are too large or cannot be decoded.

Key Functions:
    - load_quiz_file(): Read a file from disk
    - load_quiz_text(): Decode bytes already in memory

Key Classes:
    - LoadedFile: Text buffer plus source name
    - LoaderError: Rejection with a RejectionReason

Used By:
    - cli
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from quiz_toolkit.parsing.config import DEFAULT_MAX_INPUT_BYTES

logger = logging.getLogger(__name__)

ACCEPTED_SUFFIXES = (".csv",)


class RejectionReason(str, Enum):
    NOT_FOUND = "not_found"
    WRONG_TYPE = "wrong_type"
    OVERSIZE = "oversize"
    READ_FAILURE = "read_failure"

    def __str__(self) -> str:
        return self.value


class LoaderError(Exception):
    """File rejected before parsing."""

    def __init__(self, reason: RejectionReason, message: str):
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class LoadedFile:
    """
    Fully read quiz file.

    Attributes:
        text: Decoded content (UTF-8, BOM removed)
        source_name: File name shown to the user
        size_bytes: Size of the raw content
    """
    text: str
    source_name: str
    size_bytes: int


def load_quiz_file(path: Path, *, max_bytes: int = DEFAULT_MAX_INPUT_BYTES) -> LoadedFile:
    """
    Read a quiz CSV file.

    Args:
        path: CSV file path
        max_bytes: Size ceiling, normally ``ParserConfig.max_input_bytes``
            (default 5 MiB)

    Returns:
        LoadedFile with the full text

    Raises:
        LoaderError: If the file is missing, not a .csv file, larger than
            ``max_bytes`` or unreadable
    """
    if not path.exists() or not path.is_file():
        raise LoaderError(RejectionReason.NOT_FOUND, f"File not found: {path}")

    if path.suffix.lower() not in ACCEPTED_SUFFIXES:
        raise LoaderError(
            RejectionReason.WRONG_TYPE,
            f"Invalid file type '{path.suffix or path.name}'. CSV files only.",
        )

    try:
        size = path.stat().st_size
    except OSError as e:
        raise LoaderError(RejectionReason.READ_FAILURE, f"Error reading file: {e}")
    _check_size(size, max_bytes, path.name)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoaderError(RejectionReason.READ_FAILURE, f"Error reading file: {e}")

    return load_quiz_text(data, path.name, max_bytes=max_bytes)


def load_quiz_text(
    data: bytes,
    source_name: str,
    *,
    max_bytes: Optional[int] = DEFAULT_MAX_INPUT_BYTES,
) -> LoadedFile:
    """
    Decode uploaded bytes into a LoadedFile.

    Raises:
        LoaderError: If the content is too large, empty or not UTF-8
    """
    if max_bytes is not None:
        _check_size(len(data), max_bytes, source_name)

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise LoaderError(
            RejectionReason.READ_FAILURE,
            f"Failed to read file content: {source_name} is not valid UTF-8 ({e.reason})",
        )

    if not text:
        raise LoaderError(RejectionReason.READ_FAILURE, "Failed to read file content.")

    logger.debug(f"Loaded {source_name} ({len(data):,} bytes)")
    return LoadedFile(text=text, source_name=source_name, size_bytes=len(data))


def _check_size(size: int, max_bytes: int, name: str) -> None:
    if size > max_bytes:
        raise LoaderError(
            RejectionReason.OVERSIZE,
            f"File {name} is larger than {max_bytes:,} bytes ({size:,} bytes)",
        )
