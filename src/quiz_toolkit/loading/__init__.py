"""
Module: loading

Purpose:
    Acquire a quiz file as a complete text buffer before parsing.

Key Functions:
    - load_quiz_file(): Read and decode a CSV file from disk
    - load_quiz_text(): Decode uploaded bytes

Used By:
    - cli
"""

from .loader import (
    ACCEPTED_SUFFIXES,
    LoadedFile,
    LoaderError,
    RejectionReason,
    load_quiz_file,
    load_quiz_text,
)

__all__ = [
    "ACCEPTED_SUFFIXES",
    "LoadedFile",
    "LoaderError",
    "RejectionReason",
    "load_quiz_file",
    "load_quiz_text",
]
