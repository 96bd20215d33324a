"""
Utils Package

Serialization functions for the quiz models.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_quiz,
    deserialize_quiz,
    save_quiz_json,
    load_quiz_json,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_quiz",
    "deserialize_quiz",
    "save_quiz_json",
    "load_quiz_json",
]
