"""
Serialization Utilities

Provides to/from JSON utilities for the quiz models.

- ``serialize_*`` / ``deserialize_*`` work on dicts
- ``save_quiz_json`` / ``load_quiz_json`` work on files
- All models have ``to_dict()`` and ``from_dict()`` methods; these helpers
  add the schema version envelope and validation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..models.questions import Question, question_from_dict
from ..models.quiz import Quiz
from ..schemas.validator import QUIZ_SCHEMA_VERSION, ValidationError, validate_quiz


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """Serialize a Question variant to a dictionary."""
    return question.to_dict()


def deserialize_question(data: dict[str, Any]) -> Question:
    """
    Deserialize a Question variant from a dictionary.

    Raises:
        ValueError: If the type is unknown or a field is invalid
    """
    return question_from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Quiz Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_quiz(quiz: Quiz, *, source: Optional[str] = None) -> dict[str, Any]:
    """
    Serialize a Quiz with its schema version envelope.

    Args:
        quiz: Quiz to serialize
        source: Optional source file name recorded alongside the questions

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": QUIZ_SCHEMA_VERSION,
        "source": source,
        "questions": [serialize_question(q) for q in quiz.questions],
    }


def deserialize_quiz(data: dict[str, Any], *, validate: bool = True) -> Quiz:
    """
    Deserialize a Quiz from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to run basic validation first

    Raises:
        ValidationError: If validate=True and data is invalid, or a
            question cannot be rebuilt
    """
    if validate:
        validate_quiz(data, strict=False)

    questions = []
    for i, item in enumerate(data.get("questions", [])):
        try:
            questions.append(deserialize_question(item))
        except (KeyError, ValueError) as e:
            raise ValidationError(
                f"Cannot rebuild question {i}: {e}",
                path=f"questions[{i}]",
                errors=[str(e)],
            )
    return Quiz(questions=tuple(questions))


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def save_quiz_json(
    quiz: Quiz,
    path: Path,
    *,
    source: Optional[str] = None,
    validate: bool = True,
) -> None:
    """
    Save a quiz to a JSON file.

    The payload is validated against the JSON schema before writing.
    """
    data = serialize_quiz(quiz, source=source)
    if validate:
        validate_quiz(data, strict=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_quiz_json(path: Path, *, validate: bool = True) -> Quiz:
    """
    Load a quiz from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If content is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Quiz file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}", path=str(path))

    return deserialize_quiz(data, validate=validate)
