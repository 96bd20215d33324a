"""
Schema Validation Utilities

Validates serialized quiz JSON before it is written or after it is read.

Two levels:
- Basic checks (always): required fields, known type codes, the
  per-type minimum content the parser guarantees
- Strict checks (``strict=True``): full JSON Schema validation with
  ``jsonschema`` against ``quiz.schema.json``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUIZ_SCHEMA_VERSION = 1

_VALID_TYPES = ("WR", "SA", "M", "MC", "TF", "MS", "O")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_quiz(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate serialized quiz data.

    Args:
        data: Quiz dictionary (see ``serialize_quiz``)
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    required = ["schema_version", "questions"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != QUIZ_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported quiz schema version: {version} (expected {QUIZ_SCHEMA_VERSION})",
            path="schema_version",
        )

    questions = data["questions"]
    if not isinstance(questions, list):
        raise ValidationError("questions must be a list", path="questions")

    for i, question in enumerate(questions):
        validate_question(question, path=f"questions[{i}]")

    if strict:
        schema = _load_schema("quiz")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )


def validate_question(data: dict[str, Any], *, path: str = "") -> None:
    """
    Validate one serialized question.

    Applies the same completeness rules the parser uses at finalization.

    Raises:
        ValidationError: If the question is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("question must be a dict", path=path)

    required = ["type", "title", "question_text", "points"]
    missing = [f for f in required if not data.get(f) and data.get(f) != 0]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    qtype = data["type"]
    if qtype not in _VALID_TYPES:
        raise ValidationError(f"Invalid question type: {qtype!r}", path=f"{path}.type")

    if not isinstance(data["points"], int):
        raise ValidationError(
            f"Invalid points: {data['points']!r} (must be integer)",
            path=f"{path}.points",
        )

    if qtype == "M":
        pairs = data.get("pairs") or []
        if not pairs:
            raise ValidationError("Matching question has no pairs", path=f"{path}.pairs")
        for j, pair in enumerate(pairs):
            if not pair.get("choice_text") or not pair.get("match_text"):
                raise ValidationError(
                    "Matching pair is incomplete",
                    path=f"{path}.pairs[{j}]",
                )
    elif qtype in ("MC", "MS"):
        if not data.get("options"):
            raise ValidationError("Question has no options", path=f"{path}.options")
    elif qtype == "O":
        if not data.get("items"):
            raise ValidationError("Ordering question has no items", path=f"{path}.items")
    elif qtype == "TF":
        if not data.get("true_option") or not data.get("false_option"):
            raise ValidationError(
                "TrueFalse question lacks true or false option",
                path=path,
            )
    elif qtype == "SA":
        if data.get("best_answer") is None:
            raise ValidationError(
                "ShortAnswer question lacks a best answer",
                path=f"{path}.best_answer",
            )
