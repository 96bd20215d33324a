"""JSON schema validation for serialized quizzes."""

from .validator import QUIZ_SCHEMA_VERSION, ValidationError, validate_question, validate_quiz

__all__ = [
    "QUIZ_SCHEMA_VERSION",
    "ValidationError",
    "validate_question",
    "validate_quiz",
]
