"""
Quiz Toolkit Core Package

Shared data models, serialization and schema validation. These models are
the single source of truth for the parser and the preview renderers.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - The parser mutates a private draft while reading rows
   - Only validated drafts become frozen `Question` instances

2. **Tagged Variants**
   - One dataclass per question type, tagged by `QuestionType`
   - `question_from_dict()` rebuilds the right variant from JSON
"""

from .models import Question, QuestionType, Quiz

__all__ = [
    "Question",
    "QuestionType",
    "Quiz",
]
