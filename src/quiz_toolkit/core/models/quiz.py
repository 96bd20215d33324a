"""
Module: quiz

Purpose:
    Provides the Quiz dataclass - the ordered, immutable container of
    questions returned by one parse call.

Key Classes:
    - Quiz: Ordered tuple of Question variants

Used By:
    - parsing.assembler
    - core.utils.serialization
    - output renderers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List

from .questions import Question, QuestionType, question_from_dict


@dataclass(frozen=True)
class Quiz:
    """
    Parsed quiz (immutable).

    Attributes:
        questions: Questions in file order

    Example:
        >>> quiz = Quiz()
        >>> quiz.is_empty
        True
    """

    questions: tuple[Question, ...] = ()

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    @property
    def is_empty(self) -> bool:
        return not self.questions

    @property
    def total_points(self) -> int:
        return sum(q.points for q in self.questions)

    def count_by_type(self) -> Dict[QuestionType, int]:
        """Count questions per type, in first-seen order."""
        counts: Dict[QuestionType, int] = {}
        for question in self.questions:
            counts[question.type] = counts.get(question.type, 0) + 1
        return counts

    def of_type(self, question_type: QuestionType) -> List[Question]:
        return [q for q in self.questions if q.type == question_type]

    def to_dict(self) -> Dict[str, Any]:
        return {"questions": [q.to_dict() for q in self.questions]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Quiz:
        return cls(questions=tuple(question_from_dict(q) for q in data.get("questions", [])))
