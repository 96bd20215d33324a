"""
Core Models Package

Immutable data models for a parsed quiz.

All models in this package are frozen dataclasses. The parser builds them
only after a question has passed validation, so consumers never see a
partially populated question.

| Type | Role |
|------|------|
| `Quiz` | Ordered container returned by a parse |
| `Question` + 7 variants | Tagged by `QuestionType` |
| `MatchingPair`, `MCOption`, `TFOption`, `MSOption`, `OrderingItem` | Sub-records |
| `InputBox` | Short-answer input dimensions |
"""

from .options import InputBox, MatchingPair, MCOption, MSOption, OrderingItem, TFOption
from .questions import (
    MATCHING_SCORING_MODES,
    MULTI_SELECT_SCORING_MODES,
    ORDERING_SCORING_MODES,
    QUESTION_CLASSES,
    Evaluation,
    MatchingQuestion,
    MultipleChoiceQuestion,
    MultiSelectQuestion,
    OrderingQuestion,
    Question,
    QuestionType,
    ShortAnswerQuestion,
    TrueFalseQuestion,
    WrittenResponseQuestion,
    question_from_dict,
)
from .quiz import Quiz

__all__ = [
    "InputBox",
    "MatchingPair",
    "MCOption",
    "MSOption",
    "OrderingItem",
    "TFOption",
    "MATCHING_SCORING_MODES",
    "MULTI_SELECT_SCORING_MODES",
    "ORDERING_SCORING_MODES",
    "QUESTION_CLASSES",
    "Evaluation",
    "MatchingQuestion",
    "MultipleChoiceQuestion",
    "MultiSelectQuestion",
    "OrderingQuestion",
    "Question",
    "QuestionType",
    "ShortAnswerQuestion",
    "TrueFalseQuestion",
    "WrittenResponseQuestion",
    "question_from_dict",
    "Quiz",
]
