"""
Module: questions

Purpose:
    Provides the Question base dataclass and its seven variants - the
    structures produced by the CSV parser and consumed by the preview
    renderers. A question is tagged by its QuestionType; every variant
    shares the base attribute set and adds type-specific fields.

Key Classes:
    - QuestionType: Seven question type codes (WR, SA, M, MC, TF, MS, O)
    - Evaluation: Short-answer evaluation mode
    - Question: Shared base attributes
    - WrittenResponseQuestion, ShortAnswerQuestion, MatchingQuestion,
      MultipleChoiceQuestion, TrueFalseQuestion, MultiSelectQuestion,
      OrderingQuestion: The variants

Key Functions:
    - question_from_dict(data): Rebuild the right variant from a dict

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .options

Used By:
    - core.models.quiz.Quiz
    - core.utils.serialization
    - parsing.drafts (finalization)
    - output renderers

Design Notes:
    Questions are frozen. The parser accumulates fields on a mutable draft
    and only builds a Question once the draft passes validation, so a
    half-populated Question never exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from .options import (
    InputBox,
    MatchingPair,
    MCOption,
    MSOption,
    OrderingItem,
    TFOption,
)


class QuestionType(str, Enum):
    """Question type code as written in the ``NewQuestion`` row."""
    WR = "WR"  # Written response
    SA = "SA"  # Short answer
    M = "M"    # Matching
    MC = "MC"  # Multiple choice
    TF = "TF"  # True/false
    MS = "MS"  # Multi-select
    O = "O"    # Ordering

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human readable name."""
        return _TYPE_LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> Optional[QuestionType]:
        """
        Look up a type by its code.

        Codes are case-sensitive, matching the exporting tool.

        Returns:
            The QuestionType, or None for an unknown code
        """
        try:
            return cls(code)
        except ValueError:
            return None


_TYPE_LABELS = {
    QuestionType.WR: "Written Response",
    QuestionType.SA: "Short Answer",
    QuestionType.M: "Matching",
    QuestionType.MC: "Multiple Choice",
    QuestionType.TF: "True/False",
    QuestionType.MS: "Multi-Select",
    QuestionType.O: "Ordering",
}


class Evaluation(str, Enum):
    """How a short answer is compared with the best answer."""
    REGEXP = "regexp"
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_flag(cls, flag: Optional[str], default: Optional[Evaluation] = None) -> Evaluation:
        """Map an ``Answer`` row flag; anything unknown falls back to ``default``."""
        flag = (flag or "").strip().lower()
        if flag == cls.REGEXP.value:
            return cls.REGEXP
        if flag == cls.SENSITIVE.value:
            return cls.SENSITIVE
        return default or cls.INSENSITIVE


# Known scoring modes. Stored values are never restricted to these.
MATCHING_SCORING_MODES = ("EquallyWeighted", "AllOrNothing", "RightMinusWrong")
MULTI_SELECT_SCORING_MODES = (
    "RightAnswersLimitedSelections",
    "RightAnswers",
    "RightMinusWrong",
    "AllOrNothing",
)
ORDERING_SCORING_MODES = MATCHING_SCORING_MODES


@dataclass(frozen=True, kw_only=True)
class Question:
    """
    Shared question attributes (immutable).

    Attributes:
        title: Question title (required, non-empty)
        question_text: Question body, may be markup (required, non-empty)
        points: Integer points (default 1)
        id: Optional explicit id from the ``ID`` row
        difficulty: Optional 1-10 difficulty, range not validated
        image: Optional image reference
        hint: Optional hint
        feedback: Optional general feedback

    Invariants:
        - title and question_text are non-empty
        - points is an int
    """

    question_type: ClassVar[QuestionType]

    title: str
    question_text: str
    points: int = 1
    id: Optional[str] = None
    difficulty: Optional[int] = None
    image: Optional[str] = None
    hint: Optional[str] = None
    feedback: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate base fields on construction."""
        if not self.title:
            raise ValueError("Question title must not be empty")
        if not self.question_text:
            raise ValueError(f"Question text must not be empty (title: {self.title!r})")
        if not isinstance(self.points, int) or isinstance(self.points, bool):
            raise ValueError(f"points must be an int: {self.points!r}")

    @property
    def type(self) -> QuestionType:
        return self.question_type

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible dict.

        Variant fields are appended by ``_variant_dict()``.
        """
        data: Dict[str, Any] = {
            "type": self.question_type.value,
            "id": self.id,
            "title": self.title,
            "question_text": self.question_text,
            "points": self.points,
            "difficulty": self.difficulty,
            "image": self.image,
            "hint": self.hint,
            "feedback": self.feedback,
        }
        data.update(self._variant_dict())
        return data

    def _variant_dict(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def _base_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        difficulty = data.get("difficulty")
        return {
            "id": data.get("id"),
            "title": str(data["title"]),
            "question_text": str(data["question_text"]),
            "points": int(data.get("points", 1)),
            "difficulty": int(difficulty) if difficulty is not None else None,
            "image": data.get("image"),
            "hint": data.get("hint"),
            "feedback": data.get("feedback"),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        return cls(**cls._base_kwargs(data))


@dataclass(frozen=True, kw_only=True)
class WrittenResponseQuestion(Question):
    question_type: ClassVar[QuestionType] = QuestionType.WR

    initial_text: Optional[str] = None
    answer_key: Optional[str] = None

    def _variant_dict(self) -> Dict[str, Any]:
        return {"initial_text": self.initial_text, "answer_key": self.answer_key}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> WrittenResponseQuestion:
        return cls(
            **cls._base_kwargs(data),
            initial_text=data.get("initial_text"),
            answer_key=data.get("answer_key"),
        )


@dataclass(frozen=True, kw_only=True)
class ShortAnswerQuestion(Question):
    """Short answer question; ``best_answer`` may be empty but is always set."""

    question_type: ClassVar[QuestionType] = QuestionType.SA

    best_answer: str
    evaluation: Evaluation = Evaluation.INSENSITIVE
    input_box: InputBox = InputBox()

    def _variant_dict(self) -> Dict[str, Any]:
        return {
            "best_answer": self.best_answer,
            "evaluation": self.evaluation.value,
            "input_box": self.input_box.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ShortAnswerQuestion:
        return cls(
            **cls._base_kwargs(data),
            best_answer=str(data["best_answer"]),
            evaluation=Evaluation(data.get("evaluation", Evaluation.INSENSITIVE.value)),
            input_box=InputBox.from_dict(data.get("input_box", {})),
        )


@dataclass(frozen=True, kw_only=True)
class MatchingQuestion(Question):
    question_type: ClassVar[QuestionType] = QuestionType.M

    pairs: Tuple[MatchingPair, ...] = ()
    scoring: Optional[str] = None

    def get_pair(self, choice_no: int) -> Optional[MatchingPair]:
        for pair in self.pairs:
            if pair.choice_no == choice_no:
                return pair
        return None

    def _variant_dict(self) -> Dict[str, Any]:
        return {
            "pairs": [pair.to_dict() for pair in self.pairs],
            "scoring": self.scoring,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MatchingQuestion:
        return cls(
            **cls._base_kwargs(data),
            pairs=tuple(MatchingPair.from_dict(p) for p in data.get("pairs", [])),
            scoring=data.get("scoring"),
        )


@dataclass(frozen=True, kw_only=True)
class MultipleChoiceQuestion(Question):
    question_type: ClassVar[QuestionType] = QuestionType.MC

    options: Tuple[MCOption, ...] = ()

    def _variant_dict(self) -> Dict[str, Any]:
        return {"options": [option.to_dict() for option in self.options]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MultipleChoiceQuestion:
        return cls(
            **cls._base_kwargs(data),
            options=tuple(MCOption.from_dict(o) for o in data.get("options", [])),
        )


@dataclass(frozen=True, kw_only=True)
class TrueFalseQuestion(Question):
    """
    True/false question with exactly one true and one false option.

    Invariants:
        - true_option.is_true and not false_option.is_true
    """

    question_type: ClassVar[QuestionType] = QuestionType.TF

    true_option: TFOption
    false_option: TFOption

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.true_option.is_true:
            raise ValueError("true_option must have is_true=True")
        if self.false_option.is_true:
            raise ValueError("false_option must have is_true=False")

    def _variant_dict(self) -> Dict[str, Any]:
        return {
            "true_option": self.true_option.to_dict(),
            "false_option": self.false_option.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TrueFalseQuestion:
        return cls(
            **cls._base_kwargs(data),
            true_option=TFOption.from_dict(data["true_option"]),
            false_option=TFOption.from_dict(data["false_option"]),
        )


@dataclass(frozen=True, kw_only=True)
class MultiSelectQuestion(Question):
    """Multi-select question. ``scoring`` is the raw string from the file."""

    question_type: ClassVar[QuestionType] = QuestionType.MS

    options: Tuple[MSOption, ...] = ()
    scoring: Optional[str] = None

    def _variant_dict(self) -> Dict[str, Any]:
        return {
            "options": [option.to_dict() for option in self.options],
            "scoring": self.scoring,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MultiSelectQuestion:
        return cls(
            **cls._base_kwargs(data),
            options=tuple(MSOption.from_dict(o) for o in data.get("options", [])),
            scoring=data.get("scoring"),
        )


@dataclass(frozen=True, kw_only=True)
class OrderingQuestion(Question):
    """Ordering question; ``items`` are in their correct order."""

    question_type: ClassVar[QuestionType] = QuestionType.O

    items: Tuple[OrderingItem, ...] = ()
    scoring: Optional[str] = None

    def _variant_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "scoring": self.scoring,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OrderingQuestion:
        return cls(
            **cls._base_kwargs(data),
            items=tuple(OrderingItem.from_dict(i) for i in data.get("items", [])),
            scoring=data.get("scoring"),
        )


QUESTION_CLASSES: Dict[QuestionType, Type[Question]] = {
    QuestionType.WR: WrittenResponseQuestion,
    QuestionType.SA: ShortAnswerQuestion,
    QuestionType.M: MatchingQuestion,
    QuestionType.MC: MultipleChoiceQuestion,
    QuestionType.TF: TrueFalseQuestion,
    QuestionType.MS: MultiSelectQuestion,
    QuestionType.O: OrderingQuestion,
}


def question_from_dict(data: Dict[str, Any]) -> Question:
    """
    Rebuild the matching Question variant from a dict.

    Args:
        data: Dict as produced by ``Question.to_dict()``

    Returns:
        Question variant instance

    Raises:
        ValueError: If the type code is unknown or a field is invalid
        KeyError: If a required field is missing
    """
    question_type = QuestionType.from_code(str(data.get("type", "")))
    if question_type is None:
        raise ValueError(f"Unknown question type: {data.get('type')!r}")
    return QUESTION_CLASSES[question_type].from_dict(data)
