"""
Module: options

Purpose:
    Provides the sub-record dataclasses that hang off the question variants:
    matching pairs, multiple-choice / multi-select options, true/false
    options, ordering items and the short-answer input box.

Key Classes:
    - InputBox: Short-answer input dimensions
    - MatchingPair: One choice/match pair joined by choice number
    - MCOption: Multiple-choice option with percent credit
    - TFOption: True or false option with credit
    - MSOption: Multi-select option with signed weight
    - OrderingItem: One item of an ordering question

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.questions
    - parsing.drafts
    - output.text_preview / output.pdf_preview
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class InputBox:
    """
    Short-answer input box dimensions.

    Attributes:
        rows: Number of text rows (default 1)
        cols: Number of character columns (default 40)
    """

    rows: int = 1
    cols: int = 40

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> InputBox:
        return cls(rows=int(data.get("rows", 1)), cols=int(data.get("cols", 40)))


@dataclass(frozen=True, slots=True)
class MatchingPair:
    """
    Single matching pair.

    Pairs are joined by ``choice_no``: the ``Choice`` row supplies
    ``choice_text`` and the ``Match`` row with the same number supplies
    ``match_text``.

    Invariants:
        - choice_no > 0
    """

    choice_no: int
    choice_text: str
    match_text: str

    def __post_init__(self) -> None:
        if self.choice_no <= 0:
            raise ValueError(f"choice_no must be positive: {self.choice_no}")

    @property
    def is_complete(self) -> bool:
        """Both sides of the pair carry text."""
        return bool(self.choice_text) and bool(self.match_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "choice_no": self.choice_no,
            "choice_text": self.choice_text,
            "match_text": self.match_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MatchingPair:
        return cls(
            choice_no=int(data["choice_no"]),
            choice_text=str(data.get("choice_text", "")),
            match_text=str(data.get("match_text", "")),
        )


@dataclass(frozen=True, slots=True)
class MCOption:
    """
    Multiple-choice option.

    ``percent`` is passed through unvalidated; it is usually 0-100 but
    negative values and values above 100 are kept as written.
    """

    text: str
    percent: int
    feedback: Optional[str] = None
    html: bool = False
    feedback_html: bool = False

    @property
    def is_correct(self) -> bool:
        return self.percent >= 100

    @property
    def is_partial(self) -> bool:
        return 0 < self.percent < 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "percent": self.percent,
            "feedback": self.feedback,
            "html": self.html,
            "feedback_html": self.feedback_html,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MCOption:
        return cls(
            text=str(data.get("text", "")),
            percent=int(data.get("percent", 0)),
            feedback=data.get("feedback"),
            html=bool(data.get("html", False)),
            feedback_html=bool(data.get("feedback_html", False)),
        )


@dataclass(frozen=True, slots=True)
class TFOption:
    """
    True or false option of a true/false question.

    Attributes:
        is_true: True for the "true" option, False for the "false" option
        credit: Percent credit awarded when chosen
        feedback: Optional feedback text
        html: Whether feedback is markup
        defined_at: 1-based record index of the defining row. Only used to
            decide which option a trailing ``Feedback`` row belongs to.
    """

    is_true: bool
    credit: int
    feedback: Optional[str] = None
    html: bool = False
    defined_at: int = 0

    @property
    def is_correct(self) -> bool:
        return self.credit >= 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_true": self.is_true,
            "credit": self.credit,
            "feedback": self.feedback,
            "html": self.html,
            "defined_at": self.defined_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TFOption:
        return cls(
            is_true=bool(data["is_true"]),
            credit=int(data.get("credit", 0)),
            feedback=data.get("feedback"),
            html=bool(data.get("html", False)),
            defined_at=int(data.get("defined_at", 0)),
        )


@dataclass(frozen=True, slots=True)
class MSOption:
    """Multi-select option; positive weight marks a correct choice."""

    text: str
    weight: int
    feedback: Optional[str] = None
    html: bool = False
    feedback_html: bool = False

    @property
    def is_correct(self) -> bool:
        return self.weight > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "weight": self.weight,
            "feedback": self.feedback,
            "html": self.html,
            "feedback_html": self.feedback_html,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MSOption:
        return cls(
            text=str(data.get("text", "")),
            weight=int(data.get("weight", 0)),
            feedback=data.get("feedback"),
            html=bool(data.get("html", False)),
            feedback_html=bool(data.get("feedback_html", False)),
        )


@dataclass(frozen=True, slots=True)
class OrderingItem:
    """Ordering item. Items are stored in their correct order."""

    text: str
    feedback: Optional[str] = None
    html: bool = False
    feedback_html: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "feedback": self.feedback,
            "html": self.html,
            "feedback_html": self.feedback_html,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OrderingItem:
        return cls(
            text=str(data.get("text", "")),
            feedback=data.get("feedback"),
            html=bool(data.get("html", False)),
            feedback_html=bool(data.get("feedback_html", False)),
        )
