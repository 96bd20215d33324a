"""
Module: parsing.drafts

Purpose:
    Mutable in-progress question records used by the assembler. A draft
    collects fields row by row; at finalization it is validated and, if
    complete, turned into a frozen Question variant.

Key Classes:
    - QuestionDraft: Fields of any question type while rows are read
    - PairDraft, OptionDraft, TFDraft: Mutable sub-records

Key Functions:
    - QuestionDraft.incomplete_reason(): Why the draft cannot be emitted
    - QuestionDraft.build(): Frozen Question for a complete draft

Used By:
    - parsing.assembler
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from quiz_toolkit.core.models import (
    Evaluation,
    InputBox,
    MatchingPair,
    MatchingQuestion,
    MCOption,
    MSOption,
    MultipleChoiceQuestion,
    MultiSelectQuestion,
    OrderingItem,
    OrderingQuestion,
    Question,
    QuestionType,
    ShortAnswerQuestion,
    TFOption,
    TrueFalseQuestion,
    WrittenResponseQuestion,
)


@dataclass
class PairDraft:
    choice_no: int
    choice_text: str = ""
    match_text: str = ""


@dataclass
class OptionDraft:
    """
    MC option, MS option or ordering item.

    ``value`` is the MC percent or MS weight; ordering items leave it at 0.
    """
    text: str
    value: int = 0
    feedback: Optional[str] = None
    html: bool = False
    feedback_html: bool = False


@dataclass
class TFDraft:
    credit: int
    feedback: Optional[str] = None
    html: bool = False
    defined_at: int = 0


@dataclass
class QuestionDraft:
    """
    In-progress question.

    Created on ``NewQuestion`` with only the type and default points set.
    Collections are plain lists so the last-open-slot feedback rule can
    reach the tail element directly.
    """

    type: QuestionType
    points: int = 1
    id: Optional[str] = None
    title: Optional[str] = None
    question_text: Optional[str] = None
    difficulty: Optional[int] = None
    image: Optional[str] = None
    hint: Optional[str] = None
    feedback: Optional[str] = None

    # WR
    initial_text: Optional[str] = None
    answer_key: Optional[str] = None

    # SA
    best_answer: Optional[str] = None
    evaluation: Optional[Evaluation] = None
    input_box: Optional[InputBox] = None

    # M / MS / O
    scoring: Optional[str] = None
    pairs: List[PairDraft] = field(default_factory=list)

    # MC / MS options, O items
    options: List[OptionDraft] = field(default_factory=list)
    items: List[OptionDraft] = field(default_factory=list)

    # TF
    true_option: Optional[TFDraft] = None
    false_option: Optional[TFDraft] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────────────────

    def find_pair(self, choice_no: int) -> Optional[PairDraft]:
        for pair in self.pairs:
            if pair.choice_no == choice_no:
                return pair
        return None

    def feedback_slot(self) -> Optional[Union[OptionDraft, TFDraft]]:
        """
        Element a free-floating ``Feedback`` row attaches to.

        MC/MS: last option. O: last item. TF: the option defined later,
        with the false option winning when the true option is missing.
        None means the feedback is general question feedback.
        """
        if self.type in (QuestionType.MC, QuestionType.MS):
            return self.options[-1] if self.options else None
        if self.type == QuestionType.O:
            return self.items[-1] if self.items else None
        if self.type == QuestionType.TF:
            true_opt, false_opt = self.true_option, self.false_option
            if false_opt is not None and (
                true_opt is None or false_opt.defined_at > true_opt.defined_at
            ):
                return false_opt
            return true_opt
        return None

    @property
    def display_title(self) -> str:
        return self.title or "N/A"

    # ─────────────────────────────────────────────────────────────────────────
    # Finalization
    # ─────────────────────────────────────────────────────────────────────────

    def incomplete_reason(self) -> Optional[str]:
        """
        Check the draft against the completeness rules.

        Returns:
            Reason string if the draft must be dropped, None if complete
        """
        if not (self.type and self.title and self.question_text and self.points is not None):
            return "Missing required fields (type, title, text, or points)."

        if self.type == QuestionType.M:
            if not self.pairs or any(not p.choice_text or not p.match_text for p in self.pairs):
                return "Matching question has no pairs, or some pairs are incomplete."
        elif self.type == QuestionType.MC:
            if not self.options:
                return "MultipleChoice question has no options."
        elif self.type == QuestionType.TF:
            if self.true_option is None or self.false_option is None:
                return "TrueFalse question lacks true or false options definition."
        elif self.type == QuestionType.MS:
            if not self.options:
                return "MultiSelect question has no options."
        elif self.type == QuestionType.O:
            if not self.items:
                return "Ordering question has no items."
        elif self.type == QuestionType.SA:
            if self.best_answer is None:
                return "ShortAnswer question lacks a defined best answer."
        return None

    def build(self, default_input_box: InputBox, default_evaluation: Evaluation) -> Question:
        """
        Build the frozen Question for this draft.

        Call only after ``incomplete_reason()`` returned None.

        Raises:
            ValueError: If the model rejects a field
        """
        base = dict(
            title=self.title,
            question_text=self.question_text,
            points=self.points,
            id=self.id,
            difficulty=self.difficulty,
            image=self.image,
            hint=self.hint,
            feedback=self.feedback,
        )

        if self.type == QuestionType.WR:
            return WrittenResponseQuestion(
                **base,
                initial_text=self.initial_text,
                answer_key=self.answer_key,
            )
        if self.type == QuestionType.SA:
            return ShortAnswerQuestion(
                **base,
                best_answer=self.best_answer,
                evaluation=self.evaluation or default_evaluation,
                input_box=self.input_box or default_input_box,
            )
        if self.type == QuestionType.M:
            return MatchingQuestion(
                **base,
                pairs=tuple(
                    MatchingPair(p.choice_no, p.choice_text, p.match_text) for p in self.pairs
                ),
                scoring=self.scoring,
            )
        if self.type == QuestionType.MC:
            return MultipleChoiceQuestion(
                **base,
                options=tuple(
                    MCOption(
                        text=o.text,
                        percent=o.value,
                        feedback=o.feedback,
                        html=o.html,
                        feedback_html=o.feedback_html,
                    )
                    for o in self.options
                ),
            )
        if self.type == QuestionType.TF:
            return TrueFalseQuestion(
                **base,
                true_option=_tf_option(self.true_option, True),
                false_option=_tf_option(self.false_option, False),
            )
        if self.type == QuestionType.MS:
            return MultiSelectQuestion(
                **base,
                options=tuple(
                    MSOption(
                        text=o.text,
                        weight=o.value,
                        feedback=o.feedback,
                        html=o.html,
                        feedback_html=o.feedback_html,
                    )
                    for o in self.options
                ),
                scoring=self.scoring,
            )
        return OrderingQuestion(
            **base,
            items=tuple(
                OrderingItem(
                    text=i.text,
                    feedback=i.feedback,
                    html=i.html,
                    feedback_html=i.feedback_html,
                )
                for i in self.items
            ),
            scoring=self.scoring,
        )


def _tf_option(draft: TFDraft, is_true: bool) -> TFOption:
    return TFOption(
        is_true=is_true,
        credit=draft.credit,
        feedback=draft.feedback,
        html=draft.html,
        defined_at=draft.defined_at,
    )
