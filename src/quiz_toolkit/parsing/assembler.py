"""
Module: parsing.assembler

Purpose:
    Question assembler - the state machine that turns tokenized rows into
    Question instances. Rows are keyed by their first cell (matched
    case-insensitively); a ``NewQuestion`` row closes the current question
    and opens the next one.

States:
    - NoCurrentQuestion (``draft is None``): rows other than NewQuestion
      are ignored, which tolerates leading boilerplate
    - BuildingQuestion (``draft`` set): rows set fields on the draft

Key Classes:
    - QuestionAssembler: Feed rows, then finish() to get the Quiz

Dependencies:
    - parsing.drafts: Mutable drafts and completeness rules
    - parsing.diagnostics: Diagnostic collection
    - parsing.tokenizer: Cell access and number reading

Used By:
    - parsing.parser.parse_quiz_csv()

Error Model:
    Nothing raised while handling a row escapes the assembler. Each problem
    becomes a Diagnostic and processing continues with the next row.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from quiz_toolkit.core.models import Evaluation, InputBox, Question, QuestionType, Quiz

from .config import ParserConfig
from .diagnostics import DiagnosticKind, DiagnosticsCollector
from .drafts import OptionDraft, PairDraft, QuestionDraft, TFDraft
from .tokenizer import cell, is_html, is_int, parse_int

logger = logging.getLogger(__name__)

NEW_QUESTION_KEY = "newquestion"

RowHandler = Callable[["QuestionAssembler", QuestionDraft, Sequence[str], int], None]


class QuestionAssembler:
    """
    Record-oriented question assembler.

    One assembler handles one buffer. It keeps the questions finalized so
    far, the current draft and the diagnostics raised along the way.

    Example:
        >>> assembler = QuestionAssembler()
        >>> assembler.feed(["NewQuestion", "WR"], 1)
        >>> assembler.feed(["Title", "Essay"], 2)
        >>> assembler.feed(["QuestionText", "Discuss."], 3)
        >>> len(assembler.finish())
        1
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        diagnostics: Optional[DiagnosticsCollector] = None,
    ):
        self.config = config or ParserConfig()
        self.diagnostics = diagnostics or DiagnosticsCollector()
        self._draft: Optional[QuestionDraft] = None
        self._questions: List[Question] = []
        self._default_input_box = InputBox(
            rows=self.config.default_input_rows,
            cols=self.config.default_input_cols,
        )
        self._default_evaluation = Evaluation(self.config.default_evaluation)

    @property
    def is_building(self) -> bool:
        return self._draft is not None

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    def feed(self, row: Sequence[str], record_index: int, raw: str = "") -> None:
        """
        Process one tokenized row.

        Args:
            row: Cells of the record
            record_index: 1-based logical record number
            raw: Original record text, used in error messages
        """
        key = (cell(row, 0, "") or "").lower()

        if key == NEW_QUESTION_KEY:
            self._start_question(row, record_index)
            return

        if self._draft is None:
            logger.debug(f"[Record {record_index}] No open question, ignoring '{key}' row")
            return

        try:
            self._dispatch(key, self._draft, row, record_index)
        except Exception as e:
            self.diagnostics.error(
                DiagnosticKind.ROW_ERROR,
                f"Error processing record: {raw or ','.join(row)}. Error: {e}",
                record_index=record_index,
                title=self._draft.title,
            )

    def finish(self) -> Quiz:
        """
        Finalize the last open question and return the Quiz.

        The assembler can keep the result; calling finish() again returns
        the same questions.
        """
        self._finalize(record_index=None, at_end=True)
        return Quiz(questions=tuple(self._questions))

    # ─────────────────────────────────────────────────────────────────────────
    # State transitions
    # ─────────────────────────────────────────────────────────────────────────

    def _start_question(self, row: Sequence[str], record_index: int) -> None:
        self._finalize(record_index=record_index, at_end=False)

        code = cell(row, 1, "")
        question_type = QuestionType.from_code(code)
        if question_type is None:
            self.diagnostics.warning(
                DiagnosticKind.UNKNOWN_QUESTION_TYPE,
                f"Unknown question type '{code}'. Skipping this 'NewQuestion' entry.",
                record_index=record_index,
            )
            return

        self._draft = QuestionDraft(type=question_type, points=self.config.default_points)
        logger.debug(f"[Record {record_index}] Started {question_type.label} question")

    def _finalize(self, record_index: Optional[int], at_end: bool) -> None:
        draft = self._draft
        self._draft = None
        if draft is None:
            return

        which = "last question" if at_end else "question started before this record"
        reason = draft.incomplete_reason()
        if reason is None:
            try:
                question = draft.build(self._default_input_box, self._default_evaluation)
            except ValueError as e:
                reason = str(e)
            else:
                self._questions.append(question)
                return

        self.diagnostics.warning(
            DiagnosticKind.DROPPED_QUESTION,
            f"Skipping {which} (Title: {draft.display_title}) because it is "
            f"incomplete or invalid. Reason: {reason}",
            record_index=record_index,
            title=draft.title,
        )

    def _dispatch(self, key: str, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        handler = _HANDLERS.get(key)
        if handler is None:
            if key.strip():
                self.diagnostics.info(
                    DiagnosticKind.UNRECOGNIZED_KEY,
                    f"Ignoring unrecognized row type or key: '{key}'",
                    record_index=idx,
                    title=draft.title,
                )
            return

        allowed = _TYPE_RESTRICTIONS.get(key)
        if allowed is not None and draft.type not in allowed:
            self.diagnostics.warning(
                DiagnosticKind.WRONG_QUESTION_TYPE,
                f"'{cell(row, 0)}' row encountered for incompatible question type: "
                f"{draft.type}. Ignoring.",
                record_index=idx,
                title=draft.title,
            )
            return

        handler(self, draft, row, idx)

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _int(
        self,
        row: Sequence[str],
        index: int,
        default: int,
        field_name: str,
        draft: QuestionDraft,
        idx: int,
    ) -> int:
        """Read an integer cell, warning when non-empty content is not a number."""
        value = cell(row, index, None)
        if value is not None and not is_int(value):
            self.diagnostics.warning(
                DiagnosticKind.INVALID_NUMBER,
                f"Invalid {field_name} value '{value}'. Using {default}.",
                record_index=idx,
                title=draft.title,
            )
        return parse_int(value, default)

    def _html(self, row: Sequence[str], index: int) -> bool:
        return is_html(cell(row, index, ""), self.config.html_marker)

    def _choice_no(self, row: Sequence[str], draft: QuestionDraft, idx: int, label: str) -> Optional[int]:
        raw = cell(row, 1, "")
        choice_no = parse_int(raw, 0)
        if choice_no <= 0:
            self.diagnostics.warning(
                DiagnosticKind.INVALID_CHOICE_NUMBER,
                f"Invalid {label} number '{raw}' for Matching question "
                f"'{draft.display_title}'. Skipping {label.lower()}.",
                record_index=idx,
                title=draft.title,
            )
            return None
        return choice_no

    # ─────────────────────────────────────────────────────────────────────────
    # Common fields
    # ─────────────────────────────────────────────────────────────────────────

    def _on_id(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.id = cell(row, 1, None)

    def _on_title(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.title = cell(row, 1, None)

    def _on_question_text(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.question_text = cell(row, 1, None)

    def _on_points(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.points = self._int(row, 1, self.config.default_points, "Points", draft, idx)

    def _on_difficulty(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.difficulty = self._int(
            row, 1, self.config.invalid_difficulty, "Difficulty", draft, idx
        )

    def _on_image(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.image = cell(row, 1, None)

    def _on_hint(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.hint = cell(row, 1, None)

    def _on_feedback(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        value = cell(row, 1, None)
        slot = draft.feedback_slot()
        if slot is not None:
            slot.feedback = value
        else:
            draft.feedback = value

    # ─────────────────────────────────────────────────────────────────────────
    # Written response / short answer
    # ─────────────────────────────────────────────────────────────────────────

    def _on_initial_text(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.initial_text = cell(row, 1, None)

    def _on_answer_key(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.answer_key = cell(row, 1, None)

    def _on_input_box(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.input_box = InputBox(
            rows=self._int(row, 1, self.config.default_input_rows, "InputBox rows", draft, idx),
            cols=self._int(row, 2, self.config.default_input_cols, "InputBox cols", draft, idx),
        )

    def _on_answer(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.best_answer = cell(row, 2, "")
        draft.evaluation = Evaluation.from_flag(cell(row, 3, ""), self._default_evaluation)

    # ─────────────────────────────────────────────────────────────────────────
    # Matching
    # ─────────────────────────────────────────────────────────────────────────

    def _on_scoring(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.scoring = cell(row, 1, None)

    def _on_choice(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        choice_no = self._choice_no(row, draft, idx, "Choice")
        if choice_no is None:
            return
        text = cell(row, 2, "")
        pair = draft.find_pair(choice_no)
        if pair is not None:
            pair.choice_text = text
        else:
            draft.pairs.append(PairDraft(choice_no=choice_no, choice_text=text))

    def _on_match(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        choice_no = self._choice_no(row, draft, idx, "Match")
        if choice_no is None:
            return
        text = cell(row, 2, "")
        pair = draft.find_pair(choice_no)
        if pair is not None:
            pair.match_text = text
            return

        self.diagnostics.warning(
            DiagnosticKind.PLACEHOLDER_CHOICE,
            f"Matching question '{draft.display_title}' has Match row for non-existent "
            f"Choice number {choice_no}. Creating placeholder choice.",
            record_index=idx,
            title=draft.title,
        )
        draft.pairs.append(
            PairDraft(
                choice_no=choice_no,
                choice_text=self.config.placeholder_for(choice_no),
                match_text=text,
            )
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Options, true/false, ordering
    # ─────────────────────────────────────────────────────────────────────────

    def _on_option(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        label = "percent" if draft.type == QuestionType.MC else "weight"
        draft.options.append(
            OptionDraft(
                value=self._int(row, 1, 0, f"Option {label}", draft, idx),
                text=cell(row, 2, ""),
                html=self._html(row, 3),
                feedback=cell(row, 4, None),
                feedback_html=self._html(row, 5),
            )
        )

    def _on_true(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.true_option = self._tf_draft(draft, row, idx, "True")

    def _on_false(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        draft.false_option = self._tf_draft(draft, row, idx, "False")

    def _tf_draft(self, draft: QuestionDraft, row: Sequence[str], idx: int, label: str) -> TFDraft:
        return TFDraft(
            credit=self._int(row, 1, 0, f"{label} credit", draft, idx),
            feedback=cell(row, 2, None),
            html=self._html(row, 3),
            defined_at=idx,
        )

    def _on_item(self, draft: QuestionDraft, row: Sequence[str], idx: int) -> None:
        # Ordering rows keep feedback in cell 4 but its HTML flag in cell 6.
        draft.items.append(
            OptionDraft(
                text=cell(row, 1, ""),
                html=self._html(row, 2),
                feedback=cell(row, 3, None),
                feedback_html=self._html(row, 5),
            )
        )


_HANDLERS: Dict[str, RowHandler] = {
    "id": QuestionAssembler._on_id,
    "title": QuestionAssembler._on_title,
    "questiontext": QuestionAssembler._on_question_text,
    "points": QuestionAssembler._on_points,
    "difficulty": QuestionAssembler._on_difficulty,
    "image": QuestionAssembler._on_image,
    "hint": QuestionAssembler._on_hint,
    "feedback": QuestionAssembler._on_feedback,
    "initialtext": QuestionAssembler._on_initial_text,
    "answerkey": QuestionAssembler._on_answer_key,
    "inputbox": QuestionAssembler._on_input_box,
    "answer": QuestionAssembler._on_answer,
    "scoring": QuestionAssembler._on_scoring,
    "choice": QuestionAssembler._on_choice,
    "match": QuestionAssembler._on_match,
    "option": QuestionAssembler._on_option,
    "true": QuestionAssembler._on_true,
    "false": QuestionAssembler._on_false,
    "item": QuestionAssembler._on_item,
}

# Keys valid only for some question types; keys not listed apply to all.
_TYPE_RESTRICTIONS: Dict[str, tuple] = {
    "initialtext": (QuestionType.WR,),
    "answerkey": (QuestionType.WR,),
    "inputbox": (QuestionType.SA,),
    "answer": (QuestionType.SA,),
    "scoring": (QuestionType.M, QuestionType.MS, QuestionType.O),
    "choice": (QuestionType.M,),
    "match": (QuestionType.M,),
    "option": (QuestionType.MC, QuestionType.MS),
    "true": (QuestionType.TF,),
    "false": (QuestionType.TF,),
    "item": (QuestionType.O,),
}
