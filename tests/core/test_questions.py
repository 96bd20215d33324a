"""
Unit Tests for Question Models

Tests for QuestionType, Evaluation, the option records and the seven
Question variants.
"""

import pytest
from dataclasses import FrozenInstanceError

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
    QuestionType,
    Quiz,
    ShortAnswerQuestion,
    TFOption,
    TrueFalseQuestion,
    WrittenResponseQuestion,
    question_from_dict,
)


class TestQuestionType:
    """Tests for QuestionType lookup."""

    @pytest.mark.parametrize("code", ["WR", "SA", "M", "MC", "TF", "MS", "O"])
    def test_from_code_when_known_then_returns_type(self, code):
        """Every code written by the exporter maps to a type."""
        assert QuestionType.from_code(code).value == code

    @pytest.mark.parametrize("code", ["ZZ", "", "mc", "wr"])
    def test_from_code_when_unknown_or_wrong_case_then_none(self, code):
        """Codes are case-sensitive and unknown codes give None."""
        assert QuestionType.from_code(code) is None

    def test_label_when_accessed_then_human_readable(self):
        """Labels are used in preview headers."""
        assert QuestionType.TF.label == "True/False"
        assert str(QuestionType.MS) == "MS"


class TestEvaluation:
    """Tests for Evaluation.from_flag."""

    def test_from_flag_when_regexp_then_regexp(self):
        assert Evaluation.from_flag("regexp") is Evaluation.REGEXP

    def test_from_flag_when_mixed_case_sensitive_then_sensitive(self):
        assert Evaluation.from_flag(" Sensitive ") is Evaluation.SENSITIVE

    def test_from_flag_when_empty_then_insensitive(self):
        assert Evaluation.from_flag("") is Evaluation.INSENSITIVE
        assert Evaluation.from_flag(None) is Evaluation.INSENSITIVE

    def test_from_flag_when_unknown_then_default(self):
        """Unknown flags fall back to the given default."""
        assert Evaluation.from_flag("fuzzy", Evaluation.SENSITIVE) is Evaluation.SENSITIVE


class TestOptions:
    """Tests for the option value records."""

    def test_input_box_when_default_then_one_by_forty(self):
        box = InputBox()
        assert (box.rows, box.cols) == (1, 40)

    def test_matching_pair_when_choice_no_zero_then_raises(self):
        with pytest.raises(ValueError, match="choice_no must be positive"):
            MatchingPair(0, "Ottawa", "Canada")

    def test_matching_pair_when_match_missing_then_incomplete(self):
        assert not MatchingPair(1, "Ottawa", "").is_complete
        assert MatchingPair(1, "Ottawa", "Canada").is_complete

    def test_mc_option_when_percent_varies_then_correct_and_partial(self):
        assert MCOption("Paris", 100).is_correct
        assert MCOption("Lyon", 50).is_partial
        assert not MCOption("Berlin", 0).is_partial
        assert not MCOption("Berlin", 0).is_correct

    def test_mc_option_when_out_of_range_then_kept(self):
        """Percent values are passed through unvalidated."""
        assert MCOption("x", -25).percent == -25
        assert MCOption("y", 150).percent == 150

    def test_ms_option_when_positive_weight_then_correct(self):
        assert MSOption("2", 1).is_correct
        assert not MSOption("4", -1).is_correct

    def test_option_when_frozen_then_cannot_modify(self):
        option = OrderingItem("One")
        with pytest.raises(FrozenInstanceError):
            option.text = "Two"


class TestQuestionVariants:
    """Tests for Question construction and invariants."""

    def test_question_when_title_empty_then_raises(self):
        with pytest.raises(ValueError, match="title"):
            WrittenResponseQuestion(title="", question_text="Discuss")

    def test_question_when_text_empty_then_raises(self):
        with pytest.raises(ValueError, match="text"):
            WrittenResponseQuestion(title="Essay", question_text="")

    def test_question_when_points_not_int_then_raises(self):
        with pytest.raises(ValueError, match="points"):
            WrittenResponseQuestion(title="Essay", question_text="Discuss", points="2")

    def test_question_when_constructed_then_defaults_applied(self):
        question = WrittenResponseQuestion(title="Essay", question_text="Discuss")
        assert question.points == 1
        assert question.type == QuestionType.WR
        assert question.id is None
        assert question.initial_text is None

    def test_short_answer_when_default_then_insensitive_one_by_forty(self):
        question = ShortAnswerQuestion(title="Capital", question_text="?", best_answer="Paris")
        assert question.evaluation is Evaluation.INSENSITIVE
        assert question.input_box == InputBox(1, 40)

    def test_short_answer_when_best_answer_empty_then_allowed(self):
        """An empty best answer is still a defined answer."""
        question = ShortAnswerQuestion(title="Capital", question_text="?", best_answer="")
        assert question.best_answer == ""

    def test_true_false_when_polarity_swapped_then_raises(self):
        with pytest.raises(ValueError, match="true_option"):
            TrueFalseQuestion(
                title="Earth",
                question_text="Round?",
                true_option=TFOption(False, 0),
                false_option=TFOption(False, 0),
            )

    def test_matching_when_get_pair_then_found_by_number(self):
        question = MatchingQuestion(
            title="Capitals",
            question_text="Match",
            pairs=(MatchingPair(1, "Ottawa", "Canada"), MatchingPair(2, "Canberra", "Australia")),
        )
        assert question.get_pair(2).match_text == "Australia"
        assert question.get_pair(3) is None


class TestQuestionDicts:
    """Tests for to_dict / question_from_dict."""

    def test_to_dict_when_called_then_includes_type(self):
        question = MultipleChoiceQuestion(
            title="Capital", question_text="Pick", options=(MCOption("Paris", 100),)
        )
        data = question.to_dict()
        assert data["type"] == "MC"
        assert data["options"][0]["percent"] == 100

    def test_from_dict_when_ms_then_rebuilds_variant(self):
        question = MultiSelectQuestion(
            title="Primes",
            question_text="Select the primes",
            options=(MSOption("2", 1), MSOption("4", -1, feedback="Not prime")),
            scoring="RightAnswers",
        )
        rebuilt = question_from_dict(question.to_dict())
        assert rebuilt == question

    def test_from_dict_when_unknown_type_then_raises(self):
        with pytest.raises(ValueError, match="Unknown question type"):
            question_from_dict({"type": "ZZ", "title": "x", "question_text": "y"})

    def test_from_dict_when_tf_then_keeps_defined_at(self):
        question = TrueFalseQuestion(
            title="Earth",
            question_text="Round?",
            true_option=TFOption(True, 100, defined_at=4),
            false_option=TFOption(False, 0, feedback="No", defined_at=5),
        )
        rebuilt = question_from_dict(question.to_dict())
        assert rebuilt.false_option.defined_at == 5
        assert rebuilt.false_option.feedback == "No"


class TestQuiz:
    """Tests for the Quiz container."""

    @pytest.fixture
    def quiz(self) -> Quiz:
        return Quiz(questions=(
            WrittenResponseQuestion(title="Essay", question_text="Discuss", points=10),
            OrderingQuestion(title="Count", question_text="Order", items=(OrderingItem("One"),)),
            WrittenResponseQuestion(title="Essay 2", question_text="Discuss again"),
        ))

    def test_quiz_when_empty_then_is_empty(self):
        assert Quiz().is_empty
        assert len(Quiz()) == 0

    def test_quiz_when_iterated_then_file_order(self, quiz):
        assert [q.title for q in quiz] == ["Essay", "Count", "Essay 2"]

    def test_total_points_when_summed_then_all_questions(self, quiz):
        assert quiz.total_points == 12

    def test_count_by_type_when_mixed_then_counts(self, quiz):
        assert quiz.count_by_type() == {QuestionType.WR: 2, QuestionType.O: 1}

    def test_of_type_when_filtered_then_only_that_type(self, quiz):
        assert [q.title for q in quiz.of_type(QuestionType.O)] == ["Count"]

    def test_from_dict_when_to_dict_then_equal(self, quiz):
        assert Quiz.from_dict(quiz.to_dict()) == quiz
