"""
Tests for answer validation and grading.
"""

import pytest

from ecoquiz.api.schemas import Quiz
from ecoquiz.errors import MalformedSubmission
from ecoquiz.services.grading import POINTS_PER_CORRECT_ANSWER, grade, validate_submission
from ecoquiz.storage import seed

from .conftest import SUSTENTABILIDADE_KEY


@pytest.fixture
def quiz():
    return Quiz.model_validate(seed.QUIZZES[0])


class TestGrade:
    def test_all_correct(self, quiz):
        result = grade(quiz, SUSTENTABILIDADE_KEY)

        assert result.score == len(quiz.questions)
        assert result.total_questions == 5
        assert result.points_earned == len(quiz.questions) * 100

    def test_none_correct(self, quiz):
        wrong = [(k + 1) % 5 for k in SUSTENTABILIDADE_KEY]
        result = grade(quiz, wrong)

        assert result.score == 0
        assert result.points_earned == 0
        assert result.total_questions == 5

    def test_partial(self, quiz):
        answers = list(SUSTENTABILIDADE_KEY)
        answers[1] = 0
        answers[4] = 4
        result = grade(quiz, answers)

        assert result.score == 3
        assert result.points_earned == 3 * POINTS_PER_CORRECT_ANSWER

    def test_unset_never_matches(self, quiz):
        result = grade(quiz, [None, 3, None, 1, None])
        assert result.score == 2

    def test_out_of_range_never_matches(self, quiz):
        result = grade(quiz, [17, -1, 2, 1, 1])
        assert result.score == 3

    def test_bool_is_not_an_answer(self, quiz):
        # True == 1, but a boolean is not an option index
        result = grade(quiz, [0, 3, 2, True, True])
        assert result.score == 3

    def test_short_answer_list_scores_what_is_there(self, quiz):
        result = grade(quiz, [0, 3])
        assert result.score == 2
        assert result.total_questions == 5


class TestValidateSubmission:
    def test_accepts_full_list(self, quiz):
        validate_submission(quiz, SUSTENTABILIDADE_KEY)

    def test_accepts_unset_entries(self, quiz):
        validate_submission(quiz, [0, None, 2, None, 1])

    def test_rejects_short(self, quiz):
        with pytest.raises(MalformedSubmission) as exc_info:
            validate_submission(quiz, [0, 3, 2, 1])
        assert "Expected 5 answers, got 4" in exc_info.value.message

    def test_rejects_long(self, quiz):
        with pytest.raises(MalformedSubmission):
            validate_submission(quiz, SUSTENTABILIDADE_KEY + [0])

    @pytest.mark.parametrize("bad", ["1", 1.0, True, [1]])
    def test_rejects_non_integer(self, quiz, bad):
        answers = list(SUSTENTABILIDADE_KEY)
        answers[2] = bad
        with pytest.raises(MalformedSubmission):
            validate_submission(quiz, answers)
