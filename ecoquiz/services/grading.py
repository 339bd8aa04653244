from typing import Any, Sequence

from ecoquiz.api.schemas import Quiz, QuizResult
from ecoquiz.errors import MalformedSubmission

# Fixed award per correct answer.
POINTS_PER_CORRECT_ANSWER = 100


def _is_answer_value(value: Any) -> bool:
    # bool is an int subclass but never a valid answer
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


# PUBLIC_INTERFACE
def validate_submission(quiz: Quiz, answers: Sequence[Any]) -> None:
    """
    Reject submissions that cannot be graded against ``quiz``.

    Args:
        quiz: The quiz the answers are meant for.
        answers: One entry per question; an int option index or None.

    Raises:
        MalformedSubmission: wrong length or a non-integer entry.
    """
    if len(answers) != len(quiz.questions):
        raise MalformedSubmission(
            f"Expected {len(quiz.questions)} answers, got {len(answers)}"
        )
    for position, value in enumerate(answers):
        if not _is_answer_value(value):
            raise MalformedSubmission(f"Answer {position} must be an integer or null")


# PUBLIC_INTERFACE
def grade(quiz: Quiz, answers: Sequence[Any]) -> QuizResult:
    """
    Score a submission against the quiz's answer key.

    A position scores iff its answer equals the question's correct index.
    Unset, out-of-range or missing answers simply do not score.

    Returns:
        QuizResult: score, total question count and points earned.
    """
    score = 0
    for position, question in enumerate(quiz.questions):
        answer = answers[position] if position < len(answers) else None
        if answer is not None and _is_answer_value(answer) and answer == question.correct_answer:
            score += 1
    return QuizResult(
        score=score,
        total_questions=len(quiz.questions),
        points_earned=score * POINTS_PER_CORRECT_ANSWER,
    )
