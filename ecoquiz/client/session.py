"""
Interactive quiz session.

Drives one pass through a quiz the way the quiz page does: fetch a quiz,
collect one answer per question while moving back and forth, submit the
whole answer list once, then show the result or an error.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple, Union

from ecoquiz.api.schemas import Quiz, QuizQuestion, QuizResult
from ecoquiz.client.api_client import QuizApiClient
from ecoquiz.errors import ApiError, InvalidTransition, NetworkFailure

logger = logging.getLogger(__name__)

SessionError = Union[NetworkFailure, ApiError]


class SessionState(str, Enum):
    """Lifecycle states of a quiz session."""
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    FAILED = "failed"


class QuizSession:
    """
    Client-side state machine for answering one quiz.

    Answers are held positionally: ``answers[i]`` is the option chosen for
    question ``i`` or None while unset. The list never grows past the number
    of questions.
    """

    # PUBLIC_INTERFACE
    def __init__(self, api: QuizApiClient, quiz_id: Optional[int] = None) -> None:
        """
        Args:
            api: Authenticated API client.
            quiz_id: Play this quiz every time instead of a random one.
        """
        self._api = api
        self._quiz_id = quiz_id
        self.state = SessionState.LOADING
        self.quiz: Optional[Quiz] = None
        self.current_index = 0
        self._answers: List[Optional[int]] = []
        self.result: Optional[QuizResult] = None
        self.error: Optional[SessionError] = None

    # ---- loading -------------------------------------------------------

    def _load(self) -> SessionState:
        self.state = SessionState.LOADING
        self.quiz = None
        self.current_index = 0
        self._answers = []
        self.result = None
        self.error = None
        try:
            if self._quiz_id is None:
                quiz = self._api.fetch_random_quiz()
            else:
                quiz = self._api.fetch_quiz(self._quiz_id)
        except (NetworkFailure, ApiError) as exc:
            logger.warning("Could not load quiz: %s", exc)
            self.error = exc
            self.state = SessionState.FAILED
            return self.state
        self.quiz = quiz
        self.state = SessionState.IN_PROGRESS
        return self.state

    # PUBLIC_INTERFACE
    def start(self) -> SessionState:
        """Fetch the first quiz; ends IN_PROGRESS at question 0, or FAILED."""
        if self.state is not SessionState.LOADING or self.quiz is not None:
            raise InvalidTransition("session already started")
        return self._load()

    # PUBLIC_INTERFACE
    def reset(self) -> SessionState:
        """
        Discard the finished attempt and fetch a fresh quiz.

        Only allowed once the session is COMPLETED or FAILED.
        """
        if self.state not in (SessionState.COMPLETED, SessionState.FAILED):
            raise InvalidTransition(f"cannot reset while {self.state.value}")
        return self._load()

    # ---- answering -----------------------------------------------------

    def _require_in_progress(self) -> Quiz:
        if self.state is not SessionState.IN_PROGRESS or self.quiz is None:
            raise InvalidTransition(f"not allowed while {self.state.value}")
        return self.quiz

    @property
    def answers(self) -> Tuple[Optional[int], ...]:
        return tuple(self._answers)

    @property
    def last_index(self) -> int:
        return len(self.quiz.questions) - 1 if self.quiz else 0

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.quiz is None:
            return None
        return self.quiz.questions[self.current_index]

    def is_answered(self, index: int) -> bool:
        return 0 <= index < len(self._answers) and self._answers[index] is not None

    # PUBLIC_INTERFACE
    def select_answer(self, index: int, choice: int) -> None:
        """
        Record ``choice`` for question ``index``, replacing any earlier pick.

        Does not move to the next question.

        Raises:
            InvalidTransition: the session is not IN_PROGRESS.
            IndexError: no such question or option.
        """
        quiz = self._require_in_progress()
        if not 0 <= index < len(quiz.questions):
            raise IndexError(f"question index {index} out of range")
        options = quiz.questions[index].options
        if isinstance(choice, bool) or not isinstance(choice, int) or not 0 <= choice < len(options):
            raise IndexError(f"option {choice!r} out of range for question {index}")
        if len(self._answers) <= index:
            self._answers.extend([None] * (index + 1 - len(self._answers)))
        self._answers[index] = choice

    def choose(self, choice: int) -> None:
        """Answer the question currently shown."""
        self.select_answer(self.current_index, choice)

    # ---- navigation ----------------------------------------------------

    @property
    def can_advance(self) -> bool:
        # "Next" is offered only once the current question has an answer
        return (
            self.state is SessionState.IN_PROGRESS
            and self.current_index < self.last_index
            and self.is_answered(self.current_index)
        )

    @property
    def can_retreat(self) -> bool:
        return self.state is SessionState.IN_PROGRESS and self.current_index > 0

    # PUBLIC_INTERFACE
    def advance(self) -> bool:
        """Move to the next question; returns False (no-op) on the last one."""
        self._require_in_progress()
        if self.current_index >= self.last_index:
            return False
        self.current_index += 1
        return True

    # PUBLIC_INTERFACE
    def retreat(self) -> bool:
        """Move to the previous question; returns False (no-op) on the first one."""
        self._require_in_progress()
        if self.current_index <= 0:
            return False
        self.current_index -= 1
        return True

    @property
    def progress(self) -> float:
        """Percentage position in the quiz, counting the current question."""
        if self.quiz is None:
            return 0.0
        return (self.current_index + 1) / len(self.quiz.questions) * 100

    # ---- submission ----------------------------------------------------

    @property
    def can_submit(self) -> bool:
        if self.quiz is None or self.state not in (SessionState.IN_PROGRESS, SessionState.FAILED):
            return False
        return len(self._answers) == len(self.quiz.questions) and all(a is not None for a in self._answers)

    # PUBLIC_INTERFACE
    def submit(self) -> Optional[QuizResult]:
        """
        Send every answer for grading.

        Allowed from IN_PROGRESS, or from FAILED after a failed submission
        (the answers are kept, so the user can try again).

        Returns:
            QuizResult on success, None if the request failed (state FAILED,
            ``error`` set).

        Raises:
            InvalidTransition: already submitting, finished, or some question
                is still unanswered.
        """
        if self.state is SessionState.SUBMITTING:
            raise InvalidTransition("submission already in flight")
        if self.quiz is None or self.state not in (SessionState.IN_PROGRESS, SessionState.FAILED):
            raise InvalidTransition(f"cannot submit while {self.state.value}")
        if not self.can_submit:
            raise InvalidTransition("every question must be answered before submitting")

        self.state = SessionState.SUBMITTING
        self.error = None
        try:
            result = self._api.submit_answers(self.quiz.id, self._answers)
        except (NetworkFailure, ApiError) as exc:
            logger.warning("Quiz %s submission failed: %s", self.quiz.id, exc)
            self.error = exc
            self.state = SessionState.FAILED
            return None

        self.result = result
        self.state = SessionState.COMPLETED
        logger.info(
            "Quiz %s completed: %d/%d, %d points",
            self.quiz.id, result.score, result.total_questions, result.points_earned,
        )
        return result
