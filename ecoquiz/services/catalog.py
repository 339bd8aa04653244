import logging
import random
from typing import Iterable, Optional, Tuple

from ecoquiz.api.schemas import Quiz
from ecoquiz.errors import EmptyCatalog, QuizNotFound

logger = logging.getLogger(__name__)


class QuizCatalog:
    """
    Fixed, read-only collection of quizzes.

    Quizzes are validated (see ``QuizQuestion``) before they get here and the
    collection is frozen as a tuple, so it can be shared between requests
    without locking.
    """

    # PUBLIC_INTERFACE
    def __init__(self, quizzes: Iterable[Quiz], rng: Optional[random.Random] = None) -> None:
        """
        Args:
            quizzes: Quizzes in seeding order.
            rng: Random source used by pick_random; a fresh one if omitted.
        """
        self._quizzes: Tuple[Quiz, ...] = tuple(quizzes)
        ids = [q.id for q in self._quizzes]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate quiz ids in catalog: {ids}")
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._quizzes)

    # PUBLIC_INTERFACE
    def list_all(self) -> Tuple[Quiz, ...]:
        """Return every quiz, in seeding order."""
        return self._quizzes

    # PUBLIC_INTERFACE
    def pick_random(self) -> Quiz:
        """
        Pick one quiz uniformly at random.

        Raises:
            EmptyCatalog: if the catalog holds no quizzes.
        """
        if not self._quizzes:
            raise EmptyCatalog()
        return self._quizzes[self._rng.randrange(len(self._quizzes))]

    # PUBLIC_INTERFACE
    def get(self, quiz_id: int) -> Quiz:
        """
        Return the quiz with the given identifier.

        Raises:
            QuizNotFound: if no quiz has that identifier.
        """
        for quiz in self._quizzes:
            if quiz.id == quiz_id:
                return quiz
        logger.info("Quiz %s requested but not in catalog", quiz_id)
        raise QuizNotFound(f"Quiz {quiz_id} not found")
