import logging
import random
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from ecoquiz.api.schemas import Challenge, Quiz
from ecoquiz.services.catalog import QuizCatalog
from ecoquiz.storage import seed

logger = logging.getLogger(__name__)


@dataclass
class UserRecord:
    """Mutable account record; ``points`` only ever grows."""
    id: int
    username: str
    email: str
    points: int = 0
    completed_challenges: List[int] = field(default_factory=list)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryStore:
    """
    Process-lifetime in-memory store for users, challenges and the quiz catalog.

    Built once at startup and handed to request handlers through the app state.
    Data model:
    {
        "users": { id: UserRecord },
        "challenges": { id: Challenge },
        "catalog": QuizCatalog (read-only)
    }
    """

    # PUBLIC_INTERFACE
    def __init__(
        self,
        quizzes: Optional[Iterable[Quiz]] = None,
        challenges: Optional[Iterable[Dict[str, Any]]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            quizzes: Quizzes for the catalog; the demonstration set if omitted.
            challenges: Challenge definitions (without id/timestamps); the
                demonstration set if omitted.
            rng: Random source for quiz selection.
        """
        if quizzes is None:
            quizzes = [Quiz.model_validate(q) for q in seed.QUIZZES]
        self.catalog = QuizCatalog(quizzes, rng=rng)

        self._users: Dict[int, UserRecord] = {}
        self._challenges: Dict[int, Challenge] = {}
        self._next_user_id = 1
        self._next_challenge_id = 1
        # Guards id sequences and the username index
        self._lock = threading.Lock()

        for data in seed.CHALLENGES if challenges is None else challenges:
            self.add_challenge(data)
        logger.debug("Store ready: %d quizzes, %d challenges", len(self.catalog), len(self._challenges))

    # PUBLIC_INTERFACE
    @classmethod
    def with_demo_data(cls, rng: Optional[random.Random] = None) -> "MemoryStore":
        """Return a store seeded with the demonstration quizzes, challenges and user."""
        store = cls(rng=rng)
        store.create_user(seed.DEMO_USER["username"], seed.DEMO_USER["email"])
        return store

    # PUBLIC_INTERFACE
    def create_user(self, username: str, email: str) -> UserRecord:
        """
        Create a new account with zero points.

        Raises:
            ValueError: if the username is already registered.
        """
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise ValueError(f"username {username!r} already exists")
            user = UserRecord(id=self._next_user_id, username=username, email=email)
            self._users[user.id] = user
            self._next_user_id += 1
        logger.info("Created user %s (id=%d)", username, user.id)
        return user

    # PUBLIC_INTERFACE
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self._users.get(user_id)

    # PUBLIC_INTERFACE
    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        for user in list(self._users.values()):
            if user.username == username:
                return user
        return None

    # PUBLIC_INTERFACE
    def add_challenge(self, data: Dict[str, Any]) -> Challenge:
        """Store a challenge definition, assigning its id and timestamps."""
        now = _now_iso()
        with self._lock:
            challenge = Challenge.model_validate(
                {**data, "id": self._next_challenge_id, "createdAt": now, "updatedAt": now}
            )
            self._challenges[challenge.id] = challenge
            self._next_challenge_id += 1
        return challenge

    # PUBLIC_INTERFACE
    def list_challenges(self) -> List[Challenge]:
        return list(self._challenges.values())

    # PUBLIC_INTERFACE
    def get_challenge(self, challenge_id: int) -> Optional[Challenge]:
        return self._challenges.get(challenge_id)
