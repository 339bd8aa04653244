import logging
import threading
from collections import defaultdict
from typing import DefaultDict

from ecoquiz.errors import UserNotFound
from ecoquiz.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)


class UserPointsLedger:
    """
    Cumulative point counter per user.

    Awards are a read-modify-write on the user's record, serialized by a
    per-user lock so concurrent submissions from one account never lose an
    update.
    """

    def __init__(self, store: MemoryStore) -> None:
        self._store = store
        self._locks: DefaultDict[int, threading.RLock] = defaultdict(threading.RLock)
        self._locks_guard = threading.Lock()

    def user_lock(self, user_id: int) -> threading.RLock:
        """Lock serializing point updates for one user; re-entrant."""
        with self._locks_guard:
            return self._locks[user_id]

    # PUBLIC_INTERFACE
    def award(self, user_id: int, points: int) -> int:
        """
        Add ``points`` to the user's total.

        Args:
            user_id: Account identifier.
            points: Points to add (no upper bound).

        Returns:
            int: The updated total.

        Raises:
            UserNotFound: if the account does not exist; nothing is changed.
        """
        with self.user_lock(user_id):
            user = self._store.get_user(user_id)
            if user is None:
                raise UserNotFound(f"User {user_id} not found")
            user.points = user.points + points
            total = user.points
        logger.info("Awarded %d points to user %s (total %d)", points, user_id, total)
        return total

    # PUBLIC_INTERFACE
    def total(self, user_id: int) -> int:
        """Return the user's current point total."""
        user = self._store.get_user(user_id)
        if user is None:
            raise UserNotFound(f"User {user_id} not found")
        return user.points
