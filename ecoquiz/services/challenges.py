import logging

from ecoquiz.api.schemas import Challenge
from ecoquiz.errors import ChallengeAlreadyCompleted, ChallengeNotFound, UserNotFound
from ecoquiz.services.ledger import UserPointsLedger
from ecoquiz.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def complete_challenge(
    store: MemoryStore, ledger: UserPointsLedger, user_id: int, challenge_id: int
) -> Challenge:
    """
    Mark a challenge completed for a user and award its points.

    A challenge can be completed once per user. Both the completion mark and
    the award happen under the user's ledger lock.

    Returns:
        Challenge: the completed challenge.

    Raises:
        ChallengeNotFound, UserNotFound, ChallengeAlreadyCompleted
    """
    challenge = store.get_challenge(challenge_id)
    if challenge is None:
        raise ChallengeNotFound()

    with ledger.user_lock(user_id):
        user = store.get_user(user_id)
        if user is None:
            raise UserNotFound()
        if challenge_id in user.completed_challenges:
            raise ChallengeAlreadyCompleted()
        ledger.award(user_id, challenge.pontuacao_maxima)
        user.completed_challenges.append(challenge_id)

    logger.info("User %s completed challenge %s", user_id, challenge_id)
    return challenge
