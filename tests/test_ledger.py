"""
Tests for the points ledger and challenge completion.
"""

import threading

import pytest

from ecoquiz.errors import ChallengeAlreadyCompleted, ChallengeNotFound, UserNotFound
from ecoquiz.services.challenges import complete_challenge
from ecoquiz.services.ledger import UserPointsLedger
from ecoquiz.storage.memory_store import MemoryStore


@pytest.fixture
def ledger(store):
    return UserPointsLedger(store)


class TestAward:
    def test_adds_to_existing_total(self, store, ledger):
        user = store.create_user("ana", "ana@example.com")
        user.points = 100

        total = ledger.award(user.id, 250)

        assert total == 350
        assert store.get_user(user.id).points == 350
        assert ledger.total(user.id) == 350

    def test_unknown_user_changes_nothing(self, store, ledger):
        demo = store.get_user_by_username("demo")
        ledger.award(demo.id, 40)

        with pytest.raises(UserNotFound):
            ledger.award(999, 250)

        assert store.get_user(demo.id).points == 40
        assert store.get_user(999) is None

    def test_zero_award(self, store, ledger):
        demo = store.get_user_by_username("demo")
        assert ledger.award(demo.id, 0) == 0

    def test_concurrent_awards_are_not_lost(self, store, ledger):
        demo = store.get_user_by_username("demo")

        def worker():
            for _ in range(200):
                ledger.award(demo.id, 100)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert ledger.total(demo.id) == 8 * 200 * 100

    def test_total_unknown_user(self, ledger):
        with pytest.raises(UserNotFound):
            ledger.total(12345)


class TestCompleteChallenge:
    def test_awards_challenge_points(self, store, ledger):
        demo = store.get_user_by_username("demo")

        challenge = complete_challenge(store, ledger, demo.id, 2)

        assert challenge.pontuacao_maxima == 250
        assert demo.points == 250
        assert demo.completed_challenges == [2]

    def test_second_completion_rejected(self, store, ledger):
        demo = store.get_user_by_username("demo")
        complete_challenge(store, ledger, demo.id, 1)

        with pytest.raises(ChallengeAlreadyCompleted):
            complete_challenge(store, ledger, demo.id, 1)
        assert demo.points == 100

    def test_unknown_challenge(self, store, ledger):
        demo = store.get_user_by_username("demo")
        with pytest.raises(ChallengeNotFound):
            complete_challenge(store, ledger, demo.id, 42)

    def test_unknown_user(self, store, ledger):
        with pytest.raises(UserNotFound):
            complete_challenge(store, ledger, 999, 1)


class TestMemoryStore:
    def test_demo_data(self):
        store = MemoryStore.with_demo_data()

        assert store.get_user_by_username("demo").points == 0
        assert len(store.list_challenges()) == 5
        assert len(store.catalog) == 3

    def test_duplicate_username(self, store):
        with pytest.raises(ValueError):
            store.create_user("demo", "other@example.com")

    def test_user_ids_increment(self, store):
        a = store.create_user("a", "a@example.com")
        b = store.create_user("b", "b@example.com")
        assert b.id == a.id + 1
