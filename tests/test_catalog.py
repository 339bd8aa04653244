"""
Tests for the quiz catalog.
"""

import random
from collections import Counter

import pytest
from pydantic import ValidationError

from ecoquiz.api.schemas import Quiz, QuizQuestion
from ecoquiz.errors import EmptyCatalog, QuizNotFound
from ecoquiz.services.catalog import QuizCatalog
from ecoquiz.storage import seed


def _quiz(quiz_id, n_questions=2):
    return Quiz(
        id=quiz_id,
        title=f"Quiz {quiz_id}",
        questions=[
            QuizQuestion(id=quiz_id * 10 + i, question=f"Q{i}?", options=["a", "b"], correct_answer=i % 2)
            for i in range(n_questions)
        ],
    )


class TestSeededCatalog:
    """Tests against the demonstration quizzes."""

    def test_every_question_key_in_range(self, store):
        """Every correct answer indexes an existing option."""
        for quiz in store.catalog.list_all():
            for question in quiz.questions:
                assert 0 <= question.correct_answer < len(question.options)
                assert len(question.options) >= 2

    def test_list_all_keeps_seeding_order(self, store):
        titles = [q.title for q in store.catalog.list_all()]
        assert titles == ["Sustentabilidade Básica", "Energia Renovável", "Mudanças Climáticas"]

    def test_seed_wire_keys_parse(self):
        quiz = Quiz.model_validate(seed.QUIZZES[0])
        assert [q.correct_answer for q in quiz.questions] == [0, 3, 2, 1, 1]


class TestPickRandom:
    """Tests for random selection."""

    def test_returns_catalog_member(self):
        catalog = QuizCatalog([_quiz(1), _quiz(2)], rng=random.Random(7))
        assert catalog.pick_random() in catalog.list_all()

    def test_covers_all_quizzes(self):
        catalog = QuizCatalog([_quiz(1), _quiz(2), _quiz(3)], rng=random.Random(42))
        counts = Counter(catalog.pick_random().id for _ in range(600))

        assert set(counts) == {1, 2, 3}
        # roughly uniform
        assert min(counts.values()) > 100

    def test_empty_catalog_raises(self):
        catalog = QuizCatalog([])
        with pytest.raises(EmptyCatalog):
            catalog.pick_random()


class TestGet:
    def test_get_existing(self):
        catalog = QuizCatalog([_quiz(1), _quiz(2)])
        assert catalog.get(2).title == "Quiz 2"

    def test_get_missing(self):
        catalog = QuizCatalog([_quiz(1)])
        with pytest.raises(QuizNotFound):
            catalog.get(99)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            QuizCatalog([_quiz(1), _quiz(1)])


class TestQuestionValidation:
    def test_correct_answer_out_of_range(self):
        with pytest.raises(ValidationError):
            QuizQuestion(id=1, question="?", options=["a", "b"], correct_answer=2)

    def test_negative_correct_answer(self):
        with pytest.raises(ValidationError):
            QuizQuestion(id=1, question="?", options=["a", "b"], correct_answer=-1)

    def test_needs_two_options(self):
        with pytest.raises(ValidationError):
            QuizQuestion(id=1, question="?", options=["a"], correct_answer=0)

    def test_camel_case_on_the_wire(self):
        question = QuizQuestion.model_validate(
            {"id": 1, "question": "?", "options": ["a", "b"], "correctAnswer": 1}
        )
        assert question.model_dump(by_alias=True)["correctAnswer"] == 1
