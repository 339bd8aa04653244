from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Base model: snake_case attributes, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# PUBLIC_INTERFACE
class QuizQuestion(_WireModel):
    """A single multiple-choice question."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable identifier for the question.")
    question: str = Field(..., description="Question prompt text.")
    options: List[str] = Field(..., min_length=2, description="Ordered answer options.")
    correct_answer: int = Field(..., description="Index of the correct option within options (0-based).")

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuizQuestion":
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"question {self.id}: correctAnswer {self.correct_answer} "
                f"is outside 0..{len(self.options) - 1}"
            )
        return self


# PUBLIC_INTERFACE
class Quiz(_WireModel):
    """Full quiz payload, answer keys included."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier for the quiz.")
    title: str = Field(..., description="Title of the quiz.")
    questions: List[QuizQuestion] = Field(..., min_length=1, description="Ordered quiz questions.")


# PUBLIC_INTERFACE
class QuizMetaOut(_WireModel):
    """Metadata view of a quiz for listing endpoints."""
    id: int
    title: str
    question_count: int = Field(..., description="Number of questions contained in the quiz.")


# PUBLIC_INTERFACE
class QuizSubmission(_WireModel):
    """Answers for one quiz, one entry per question; null marks an unanswered slot."""
    quiz_id: Optional[int] = Field(
        default=None, description="Identifier of the quiz that was shown. Omit for legacy random grading."
    )
    answers: List[Optional[StrictInt]] = Field(..., description="Selected option index per question.")


# PUBLIC_INTERFACE
class QuizResult(_WireModel):
    """Outcome of grading a submission."""
    score: int = Field(..., description="Number of correct answers.")
    total_questions: int
    points_earned: int


# PUBLIC_INTERFACE
class LoginIn(_WireModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# PUBLIC_INTERFACE
class RegisterIn(_WireModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


# PUBLIC_INTERFACE
class TokenOut(_WireModel):
    """Bearer credential issued on login/registration."""
    token: str
    username: str
    message: str


# PUBLIC_INTERFACE
class ProfileOut(_WireModel):
    id: int
    username: str
    email: str
    points: int
    completed_challenges: int = Field(..., description="Number of completed challenges.")


# PUBLIC_INTERFACE
class Challenge(_WireModel):
    """A completable task with its own point value."""
    id: int
    titulo: str
    descricao: str = ""
    nivel_dificuldade: str = ""
    categoria: str = ""
    pontuacao_maxima: int = 0
    tempo_estimado: int = 0
    status_ativo: bool = True
    created_at: str
    updated_at: str


# PUBLIC_INTERFACE
class ChallengeCompletionOut(_WireModel):
    message: str
    points_earned: int


# PUBLIC_INTERFACE
class HealthOut(_WireModel):
    message: str
    quizzes: int
