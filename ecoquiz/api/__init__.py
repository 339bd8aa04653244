"""
API package initialization.

Exports shared schema models for external use.
"""

# Re-export commonly used schema models
from .schemas import Quiz, QuizQuestion, QuizResult, QuizSubmission, QuizMetaOut  # noqa: F401
