"""
Client package: HTTP access to the API and the interactive quiz session.
"""

from .api_client import QuizApiClient  # noqa: F401
from .session import QuizSession, SessionState  # noqa: F401
