"""
Error types shared by the services, the HTTP layer and the client.

Service errors carry the HTTP status they map to; the API turns them into
``{"detail": message}`` responses.
"""


class EcoQuizError(Exception):
    """Base class for all service-side errors."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(EcoQuizError):
    status_code = 401
    default_message = "Access token required"


class CredentialInvalid(EcoQuizError):
    status_code = 403
    default_message = "Invalid or expired token"


class EmptyCatalog(EcoQuizError):
    status_code = 503
    default_message = "No quizzes available"


class QuizNotFound(EcoQuizError):
    status_code = 404
    default_message = "Quiz not found"


class UserNotFound(EcoQuizError):
    status_code = 404
    default_message = "User not found"


class ChallengeNotFound(EcoQuizError):
    status_code = 404
    default_message = "Challenge not found"


class ChallengeAlreadyCompleted(EcoQuizError):
    status_code = 400
    default_message = "Challenge already completed"


class UsernameTaken(EcoQuizError):
    status_code = 400
    default_message = "Username already exists"


class MalformedSubmission(EcoQuizError):
    status_code = 400
    default_message = "Malformed quiz submission"


# Client-side errors


class NetworkFailure(Exception):
    """The request never completed (connection refused, timeout, ...)."""


class ApiError(Exception):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class InvalidTransition(Exception):
    """A quiz session operation was called in a state that does not allow it."""
