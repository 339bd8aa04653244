import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from ecoquiz.api.schemas import ProfileOut, Quiz, QuizResult, TokenOut
from ecoquiz.errors import ApiError, NetworkFailure

logger = logging.getLogger(__name__)


class QuizApiClient:
    """
    Thin wrapper over an ``httpx.Client`` for the EcoQuiz API.

    The bearer token from ``login``/``register`` is kept and sent on every
    later request. Requests are never retried.
    """

    # PUBLIC_INTERFACE
    def __init__(self, http: httpx.Client, token: Optional[str] = None) -> None:
        """
        Args:
            http: Client with ``base_url`` pointing at the API server.
            token: Existing bearer token, if any.
        """
        self._http = http
        self.token = token

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except httpx.TransportError as exc:
            logger.warning("%s %s did not complete: %s", method, path, exc)
            raise NetworkFailure(str(exc)) from exc

        if response.is_success:
            return response.json()

        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        if not isinstance(detail, str):
            detail = str(detail) if detail else response.reason_phrase
        raise ApiError(response.status_code, detail)

    # PUBLIC_INTERFACE
    def login(self, username: str, password: str) -> TokenOut:
        data = TokenOut.model_validate(
            self._request("POST", "/api/auth/login", {"username": username, "password": password})
        )
        self.token = data.token
        return data

    # PUBLIC_INTERFACE
    def register(self, username: str, email: str, password: str) -> TokenOut:
        data = TokenOut.model_validate(
            self._request(
                "POST",
                "/api/auth/register",
                {"username": username, "email": email, "password": password},
            )
        )
        self.token = data.token
        return data

    # PUBLIC_INTERFACE
    def fetch_random_quiz(self) -> Quiz:
        return Quiz.model_validate(self._request("GET", "/api/quiz/random"))

    # PUBLIC_INTERFACE
    def fetch_quiz(self, quiz_id: int) -> Quiz:
        return Quiz.model_validate(self._request("GET", f"/api/quiz/{quiz_id}"))

    # PUBLIC_INTERFACE
    def submit_answers(self, quiz_id: Optional[int], answers: Sequence[Optional[int]]) -> QuizResult:
        """
        Post answers for grading.

        Args:
            quiz_id: The quiz that was shown; None uses legacy random grading.
            answers: One option index (or None) per question.
        """
        body: Dict[str, Any] = {"answers": list(answers)}
        if quiz_id is not None:
            body["quizId"] = quiz_id
        return QuizResult.model_validate(self._request("POST", "/api/quiz/submit", body))

    # PUBLIC_INTERFACE
    def profile(self) -> ProfileOut:
        return ProfileOut.model_validate(self._request("GET", "/api/user/profile"))
