"""JWT bearer tokens identifying a user."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import jwt

from ecoquiz.errors import CredentialInvalid, Unauthenticated

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: int
    username: str
    expires_at: int


class TokenSigner:
    def __init__(self, secret: str, ttl_seconds: int = 86400) -> None:
        if not secret:
            raise ValueError("Token secret is not configured")
        if ttl_seconds <= 0:
            raise ValueError("TTL must be a positive integer")
        self._secret = secret
        self.ttl_seconds = ttl_seconds

    def issue(self, user_id: int, username: str, now: Optional[int] = None) -> str:
        """Return a signed token for the user valid for ``ttl_seconds``."""
        if now is None:
            now = int(time.time())
        payload = {
            "userId": user_id,
            "username": username,
            "exp": now + self.ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str], now: Optional[int] = None) -> TokenClaims:
        """
        Check a token's signature and expiry.

        Args:
            token: The bearer credential, or None when none was sent.
            now: Evaluation time in epoch seconds; the current time if omitted.

        Raises:
            Unauthenticated: no token was presented.
            CredentialInvalid: the token is malformed, tampered with or expired.
        """
        if not token:
            raise Unauthenticated()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "userId", "username"], "verify_exp": now is None},
            )
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected bearer token: %s", exc)
            raise CredentialInvalid()

        user_id = payload["userId"]
        username = payload["username"]
        expires_at = payload["exp"]
        if isinstance(user_id, bool) or not isinstance(user_id, int) or not isinstance(username, str):
            logger.warning("Rejected bearer token with malformed claims")
            raise CredentialInvalid()
        if now is not None and now > expires_at:
            logger.info("Rejected expired token for user %s", user_id)
            raise CredentialInvalid()

        return TokenClaims(user_id=user_id, username=username, expires_at=expires_at)
