"""Stateless session tokens.

Tokens are HS256 JWTs carrying the user id, username, issue time and expiry.
Nothing is stored server side: a token is valid exactly when its signature
checks out against the configured secret and ``exp`` has not passed.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from groupfund.domain.users.entities import SessionIdentity, SessionToken
from groupfund.domain.users.exceptions import InvalidTokenError
from groupfund.domain.users.repositories import SessionTokenService
from groupfund.shared.logging import logger

ALGORITHM = "HS256"
_REQUIRED_CLAIMS = ["id", "username", "iat", "exp"]


class JwtSessionTokenService(SessionTokenService):
    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=1)) -> None:
        if not secret:
            raise ValueError("Token signing secret cannot be empty")
        self._secret = secret
        self._ttl = ttl

    def issue(self, user_id: str, username: str) -> SessionToken:
        now = datetime.now(UTC)
        expires_at = now + self._ttl
        payload = {
            "id": user_id,
            "username": username,
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        return SessionToken(user_id=user_id, token=token, expires_at=expires_at)

    def verify(self, token: str) -> SessionIdentity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.InvalidTokenError as exc:
            # Expired and tampered tokens look the same to the caller.
            logger.debug(f"session.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        user_id = payload["id"]
        username = payload["username"]
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise InvalidTokenError()

        return SessionIdentity(
            user_id=user_id,
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
