"""Signed, time-limited session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from sessionauth.domain.users.entities import SessionClaims
from sessionauth.domain.users.exceptions import InvalidTokenError, TokenExpiredError
from sessionauth.domain.users.repositories import SessionIssuer
from sessionauth.shared.logging import logger

DEFAULT_TTL = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtSessionIssuer(SessionIssuer):
    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: str, username: str) -> str:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        claims = {
            "id": user_id,
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        logger.debug(f"session.issue: user_id={user_id} exp={expires_at.isoformat()}")
        return token

    def verify(self, token: str) -> SessionClaims:
        if not token:
            raise InvalidTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError() from exc

        user_id = payload.get("id")
        username = payload.get("username")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise InvalidTokenError(context={"reason": "missing_identity"})
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidTokenError(context={"reason": "missing_timestamps"})

        # expiry is checked against the injected clock, not the wall clock
        if int(self._clock().timestamp()) >= expires_at:
            raise TokenExpiredError()

        return SessionClaims(
            user_id=user_id,
            username=username,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
