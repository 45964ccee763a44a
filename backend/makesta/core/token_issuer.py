"""Session Token Issuer — mints and verifies signed, time-limited identity tokens.

Invariants:
    - Tokens carry sub (user id as string), username, role, iat, exp
    - exp is absolute: iat + ttl (24h by default); there is no refresh
    - verify() raises InvalidTokenError for bad signature, expiry, malformed
      payload, missing claims, or unknown role — never returns partial identity

Design Decisions:
    - Secret, algorithm and ttl injected through the constructor at startup
      (no module-level key); rotating the secret invalidates every token
    - clock injectable so expiry can be tested without sleeping
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from makesta.core.domain_types import Identity, Role, UserId
from makesta.core.errors import InvalidTokenError

_REQUIRED_CLAIMS = ["sub", "username", "role", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """HMAC-signed JWT issuer/verifier."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int, username: str, role: Role | str) -> str:
        """Sign a token embedding the caller's identity and an absolute expiry."""
        now = self._clock()
        payload = {
            "sub": str(user_id),
            "username": username,
            "role": Role(role).value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        """Decode and validate a token. Raises InvalidTokenError on any failure."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS, "verify_exp": False},
            )
        except jwt.InvalidTokenError:
            raise InvalidTokenError("Invalid token")

        # Expiry checked against the injected clock, not the system clock
        if payload["exp"] <= int(self._clock().timestamp()):
            raise InvalidTokenError("Token has expired")

        try:
            return Identity(
                user_id=UserId(int(payload["sub"])),
                username=str(payload["username"]),
                role=Role(payload["role"]),
            )
        except (TypeError, ValueError):
            raise InvalidTokenError("Invalid token")
