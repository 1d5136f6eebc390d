"""Stateless signed session tokens (JWT) carried in an HTTP cookie.

Tokens are never stored server-side. A token stays valid until its expiry;
rotating SESSION_SECRET invalidates every outstanding session.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from kedjora.schemas.auth import AuthenticatedIdentity

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(days=30)
REQUIRED_CLAIMS = ["sub", "role", "iat", "exp"]


class MisconfiguredSigningSecret(RuntimeError):
    """Raised at startup when the session signing secret is missing."""


@dataclass(frozen=True)
class SessionToken:
    """Decoded session: who is logged in, with which role, until when."""

    user_id: int
    role: str
    name: str
    email: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        current = now if now is not None else datetime.now(UTC)
        return current >= self.expires_at


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionCodec:
    """Issues and reads session tokens with a process-wide signing secret."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        max_age: timedelta = DEFAULT_MAX_AGE,
        cookie_name: str = "kedjora.session-token",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret or not secret.strip():
            raise MisconfiguredSigningSecret("Session signing secret is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self.max_age = max_age
        self.cookie_name = cookie_name
        self._clock = clock

    def issue(self, identity: AuthenticatedIdentity) -> str:
        """Sign a token for a verified identity, expiring max_age from now."""
        issued_at = self._clock().replace(microsecond=0)
        payload: dict[str, Any] = {
            "sub": str(identity.id),
            "role": identity.role,
            "name": identity.name,
            "email": identity.email,
            "iat": issued_at,
            "exp": issued_at + self.max_age,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str | None) -> SessionToken | None:
        """
        Validate signature, claims and expiry; return the session or None.
        Never raises for malformed, forged or expired tokens.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # Expiry is checked against the injected clock below.
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
            session = SessionToken(
                user_id=int(payload["sub"]),
                role=str(payload["role"]),
                name=str(payload.get("name") or ""),
                email=str(payload.get("email") or ""),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            )
        except (jwt.PyJWTError, KeyError, TypeError, ValueError, OverflowError) as e:
            logger.debug("Rejected session token: %s", type(e).__name__)
            return None
        if session.is_expired(self._clock()):
            return None
        return session

    def read(self, cookies: Mapping[str, str]) -> SessionToken | None:
        """Read the session cookie from a request's cookie mapping."""
        return self.decode(cookies.get(self.cookie_name))
