"""JWT issuance and revocation for account sessions.

Access tokens are short-lived and can be revoked individually through a
Redis blocklist keyed by ``jti``. Every token also carries the user's
``token_version`` so that bumping the version invalidates all of them at once.
"""

import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, NamedTuple

import jwt
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed

from core.redis_client import get_redis_client


class BlocklistUnavailable(Exception):
    """Raised when Redis blocklist cannot be reached (fail-closed)."""


class TokenPair(NamedTuple):
    access: str
    refresh: str


class TokenService:
    """Sign, verify and revoke access/refresh tokens."""

    ACCESS_TTL = timedelta(minutes=15)
    REFRESH_TTL = timedelta(hours=24)
    ALGORITHM = "HS256"
    BLOCKLIST_PREFIX = "blocklist:token:"

    @classmethod
    def issue_pair(cls, user) -> TokenPair:
        """Return a fresh access/refresh pair for ``user``."""
        now = datetime.now(timezone.utc)
        return TokenPair(
            access=cls._sign(user, "access", now + cls.ACCESS_TTL, now),
            refresh=cls._sign(user, "refresh", now + cls.REFRESH_TTL, now),
        )

    @classmethod
    def _sign(cls, user, token_type: str, expires_at: datetime, issued_at: datetime) -> str:
        claims = {
            "sub": str(user.pk),
            "jti": uuid.uuid4().hex,
            "type": token_type,
            "ver": user.token_version,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(claims, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def decode(cls, token: str, expected_type: str) -> dict[str, Any]:
        """Verify signature, expiry and token type; return the claims."""
        try:
            claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[cls.ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

        if claims.get("type") != expected_type:
            raise AuthenticationFailed("Invalid token type")
        return claims

    @staticmethod
    def matches_version(claims: dict[str, Any], user) -> bool:
        return claims.get("ver") == user.token_version

    @classmethod
    def revoke(cls, claims: dict[str, Any]) -> None:
        """Blocklist the token described by ``claims`` until it would expire anyway."""
        ttl_seconds = max(1, int(claims["exp"]) - int(time.time()))
        try:
            get_redis_client().setex(f"{cls.BLOCKLIST_PREFIX}{claims['jti']}", ttl_seconds, "1")
        except Exception as exc:  # pragma: no cover - network failure
            raise BlocklistUnavailable("Redis unavailable while blocklisting") from exc

    @classmethod
    def is_revoked(cls, jti: str) -> bool:
        try:
            return get_redis_client().get(f"{cls.BLOCKLIST_PREFIX}{jti}") is not None
        except Exception as exc:  # pragma: no cover - network failure
            raise BlocklistUnavailable("Redis unavailable while checking blocklist") from exc


__all__ = ["BlocklistUnavailable", "TokenPair", "TokenService"]
