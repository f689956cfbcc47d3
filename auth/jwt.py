"""
JWT creation and verification.

Tokens are HS256-signed JWTs carrying ``userId``, ``username``, ``iat``
and ``exp``.  Secret, algorithm and lifetime come from ``Settings``
(env vars: ``JWT_SECRET``, ``JWT_ALGORITHM``, ``JWT_EXPIRY_SECONDS``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from config.settings import Settings
from utils.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: int
    username: str


def create_token(user_id: int, username: str, settings: Settings) -> str:
    """Create a signed token for ``user_id`` that expires after the configured lifetime."""
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=settings.jwt_expiry_seconds)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> AuthenticatedUser:
    """
    Verify signature and expiry and return the identity the token asserts.

    Raises ``InvalidTokenError`` (403) on any failure.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "userId"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise InvalidTokenError()
    except jwt.InvalidTokenError as exc:
        logger.warning("Token verification failed: %s", exc)
        raise InvalidTokenError()

    user_id = payload["userId"]
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        logger.warning("Token verification failed: non-integer userId")
        raise InvalidTokenError()
    return AuthenticatedUser(user_id=user_id, username=str(payload.get("username", "")))
