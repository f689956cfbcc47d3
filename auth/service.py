"""
Registration and login.

Both functions raise typed errors from ``utils.errors``; the HTTP layer
turns them into responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.password import MAX_PASSWORD_BYTES, hash_password, verify_password
from config.settings import Settings
from database.helpers import email_exists, get_user_by_username, insert_user, username_exists
from utils.errors import AuthError, ConflictError, ValidationError
from utils.schemas import PublicUser

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


async def register_user(
    session: AsyncSession,
    settings: Settings,
    username: str,
    password: str,
    email: str,
    full_name: str,
) -> Dict[str, Any]:
    """
    Create a user account.

    Uniqueness is checked up front so the caller gets a precise message;
    the unique constraints still catch a concurrent insert, which is
    reported as the same ``ConflictError``.
    """
    if any(_blank(v) for v in (username, password, email, full_name)):
        raise ValidationError(
            "Username, password, email, and full name are all required for registration."
        )
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long.")
    username, email, full_name = username.strip(), email.strip(), full_name.strip()

    if await username_exists(session, username):
        raise ConflictError("Username already exists. Please choose a different one.")
    if await email_exists(session, email):
        raise ConflictError("Email already registered. Please use a different email or log in.")

    try:
        user = await insert_user(
            session,
            username=username,
            email=email,
            full_name=full_name,
            password_hash=hash_password(password, rounds=settings.bcrypt_rounds),
        )
    except IntegrityError:
        await session.rollback()
        logger.info("Registration for %s lost a uniqueness race", username)
        raise ConflictError("Username or email already exists.")

    logger.info("Registered user %s (%s)", user.username, user.id)
    return {"user_id": user.id, "username": user.username}


async def login_user(
    session: AsyncSession,
    settings: Settings,
    username: str,
    password: str,
) -> Dict[str, Any]:
    """
    Check credentials and issue a token.

    An unknown username and a wrong password fail identically.
    """
    if _blank(username) or _blank(password):
        raise ValidationError("Username and password are required")

    username = username.strip()
    user = await get_user_by_username(session, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login for %r", username)
        raise AuthError(_INVALID_CREDENTIALS)

    token = create_token(user.id, user.username, settings)
    logger.info("Login: %s (%s)", user.username, user.id)

    return {
        "token": token,
        "user": PublicUser.model_validate(user),
    }
