"""
FastAPI dependencies for authentication.

Provides ``get_settings`` and ``get_current_user`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from auth.jwt import AuthenticatedUser, verify_token
from config.settings import Settings
from utils.errors import AuthError

_BEARER_PREFIX = "Bearer "


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Extract and verify the Bearer token from the Authorization header.

    A missing header or a non-Bearer scheme is a 401; a token that fails
    verification is a 403 (raised by ``verify_token``).
    """
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise AuthError("No token, authorization denied or invalid token format")
    token = authorization[len(_BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("No token, authorization denied or invalid token format")
    return verify_token(token, settings)
