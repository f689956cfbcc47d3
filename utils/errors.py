"""
Typed application errors.

Services raise these; ``api.middleware`` maps each one to its HTTP status
and a ``{"message": ...}`` body.
"""

from __future__ import annotations

from typing import Optional


class AppError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(AppError):
    status_code = 400
    message = "Invalid request"


class AuthError(AppError):
    status_code = 401
    message = "Authentication required"


class InvalidTokenError(AuthError):
    status_code = 403
    message = "Token is not valid or expired"


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


class ConflictError(AppError):
    status_code = 409
    message = "Resource already exists"


class InternalError(AppError):
    status_code = 500
    message = "Internal server error"
