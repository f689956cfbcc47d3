"""
Pydantic schemas for the auth and task APIs.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    username: str = Field(..., max_length=64)
    password: str = Field(..., max_length=72)
    email: str = Field(..., max_length=255)
    full_name: str = Field(..., max_length=128)


class RegisterResponse(BaseModel):
    message: str
    user_id: int = Field(..., serialization_alias="userId")
    username: str


class LoginRequest(BaseModel):
    username: str
    password: str


class PublicUser(BaseModel):
    """What a client may see about a user.  Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    full_name: str


class LoginResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


# ═══════════════════════════════════════════════════════════════════════════════
# Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class TaskCreate(BaseModel):
    title: str = Field(..., max_length=255)
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    """
    Partial update.  Only the fields present in the request body are
    applied; see ``model_dump(exclude_unset=True)``.
    """

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    completed: Optional[bool] = None


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    user_id: int
    created_at: datetime
