"""
Auth API routes — register, login.

Route prefix: /auth
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import get_settings
from auth.service import login_user, register_user
from config.settings import Settings
from database.session import get_db_session
from utils.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register a new user."""
    created = await register_user(
        session,
        settings,
        username=req.username,
        password=req.password,
        email=req.email,
        full_name=req.full_name,
    )
    return {"message": "User registered successfully! You can now log in.", **created}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Login with username + password."""
    result = await login_user(session, settings, username=req.username, password=req.password)
    return {"message": "Logged in successfully!", **result}
