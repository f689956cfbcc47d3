"""
Task API routes — list, create, update, delete.

Route prefix: /tasks.  Every route requires a Bearer token.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import get_current_user
from auth.jwt import AuthenticatedUser
from database.session import get_db_session
from tasks.service import create_task, delete_task, list_tasks, update_task
from utils.schemas import TaskCreate, TaskOut, TaskUpdate

router = APIRouter(tags=["tasks"])


@router.get("", response_model=List[TaskOut])
async def get_tasks(
    session: AsyncSession = Depends(get_db_session),
    user: AuthenticatedUser = Depends(get_current_user),
) -> List[TaskOut]:
    """All tasks owned by the caller, newest first."""
    return await list_tasks(session, user)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def add_task(
    payload: TaskCreate,
    session: AsyncSession = Depends(get_db_session),
    user: AuthenticatedUser = Depends(get_current_user),
) -> TaskOut:
    return await create_task(session, user, payload.title, payload.description)


@router.put("/{task_id}", response_model=TaskOut)
async def edit_task(
    task_id: int,
    payload: TaskUpdate,
    session: AsyncSession = Depends(get_db_session),
    user: AuthenticatedUser = Depends(get_current_user),
) -> TaskOut:
    return await update_task(session, user, task_id, payload.model_dump(exclude_unset=True))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_task(
    task_id: int,
    session: AsyncSession = Depends(get_db_session),
    user: AuthenticatedUser = Depends(get_current_user),
) -> Response:
    await delete_task(session, user, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
