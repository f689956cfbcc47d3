"""
Task operations, each scoped to the authenticated user.

A task that exists but belongs to someone else is reported exactly like a
task that does not exist (``NotFoundError``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import AuthenticatedUser
from database.helpers import (
    delete_owned_task,
    get_owned_task,
    insert_task,
    list_tasks_for_owner,
    update_owned_task,
)
from utils.errors import AuthError, InternalError, NotFoundError, ValidationError
from utils.schemas import TaskOut

logger = logging.getLogger(__name__)

_NOT_FOUND = "Task not found or not authorized"
_UPDATABLE_FIELDS = ("title", "description", "completed")


def _require_identity(user: Optional[AuthenticatedUser]) -> int:
    if user is None:
        raise AuthError()
    return user.user_id


def _clean_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Task title is required")
    return title.strip()


async def list_tasks(session: AsyncSession, user: Optional[AuthenticatedUser]) -> List[TaskOut]:
    user_id = _require_identity(user)
    rows = await list_tasks_for_owner(session, user_id)
    return [TaskOut.model_validate(row) for row in rows]


async def create_task(
    session: AsyncSession,
    user: Optional[AuthenticatedUser],
    title: Any,
    description: Optional[str] = None,
) -> TaskOut:
    user_id = _require_identity(user)
    task = await insert_task(session, user_id, _clean_title(title), description)
    logger.info("Task %s created by user %s", task.id, user_id)
    return TaskOut.model_validate(task)


async def update_task(
    session: AsyncSession,
    user: Optional[AuthenticatedUser],
    task_id: int,
    changes: Dict[str, Any],
) -> TaskOut:
    """
    Apply a partial update.

    ``changes`` holds only the fields the client sent; anything absent keeps
    its stored value.  ``created_at`` and ``user_id`` are never written.
    """
    user_id = _require_identity(user)

    existing = await get_owned_task(session, task_id, user_id)
    if existing is None:
        raise NotFoundError(_NOT_FOUND)

    values = {k: v for k, v in changes.items() if k in _UPDATABLE_FIELDS}
    if "title" in values:
        values["title"] = _clean_title(values["title"])
    if "completed" in values and not isinstance(values["completed"], bool):
        raise ValidationError("completed must be true or false")

    merged = {
        "id": existing.id,
        "title": existing.title,
        "description": existing.description,
        "completed": existing.completed,
        "user_id": existing.user_id,
        "created_at": existing.created_at,
    }
    merged.update(values)

    affected = await update_owned_task(
        session,
        task_id,
        user_id,
        {
            "title": merged["title"],
            "description": merged["description"],
            "completed": merged["completed"],
        },
    )
    if affected == 0:
        logger.error("Task %s vanished between fetch and update (user %s)", task_id, user_id)
        raise InternalError("Failed to update task")

    logger.info("Task %s updated by user %s: %s", task_id, user_id, sorted(values))
    return TaskOut.model_validate(merged)


async def delete_task(
    session: AsyncSession,
    user: Optional[AuthenticatedUser],
    task_id: int,
) -> None:
    user_id = _require_identity(user)
    if await delete_owned_task(session, task_id, user_id) == 0:
        raise NotFoundError(_NOT_FOUND)
    logger.info("Task %s deleted by user %s", task_id, user_id)
