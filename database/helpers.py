"""
Database helper functions — user lookups and owner-scoped task queries.

Every task query filters on ``user_id`` as well as ``id``; callers never
touch a task row without naming its owner.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task, User


# ── Users ───────────────────────────────────────────────────────────


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def username_exists(session: AsyncSession, username: str) -> bool:
    result = await session.execute(select(User.id).where(User.username == username))
    return result.first() is not None


async def email_exists(session: AsyncSession, email: str) -> bool:
    result = await session.execute(select(User.id).where(User.email == email))
    return result.first() is not None


async def insert_user(
    session: AsyncSession,
    username: str,
    email: str,
    full_name: str,
    password_hash: str,
) -> User:
    """Add a ``User`` row and flush so its id is assigned.

    Raises ``sqlalchemy.exc.IntegrityError`` if a unique constraint fails.
    """
    user = User(
        username=username,
        email=email,
        full_name=full_name,
        password_hash=password_hash,
    )
    session.add(user)
    await session.flush()
    return user


# ── Tasks ───────────────────────────────────────────────────────────


async def list_tasks_for_owner(session: AsyncSession, user_id: int) -> List[Task]:
    """Return the owner's tasks, newest first."""
    result = await session.execute(
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(result.scalars().all())


async def insert_task(
    session: AsyncSession,
    user_id: int,
    title: str,
    description: Optional[str] = None,
) -> Task:
    task = Task(
        title=title,
        description=description,
        completed=False,
        user_id=user_id,
        created_at=datetime.now(timezone.utc),
    )
    session.add(task)
    await session.flush()
    return task


async def get_owned_task(session: AsyncSession, task_id: int, user_id: int) -> Optional[Task]:
    """Fetch a task only if it belongs to ``user_id``."""
    result = await session.execute(
        select(Task).where(Task.id == task_id, Task.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def update_owned_task(
    session: AsyncSession,
    task_id: int,
    user_id: int,
    values: Dict[str, Any],
) -> int:
    """Conditional UPDATE on (id, owner).  Returns the affected row count."""
    result = await session.execute(
        update(Task)
        .where(Task.id == task_id, Task.user_id == user_id)
        .values(**values)
    )
    return result.rowcount


async def delete_owned_task(session: AsyncSession, task_id: int, user_id: int) -> int:
    """Conditional DELETE on (id, owner).  Returns the affected row count."""
    result = await session.execute(
        delete(Task)
        .where(Task.id == task_id, Task.user_id == user_id)
    )
    return result.rowcount
