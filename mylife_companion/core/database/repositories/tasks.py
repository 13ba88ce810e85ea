"""
Task and task category repositories.

Task reads join the owning category so that callers get both in one query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from mylife_companion.core.models.domain.enums import TaskStatus

from ..entities.tasks import Task, TaskCategory
from .base import UserScopedRepository

TaskRow = Tuple[Task, Optional[TaskCategory]]


@dataclass(frozen=True)
class TaskFilters:
    """Optional criteria for listing a user's tasks."""

    status: Optional[str] = None
    category_id: Optional[int] = None
    priority: Optional[str] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    search: Optional[str] = None


class TaskCategoryRepository(UserScopedRepository[TaskCategory]):
    """Repository for task categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TaskCategory)

    async def count_tasks(self, category_id: int) -> int:
        """Number of tasks filed under the category."""
        stmt = select(func.count()).select_from(Task).where(Task.category_id == category_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class TaskRepository(UserScopedRepository[Task]):
    """Repository for task data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    def _with_category(self):
        return select(Task, TaskCategory).outerjoin(TaskCategory, Task.category_id == TaskCategory.id)

    async def get_with_category(self, task_id: int, user_id: int) -> Optional[TaskRow]:
        """Get a user's task and its category.

        Args:
            task_id: Task ID
            user_id: Owner to match

        Returns:
            ``(task, category)`` tuple, or None if not found for this user
        """
        stmt = self._with_category().where(Task.id == task_id, Task.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def search(self, user_id: int, filters: Optional[TaskFilters] = None) -> List[TaskRow]:
        """List a user's tasks with their categories, ordered by due date.

        Args:
            user_id: Owner to match
            filters: Optional status, category, priority, date range and text criteria

        Returns:
            List of ``(task, category)`` tuples
        """
        filters = filters or TaskFilters()
        stmt = self._with_category().where(Task.user_id == user_id)
        if filters.status:
            stmt = stmt.where(Task.status == filters.status)
        if filters.category_id is not None:
            stmt = stmt.where(Task.category_id == filters.category_id)
        if filters.priority:
            stmt = stmt.where(Task.priority == filters.priority)
        if filters.from_date is not None:
            stmt = stmt.where(Task.due_date >= filters.from_date)
        if filters.to_date is not None:
            stmt = stmt.where(Task.due_date <= filters.to_date)
        if filters.search:
            pattern = f"%{filters.search}%"
            stmt = stmt.where(or_(Task.title.ilike(pattern), Task.description.ilike(pattern)))
        stmt = stmt.order_by(Task.due_date.asc(), Task.id.asc())

        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def count_by(self, user_id: int, column) -> Dict[str, int]:
        """Count a user's tasks grouped by ``column`` (status or priority)."""
        stmt = select(column, func.count(Task.id)).where(Task.user_id == user_id).group_by(column)
        result = await self.session.execute(stmt)
        return {key: int(count) for key, count in result.all()}

    async def count_open_due_between(self, user_id: int, start: datetime, end: datetime) -> int:
        """Count tasks not yet completed whose due date falls in ``[start, end]``."""
        stmt = (
            select(func.count(Task.id))
            .where(Task.user_id == user_id)
            .where(Task.status != TaskStatus.completed.value)
            .where(Task.due_date >= start, Task.due_date <= end)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def count_open_due_before(self, user_id: int, moment: datetime) -> int:
        """Count tasks not yet completed whose due date is before ``moment``."""
        stmt = (
            select(func.count(Task.id))
            .where(Task.user_id == user_id)
            .where(Task.status != TaskStatus.completed.value)
            .where(Task.due_date < moment)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
