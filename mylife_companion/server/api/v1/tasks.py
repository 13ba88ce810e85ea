"""
Task Management Endpoints.

CRUD for the signed-in user's tasks plus the dashboard statistics. Every
query is scoped to the caller, so other users' tasks read as missing.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from mylife_companion.core.database import apply_changes, utc_now
from mylife_companion.core.database.entities.tasks import Task, TaskCategory
from mylife_companion.core.database.repositories import TaskFilters
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.domain.enums import TaskPriority, TaskStatus
from mylife_companion.core.models.io import (
    MessageResponse,
    PriorityCount,
    StatusCount,
    TaskCategoryRef,
    TaskCreate,
    TaskRead,
    TaskStats,
    TaskUpdate,
)
from mylife_companion.core.models.io.common import to_naive_utc
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter()

UPCOMING_WINDOW = timedelta(days=7)


def _task_read(task: Task, category: Optional[TaskCategory]) -> TaskRead:
    read = TaskRead.model_validate(task)
    read.category = TaskCategoryRef.model_validate(category) if category is not None else None
    return read


async def _ensure_category(repos: ReposDep, category_id: Optional[int], user_id: int) -> None:
    if category_id is None:
        return
    if await repos.task_categories.get_for_user(category_id, user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a task for the signed-in user.",
    responses={
        400: {"description": "Title missing or a field is invalid"},
        404: {"description": "Category not found"},
    },
)
async def create_task(payload: TaskCreate, user: CurrentUserDep, repos: ReposDep) -> TaskRead:
    """
    Create a new task.

    - **title**: Required
    - **priority**: ``low``, ``medium`` (default) or ``high``
    - **status**: ``pending`` (default), ``in_progress``, ``completed`` or ``canceled``
    - **category_id**: One of the caller's task categories
    """
    await _ensure_category(repos, payload.category_id, user.id)

    task = Task(
        user_id=user.id,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        priority=payload.priority.value,
        status=payload.status.value,
        category_id=payload.category_id,
    )
    task = await repos.tasks.create(task)
    logger.debug(f"Created task {task.id} for user {user.id}")

    row = await repos.tasks.get_with_category(task.id, user.id)
    return _task_read(*row) if row else _task_read(task, None)


@router.get(
    "",
    response_model=List[TaskRead],
    summary="List Tasks",
    description="List the signed-in user's tasks ordered by due date, optionally filtered.",
)
async def list_tasks(
    user: CurrentUserDep,
    repos: ReposDep,
    task_status: Optional[TaskStatus] = Query(default=None, alias="status"),
    category_id: Optional[int] = Query(default=None),
    priority: Optional[TaskPriority] = Query(default=None),
    from_date: Optional[datetime] = Query(default=None),
    to_date: Optional[datetime] = Query(default=None),
    search: Optional[str] = Query(default=None, description="Case-insensitive text in title or description"),
) -> List[TaskRead]:
    filters = TaskFilters(
        status=task_status.value if task_status else None,
        category_id=category_id,
        priority=priority.value if priority else None,
        from_date=to_naive_utc(from_date),
        to_date=to_naive_utc(to_date),
        search=search or None,
    )
    rows = await repos.tasks.search(user.id, filters)
    return [_task_read(task, category) for task, category in rows]


@router.get(
    "/stats",
    response_model=TaskStats,
    summary="Task Statistics",
    description="Counts by status and priority, plus open tasks due soon or already overdue.",
)
async def get_task_stats(user: CurrentUserDep, repos: ReposDep) -> TaskStats:
    now = utc_now()
    by_status = await repos.tasks.count_by(user.id, Task.status)
    by_priority = await repos.tasks.count_by(user.id, Task.priority)

    return TaskStats(
        status_stats=[StatusCount(status=key, count=count) for key, count in sorted(by_status.items())],
        priority_stats=[PriorityCount(priority=key, count=count) for key, count in sorted(by_priority.items())],
        upcoming=await repos.tasks.count_open_due_between(user.id, now, now + UPCOMING_WINDOW),
        overdue=await repos.tasks.count_open_due_before(user.id, now),
    )


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get Task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(task_id: int, user: CurrentUserDep, repos: ReposDep) -> TaskRead:
    row = await repos.tasks.get_with_category(task_id, user.id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return _task_read(*row)


@router.put(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Update Task",
    description="Change any task field. Omitted fields keep their value.",
    responses={404: {"description": "Task or category not found"}},
)
async def update_task(task_id: int, payload: TaskUpdate, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    task = await repos.tasks.get_for_user(task_id, user.id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    changes = payload.model_dump(exclude_unset=True)
    if "category_id" in changes:
        await _ensure_category(repos, changes["category_id"], user.id)
    apply_changes(task, changes)

    await repos.tasks.update(task)
    return MessageResponse(message="Task updated successfully")


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete Task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(task_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    task = await repos.tasks.get_for_user(task_id, user.id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    await repos.tasks.delete(task.id)
    return MessageResponse(message="Task deleted successfully")
