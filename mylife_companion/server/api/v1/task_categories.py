"""
Task Category Endpoints.

Users file their tasks under categories they define themselves.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from mylife_companion.core.database import apply_changes
from mylife_companion.core.database.entities.tasks import TaskCategory
from mylife_companion.core.models.io import (
    MessageResponse,
    TaskCategoryCreate,
    TaskCategoryRead,
    TaskCategoryUpdate,
)
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep

router = APIRouter()


@router.get("", response_model=List[TaskCategoryRead], summary="List Task Categories")
async def list_task_categories(user: CurrentUserDep, repos: ReposDep) -> List[TaskCategoryRead]:
    categories = await repos.task_categories.list_for_user(user.id, order_by=TaskCategory.name)
    return [TaskCategoryRead.model_validate(category) for category in categories]


@router.post(
    "",
    response_model=TaskCategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task Category",
    responses={400: {"description": "Name missing"}},
)
async def create_task_category(
    payload: TaskCategoryCreate, user: CurrentUserDep, repos: ReposDep
) -> TaskCategoryRead:
    category = TaskCategory(user_id=user.id, **payload.model_dump())
    category = await repos.task_categories.create(category)
    return TaskCategoryRead.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=TaskCategoryRead,
    summary="Update Task Category",
    responses={404: {"description": "Category not found"}},
)
async def update_task_category(
    category_id: int, payload: TaskCategoryUpdate, user: CurrentUserDep, repos: ReposDep
) -> TaskCategoryRead:
    category = await repos.task_categories.get_for_user(category_id, user.id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    apply_changes(category, payload.model_dump(exclude_unset=True))
    category = await repos.task_categories.update(category)
    return TaskCategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete Task Category",
    description="Delete a category. Categories still holding tasks cannot be deleted.",
    responses={
        400: {"description": "Category still has tasks"},
        404: {"description": "Category not found"},
    },
)
async def delete_task_category(category_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    category = await repos.task_categories.get_for_user(category_id, user.id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    if await repos.task_categories.count_tasks(category_id) > 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete category with tasks. Please reassign or delete the tasks first.",
        )
    await repos.task_categories.delete(category_id)
    return MessageResponse(message="Category deleted successfully")
