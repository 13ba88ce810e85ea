"""
Task and task category I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mylife_companion.core.models.domain.enums import TaskPriority, TaskStatus

from .common import UTCDatetime


class TaskCategoryRef(BaseModel):
    """Category summary embedded in task responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    icon: str


class TaskCategoryRead(TaskCategoryRef):
    user_id: int
    created_at: datetime
    updated_at: datetime


class TaskCategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    color: str = Field(default="#4CAF50", max_length=20)
    icon: str = Field(default="list", max_length=50)


class TaskCategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    color: Optional[str] = Field(default=None, max_length=20)
    icon: Optional[str] = Field(default=None, max_length=50)


class TaskRead(BaseModel):
    """Schema for reading a task, with its category when it has one."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    due_date: Optional[datetime] = None
    priority: str
    status: str
    category_id: Optional[int] = None
    category: Optional[TaskCategoryRef] = None
    created_at: datetime
    updated_at: datetime


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    title: str = Field(min_length=1, max_length=100, description="Short task title")
    description: str = Field(default="", description="Free-form details")
    due_date: Optional[UTCDatetime] = None
    priority: TaskPriority = TaskPriority.medium
    status: TaskStatus = TaskStatus.pending
    category_id: Optional[int] = None


class TaskUpdate(BaseModel):
    """Schema for updating a task; only provided fields change."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    due_date: Optional[UTCDatetime] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    category_id: Optional[int] = None


class StatusCount(BaseModel):
    status: str
    count: int


class PriorityCount(BaseModel):
    priority: str
    count: int


class TaskStats(BaseModel):
    """Task counts for the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    status_stats: List[StatusCount] = Field(alias="statusStats")
    priority_stats: List[PriorityCount] = Field(alias="priorityStats")
    upcoming: int = Field(description="Open tasks due within the next 7 days")
    overdue: int = Field(description="Open tasks past their due date")
