"""
Task entity models.

Tasks belong to a user and may be filed under one of that user's task
categories.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from mylife_companion.core.models.domain.enums import TaskPriority, TaskStatus

from ..base import Base, utc_now


class TaskCategory(Base, table=True):
    """User-defined grouping for tasks.

    Table: task_categories
    """

    __tablename__ = "task_categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str = Field(max_length=50)
    color: str = Field(default="#4CAF50", max_length=20)
    icon: str = Field(default="list", max_length=50)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"TaskCategory(id={self.id}, name={self.name})"


class TaskBase(Base):
    """Base fields for a task."""

    title: str = Field(max_length=100, description="Short task title")
    description: str = Field(default="", description="Free-form details")
    due_date: Optional[datetime] = Field(default=None, index=True)
    priority: str = Field(default=TaskPriority.medium.value, max_length=10)
    status: str = Field(default=TaskStatus.pending.value, max_length=20)
    category_id: Optional[int] = Field(default=None, foreign_key="task_categories.id")


class Task(TaskBase, table=True):
    """Persistent task.

    Table: tasks
    """

    __tablename__ = "tasks"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title={self.title}, status={self.status})"
