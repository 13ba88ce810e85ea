"""
Calendar entity models.

General-purpose calendar events and the per-user categories that colour them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class CalendarCategory(Base, table=True):
    """User-defined calendar category.

    Table: calendar_categories
    """

    __tablename__ = "calendar_categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str = Field(max_length=50)
    color: str = Field(default="#2196F3", max_length=20)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"CalendarCategory(id={self.id}, name={self.name})"


class CalendarEventBase(Base):
    """Base fields for a calendar event."""

    title: str = Field(max_length=100)
    description: str = Field(default="")
    location: str = Field(default="", max_length=255)
    start_time: datetime = Field(index=True)
    end_time: datetime
    all_day: bool = Field(default=False)
    reminder: Optional[int] = Field(default=None, description="Minutes before start_time")
    category_id: Optional[int] = Field(default=None, foreign_key="calendar_categories.id")


class CalendarEvent(CalendarEventBase, table=True):
    """Persistent calendar event.

    Table: calendar_events
    """

    __tablename__ = "calendar_events"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"CalendarEvent(id={self.id}, title={self.title}, start={self.start_time})"
