"""
Health calendar entity model.

Health calendar events may carry a metric value, in which case they are linked
to the HealthMetric row recorded for it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from mylife_companion.core.models.domain.enums import (
    CalendarReminderType,
    HealthEventCategory,
    RecurrenceFrequency,
)

from ..base import Base, utc_now


class HealthCalendarEventBase(Base):
    """Base fields for a health calendar event."""

    title: str = Field(max_length=100)
    description: str = Field(default="")
    start_time: datetime = Field(index=True)
    end_time: datetime
    category: str = Field(default=HealthEventCategory.other.value, max_length=20, index=True)
    color: str = Field(default="#3788d8", max_length=20)
    all_day: bool = Field(default=False)
    metric_value: Optional[float] = Field(default=None)
    recurrence_frequency: str = Field(default=RecurrenceFrequency.none.value, max_length=10)
    recurrence_interval: int = Field(default=1)
    recurrence_end_date: Optional[datetime] = Field(default=None)
    reminder_time: Optional[int] = Field(default=None, description="Minutes before start_time")
    reminder_type: str = Field(default=CalendarReminderType.notification.value, max_length=20)


class HealthCalendarEvent(HealthCalendarEventBase, table=True):
    """Persistent health calendar event.

    Table: health_calendar_events
    """

    __tablename__ = "health_calendar_events"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    health_metric_id: Optional[int] = Field(default=None, foreign_key="health_metrics.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"HealthCalendarEvent(id={self.id}, title={self.title}, category={self.category})"
