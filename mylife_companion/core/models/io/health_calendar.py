"""
Health calendar I/O models for API requests and responses.

Request bodies accept both the camelCase keys the web client sends and the
snake_case column names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mylife_companion.core.models.domain.enums import (
    CalendarReminderType,
    HealthEventCategory,
    RecurrenceFrequency,
)

from .common import UTCDatetime


class HealthCalendarEventRead(BaseModel):
    """Schema for reading a health calendar event."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    category: str
    color: str
    all_day: bool
    health_metric_id: Optional[int] = None
    metric_value: Optional[float] = None
    recurrence_frequency: str
    recurrence_interval: int
    recurrence_end_date: Optional[datetime] = None
    reminder_time: Optional[int] = None
    reminder_type: str
    created_at: datetime
    updated_at: datetime


class HealthCalendarEventCreate(BaseModel):
    """Schema for creating a health calendar event."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=100)
    description: str = ""
    start_time: UTCDatetime = Field(alias="startTime")
    end_time: UTCDatetime = Field(alias="endTime")
    category: HealthEventCategory = HealthEventCategory.other
    color: str = Field(default="#3788d8", max_length=20)
    all_day: bool = Field(default=False, alias="allDay")
    metric_value: Optional[float] = Field(default=None, alias="metricValue")
    recurrence_frequency: RecurrenceFrequency = Field(default=RecurrenceFrequency.none, alias="recurrenceFrequency")
    recurrence_interval: int = Field(default=1, ge=1, alias="recurrenceInterval")
    recurrence_end_date: Optional[UTCDatetime] = Field(default=None, alias="recurrenceEndDate")
    reminder_time: Optional[int] = Field(default=None, ge=0, alias="reminderTime")
    reminder_type: CalendarReminderType = Field(default=CalendarReminderType.notification, alias="reminderType")

    @model_validator(mode="after")
    def _check_order(self) -> "HealthCalendarEventCreate":
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class HealthCalendarEventUpdate(BaseModel):
    """Schema for updating a health calendar event; omitted fields keep their value."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    start_time: Optional[UTCDatetime] = Field(default=None, alias="startTime")
    end_time: Optional[UTCDatetime] = Field(default=None, alias="endTime")
    category: Optional[HealthEventCategory] = None
    color: Optional[str] = Field(default=None, max_length=20)
    all_day: Optional[bool] = Field(default=None, alias="allDay")
    metric_value: Optional[float] = Field(default=None, alias="metricValue")
    recurrence_frequency: Optional[RecurrenceFrequency] = Field(default=None, alias="recurrenceFrequency")
    recurrence_interval: Optional[int] = Field(default=None, ge=1, alias="recurrenceInterval")
    recurrence_end_date: Optional[UTCDatetime] = Field(default=None, alias="recurrenceEndDate")
    reminder_time: Optional[int] = Field(default=None, ge=0, alias="reminderTime")
    reminder_type: Optional[CalendarReminderType] = Field(default=None, alias="reminderType")
