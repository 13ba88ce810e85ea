"""
Calendar event and calendar category I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .common import UTCDatetime


class CalendarCategoryRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str


class CalendarCategoryRead(CalendarCategoryRef):
    user_id: int
    created_at: datetime
    updated_at: datetime


class CalendarCategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    color: str = Field(default="#2196F3", max_length=20)


class CalendarCategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    color: Optional[str] = Field(default=None, max_length=20)


class CalendarEventRead(BaseModel):
    """Schema for reading a calendar event, with its category when it has one."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    location: str
    start_time: datetime
    end_time: datetime
    all_day: bool
    reminder: Optional[int] = None
    category_id: Optional[int] = None
    category: Optional[CalendarCategoryRef] = None
    created_at: datetime
    updated_at: datetime


class CalendarEventCreate(BaseModel):
    """Schema for creating a calendar event."""

    title: str = Field(min_length=1, max_length=100)
    description: str = ""
    location: str = Field(default="", max_length=255)
    start_time: UTCDatetime
    end_time: UTCDatetime
    all_day: bool = False
    reminder: Optional[int] = Field(default=None, ge=0, description="Minutes before start_time")
    category_id: Optional[int] = None

    @model_validator(mode="after")
    def _check_order(self) -> "CalendarEventCreate":
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class CalendarEventUpdate(BaseModel):
    """Schema for updating a calendar event; omitted fields keep their value."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=255)
    start_time: Optional[UTCDatetime] = None
    end_time: Optional[UTCDatetime] = None
    all_day: Optional[bool] = None
    reminder: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None


class CalendarEventEnvelope(BaseModel):
    message: str
    event: CalendarEventRead


class CalendarCategoryEnvelope(BaseModel):
    message: str
    category: CalendarCategoryRead
