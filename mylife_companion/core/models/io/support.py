"""
Emotional support chat I/O models.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SupportMessageCreate(BaseModel):
    message: str = Field(max_length=2000)

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("message must not be empty")
        return value


class SupportMessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    message: str
    sender_type: str
    created_at: datetime


class SupportExchange(BaseModel):
    """A stored user message and the reply generated for it."""

    model_config = ConfigDict(populate_by_name=True)

    user_message: SupportMessageRead = Field(alias="userMessage")
    ai_message: SupportMessageRead = Field(alias="aiMessage")


class SupportHistoryCleared(BaseModel):
    message: str
    deleted: int
