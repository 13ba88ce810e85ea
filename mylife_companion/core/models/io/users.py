"""
User account I/O models for API requests and responses.

Preference payloads use the camelCase keys the web client sends; the database
columns behind them are snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mylife_companion.core.models.domain.enums import UserRole, UserStatus


class UserRead(BaseModel):
    """Public view of an account. Never includes the password hash."""

    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    role: str
    status: str
    last_login: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Schema for an administrator creating an account."""

    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)
    full_name: Optional[str] = Field(default=None, max_length=100)
    role: UserRole = UserRole.user
    status: UserStatus = UserStatus.active


class ProfileRead(UserRead):
    """Account merged with the profile extras kept on the preference row."""

    phone: str = ""
    school: str = ""
    grade: str = ""
    bio: str = ""


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    full_name: Optional[str] = Field(default=None, max_length=100)
    avatar: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=30)
    school: Optional[str] = Field(default=None, max_length=100)
    grade: Optional[str] = Field(default=None, max_length=30)
    bio: Optional[str] = None


class NotificationSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    email_reminders: bool = Field(default=True, alias="emailReminders")
    task_notifications: bool = Field(default=True, alias="taskNotifications")
    health_reminders: bool = Field(default=True, alias="healthReminders")
    emotional_support_messages: bool = Field(default=True, alias="emotionalSupportMessages")


class PrivacySettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    share_health_data: bool = Field(default=False, alias="shareHealthData")
    share_emotional_data: bool = Field(default=False, alias="shareEmotionalData")
    allow_parent_access: bool = Field(default=False, alias="allowParentAccess")
    allow_school_access: bool = Field(default=False, alias="allowSchoolAccess")


class AppearanceSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    dark_mode: bool = Field(default=False, alias="darkMode")
    color_theme: str = Field(default="blue", max_length=20, alias="colorTheme")


class AvatarUploadResponse(BaseModel):
    message: str
    avatar: str
