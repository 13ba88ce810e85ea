"""
User account entity models.

This module contains the account table and the per-user preference row that
holds profile extras, notification and privacy switches, and theme settings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from mylife_companion.core.models.domain.enums import UserRole, UserStatus

from ..base import Base, utc_now


class UserBase(Base):
    """Base fields for a user account."""

    username: str = Field(max_length=50, unique=True, index=True, description="Unique login name")
    email: str = Field(max_length=100, unique=True, index=True, description="Unique email address")
    full_name: Optional[str] = Field(default=None, max_length=100, description="Display name")
    avatar: Optional[str] = Field(default=None, max_length=255, description="Avatar file name")
    role: str = Field(default=UserRole.user.value, max_length=20, description="user or admin")
    status: str = Field(default=UserStatus.active.value, max_length=20, description="active, inactive or suspended")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(max_length=255, description="bcrypt hash of the password")
    last_login: Optional[datetime] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin.value

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.active.value

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.role})"


class UserPreference(Base, table=True):
    """Preferences attached one-to-one to a user.

    The row is optional; readers fall back to the column defaults when it is
    missing.

    Table: user_preferences
    """

    __tablename__ = "user_preferences"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", unique=True, index=True)

    # Profile extras
    phone: Optional[str] = Field(default=None, max_length=30)
    school: Optional[str] = Field(default=None, max_length=100)
    grade: Optional[str] = Field(default=None, max_length=30)
    bio: Optional[str] = Field(default=None)

    # Notifications
    email_reminders: bool = Field(default=True)
    task_notifications: bool = Field(default=True)
    health_reminders: bool = Field(default=True)
    emotional_support_messages: bool = Field(default=True)

    # Privacy
    share_health_data: bool = Field(default=False)
    share_emotional_data: bool = Field(default=False)
    allow_parent_access: bool = Field(default=False)
    allow_school_access: bool = Field(default=False)

    # Appearance
    dark_mode: bool = Field(default=False)
    color_theme: str = Field(default="blue", max_length=20)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"UserPreference(id={self.id}, user_id={self.user_id})"
