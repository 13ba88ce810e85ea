"""
Emotional support chat entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class SupportMessage(Base, table=True):
    """One message in a user's emotional support conversation.

    Table: support_messages
    """

    __tablename__ = "support_messages"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    message: str
    sender_type: str = Field(max_length=10, description="user or ai")

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"SupportMessage(id={self.id}, sender={self.sender_type}, user_id={self.user_id})"
