"""
Emotional support chat repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.support_messages import SupportMessage
from .base import UserScopedRepository


class SupportMessageRepository(UserScopedRepository[SupportMessage]):
    """Repository for support chat messages."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SupportMessage)

    async def add_exchange(self, user_message: SupportMessage, reply: SupportMessage) -> None:
        """Store a user message and the reply to it in one commit."""
        self.session.add(user_message)
        await self.session.flush()
        self.session.add(reply)
        await self.session.commit()
        await self.session.refresh(user_message)
        await self.session.refresh(reply)

    async def history(self, user_id: int, limit: int) -> List[SupportMessage]:
        """The ``limit`` most recent messages of a user, oldest first."""
        stmt = (
            select(SupportMessage)
            .where(SupportMessage.user_id == user_id)
            .order_by(SupportMessage.created_at.desc(), SupportMessage.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def clear(self, user_id: int) -> int:
        """Delete a user's whole conversation and return how many rows went."""
        result = await self.session.execute(sa_delete(SupportMessage).where(SupportMessage.user_id == user_id))
        await self.session.commit()
        return result.rowcount or 0
