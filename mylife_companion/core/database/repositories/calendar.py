"""
Calendar event and calendar category repositories.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.calendar import CalendarCategory, CalendarEvent
from .base import UserScopedRepository

EventRow = Tuple[CalendarEvent, Optional[CalendarCategory]]


class CalendarCategoryRepository(UserScopedRepository[CalendarCategory]):
    """Repository for calendar categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CalendarCategory)

    async def list_sorted(self, user_id: int) -> List[CalendarCategory]:
        return await self.list_for_user(user_id, order_by=CalendarCategory.name.asc())

    async def count_events(self, category_id: int) -> int:
        """Number of events that use the category."""
        stmt = select(func.count()).select_from(CalendarEvent).where(CalendarEvent.category_id == category_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class CalendarEventRepository(UserScopedRepository[CalendarEvent]):
    """Repository for calendar events."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CalendarEvent)

    def _with_category(self):
        return select(CalendarEvent, CalendarCategory).outerjoin(
            CalendarCategory, CalendarEvent.category_id == CalendarCategory.id
        )

    async def get_with_category(self, event_id: int, user_id: int) -> Optional[EventRow]:
        stmt = self._with_category().where(CalendarEvent.id == event_id, CalendarEvent.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_with_categories(self, user_id: int) -> List[EventRow]:
        """List all of a user's events with their categories, ordered by start time."""
        stmt = (
            self._with_category()
            .where(CalendarEvent.user_id == user_id)
            .order_by(CalendarEvent.start_time.asc(), CalendarEvent.id.asc())
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def list_overlapping(self, user_id: int, start: datetime, end: datetime) -> List[EventRow]:
        """List a user's events that overlap the closed window ``[start, end]``.

        An event overlaps when it starts inside the window, ends inside it, or
        starts before and ends after it.

        Args:
            user_id: Owner to match
            start: Window start
            end: Window end

        Returns:
            List of ``(event, category)`` tuples ordered by start time
        """
        stmt = (
            self._with_category()
            .where(CalendarEvent.user_id == user_id)
            .where(
                or_(
                    and_(CalendarEvent.start_time >= start, CalendarEvent.start_time <= end),
                    and_(CalendarEvent.end_time >= start, CalendarEvent.end_time <= end),
                    and_(CalendarEvent.start_time <= start, CalendarEvent.end_time >= end),
                )
            )
            .order_by(CalendarEvent.start_time.asc(), CalendarEvent.id.asc())
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]
