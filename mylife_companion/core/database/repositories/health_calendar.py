"""
Health calendar event repository.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.health_calendar import HealthCalendarEvent
from ..entities.health_metrics import HealthMetric
from .base import UserScopedRepository


class HealthCalendarEventRepository(UserScopedRepository[HealthCalendarEvent]):
    """Repository for health calendar events."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HealthCalendarEvent)

    async def list_sorted(self, user_id: int) -> List[HealthCalendarEvent]:
        return await self.list_for_user(user_id, order_by=HealthCalendarEvent.start_time.asc())

    async def list_overlapping(self, user_id: int, start: datetime, end: datetime) -> List[HealthCalendarEvent]:
        """List a user's events overlapping the closed window ``[start, end]``."""
        stmt = (
            select(HealthCalendarEvent)
            .where(HealthCalendarEvent.user_id == user_id)
            .where(
                or_(
                    and_(HealthCalendarEvent.start_time >= start, HealthCalendarEvent.start_time <= end),
                    and_(HealthCalendarEvent.end_time >= start, HealthCalendarEvent.end_time <= end),
                    and_(HealthCalendarEvent.start_time <= start, HealthCalendarEvent.end_time >= end),
                )
            )
            .order_by(HealthCalendarEvent.start_time.asc(), HealthCalendarEvent.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_metric(self, user_id: int, metric_id: int) -> List[HealthCalendarEvent]:
        stmt = (
            select(HealthCalendarEvent)
            .where(HealthCalendarEvent.user_id == user_id, HealthCalendarEvent.health_metric_id == metric_id)
            .order_by(HealthCalendarEvent.start_time.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_category(self, user_id: int, category: str) -> List[HealthCalendarEvent]:
        stmt = (
            select(HealthCalendarEvent)
            .where(HealthCalendarEvent.user_id == user_id, HealthCalendarEvent.category == category)
            .order_by(HealthCalendarEvent.start_time.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_with_metric(
        self, event: HealthCalendarEvent, metric: Optional[HealthMetric]
    ) -> HealthCalendarEvent:
        """Persist an event and, when given, the metric it records, linking the two.

        Both rows are written in a single commit.

        Args:
            event: New event
            metric: New metric derived from the event, or None

        Returns:
            The stored event
        """
        if metric is not None:
            self.session.add(metric)
            await self.session.flush()
            event.health_metric_id = metric.id
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)
        return event

    async def delete_with_metric(self, event: HealthCalendarEvent) -> None:
        """Delete an event and the metric it is linked to, if any."""
        metric_id = event.health_metric_id
        await self.session.delete(event)
        await self.session.flush()
        if metric_id is not None:
            metric = await self.session.get(HealthMetric, metric_id)
            if metric is not None:
                await self.session.delete(metric)
        await self.session.commit()
