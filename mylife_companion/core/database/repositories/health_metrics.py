"""
Health metric repository.

Besides plain CRUD this serves the paginated history, date-range and per-type
queries behind the health dashboards.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.health_calendar import HealthCalendarEvent
from ..entities.health_metrics import HealthMetric
from .base import UserScopedRepository


class HealthMetricRepository(UserScopedRepository[HealthMetric]):
    """Repository for health metric data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HealthMetric)

    async def page(
        self,
        user_id: int,
        limit: int,
        offset: int,
        metric_type: Optional[str] = None,
    ) -> Tuple[int, List[HealthMetric]]:
        """Fetch one page of a user's metrics, newest first.

        Args:
            user_id: Owner to match
            limit: Page size
            offset: Records to skip
            metric_type: Optional type to restrict to

        Returns:
            ``(total matching rows, metrics on this page)``
        """
        filters = {"type": metric_type} if metric_type else None
        total = await self.count_for_user(user_id, filters)

        stmt = select(HealthMetric).where(HealthMetric.user_id == user_id)
        if metric_type:
            stmt = stmt.where(HealthMetric.type == metric_type)
        stmt = (
            stmt.order_by(HealthMetric.created_at.desc(), HealthMetric.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return total, list(result.scalars().all())

    async def list_by_date(
        self,
        user_id: int,
        metric_type: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        ascending: bool = False,
    ) -> List[HealthMetric]:
        """List a user's metrics ordered by measurement date.

        The date range is applied only when both ``start`` and ``end`` are given.

        Args:
            user_id: Owner to match
            metric_type: Optional type to restrict to
            start: Inclusive range start
            end: Inclusive range end
            ascending: Oldest first instead of newest first

        Returns:
            List of HealthMetric instances
        """
        stmt = select(HealthMetric).where(HealthMetric.user_id == user_id)
        if metric_type:
            stmt = stmt.where(HealthMetric.type == metric_type)
        if start is not None and end is not None:
            stmt = stmt.where(HealthMetric.date >= start, HealthMetric.date <= end)
        if ascending:
            stmt = stmt.order_by(HealthMetric.date.asc(), HealthMetric.id.asc())
        else:
            stmt = stmt.order_by(HealthMetric.date.desc(), HealthMetric.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def created_since(self, user_id: int, since: datetime) -> List[HealthMetric]:
        """List metrics recorded at or after ``since``, newest first."""
        stmt = (
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id, HealthMetric.created_at >= since)
            .order_by(HealthMetric.created_at.desc(), HealthMetric.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, metric_id: int) -> bool:
        """Delete a metric, detaching any health calendar events that point at it.

        Args:
            metric_id: Metric ID to delete

        Returns:
            True if deleted, False if not found
        """
        metric = await self.get_by_id(metric_id)
        if not metric:
            return False
        await self.session.execute(
            sa_update(HealthCalendarEvent)
            .where(HealthCalendarEvent.health_metric_id == metric_id)
            .values(health_metric_id=None)
        )
        await self.session.delete(metric)
        await self.session.commit()
        return True
