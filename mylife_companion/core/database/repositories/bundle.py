"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
bound to one session, so a request handler can reach every table through a
single dependency.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .calendar import CalendarCategoryRepository, CalendarEventRepository
from .health_calendar import HealthCalendarEventRepository
from .health_metrics import HealthMetricRepository
from .support_messages import SupportMessageRepository
from .tasks import TaskCategoryRepository, TaskRepository
from .users import UserPreferenceRepository, UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    preferences: UserPreferenceRepository
    tasks: TaskRepository
    task_categories: TaskCategoryRepository
    calendar_events: CalendarEventRepository
    calendar_categories: CalendarCategoryRepository
    health_metrics: HealthMetricRepository
    health_events: HealthCalendarEventRepository
    support_messages: SupportMessageRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        preferences=UserPreferenceRepository(session),
        tasks=TaskRepository(session),
        task_categories=TaskCategoryRepository(session),
        calendar_events=CalendarEventRepository(session),
        calendar_categories=CalendarCategoryRepository(session),
        health_metrics=HealthMetricRepository(session),
        health_events=HealthCalendarEventRepository(session),
        support_messages=SupportMessageRepository(session),
    )
