"""
Repository layer.

One repository per table; ``SqlRepoBundle`` groups them around a session.
"""

from .base import BaseRepository, QueryBuilder, UserScopedRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .calendar import CalendarCategoryRepository, CalendarEventRepository
from .health_calendar import HealthCalendarEventRepository
from .health_metrics import HealthMetricRepository
from .support_messages import SupportMessageRepository
from .tasks import TaskCategoryRepository, TaskFilters, TaskRepository
from .users import UserPreferenceRepository, UserRepository

__all__ = [
    "BaseRepository",
    "CalendarCategoryRepository",
    "CalendarEventRepository",
    "HealthCalendarEventRepository",
    "HealthMetricRepository",
    "QueryBuilder",
    "SqlRepoBundle",
    "SupportMessageRepository",
    "TaskCategoryRepository",
    "TaskFilters",
    "TaskRepository",
    "UserPreferenceRepository",
    "UserRepository",
    "UserScopedRepository",
    "build_sql_repos_from_session",
]
