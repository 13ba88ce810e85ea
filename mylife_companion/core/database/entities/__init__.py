"""
Database entity models.

Modules:
- users: Accounts and per-user preferences
- tasks: Tasks and task categories
- calendar: Calendar events and calendar categories
- health_metrics: Health measurements
- health_calendar: Health calendar events linked to measurements
- support_messages: Emotional support chat history
"""

from . import (
    calendar,
    health_calendar,
    health_metrics,
    support_messages,
    tasks,
    users,
)
from .calendar import CalendarCategory, CalendarEvent
from .health_calendar import HealthCalendarEvent
from .health_metrics import HealthMetric
from .support_messages import SupportMessage
from .tasks import Task, TaskCategory
from .users import User, UserPreference

__all__ = [
    "CalendarCategory",
    "CalendarEvent",
    "HealthCalendarEvent",
    "HealthMetric",
    "SupportMessage",
    "Task",
    "TaskCategory",
    "User",
    "UserPreference",
    "calendar",
    "health_calendar",
    "health_metrics",
    "support_messages",
    "tasks",
    "users",
]
