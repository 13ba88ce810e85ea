"""Domain vocabulary for MyLife Companion."""

from .enums import (
    CalendarReminderType,
    HealthEventCategory,
    MetricType,
    RecurrenceFrequency,
    SenderType,
    TaskPriority,
    TaskStatus,
    UserRole,
    UserStatus,
)

__all__ = [
    "CalendarReminderType",
    "HealthEventCategory",
    "MetricType",
    "RecurrenceFrequency",
    "SenderType",
    "TaskPriority",
    "TaskStatus",
    "UserRole",
    "UserStatus",
]
