"""Domain enums for MyLife Companion models."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Authorization role of an account."""

    user = "user"
    admin = "admin"


class UserStatus(str, Enum):
    """Lifecycle status of an account. Only active accounts may sign in."""

    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    canceled = "canceled"


class MetricType(str, Enum):
    """Kinds of health metric a user can record.

    Values keep the camelCase spelling the web client sends.
    """

    weight = "weight"
    height = "height"
    blood_pressure = "bloodPressure"
    heart_rate = "heartRate"
    blood_sugar = "bloodSugar"
    sleep = "sleep"
    exercise = "exercise"
    water = "water"
    diet = "diet"
    medication = "medication"
    other = "other"


class HealthEventCategory(str, Enum):
    """Category of a health calendar event."""

    medication = "medication"
    appointment = "appointment"
    exercise = "exercise"
    diet = "diet"
    measurement = "measurement"
    other = "other"


class RecurrenceFrequency(str, Enum):
    none = "none"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"


class CalendarReminderType(str, Enum):
    notification = "notification"
    email = "email"
    sms = "sms"


class SenderType(str, Enum):
    """Author of a support chat message."""

    user = "user"
    ai = "ai"
