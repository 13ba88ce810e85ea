"""
Health metric and health calendar synchronisation rules.

Recording a metric drops a matching entry onto the health calendar, and a
calendar entry that carries a value records the matching metric. The two
directions use different category tables, kept here side by side.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from mylife_companion.core.database.base import utc_now
from mylife_companion.core.database.entities.health_calendar import HealthCalendarEvent
from mylife_companion.core.database.entities.health_metrics import HealthMetric
from mylife_companion.core.models.domain.enums import (
    CalendarReminderType,
    HealthEventCategory,
    MetricType,
    RecurrenceFrequency,
)

METRIC_EVENT_DURATION = timedelta(minutes=30)
METRIC_EVENT_COLOR = "#3788d8"

# metric type -> calendar category
METRIC_TO_EVENT_CATEGORY: Dict[str, str] = {
    MetricType.weight.value: HealthEventCategory.measurement.value,
    MetricType.height.value: HealthEventCategory.measurement.value,
    MetricType.blood_pressure.value: HealthEventCategory.measurement.value,
    MetricType.heart_rate.value: HealthEventCategory.measurement.value,
    MetricType.blood_sugar.value: HealthEventCategory.measurement.value,
    MetricType.sleep.value: HealthEventCategory.other.value,
    MetricType.exercise.value: HealthEventCategory.exercise.value,
    MetricType.water.value: HealthEventCategory.diet.value,
    MetricType.diet.value: HealthEventCategory.diet.value,
    MetricType.medication.value: HealthEventCategory.medication.value,
}

# metric type -> (title label, default unit)
METRIC_TITLES: Dict[str, Tuple[str, str]] = {
    MetricType.weight.value: ("Weight", "kg"),
    MetricType.sleep.value: ("Sleep", "hours"),
    MetricType.exercise.value: ("Exercise", "minutes"),
    MetricType.water.value: ("Water", "ml"),
    MetricType.blood_pressure.value: ("Blood pressure", "mmHg"),
    MetricType.heart_rate.value: ("Heart rate", "bpm"),
}

# Checked in order against the lowercased title of a measurement event
MEASUREMENT_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("weight", MetricType.weight.value),
    ("blood pressure", MetricType.blood_pressure.value),
    ("heart", MetricType.heart_rate.value),
)


def event_category_for_metric(metric_type: str) -> str:
    """Calendar category used for the event generated from a metric."""
    return METRIC_TO_EVENT_CATEGORY.get(metric_type, HealthEventCategory.other.value)


def metric_type_for_event(category: str, title: str) -> Optional[str]:
    """
    Metric type recorded for a health calendar event.

    Args:
        category: Event category
        title: Event title, consulted only for ``measurement`` events

    Returns:
        The metric type, or None for ``other`` events, which record no metric
    """
    if category == HealthEventCategory.other.value:
        return None
    if category == HealthEventCategory.measurement.value:
        lowered = title.lower()
        for keyword, metric_type in MEASUREMENT_KEYWORDS:
            if keyword in lowered:
                return metric_type
        return MetricType.other.value
    # appointment has no metric type of its own
    if category == HealthEventCategory.appointment.value:
        return MetricType.other.value
    return category


def format_value(value: float) -> str:
    """Render a reading without a trailing ``.0`` on whole numbers."""
    return f"{value:g}"


def event_title_for_metric(metric_type: str, value: float, unit: str) -> str:
    label, default_unit = METRIC_TITLES.get(metric_type, (metric_type, ""))
    return f"{label} record: {format_value(value)}{unit or default_unit}"


def build_event_for_metric(metric: HealthMetric, now: Optional[datetime] = None) -> HealthCalendarEvent:
    """
    Build (without saving) the calendar event that mirrors a freshly recorded metric.

    Args:
        metric: Stored metric; its id becomes the event's link
        now: Event start time (defaults to the current time)

    Returns:
        Unsaved HealthCalendarEvent
    """
    start = now or utc_now()
    return HealthCalendarEvent(
        user_id=metric.user_id,
        title=event_title_for_metric(metric.type, metric.value, metric.unit),
        description=metric.notes or f"{metric.type} record",
        start_time=start,
        end_time=start + METRIC_EVENT_DURATION,
        category=event_category_for_metric(metric.type),
        color=METRIC_EVENT_COLOR,
        all_day=False,
        health_metric_id=metric.id,
        metric_value=metric.value,
        recurrence_frequency=RecurrenceFrequency.none.value,
        recurrence_interval=1,
        reminder_type=CalendarReminderType.notification.value,
    )


def metric_notes_for_event(event: HealthCalendarEvent) -> str:
    return event.description or f"Added from health calendar: {event.title}"


def build_metric_for_event(event: HealthCalendarEvent) -> Optional[HealthMetric]:
    """
    Build (without saving) the metric a health calendar event records.

    Returns:
        Unsaved HealthMetric, or None when the event has no value or is an ``other`` event
    """
    if event.metric_value is None:
        return None
    metric_type = metric_type_for_event(event.category, event.title)
    if metric_type is None:
        return None
    return HealthMetric(
        user_id=event.user_id,
        type=metric_type,
        value=event.metric_value,
        unit="",
        date=event.start_time,
        notes=metric_notes_for_event(event),
    )


def apply_event_to_metric(event: HealthCalendarEvent, metric: HealthMetric) -> None:
    """Copy an edited event's value, start time and notes onto its linked metric."""
    metric.value = event.metric_value
    metric.date = event.start_time
    metric.notes = metric_notes_for_event(event)
