"""
Aggregations over health metrics.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Sequence

from mylife_companion.core.database.base import utc_now
from mylife_companion.core.database.entities.health_metrics import HealthMetric
from mylife_companion.core.models.io.health import (
    AverageReading,
    HealthSummary,
    LatestReading,
    MetricStatPoint,
    MetricStats,
)

SUMMARY_WINDOW = timedelta(days=7)


def summary_cutoff():
    """Earliest creation time that still counts toward the weekly summary."""
    return utc_now() - SUMMARY_WINDOW


def summarize(metrics: Sequence[HealthMetric]) -> HealthSummary:
    """
    Build the latest-reading and average-per-type summary.

    Args:
        metrics: Metrics recorded within the summary window, in any order

    Returns:
        HealthSummary keyed by metric type
    """
    latest: Dict[str, HealthMetric] = {}
    values: Dict[str, List[float]] = {}
    for metric in metrics:
        current = latest.get(metric.type)
        if current is None or (metric.created_at, metric.id) > (current.created_at, current.id):
            latest[metric.type] = metric
        values.setdefault(metric.type, []).append(metric.value)

    return HealthSummary(
        latest={
            metric_type: LatestReading(value=metric.value, unit=metric.unit, timestamp=metric.created_at)
            for metric_type, metric in latest.items()
        },
        averages={
            metric_type: AverageReading(
                value=f"{sum(readings) / len(readings):.1f}",
                unit=latest[metric_type].unit or "",
            )
            for metric_type, readings in values.items()
        },
    )


def compute_stats(metrics: Sequence[HealthMetric]) -> MetricStats:
    """
    Average, range, count and trend over metrics sorted oldest first.

    ``trend`` is the percentage change from the first to the last value; it is
    None with fewer than two values or when the first value is zero.
    """
    if not metrics:
        return MetricStats()

    readings = [metric.value for metric in metrics]
    trend = None
    if len(readings) > 1 and readings[0] != 0:
        trend = (readings[-1] - readings[0]) / readings[0] * 100

    return MetricStats(
        average=sum(readings) / len(readings),
        min=min(readings),
        max=max(readings),
        count=len(readings),
        trend=trend,
        data=[MetricStatPoint(date=metric.date, value=metric.value, notes=metric.notes) for metric in metrics],
    )
