"""
Health Metric Endpoints.

Raw metric CRUD, date-range queries and per-type statistics.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from mylife_companion.core.database import apply_changes, utc_now
from mylife_companion.core.database.entities.health_metrics import HealthMetric
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.domain.enums import MetricType
from mylife_companion.core.models.io import (
    HealthMetricCreate,
    HealthMetricRead,
    HealthMetricUpdate,
    MessageResponse,
    MetricStats,
)
from mylife_companion.core.models.io.common import to_naive_utc
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep
from mylife_companion.server.services.health_stats import compute_stats

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=HealthMetricRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Health Metric",
    responses={400: {"description": "Type or value missing, or unknown type"}},
)
async def create_metric(payload: HealthMetricCreate, user: CurrentUserDep, repos: ReposDep) -> HealthMetricRead:
    """
    Record a health metric.

    - **type**: weight, height, bloodPressure, heartRate, bloodSugar, sleep,
      exercise, water, diet, medication or other
    - **value**: Numeric reading
    - **date**: Measurement time, defaults to now
    """
    metric = HealthMetric(
        user_id=user.id,
        type=payload.type.value,
        value=payload.value,
        unit=payload.unit,
        date=payload.date or utc_now(),
        notes=payload.notes,
    )
    metric = await repos.health_metrics.create(metric)
    logger.debug(f"User {user.id} recorded {metric.type} metric {metric.id}")
    return HealthMetricRead.model_validate(metric)


@router.get(
    "",
    response_model=List[HealthMetricRead],
    summary="List Health Metrics",
    description="All of the signed-in user's metrics, most recent measurement first.",
)
async def list_metrics(user: CurrentUserDep, repos: ReposDep) -> List[HealthMetricRead]:
    metrics = await repos.health_metrics.list_by_date(user.id)
    return [HealthMetricRead.model_validate(metric) for metric in metrics]


@router.get(
    "/type/{metric_type}",
    response_model=List[HealthMetricRead],
    summary="List Health Metrics By Type",
    responses={400: {"description": "Unknown metric type"}},
)
async def list_metrics_by_type(metric_type: MetricType, user: CurrentUserDep, repos: ReposDep) -> List[HealthMetricRead]:
    metrics = await repos.health_metrics.list_by_date(user.id, metric_type.value)
    return [HealthMetricRead.model_validate(metric) for metric in metrics]


@router.get(
    "/date-range",
    response_model=List[HealthMetricRead],
    summary="List Health Metrics In Date Range",
    description="The range is applied only when both startDate and endDate are given.",
)
async def list_metrics_in_range(
    user: CurrentUserDep,
    repos: ReposDep,
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    metric_type: Optional[MetricType] = Query(default=None, alias="type"),
) -> List[HealthMetricRead]:
    metrics = await repos.health_metrics.list_by_date(
        user.id,
        metric_type.value if metric_type else None,
        to_naive_utc(start_date),
        to_naive_utc(end_date),
    )
    return [HealthMetricRead.model_validate(metric) for metric in metrics]


@router.get(
    "/stats/{metric_type}",
    response_model=MetricStats,
    summary="Health Metric Statistics",
    description="Average, min, max, count and trend for one metric type, oldest reading first.",
    responses={400: {"description": "Unknown metric type"}},
)
async def get_metric_stats(
    metric_type: MetricType,
    user: CurrentUserDep,
    repos: ReposDep,
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
) -> MetricStats:
    metrics = await repos.health_metrics.list_by_date(
        user.id,
        metric_type.value,
        to_naive_utc(start_date),
        to_naive_utc(end_date),
        ascending=True,
    )
    return compute_stats(metrics)


@router.get(
    "/{metric_id}",
    response_model=HealthMetricRead,
    summary="Get Health Metric",
    responses={404: {"description": "Metric not found"}},
)
async def get_metric(metric_id: int, user: CurrentUserDep, repos: ReposDep) -> HealthMetricRead:
    metric = await repos.health_metrics.get_for_user(metric_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health metric not found")
    return HealthMetricRead.model_validate(metric)


@router.put(
    "/{metric_id}",
    response_model=HealthMetricRead,
    summary="Update Health Metric",
    description="Change any metric field. Omitted fields keep their value.",
    responses={404: {"description": "Metric not found"}},
)
async def update_metric(
    metric_id: int, payload: HealthMetricUpdate, user: CurrentUserDep, repos: ReposDep
) -> HealthMetricRead:
    metric = await repos.health_metrics.get_for_user(metric_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health metric not found")
    apply_changes(metric, payload.model_dump(exclude_unset=True))
    metric = await repos.health_metrics.update(metric)
    return HealthMetricRead.model_validate(metric)


@router.delete(
    "/{metric_id}",
    response_model=MessageResponse,
    summary="Delete Health Metric",
    description="Delete a metric. Health calendar events that recorded it stay, unlinked.",
    responses={404: {"description": "Metric not found"}},
)
async def delete_metric(metric_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    metric = await repos.health_metrics.get_for_user(metric_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health metric not found")
    await repos.health_metrics.delete(metric.id)
    logger.debug(f"User {user.id} deleted health metric {metric_id}")
    return MessageResponse(message="Health metric deleted successfully")
