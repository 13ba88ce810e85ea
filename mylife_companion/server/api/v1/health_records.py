"""
Health Record Endpoints.

The dashboard-facing view of health metrics: a weekly summary, paginated
history, and record creation that also drops a matching entry onto the
health calendar.
"""

from __future__ import annotations

import math

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from mylife_companion.core.database import apply_changes, utc_now
from mylife_companion.core.database.entities.health_metrics import HealthMetric
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.domain.enums import MetricType
from mylife_companion.core.models.io import (
    HealthMetricCreate,
    HealthMetricEnvelope,
    HealthMetricPage,
    HealthMetricRead,
    HealthRecordUpdate,
    HealthSummary,
    MessageResponse,
)
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep
from mylife_companion.server.services.health_stats import summarize, summary_cutoff
from mylife_companion.server.services.health_sync import build_event_for_metric

logger = get_logger(__name__)

router = APIRouter()

DEFAULT_PAGE_SIZE = 100


async def _page(repos: ReposDep, user_id: int, limit: int, offset: int, metric_type=None) -> HealthMetricPage:
    total, metrics = await repos.health_metrics.page(user_id, limit, offset, metric_type)
    return HealthMetricPage(
        total=total,
        metrics=[HealthMetricRead.model_validate(metric) for metric in metrics],
        current_page=offset // limit + 1,
        total_pages=math.ceil(total / limit),
    )


@router.get(
    "/summary",
    response_model=HealthSummary,
    summary="Weekly Health Summary",
    description="Latest reading and average per metric type over the last 7 days.",
)
async def get_summary(user: CurrentUserDep, repos: ReposDep) -> HealthSummary:
    metrics = await repos.health_metrics.created_since(user.id, summary_cutoff())
    return summarize(metrics)


@router.get(
    "",
    response_model=HealthMetricPage,
    summary="List Health Records",
    description="The signed-in user's records, newest first, one page at a time.",
)
async def list_records(
    user: CurrentUserDep,
    repos: ReposDep,
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
) -> HealthMetricPage:
    return await _page(repos, user.id, limit, offset)


@router.get(
    "/type/{metric_type}",
    response_model=HealthMetricPage,
    summary="List Health Records By Type",
    responses={400: {"description": "Unknown metric type"}},
)
async def list_records_by_type(
    metric_type: MetricType,
    user: CurrentUserDep,
    repos: ReposDep,
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
) -> HealthMetricPage:
    return await _page(repos, user.id, limit, offset, metric_type.value)


@router.get(
    "/{record_id}",
    response_model=HealthMetricRead,
    summary="Get Health Record",
    responses={404: {"description": "Record not found"}},
)
async def get_record(record_id: int, user: CurrentUserDep, repos: ReposDep) -> HealthMetricRead:
    metric = await repos.health_metrics.get_for_user(record_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health record not found")
    return HealthMetricRead.model_validate(metric)


@router.post(
    "",
    response_model=HealthMetricEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Add Health Record",
    responses={400: {"description": "Type or value missing, or unknown type"}},
)
async def create_record(payload: HealthMetricCreate, user: CurrentUserDep, repos: ReposDep) -> HealthMetricEnvelope:
    """
    Record a health metric and add it to the health calendar.

    The calendar entry is best effort: if it cannot be stored the record is
    still kept and returned.

    - **type**: One of the metric types (weight, bloodPressure, sleep, ...)
    - **value**: Numeric reading
    - **unit**, **notes**: Optional
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
    created = HealthMetricRead.model_validate(metric)

    try:
        await repos.health_events.create(build_event_for_metric(metric))
    except SQLAlchemyError as e:
        await repos.health_events.session.rollback()
        logger.error(f"Failed to add health record {created.id} to the health calendar: {e}", exc_info=True)

    return HealthMetricEnvelope(message="Health record added successfully", metric=created)


@router.put(
    "/{record_id}",
    response_model=HealthMetricEnvelope,
    summary="Update Health Record",
    description="Change the value, unit or notes of a record. Omitted fields keep their value.",
    responses={404: {"description": "Record not found"}},
)
async def update_record(
    record_id: int, payload: HealthRecordUpdate, user: CurrentUserDep, repos: ReposDep
) -> HealthMetricEnvelope:
    metric = await repos.health_metrics.get_for_user(record_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health record not found")
    apply_changes(metric, payload.model_dump(exclude_unset=True))
    metric = await repos.health_metrics.update(metric)
    return HealthMetricEnvelope(message="Health record updated successfully", metric=HealthMetricRead.model_validate(metric))


@router.delete(
    "/{record_id}",
    response_model=MessageResponse,
    summary="Delete Health Record",
    responses={404: {"description": "Record not found"}},
)
async def delete_record(record_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    metric = await repos.health_metrics.get_for_user(record_id, user.id)
    if metric is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health record not found")
    await repos.health_metrics.delete(metric.id)
    return MessageResponse(message="Health record deleted successfully")
