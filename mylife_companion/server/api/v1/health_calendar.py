"""
Health Calendar Endpoints.

Health calendar events may carry a metric value. Creating such an event
records the matching health metric, editing the value keeps that metric in
step, and deleting the event removes it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, status

from mylife_companion.core.database import apply_changes
from mylife_companion.core.database.entities.health_calendar import HealthCalendarEvent
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.domain.enums import HealthEventCategory
from mylife_companion.core.models.io import (
    HealthCalendarEventCreate,
    HealthCalendarEventRead,
    HealthCalendarEventUpdate,
    MessageResponse,
)
from mylife_companion.server.services.date_ranges import month_window
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep
from mylife_companion.server.services.health_sync import apply_event_to_metric, build_metric_for_event

logger = get_logger(__name__)

router = APIRouter()


def _column_values(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in values.items()}


def _read_all(events: List[HealthCalendarEvent]) -> List[HealthCalendarEventRead]:
    return [HealthCalendarEventRead.model_validate(event) for event in events]


@router.post(
    "",
    response_model=HealthCalendarEventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Health Calendar Event",
    responses={400: {"description": "Title, start time or end time missing"}},
)
async def create_health_event(
    payload: HealthCalendarEventCreate, user: CurrentUserDep, repos: ReposDep
) -> HealthCalendarEventRead:
    """
    Create a health calendar event.

    When **metricValue** is given and the category is not ``other``, a health
    metric is recorded for it and linked to the event.

    - **title**, **startTime**, **endTime**: Required
    - **category**: medication, exercise, diet, measurement, appointment or other
    """
    event = HealthCalendarEvent(user_id=user.id, **_column_values(payload.model_dump()))
    metric = build_metric_for_event(event)
    event = await repos.health_events.create_with_metric(event, metric)
    if metric is not None:
        logger.debug(f"Health calendar event {event.id} recorded metric {event.health_metric_id}")
    return HealthCalendarEventRead.model_validate(event)


@router.get(
    "",
    response_model=List[HealthCalendarEventRead],
    summary="List Health Calendar Events",
)
async def list_health_events(user: CurrentUserDep, repos: ReposDep) -> List[HealthCalendarEventRead]:
    return _read_all(await repos.health_events.list_sorted(user.id))


@router.get(
    "/month/{year}/{month}",
    response_model=List[HealthCalendarEventRead],
    summary="List Health Calendar Events In Month",
    description="Events that start, end, or span the given month.",
    responses={400: {"description": "Invalid year or month"}},
)
async def list_health_events_in_month(
    year: int, month: int, user: CurrentUserDep, repos: ReposDep
) -> List[HealthCalendarEventRead]:
    try:
        start, end = month_window(year, month)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _read_all(await repos.health_events.list_overlapping(user.id, start, end))


@router.get(
    "/metric/{metric_id}",
    response_model=List[HealthCalendarEventRead],
    summary="List Events For Metric",
)
async def list_health_events_for_metric(
    metric_id: int, user: CurrentUserDep, repos: ReposDep
) -> List[HealthCalendarEventRead]:
    return _read_all(await repos.health_events.list_by_metric(user.id, metric_id))


@router.get(
    "/category/{category}",
    response_model=List[HealthCalendarEventRead],
    summary="List Events In Category",
    responses={400: {"description": "Unknown category"}},
)
async def list_health_events_in_category(
    category: HealthEventCategory, user: CurrentUserDep, repos: ReposDep
) -> List[HealthCalendarEventRead]:
    return _read_all(await repos.health_events.list_by_category(user.id, category.value))


@router.get(
    "/{event_id}",
    response_model=HealthCalendarEventRead,
    summary="Get Health Calendar Event",
    responses={404: {"description": "Event not found"}},
)
async def get_health_event(event_id: int, user: CurrentUserDep, repos: ReposDep) -> HealthCalendarEventRead:
    event = await repos.health_events.get_for_user(event_id, user.id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health calendar event not found")
    return HealthCalendarEventRead.model_validate(event)


@router.put(
    "/{event_id}",
    response_model=HealthCalendarEventRead,
    summary="Update Health Calendar Event",
    description="Change any event field. A new metricValue is copied onto the linked metric.",
    responses={
        400: {"description": "Invalid field or time range"},
        404: {"description": "Event not found"},
    },
)
async def update_health_event(
    event_id: int, payload: HealthCalendarEventUpdate, user: CurrentUserDep, repos: ReposDep
) -> HealthCalendarEventRead:
    event = await repos.health_events.get_for_user(event_id, user.id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health calendar event not found")

    changes = _column_values(payload.model_dump(exclude_unset=True))
    apply_changes(event, changes)
    if event.end_time < event.start_time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end_time must not be before start_time")

    if event.health_metric_id is not None and changes.get("metric_value") is not None:
        metric = await repos.health_metrics.get_for_user(event.health_metric_id, user.id)
        if metric is not None:
            apply_event_to_metric(event, metric)
            await repos.health_metrics.update(metric)

    event = await repos.health_events.update(event)
    return HealthCalendarEventRead.model_validate(event)


@router.delete(
    "/{event_id}",
    response_model=MessageResponse,
    summary="Delete Health Calendar Event",
    description="Delete an event together with the metric it recorded.",
    responses={404: {"description": "Event not found"}},
)
async def delete_health_event(event_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    event = await repos.health_events.get_for_user(event_id, user.id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health calendar event not found")
    await repos.health_events.delete_with_metric(event)
    return MessageResponse(message="Health calendar event deleted successfully")
