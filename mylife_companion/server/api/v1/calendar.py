"""
Calendar Endpoints.

General-purpose calendar events and the categories that group them. Month
views return every event that overlaps the requested month.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from mylife_companion.core.database import apply_changes
from mylife_companion.core.database.entities.calendar import CalendarCategory, CalendarEvent
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.io import (
    CalendarCategoryCreate,
    CalendarCategoryEnvelope,
    CalendarCategoryRead,
    CalendarCategoryRef,
    CalendarCategoryUpdate,
    CalendarEventCreate,
    CalendarEventEnvelope,
    CalendarEventRead,
    CalendarEventUpdate,
    MessageResponse,
)
from mylife_companion.server.services.date_ranges import month_window
from mylife_companion.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter()


def _event_read(event: CalendarEvent, category: Optional[CalendarCategory]) -> CalendarEventRead:
    read = CalendarEventRead.model_validate(event)
    read.category = CalendarCategoryRef.model_validate(category) if category is not None else None
    return read


async def _check_category(repos: ReposDep, category_id: Optional[int], user_id: int) -> None:
    if category_id is None:
        return
    if await repos.calendar_categories.get_for_user(category_id, user_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid calendar category")


async def _reload(repos: ReposDep, event: CalendarEvent) -> CalendarEventRead:
    row = await repos.calendar_events.get_with_category(event.id, event.user_id)
    return _event_read(*row) if row else _event_read(event, None)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@router.get(
    "/events",
    response_model=List[CalendarEventRead],
    summary="List Events",
    description="All of the signed-in user's events ordered by start time.",
)
async def list_events(user: CurrentUserDep, repos: ReposDep) -> List[CalendarEventRead]:
    rows = await repos.calendar_events.list_with_categories(user.id)
    return [_event_read(event, category) for event, category in rows]


@router.get(
    "/events/month/{year}/{month}",
    response_model=List[CalendarEventRead],
    summary="List Events In Month",
    description="Events that start, end, or span the given month.",
    responses={400: {"description": "Invalid year or month"}},
)
async def list_events_in_month(year: int, month: int, user: CurrentUserDep, repos: ReposDep) -> List[CalendarEventRead]:
    try:
        start, end = month_window(year, month)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    rows = await repos.calendar_events.list_overlapping(user.id, start, end)
    return [_event_read(event, category) for event, category in rows]


@router.get(
    "/events/{event_id}",
    response_model=CalendarEventRead,
    summary="Get Event",
    responses={404: {"description": "Event not found"}},
)
async def get_event(event_id: int, user: CurrentUserDep, repos: ReposDep) -> CalendarEventRead:
    row = await repos.calendar_events.get_with_category(event_id, user.id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return _event_read(*row)


@router.post(
    "/events",
    response_model=CalendarEventEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Event",
    responses={400: {"description": "Missing field or invalid category"}},
)
async def create_event(payload: CalendarEventCreate, user: CurrentUserDep, repos: ReposDep) -> CalendarEventEnvelope:
    """
    Create a calendar event.

    - **title**, **start_time**, **end_time**: Required
    - **category_id**: One of the caller's calendar categories
    - **reminder**: Minutes before the start to remind
    """
    await _check_category(repos, payload.category_id, user.id)
    event = await repos.calendar_events.create(CalendarEvent(user_id=user.id, **payload.model_dump()))
    logger.debug(f"Created calendar event {event.id} for user {user.id}")
    return CalendarEventEnvelope(message="Event created successfully", event=await _reload(repos, event))


@router.put(
    "/events/{event_id}",
    response_model=CalendarEventEnvelope,
    summary="Update Event",
    description="Change any event field. Omitted fields keep their value.",
    responses={
        400: {"description": "Invalid category or time range"},
        404: {"description": "Event not found"},
    },
)
async def update_event(
    event_id: int, payload: CalendarEventUpdate, user: CurrentUserDep, repos: ReposDep
) -> CalendarEventEnvelope:
    event = await repos.calendar_events.get_for_user(event_id, user.id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")

    changes = payload.model_dump(exclude_unset=True)
    if "category_id" in changes:
        await _check_category(repos, changes["category_id"], user.id)
    apply_changes(event, changes)
    if event.end_time < event.start_time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end_time must not be before start_time")

    event = await repos.calendar_events.update(event)
    return CalendarEventEnvelope(message="Event updated successfully", event=await _reload(repos, event))


@router.delete(
    "/events/{event_id}",
    response_model=MessageResponse,
    summary="Delete Event",
    responses={404: {"description": "Event not found"}},
)
async def delete_event(event_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    event = await repos.calendar_events.get_for_user(event_id, user.id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    await repos.calendar_events.delete(event.id)
    return MessageResponse(message="Event deleted successfully")


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


@router.get(
    "/categories",
    response_model=List[CalendarCategoryRead],
    summary="List Calendar Categories",
    description="The signed-in user's calendar categories ordered by name.",
)
async def list_categories(user: CurrentUserDep, repos: ReposDep) -> List[CalendarCategoryRead]:
    categories = await repos.calendar_categories.list_sorted(user.id)
    return [CalendarCategoryRead.model_validate(category) for category in categories]


@router.post(
    "/categories",
    response_model=CalendarCategoryEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Calendar Category",
    responses={400: {"description": "Name missing"}},
)
async def create_category(
    payload: CalendarCategoryCreate, user: CurrentUserDep, repos: ReposDep
) -> CalendarCategoryEnvelope:
    category = await repos.calendar_categories.create(CalendarCategory(user_id=user.id, **payload.model_dump()))
    return CalendarCategoryEnvelope(
        message="Category created successfully", category=CalendarCategoryRead.model_validate(category)
    )


@router.put(
    "/categories/{category_id}",
    response_model=CalendarCategoryEnvelope,
    summary="Update Calendar Category",
    responses={404: {"description": "Category not found"}},
)
async def update_category(
    category_id: int, payload: CalendarCategoryUpdate, user: CurrentUserDep, repos: ReposDep
) -> CalendarCategoryEnvelope:
    category = await repos.calendar_categories.get_for_user(category_id, user.id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    apply_changes(category, payload.model_dump(exclude_unset=True))
    category = await repos.calendar_categories.update(category)
    return CalendarCategoryEnvelope(
        message="Category updated successfully", category=CalendarCategoryRead.model_validate(category)
    )


@router.delete(
    "/categories/{category_id}",
    response_model=MessageResponse,
    summary="Delete Calendar Category",
    description="Delete a category that no event uses.",
    responses={
        400: {"description": "Category is still in use"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(category_id: int, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    category = await repos.calendar_categories.get_for_user(category_id, user.id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    if await repos.calendar_categories.count_events(category_id) > 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete category that is in use. Please reassign events first.",
        )
    await repos.calendar_categories.delete(category_id)
    return MessageResponse(message="Category deleted successfully")
