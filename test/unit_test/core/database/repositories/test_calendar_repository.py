"""Unit tests for the calendar event and calendar category repositories."""

from __future__ import annotations

from datetime import datetime

import pytest

from mylife_companion.core.database.entities.calendar import CalendarCategory, CalendarEvent
from mylife_companion.core.database.repositories.calendar import (
    CalendarCategoryRepository,
    CalendarEventRepository,
)

pytestmark = pytest.mark.asyncio

MARCH_START = datetime(2024, 3, 1)
MARCH_END = datetime(2024, 3, 31, 23, 59, 59, 999999)


def _event(user_id, title, start, end, category_id=None):
    return CalendarEvent(user_id=user_id, title=title, start_time=start, end_time=end, category_id=category_id)


@pytest.fixture
def events(in_memory_session):
    return CalendarEventRepository(in_memory_session)


@pytest.fixture
def categories(in_memory_session):
    return CalendarCategoryRepository(in_memory_session)


class TestCalendarEventRepository:
    async def test_list_overlapping_month(self, events, owner, other_user):
        await events.create(_event(owner.id, "inside", datetime(2024, 3, 10, 9), datetime(2024, 3, 10, 10)))
        await events.create(_event(owner.id, "starts before", datetime(2024, 2, 28), datetime(2024, 3, 2)))
        await events.create(_event(owner.id, "ends after", datetime(2024, 3, 30), datetime(2024, 4, 2)))
        await events.create(_event(owner.id, "spans", datetime(2024, 2, 1), datetime(2024, 5, 1)))
        await events.create(_event(owner.id, "april", datetime(2024, 4, 3), datetime(2024, 4, 4)))
        await events.create(_event(other_user.id, "not mine", datetime(2024, 3, 10), datetime(2024, 3, 11)))

        rows = await events.list_overlapping(owner.id, MARCH_START, MARCH_END)

        assert [event.title for event, _ in rows] == ["spans", "starts before", "inside", "ends after"]

    async def test_list_with_categories(self, events, categories, owner):
        work = await categories.create(CalendarCategory(user_id=owner.id, name="Work"))
        await events.create(
            _event(owner.id, "standup", datetime(2024, 3, 4, 9), datetime(2024, 3, 4, 10), category_id=work.id)
        )
        await events.create(_event(owner.id, "gym", datetime(2024, 3, 3, 18), datetime(2024, 3, 3, 19)))

        rows = await events.list_with_categories(owner.id)

        assert [(event.title, category.name if category else None) for event, category in rows] == [
            ("gym", None),
            ("standup", "Work"),
        ]

    async def test_get_with_category_scoped(self, events, owner, other_user):
        event = await events.create(_event(owner.id, "dentist", datetime(2024, 3, 5, 9), datetime(2024, 3, 5, 10)))

        found = await events.get_with_category(event.id, owner.id)
        assert found[0].title == "dentist"
        assert found[1] is None
        assert await events.get_with_category(event.id, other_user.id) is None


class TestCalendarCategoryRepository:
    async def test_list_sorted_and_count_events(self, events, categories, owner):
        personal = await categories.create(CalendarCategory(user_id=owner.id, name="Personal"))
        await categories.create(CalendarCategory(user_id=owner.id, name="Family"))
        await events.create(
            _event(owner.id, "party", datetime(2024, 3, 9, 19), datetime(2024, 3, 9, 23), category_id=personal.id)
        )

        assert [c.name for c in await categories.list_sorted(owner.id)] == ["Family", "Personal"]
        assert await categories.count_events(personal.id) == 1
