"""Unit tests for the task and task category repositories."""

from __future__ import annotations

from datetime import datetime

import pytest

from mylife_companion.core.database.entities.tasks import Task, TaskCategory
from mylife_companion.core.database.repositories.tasks import TaskCategoryRepository, TaskFilters, TaskRepository

pytestmark = pytest.mark.asyncio


@pytest.fixture
def tasks(in_memory_session):
    return TaskRepository(in_memory_session)


@pytest.fixture
def categories(in_memory_session):
    return TaskCategoryRepository(in_memory_session)


@pytest.fixture
async def seeded(tasks, categories, owner, other_user):
    school = await categories.create(TaskCategory(user_id=owner.id, name="School"))
    rows = [
        Task(
            user_id=owner.id,
            title="Math homework",
            description="Chapter 4",
            due_date=datetime(2024, 3, 5),
            priority="high",
            category_id=school.id,
        ),
        Task(user_id=owner.id, title="Buy milk", due_date=datetime(2024, 3, 1), status="completed"),
        Task(user_id=owner.id, title="Read novel", description="math free", due_date=datetime(2024, 3, 10)),
        Task(user_id=other_user.id, title="Not mine", due_date=datetime(2024, 3, 2)),
    ]
    for row in rows:
        await tasks.create(row)
    return school


class TestTaskRepository:
    async def test_search_orders_by_due_date_and_scopes_to_owner(self, tasks, owner, seeded):
        rows = await tasks.search(owner.id)

        assert [task.title for task, _ in rows] == ["Buy milk", "Math homework", "Read novel"]
        assert rows[1][1].name == "School"
        assert rows[0][1] is None

    async def test_search_filters(self, tasks, owner, seeded):
        by_status = await tasks.search(owner.id, TaskFilters(status="completed"))
        assert [t.title for t, _ in by_status] == ["Buy milk"]

        by_category = await tasks.search(owner.id, TaskFilters(category_id=seeded.id))
        assert [t.title for t, _ in by_category] == ["Math homework"]

        by_range = await tasks.search(
            owner.id, TaskFilters(from_date=datetime(2024, 3, 2), to_date=datetime(2024, 3, 6))
        )
        assert [t.title for t, _ in by_range] == ["Math homework"]

        by_text = await tasks.search(owner.id, TaskFilters(search="math"))
        assert [t.title for t, _ in by_text] == ["Math homework", "Read novel"]

    async def test_get_with_category(self, tasks, owner, other_user, seeded):
        math = (await tasks.search(owner.id, TaskFilters(priority="high")))[0][0]

        task, category = await tasks.get_with_category(math.id, owner.id)
        assert task.id == math.id
        assert category.id == seeded.id
        assert await tasks.get_with_category(math.id, other_user.id) is None

    async def test_counts(self, tasks, owner, seeded):
        assert await tasks.count_by(owner.id, Task.status) == {"pending": 2, "completed": 1}
        assert await tasks.count_by(owner.id, Task.priority) == {"high": 1, "medium": 2}
        assert await tasks.count_open_due_between(owner.id, datetime(2024, 3, 1), datetime(2024, 3, 6)) == 1
        assert await tasks.count_open_due_before(owner.id, datetime(2024, 3, 11)) == 2

    async def test_get_for_user_and_delete(self, tasks, owner, other_user, seeded):
        task = (await tasks.search(owner.id))[0][0]

        assert await tasks.get_for_user(task.id, other_user.id) is None
        assert await tasks.delete(task.id) is True
        assert await tasks.get_by_id(task.id) is None


class TestTaskCategoryRepository:
    async def test_count_tasks(self, categories, seeded):
        assert await categories.count_tasks(seeded.id) == 1

    async def test_list_for_user_orders_by_name(self, categories, owner):
        await categories.create(TaskCategory(user_id=owner.id, name="Work"))
        await categories.create(TaskCategory(user_id=owner.id, name="Errands"))

        listed = await categories.list_for_user(owner.id, order_by=TaskCategory.name)
        assert [c.name for c in listed] == ["Errands", "Work"]
        assert await categories.count_for_user(owner.id) == 2
