"""Unit tests for the user account and preference repositories."""

from __future__ import annotations

import pytest
from sqlmodel import select

from mylife_companion.core.database.entities.support_messages import SupportMessage
from mylife_companion.core.database.entities.tasks import Task, TaskCategory
from mylife_companion.core.database.entities.users import User, UserPreference
from mylife_companion.core.database.repositories.users import UserPreferenceRepository, UserRepository

pytestmark = pytest.mark.asyncio


class TestUserRepository:
    @pytest.fixture
    def repository(self, in_memory_session):
        return UserRepository(in_memory_session)

    async def test_create_and_lookups(self, repository):
        user = await repository.create(User(username="bob", email="bob@example.com", password_hash="h"))

        assert user.id is not None
        assert (await repository.get_by_id(user.id)).username == "bob"
        assert (await repository.get_by_email("bob@example.com")).id == user.id
        assert (await repository.get_by_username("bob")).id == user.id
        assert await repository.get_by_email("nobody@example.com") is None

    async def test_find_conflict(self, repository, owner):
        assert (await repository.find_conflict("owner", "fresh@example.com")).id == owner.id
        assert (await repository.find_conflict("fresh", "owner@example.com")).id == owner.id
        assert await repository.find_conflict("fresh", "fresh@example.com") is None

    async def test_find_conflict_prefers_username_match(self, repository, owner, other_user):
        assert (await repository.find_conflict("other", "owner@example.com")).id == other_user.id

    async def test_touch_last_login(self, repository, owner):
        assert owner.last_login is None
        updated = await repository.touch_last_login(owner)
        assert updated.last_login is not None

    async def test_list_with_filters_and_pagination(self, repository, owner, other_user):
        other_user.role = "admin"
        await repository.update(other_user)

        assert [u.id for u in await repository.list()] == [owner.id, other_user.id]
        assert [u.id for u in await repository.list(filters={"role": "admin"})] == [other_user.id]
        assert [u.id for u in await repository.list(limit=1, offset=1)] == [other_user.id]

    async def test_delete_cascades_owned_rows(self, repository, in_memory_session, owner, other_user):
        category = TaskCategory(user_id=owner.id, name="School")
        in_memory_session.add(category)
        await in_memory_session.flush()
        in_memory_session.add_all(
            [
                Task(user_id=owner.id, title="Homework", category_id=category.id),
                UserPreference(user_id=owner.id),
                SupportMessage(user_id=owner.id, message="hi", sender_type="user"),
                Task(user_id=other_user.id, title="Keep me"),
            ]
        )
        await in_memory_session.commit()

        assert await repository.delete(owner.id) is True

        remaining = (await in_memory_session.execute(select(Task))).scalars().all()
        assert [t.title for t in remaining] == ["Keep me"]
        assert (await in_memory_session.execute(select(UserPreference))).scalars().all() == []
        assert await repository.get_by_id(owner.id) is None

    async def test_delete_missing(self, repository):
        assert await repository.delete(999) is False


class TestUserPreferenceRepository:
    @pytest.fixture
    def repository(self, in_memory_session):
        return UserPreferenceRepository(in_memory_session)

    async def test_get_or_create_inserts_defaults_once(self, repository, owner):
        assert await repository.get_by_user(owner.id) is None

        first = await repository.get_or_create(owner.id)
        second = await repository.get_or_create(owner.id)

        assert first.id == second.id
        assert first.email_reminders is True
        assert first.color_theme == "blue"

    async def test_update_fields(self, repository, owner):
        preference = await repository.update_fields(owner.id, {"dark_mode": True, "school": "Hillside"})

        assert preference.dark_mode is True
        assert preference.school == "Hillside"
        assert (await repository.get_by_user(owner.id)).dark_mode is True
