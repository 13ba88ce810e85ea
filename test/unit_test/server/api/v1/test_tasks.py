from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def _iso(delta: timedelta) -> str:
    return (datetime.utcnow() + delta).isoformat()


async def _create(client: AsyncClient, headers, **fields):
    response = await client.post("/api/tasks", headers=headers, json={"title": "Task", **fields})
    assert response.status_code == 201, response.text
    return response.json()


async def _category(client: AsyncClient, headers, name="School"):
    response = await client.post("/api/task-categories", headers=headers, json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateTask:
    async def test_defaults(self, client: AsyncClient, auth_headers):
        task = await _create(client, auth_headers, title="Read a book")
        assert task["priority"] == "medium"
        assert task["status"] == "pending"
        assert task["description"] == ""
        assert task["category"] is None

    async def test_missing_title_is_bad_request(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/tasks", headers=auth_headers, json={"description": "no title"})
        assert response.status_code == 400

    async def test_includes_category(self, client: AsyncClient, auth_headers):
        category = await _category(client, auth_headers)
        task = await _create(client, auth_headers, category_id=category["id"])
        assert task["category"] == {
            "id": category["id"],
            "name": "School",
            "color": "#4CAF50",
            "icon": "list",
        }

    async def test_other_users_category_is_not_found(self, client: AsyncClient, auth_headers, register_and_login):
        bob_headers = await register_and_login("bob")
        category = await _category(client, bob_headers)
        response = await client.post(
            "/api/tasks", headers=auth_headers, json={"title": "Sneaky", "category_id": category["id"]}
        )
        assert response.status_code == 404

    async def test_invalid_priority_is_bad_request(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/tasks", headers=auth_headers, json={"title": "x", "priority": "urgent"})
        assert response.status_code == 400

    async def test_requires_token(self, client: AsyncClient):
        response = await client.post("/api/tasks", json={"title": "x"})
        assert response.status_code == 403


class TestListTasks:
    async def test_sorted_by_due_date(self, client: AsyncClient, auth_headers):
        await _create(client, auth_headers, title="later", due_date=_iso(timedelta(days=3)))
        await _create(client, auth_headers, title="sooner", due_date=_iso(timedelta(days=1)))
        titles = [task["title"] for task in (await client.get("/api/tasks", headers=auth_headers)).json()]
        assert titles == ["sooner", "later"]

    async def test_filters(self, client: AsyncClient, auth_headers):
        await _create(client, auth_headers, title="Math homework", priority="high")
        await _create(client, auth_headers, title="Groceries", status="completed", description="buy MILK")

        high = await client.get("/api/tasks", headers=auth_headers, params={"priority": "high"})
        assert [t["title"] for t in high.json()] == ["Math homework"]

        done = await client.get("/api/tasks", headers=auth_headers, params={"status": "completed"})
        assert [t["title"] for t in done.json()] == ["Groceries"]

        search = await client.get("/api/tasks", headers=auth_headers, params={"search": "milk"})
        assert [t["title"] for t in search.json()] == ["Groceries"]

    async def test_date_range_single_bound(self, client: AsyncClient, auth_headers):
        await _create(client, auth_headers, title="past", due_date=_iso(timedelta(days=-5)))
        await _create(client, auth_headers, title="future", due_date=_iso(timedelta(days=5)))
        response = await client.get("/api/tasks", headers=auth_headers, params={"from_date": _iso(timedelta(0))})
        assert [t["title"] for t in response.json()] == ["future"]

    async def test_only_own_tasks(self, client: AsyncClient, auth_headers, register_and_login):
        bob_headers = await register_and_login("bob")
        await _create(client, bob_headers, title="bob's")
        assert (await client.get("/api/tasks", headers=auth_headers)).json() == []


class TestTaskStats:
    async def test_counts(self, client: AsyncClient, auth_headers):
        await _create(client, auth_headers, title="soon", due_date=_iso(timedelta(days=2)))
        await _create(client, auth_headers, title="late", due_date=_iso(timedelta(days=-2)), priority="high")
        await _create(client, auth_headers, title="done late", due_date=_iso(timedelta(days=-2)), status="completed")

        response = await client.get("/api/tasks/stats", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        statuses = {row["status"]: row["count"] for row in data["statusStats"]}
        priorities = {row["priority"]: row["count"] for row in data["priorityStats"]}
        assert statuses == {"pending": 2, "completed": 1}
        assert priorities == {"medium": 2, "high": 1}
        assert data["upcoming"] == 1
        assert data["overdue"] == 1


class TestTaskById:
    async def test_get_update_delete(self, client: AsyncClient, auth_headers):
        task = await _create(client, auth_headers, title="Draft")

        response = await client.put(
            f"/api/tasks/{task['id']}", headers=auth_headers, json={"status": "in_progress", "title": "Final"}
        )
        assert response.status_code == 200
        assert "message" in response.json()

        fetched = (await client.get(f"/api/tasks/{task['id']}", headers=auth_headers)).json()
        assert fetched["status"] == "in_progress"
        assert fetched["title"] == "Final"

        assert (await client.delete(f"/api/tasks/{task['id']}", headers=auth_headers)).status_code == 200
        assert (await client.get(f"/api/tasks/{task['id']}", headers=auth_headers)).status_code == 404

    async def test_other_users_task_is_not_found(self, client: AsyncClient, auth_headers, register_and_login):
        bob_headers = await register_and_login("bob")
        task = await _create(client, bob_headers)
        assert (await client.get(f"/api/tasks/{task['id']}", headers=auth_headers)).status_code == 404
        assert (await client.put(f"/api/tasks/{task['id']}", headers=auth_headers, json={})).status_code == 404
        assert (await client.delete(f"/api/tasks/{task['id']}", headers=auth_headers)).status_code == 404

    async def test_update_with_nulls_keeps_required_fields(self, client: AsyncClient, auth_headers):
        task = await _create(client, auth_headers, title="Draft", description="Outline", priority="high")

        response = await client.put(
            f"/api/tasks/{task['id']}",
            headers=auth_headers,
            json={"title": None, "status": None, "priority": None, "description": None},
        )
        assert response.status_code == 200

        fetched = (await client.get(f"/api/tasks/{task['id']}", headers=auth_headers)).json()
        assert fetched["title"] == "Draft"
        assert fetched["status"] == "pending"
        assert fetched["priority"] == "high"
        assert fetched["description"] == "Outline"

    async def test_update_with_null_category_clears_it(self, client: AsyncClient, auth_headers):
        category = await _category(client, auth_headers)
        task = await _create(client, auth_headers, category_id=category["id"])

        response = await client.put(f"/api/tasks/{task['id']}", headers=auth_headers, json={"category_id": None})
        assert response.status_code == 200

        fetched = (await client.get(f"/api/tasks/{task['id']}", headers=auth_headers)).json()
        assert fetched["category"] is None

    async def test_update_with_foreign_category(self, client: AsyncClient, auth_headers):
        task = await _create(client, auth_headers)
        response = await client.put(f"/api/tasks/{task['id']}", headers=auth_headers, json={"category_id": 999})
        assert response.status_code == 404
