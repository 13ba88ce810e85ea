import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_create_and_list_sorted_by_name(client: AsyncClient, auth_headers):
    for name in ("Work", "Home"):
        response = await client.post("/api/task-categories", headers=auth_headers, json={"name": name})
        assert response.status_code == 201

    categories = (await client.get("/api/task-categories", headers=auth_headers)).json()
    assert [c["name"] for c in categories] == ["Home", "Work"]
    assert categories[0]["color"] == "#4CAF50"
    assert categories[0]["icon"] == "list"


async def test_missing_name_is_bad_request(client: AsyncClient, auth_headers):
    response = await client.post("/api/task-categories", headers=auth_headers, json={"color": "#000000"})
    assert response.status_code == 400


async def test_update_category(client: AsyncClient, auth_headers):
    category = (await client.post("/api/task-categories", headers=auth_headers, json={"name": "Work"})).json()
    response = await client.put(
        f"/api/task-categories/{category['id']}", headers=auth_headers, json={"color": "#FF0000"}
    )
    assert response.status_code == 200
    assert response.json()["color"] == "#FF0000"
    assert response.json()["name"] == "Work"


async def test_update_with_nulls_keeps_values(client: AsyncClient, auth_headers):
    category = (await client.post("/api/task-categories", headers=auth_headers, json={"name": "Work"})).json()
    response = await client.put(
        f"/api/task-categories/{category['id']}",
        headers=auth_headers,
        json={"name": None, "color": None, "icon": None},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Work"
    assert response.json()["color"] == "#4CAF50"
    assert response.json()["icon"] == "list"


async def test_delete_category_in_use_is_rejected(client: AsyncClient, auth_headers):
    category = (await client.post("/api/task-categories", headers=auth_headers, json={"name": "Work"})).json()
    await client.post("/api/tasks", headers=auth_headers, json={"title": "Report", "category_id": category["id"]})

    response = await client.delete(f"/api/task-categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 400


async def test_delete_unused_category(client: AsyncClient, auth_headers):
    category = (await client.post("/api/task-categories", headers=auth_headers, json={"name": "Work"})).json()
    response = await client.delete(f"/api/task-categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert (await client.get("/api/task-categories", headers=auth_headers)).json() == []


async def test_unknown_category_is_not_found(client: AsyncClient, auth_headers):
    assert (await client.put("/api/task-categories/42", headers=auth_headers, json={"name": "x"})).status_code == 404
    assert (await client.delete("/api/task-categories/42", headers=auth_headers)).status_code == 404
