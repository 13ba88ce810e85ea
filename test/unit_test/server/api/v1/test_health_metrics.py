from unittest.mock import patch

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _metric(client: AsyncClient, headers, **fields):
    response = await client.post("/api/health-metrics", headers=headers, json=fields)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_defaults(client: AsyncClient, auth_headers):
    metric = await _metric(client, auth_headers, type="bloodPressure", value=120)
    assert metric["unit"] == ""
    assert metric["notes"] == ""
    assert metric["date"] is not None


async def test_create_does_not_touch_health_calendar(client: AsyncClient, auth_headers):
    await _metric(client, auth_headers, type="weight", value=60)
    assert (await client.get("/api/health-calendar", headers=auth_headers)).json() == []


async def test_missing_type_is_bad_request(client: AsyncClient, auth_headers):
    response = await client.post("/api/health-metrics", headers=auth_headers, json={"value": 1})
    assert response.status_code == 400


async def test_list_sorted_by_date_desc(client: AsyncClient, auth_headers):
    await _metric(client, auth_headers, type="weight", value=1, date="2024-01-01T08:00:00")
    await _metric(client, auth_headers, type="weight", value=3, date="2024-01-03T08:00:00")
    await _metric(client, auth_headers, type="sleep", value=2, date="2024-01-02T08:00:00")

    values = [m["value"] for m in (await client.get("/api/health-metrics", headers=auth_headers)).json()]
    assert values == [3, 2, 1]

    weights = [m["value"] for m in (await client.get("/api/health-metrics/type/weight", headers=auth_headers)).json()]
    assert weights == [3, 1]


async def test_date_range_needs_both_bounds(client: AsyncClient, auth_headers):
    await _metric(client, auth_headers, type="weight", value=1, date="2024-01-01T08:00:00")
    await _metric(client, auth_headers, type="weight", value=2, date="2024-02-01T08:00:00")

    ranged = await client.get(
        "/api/health-metrics/date-range",
        headers=auth_headers,
        params={"startDate": "2024-01-15T00:00:00", "endDate": "2024-02-15T00:00:00", "type": "weight"},
    )
    assert [m["value"] for m in ranged.json()] == [2]

    one_bound = await client.get(
        "/api/health-metrics/date-range", headers=auth_headers, params={"startDate": "2024-01-15T00:00:00"}
    )
    assert len(one_bound.json()) == 2


async def test_stats(client: AsyncClient, auth_headers):
    await _metric(client, auth_headers, type="weight", value=80, date="2024-01-01T08:00:00", notes="start")
    await _metric(client, auth_headers, type="weight", value=70, date="2024-01-02T08:00:00")
    await _metric(client, auth_headers, type="weight", value=72, date="2024-01-03T08:00:00")

    stats = (await client.get("/api/health-metrics/stats/weight", headers=auth_headers)).json()
    assert stats["count"] == 3
    assert stats["min"] == 70
    assert stats["max"] == 80
    assert stats["average"] == pytest.approx(74.0)
    assert stats["trend"] == pytest.approx(-10.0)
    assert [point["value"] for point in stats["data"]] == [80, 70, 72]
    assert stats["data"][0]["notes"] == "start"


async def test_stats_without_data(client: AsyncClient, auth_headers):
    stats = (await client.get("/api/health-metrics/stats/sleep", headers=auth_headers)).json()
    assert stats == {"average": None, "min": None, "max": None, "count": 0, "trend": None, "data": []}


async def test_stats_unknown_type(client: AsyncClient, auth_headers):
    assert (await client.get("/api/health-metrics/stats/mood", headers=auth_headers)).status_code == 400


async def test_get_update_delete(client: AsyncClient, auth_headers):
    metric = await _metric(client, auth_headers, type="water", value=250, unit="ml")

    response = await client.put(f"/api/health-metrics/{metric['id']}", headers=auth_headers, json={"notes": "lunch"})
    assert response.status_code == 200
    assert response.json()["notes"] == "lunch"
    assert response.json()["value"] == 250

    assert (await client.get(f"/api/health-metrics/{metric['id']}", headers=auth_headers)).status_code == 200
    assert (await client.delete(f"/api/health-metrics/{metric['id']}", headers=auth_headers)).status_code == 200
    assert (await client.get(f"/api/health-metrics/{metric['id']}", headers=auth_headers)).status_code == 404


async def test_create_and_delete_are_logged(client: AsyncClient, auth_headers):
    with patch("mylife_companion.server.api.v1.health_metrics.logger") as mock_logger:
        metric = await _metric(client, auth_headers, type="sleep", value=8)
        await client.delete(f"/api/health-metrics/{metric['id']}", headers=auth_headers)

    messages = [call.args[0] for call in mock_logger.debug.call_args_list]
    assert any(f"sleep metric {metric['id']}" in message for message in messages)
    assert any(f"deleted health metric {metric['id']}" in message for message in messages)


async def test_unknown_metric(client: AsyncClient, auth_headers):
    assert (await client.get("/api/health-metrics/999", headers=auth_headers)).status_code == 404
    assert (await client.put("/api/health-metrics/999", headers=auth_headers, json={"value": 1})).status_code == 404
    assert (await client.delete("/api/health-metrics/999", headers=auth_headers)).status_code == 404


async def test_other_users_metric_is_hidden(client: AsyncClient, auth_headers, register_and_login):
    bob_headers = await register_and_login("bob")
    metric = await _metric(client, bob_headers, type="weight", value=90)
    assert (await client.get(f"/api/health-metrics/{metric['id']}", headers=auth_headers)).status_code == 404
