"""MyLife Companion API client

Overview
--------
Thin HTTP client for the MyLife Companion REST API, mirroring the service
wrappers the web client uses. Endpoints are grouped into namespaces:

- ``client.auth``: register, login, logout
- ``client.tasks``: task CRUD
- ``client.calendar``: calendar event CRUD and month view
- ``client.health_metrics``: record and list health metrics
- ``client.health_calendar``: create health calendar events and month view

Authentication
--------------
``auth.login`` stores the returned access token; every later request sends it
as ``Authorization: Bearer <token>``. A token can also be passed directly.

Errors
------
Non-2xx responses are raised as ``MyLifeApiError`` carrying the status code
and the decoded error body. A 404 raises ``MyLifeNotFoundError``.

Usage
-----
>>> client = MyLifeClient("http://localhost:8000")
>>> client.auth.login("me@example.com", "secret")
>>> task = client.tasks.create(title="Study math")
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from mylife_companion.core.models.io import (
    CalendarEventEnvelope,
    CalendarEventRead,
    HealthCalendarEventRead,
    HealthMetricRead,
    SigninResponse,
    TaskRead,
)

from .errors import MyLifeApiError, MyLifeNotFoundError


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class MyLifeClient:
    """Thin HTTP client for the MyLife Companion API.

    Responsibilities
    ----------------
    - Keep the access token obtained at login and send it with each request.
    - Map error responses to ``MyLifeApiError`` / ``MyLifeNotFoundError``.
    - Return typed models for record payloads.
    """

    def __init__(
        self,
        base_url: str,
        *,
        access_token: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create an API client.

        Args:
            base_url: Base URL of the server (e.g., ``http://localhost:8000``).
            access_token: Access token to start with, if already signed in.
            timeout: Default HTTP timeout for the internal client.
            client: Optional preconfigured ``httpx.Client`` to use.
        """
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

        self.auth = _AuthNamespace(self)
        self.tasks = _TasksNamespace(self)
        self.calendar = _CalendarNamespace(self)
        self.health_metrics = _HealthMetricsNamespace(self)
        self.health_calendar = _HealthCalendarNamespace(self)

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request to ``/api<path>`` and return the decoded JSON body.

        Raises:
            MyLifeNotFoundError: On 404.
            MyLifeApiError: On any other non-2xx status.
        """
        r = self._client.request(method, f"{self.base_url}/api{path}", headers=self._headers(), **kwargs)
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            try:
                details = e.response.json()
            except ValueError:
                details = e.response.text
            message = details.get("detail") if isinstance(details, dict) else None
            message = message or f"{method} {path} failed: {e.response.status_code}"
            self._logger.debug("MyLifeClient %s %s -> %s", method, path, e.response.status_code)
            error_type = MyLifeNotFoundError if e.response.status_code == 404 else MyLifeApiError
            raise error_type(message, status_code=e.response.status_code, details=details) from e
        return r.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MyLifeClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class _AuthNamespace:
    def __init__(self, client: MyLifeClient) -> None:
        self._client = client

    def register(self, username: str, email: str, password: str, full_name: Optional[str] = None) -> str:
        """Create an account (``POST /api/auth/signup``) and return the server message."""
        body = _drop_none({"username": username, "email": email, "password": password, "full_name": full_name})
        return self._client.request("POST", "/auth/signup", json=body)["message"]

    def login(self, email: str, password: str) -> SigninResponse:
        """Sign in (``POST /api/auth/signin``) and keep the access token for later calls."""
        data = self._client.request("POST", "/auth/signin", json={"email": email, "password": password})
        signin = SigninResponse.model_validate(data)
        self._client.access_token = signin.access_token
        return signin

    def logout(self) -> None:
        """Tell the server and forget the stored token."""
        try:
            self._client.request("POST", "/auth/logout")
        finally:
            self._client.access_token = None


class _TasksNamespace:
    def __init__(self, client: MyLifeClient) -> None:
        self._client = client

    def list(self, **filters: Any) -> List[TaskRead]:
        """List tasks (``GET /api/tasks``) with optional status, priority, search... filters."""
        params = {key: _iso(value) if isinstance(value, datetime) else value for key, value in filters.items()}
        data = self._client.request("GET", "/tasks", params=_drop_none(params) or None)
        return [TaskRead.model_validate(item) for item in data]

    def get(self, task_id: int) -> TaskRead:
        return TaskRead.model_validate(self._client.request("GET", f"/tasks/{task_id}"))

    def create(
        self,
        title: str,
        *,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        priority: Optional[str] = None,
        status: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> TaskRead:
        body = _drop_none(
            {
                "title": title,
                "description": description,
                "due_date": _iso(due_date),
                "priority": priority,
                "status": status,
                "category_id": category_id,
            }
        )
        return TaskRead.model_validate(self._client.request("POST", "/tasks", json=body))

    def update(self, task_id: int, **changes: Any) -> str:
        body = {key: _iso(value) if isinstance(value, datetime) else value for key, value in changes.items()}
        return self._client.request("PUT", f"/tasks/{task_id}", json=body)["message"]

    def delete(self, task_id: int) -> str:
        return self._client.request("DELETE", f"/tasks/{task_id}")["message"]


class _CalendarNamespace:
    def __init__(self, client: MyLifeClient) -> None:
        self._client = client

    def list(self) -> List[CalendarEventRead]:
        data = self._client.request("GET", "/calendar/events")
        return [CalendarEventRead.model_validate(item) for item in data]

    def month(self, year: int, month: int) -> List[CalendarEventRead]:
        """Events overlapping a month (``GET /api/calendar/events/month/{year}/{month}``)."""
        data = self._client.request("GET", f"/calendar/events/month/{year}/{month}")
        return [CalendarEventRead.model_validate(item) for item in data]

    def get(self, event_id: int) -> CalendarEventRead:
        return CalendarEventRead.model_validate(self._client.request("GET", f"/calendar/events/{event_id}"))

    def create(self, title: str, start_time: datetime, end_time: datetime, **fields: Any) -> CalendarEventRead:
        body = {"title": title, "start_time": _iso(start_time), "end_time": _iso(end_time), **fields}
        data = self._client.request("POST", "/calendar/events", json=_drop_none(body))
        return CalendarEventEnvelope.model_validate(data).event

    def update(self, event_id: int, **changes: Any) -> CalendarEventRead:
        body = {key: _iso(value) if isinstance(value, datetime) else value for key, value in changes.items()}
        data = self._client.request("PUT", f"/calendar/events/{event_id}", json=body)
        return CalendarEventEnvelope.model_validate(data).event

    def delete(self, event_id: int) -> str:
        return self._client.request("DELETE", f"/calendar/events/{event_id}")["message"]


class _HealthMetricsNamespace:
    def __init__(self, client: MyLifeClient) -> None:
        self._client = client

    def create(
        self,
        metric_type: str,
        value: float,
        *,
        unit: Optional[str] = None,
        date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> HealthMetricRead:
        body = _drop_none({"type": metric_type, "value": value, "unit": unit, "date": _iso(date), "notes": notes})
        return HealthMetricRead.model_validate(self._client.request("POST", "/health-metrics", json=body))

    def list(self, metric_type: Optional[str] = None) -> List[HealthMetricRead]:
        path = f"/health-metrics/type/{metric_type}" if metric_type else "/health-metrics"
        return [HealthMetricRead.model_validate(item) for item in self._client.request("GET", path)]


class _HealthCalendarNamespace:
    def __init__(self, client: MyLifeClient) -> None:
        self._client = client

    def create(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        *,
        category: Optional[str] = None,
        metric_value: Optional[float] = None,
        description: Optional[str] = None,
    ) -> HealthCalendarEventRead:
        body = _drop_none(
            {
                "title": title,
                "startTime": _iso(start_time),
                "endTime": _iso(end_time),
                "category": category,
                "metricValue": metric_value,
                "description": description,
            }
        )
        return HealthCalendarEventRead.model_validate(self._client.request("POST", "/health-calendar", json=body))

    def month(self, year: int, month: int) -> List[HealthCalendarEventRead]:
        data = self._client.request("GET", f"/health-calendar/month/{year}/{month}")
        return [HealthCalendarEventRead.model_validate(item) for item in data]
