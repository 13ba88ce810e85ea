"""
Unit tests for server exception handlers.

Tests cover validation error reporting and global exception handling.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from mylife_companion.server.exception_handlers import setup_exception_handlers
from mylife_companion.server.exception_handlers.global_handler import (
    global_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/tasks"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("mylife_companion.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["path"] == "/api/tasks"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_json(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("mylife_companion.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert body["error_id"] == id(exc)

    @pytest.mark.asyncio
    async def test_exception_handler_reports_to_monitoring(self, mock_request):
        with patch("mylife_companion.server.exception_handlers.global_handler.log_error") as mock_log_error:
            await global_exception_handler(mock_request, KeyError("missing"))

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][0] == "KeyError"

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None
        with patch("mylife_companion.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, ValueError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestValidationExceptionHandler:
    @pytest.mark.asyncio
    async def test_returns_400_with_first_error(self, mock_request):
        exc = RequestValidationError(
            [
                {"type": "missing", "loc": ("body", "title"), "msg": "Field required", "input": {}},
                {"type": "missing", "loc": ("body", "start_time"), "msg": "Field required", "input": {}},
            ]
        )
        response = await validation_exception_handler(mock_request, exc)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["detail"] == "title: Field required"
        assert len(body["errors"]) == 2
        assert body["errors"][1]["loc"] == ["body", "start_time"]

    @pytest.mark.asyncio
    async def test_errors_without_location(self, mock_request):
        exc = RequestValidationError([{"type": "value_error", "loc": ("body",), "msg": "Bad body"}])
        response = await validation_exception_handler(mock_request, exc)
        assert json.loads(response.body)["detail"] == "Bad body"


class TestSetupExceptionHandlers:
    @pytest.mark.asyncio
    async def test_registered_handlers_apply_to_app(self):
        app = FastAPI()
        setup_exception_handlers(app)

        class Body(BaseModel):
            name: str

        @app.post("/items")
        async def create_item(body: Body):
            return body

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            invalid = await client.post("/items", json={})
            crashed = await client.get("/boom")

        assert invalid.status_code == 400
        assert invalid.json()["detail"] == "name: Field required"
        assert crashed.status_code == 500
        assert crashed.json()["error_type"] == "RuntimeError"
