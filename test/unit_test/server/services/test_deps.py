"""Unit tests for the authentication and authorization dependencies."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from mylife_companion.core.database.entities.users import User
from mylife_companion.core.models.domain.enums import UserRole, UserStatus
from mylife_companion.core.security import TokenType, create_access_token, create_refresh_token, create_token
from mylife_companion.server.services.deps import (
    get_current_user,
    get_current_user_id,
    get_token,
    require_admin,
    require_admin_or_same_user,
)


def _user(user_id=1, role=UserRole.user, status=UserStatus.active) -> User:
    return User(
        id=user_id,
        username=f"user{user_id}",
        email=f"user{user_id}@example.com",
        password_hash="x",
        role=role.value,
        status=status.value,
    )


def _repos(user):
    repos = MagicMock()
    repos.users.get_by_id = AsyncMock(return_value=user)
    return repos


class TestGetToken:
    def test_prefers_access_token_header(self):
        bearer = HTTPAuthorizationCredentials(scheme="Bearer", credentials="from-bearer")
        assert get_token("from-header", bearer) == "from-header"

    def test_falls_back_to_bearer(self):
        bearer = HTTPAuthorizationCredentials(scheme="Bearer", credentials="from-bearer")
        assert get_token(None, bearer) == "from-bearer"

    def test_missing_token_is_forbidden(self):
        with pytest.raises(HTTPException) as exc_info:
            get_token(None, None)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "No token provided!"


class TestGetCurrentUserId:
    def test_valid_access_token(self):
        assert get_current_user_id(create_access_token(42)) == 42

    def test_refresh_token_is_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(create_refresh_token(42))
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Unauthorized!"

    def test_expired_token(self):
        token = create_token(42, TokenType.access, expires_delta=timedelta(seconds=-5))
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired!"

    def test_garbage_token(self):
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id("not-a-jwt")
        assert exc_info.value.status_code == 401


@pytest.mark.asyncio
class TestGetCurrentUser:
    async def test_returns_active_user(self):
        user = _user()
        assert await get_current_user(1, _repos(user)) is user

    async def test_missing_user(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(1, _repos(None))
        assert exc_info.value.status_code == 404

    async def test_inactive_user(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(1, _repos(_user(status=UserStatus.suspended)))
        assert exc_info.value.status_code == 403


@pytest.mark.asyncio
class TestRoleChecks:
    async def test_require_admin(self):
        admin = _user(role=UserRole.admin)
        assert await require_admin(admin) is admin

        with pytest.raises(HTTPException) as exc_info:
            await require_admin(_user())
        assert exc_info.value.detail == "Require Admin Role!"

    async def test_require_admin_or_same_user(self):
        owner = _user(user_id=5)
        assert await require_admin_or_same_user(5, owner) is owner
        assert await require_admin_or_same_user(9, _user(role=UserRole.admin)) is not None

        with pytest.raises(HTTPException) as exc_info:
            await require_admin_or_same_user(9, owner)
        assert exc_info.value.status_code == 403
