from typing import AsyncGenerator, Awaitable, Callable, Dict
from unittest.mock import patch

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from mylife_companion.core.database import create_all, create_engine, create_sessionmaker
from mylife_companion.core.database.entities.users import User
from mylife_companion.core.models.domain.enums import UserRole
from mylife_companion.core.security import hash_password

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "secret123"

AuthFactory = Callable[..., Awaitable[Dict[str, str]]]


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    session_maker = create_sessionmaker(test_engine)

    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from mylife_companion.core.database import get_session
    from mylife_companion.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("mylife_companion.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def register_and_login(client: AsyncClient) -> AuthFactory:
    """Factory that signs up a user through the API and returns its auth headers."""

    async def _register(username: str = "alice", email: str = None, password: str = TEST_PASSWORD) -> Dict[str, str]:
        email = email or f"{username}@example.com"
        response = await client.post(
            "/api/auth/signup", json={"username": username, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        response = await client.post("/api/auth/signin", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"x-access-token": response.json()["accessToken"]}

    return _register


@pytest_asyncio.fixture
async def auth_headers(register_and_login: AuthFactory) -> Dict[str, str]:
    """Headers for a signed-in regular user named alice."""
    return await register_and_login("alice")


@pytest_asyncio.fixture
async def admin_headers(client: AsyncClient, session: AsyncSession) -> Dict[str, str]:
    """Headers for a signed-in administrator, created directly in the database."""
    admin = User(
        username="admin",
        email="admin@example.com",
        password_hash=hash_password(TEST_PASSWORD),
        role=UserRole.admin.value,
    )
    session.add(admin)
    await session.commit()

    response = await client.post("/api/auth/signin", json={"email": "admin@example.com", "password": TEST_PASSWORD})
    assert response.status_code == 200, response.text
    return {"x-access-token": response.json()["accessToken"]}
