"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer against
an in-memory SQLite database.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from mylife_companion.core.database import create_all, create_engine, create_sessionmaker
from mylife_companion.core.database.entities.users import User


@pytest_asyncio.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with every table created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def owner(in_memory_session: AsyncSession) -> User:
    """A stored account that owns the rows created in a test."""
    user = User(username="owner", email="owner@example.com", password_hash="hash")
    in_memory_session.add(user)
    await in_memory_session.commit()
    await in_memory_session.refresh(user)
    return user


@pytest_asyncio.fixture(scope="function")
async def other_user(in_memory_session: AsyncSession) -> User:
    """A second account, for ownership checks."""
    user = User(username="other", email="other@example.com", password_hash="hash")
    in_memory_session.add(user)
    await in_memory_session.commit()
    await in_memory_session.refresh(user)
    return user
