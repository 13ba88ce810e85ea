"""
User account repository.

Provides data access for accounts and their preference rows, including the
lookups the authentication flow needs and a cascading account delete.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy import case, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.calendar import CalendarCategory, CalendarEvent
from ..entities.health_calendar import HealthCalendarEvent
from ..entities.health_metrics import HealthMetric
from ..entities.support_messages import SupportMessage
from ..entities.tasks import Task, TaskCategory
from ..entities.users import User, UserPreference
from .base import BaseRepository, QueryBuilder

# Child tables in an order that never deletes a referenced row first
_OWNED_MODELS = (
    SupportMessage,
    HealthCalendarEvent,
    HealthMetric,
    CalendarEvent,
    CalendarCategory,
    Task,
    TaskCategory,
    UserPreference,
)


class UserRepository(BaseRepository[User]):
    """Repository for user account data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Create a new user account.

        Args:
            user: User SQLModel instance with ``password_hash`` already set

        Returns:
            Persisted User with generated fields
        """
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_conflict(self, username: str, email: str) -> Optional[User]:
        """Find an existing account that already uses ``username`` or ``email``.

        Args:
            username: Candidate username
            email: Candidate email

        Returns:
            The conflicting User, preferring a username match, or None when both are free
        """
        stmt = (
            select(User)
            .where(or_(User.username == username, User.email == email))
            .order_by(case((User.username == username, 0), else_=1))
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, user: User) -> User:
        user.updated_at = utc_now()
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def touch_last_login(self, user: User) -> User:
        """Record a successful sign-in on the account."""
        user.last_login = utc_now()
        return await self.update(user)

    async def delete(self, user_id: int) -> bool:
        """Delete a user account together with every row it owns.

        Args:
            user_id: Account ID to delete

        Returns:
            True if deleted, False if not found
        """
        user = await self.get_by_id(user_id)
        if not user:
            return False
        for model in _OWNED_MODELS:
            await self.session.execute(sa_delete(model).where(model.user_id == user_id))
        await self.session.delete(user)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        """List user accounts ordered by ID.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (role, status)

        Returns:
            List of User instances
        """
        stmt = select(User).order_by(User.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class UserPreferenceRepository:
    """Find-or-create access to the one preference row each user may have."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_user(self, user_id: int) -> Optional[UserPreference]:
        stmt = select(UserPreference).where(UserPreference.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(self, user_id: int) -> UserPreference:
        """Return the user's preference row, inserting one with defaults if needed."""
        preference = await self.get_by_user(user_id)
        if preference is None:
            preference = UserPreference(user_id=user_id)
            self.session.add(preference)
            await self.session.commit()
            await self.session.refresh(preference)
        return preference

    async def update_fields(self, user_id: int, values: Dict[str, Any]) -> UserPreference:
        """Apply ``values`` to the user's preference row, creating it first if missing.

        Args:
            user_id: Owner of the preference row
            values: Column names mapped to new values

        Returns:
            The stored preference row
        """
        preference = await self.get_or_create(user_id)
        for key, value in values.items():
            setattr(preference, key, value)
        preference.updated_at = utc_now()
        self.session.add(preference)
        await self.session.commit()
        await self.session.refresh(preference)
        return preference
