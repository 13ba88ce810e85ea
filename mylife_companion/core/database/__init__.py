"""
Database layer for MyLife Companion.

Structure:
- entities/: SQLModel table definitions, one module per business area
- repositories/: Async data access, one repository per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and DDL helpers
"""

from .base import Base, apply_changes, utc_now
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_url,
)

__all__ = [
    "Base",
    "apply_changes",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_url",
    "utc_now",
]
