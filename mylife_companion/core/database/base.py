"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def apply_changes(entity: SQLModel, changes: Dict[str, Any]) -> None:
    """Copy a partial update onto a table entity.

    Enum members are stored by value. ``None`` sent for a NOT NULL column is
    ignored and the column keeps its current value.

    Args:
        entity: Table entity to modify in place
        changes: Field names mapped to new values
    """
    columns = entity.__table__.columns
    for key, value in changes.items():
        if value is None and key in columns and not columns[key].nullable:
            continue
        setattr(entity, key, value.value if isinstance(value, Enum) else value)
