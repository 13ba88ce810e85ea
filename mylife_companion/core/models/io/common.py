"""
Shared I/O building blocks.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# Timestamps are stored as naive UTC, so every inbound datetime is normalised.
UTCDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
