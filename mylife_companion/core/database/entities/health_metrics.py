"""
Health metric entity model.

A single measurement such as a weight reading or a night's sleep.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class HealthMetric(Base, table=True):
    """Persistent health metric.

    Table: health_metrics
    """

    __tablename__ = "health_metrics"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    type: str = Field(max_length=20, index=True, description="One of MetricType values")
    value: float
    unit: str = Field(default="", max_length=20)
    date: datetime = Field(default_factory=utc_now, index=True)
    notes: str = Field(default="")

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"HealthMetric(id={self.id}, type={self.type}, value={self.value})"
