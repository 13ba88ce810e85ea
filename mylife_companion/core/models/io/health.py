"""
Health metric I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mylife_companion.core.models.domain.enums import MetricType

from .common import UTCDatetime


class HealthMetricRead(BaseModel):
    """Schema for reading a health metric."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: str
    value: float
    unit: str
    date: datetime
    notes: str
    created_at: datetime
    updated_at: datetime


class HealthMetricCreate(BaseModel):
    """Schema for recording a health metric."""

    type: MetricType
    value: float
    unit: str = Field(default="", max_length=20)
    date: Optional[UTCDatetime] = Field(default=None, description="Measurement time; defaults to now")
    notes: str = ""


class HealthMetricUpdate(BaseModel):
    """Schema for updating a health metric; omitted fields keep their value."""

    type: Optional[MetricType] = None
    value: Optional[float] = None
    unit: Optional[str] = Field(default=None, max_length=20)
    date: Optional[UTCDatetime] = None
    notes: Optional[str] = None


class HealthRecordUpdate(BaseModel):
    """The subset of a metric the health records endpoints allow changing."""

    value: Optional[float] = None
    unit: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = None


class HealthMetricEnvelope(BaseModel):
    message: str
    metric: HealthMetricRead


class HealthMetricPage(BaseModel):
    """One page of metric history."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    metrics: List[HealthMetricRead]
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")


class LatestReading(BaseModel):
    value: float
    unit: str
    timestamp: datetime


class AverageReading(BaseModel):
    value: str = Field(description="Mean rounded to one decimal place")
    unit: str


class HealthSummary(BaseModel):
    """Latest reading and weekly mean per metric type."""

    latest: Dict[str, LatestReading]
    averages: Dict[str, AverageReading]


class MetricStatPoint(BaseModel):
    date: datetime
    value: float
    notes: str


class MetricStats(BaseModel):
    """Aggregates over one metric type; statistics are null when there is no data."""

    average: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    count: int = 0
    trend: Optional[float] = Field(default=None, description="Percent change from first to last value")
    data: List[MetricStatPoint] = Field(default_factory=list)
