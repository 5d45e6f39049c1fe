"""Pydantic schemas for growth metrics and the progress analysis."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import Field

from journalup.schemas.base import CamelModel

MetricType = Literal["resilience", "learning", "challenge", "feedback", "effort"]

# Fixed iteration order for analysis output.
METRIC_TYPES: tuple[str, ...] = ("resilience", "learning", "challenge", "feedback", "effort")

TrendDirection = Literal["increasing", "decreasing", "stable"]


class MetricCreate(CamelModel):
    """Body for POST /metrics. The 1-10 range is enforced by MetricsService (400, not 422)."""

    type: MetricType = Field(..., description="Metric type")
    value: int = Field(..., description="Self-rating from 1 to 10")
    notes: str | None = Field(default=None, max_length=2000, description="Optional notes")


class MetricOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    type: MetricType
    value: int
    notes: str | None = None
    created_at: datetime


class DateRange(CamelModel):
    """Inclusive time window."""

    start: datetime
    end: datetime


class MetricTrend(CamelModel):
    """Derived per-type trend over the current 30-day window vs the previous one."""

    type: MetricType
    change: float = Field(..., description="Percent change of the average vs the previous window")
    trend: TrendDirection
    average_value: float
    data_points: int


class GrowthArea(CamelModel):
    type: MetricType
    strength: float = Field(..., ge=0, le=1)
    suggestions: list[str]


class ProgressAnalysis(CamelModel):
    """Response body for GET /metrics/analysis."""

    time_range: DateRange
    metrics: dict[MetricType, MetricTrend]
    top_growth_areas: list[GrowthArea]
    overall_growth: float = Field(..., ge=0, le=1)
    insights: list[str]
    recommendations: list[str]
