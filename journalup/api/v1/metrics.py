"""Metrics endpoints: record self-ratings, list them, and analyze progress."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Query

from journalup.api.deps import MetricsServiceDep
from journalup.api.v1.auth import CurrentUserDep
from journalup.core.errors import ValidationError
from journalup.schemas.metrics import DateRange, MetricCreate, MetricOut, ProgressAnalysis

router = APIRouter()


@router.post("", response_model=MetricOut)
def record_metric(
    body: MetricCreate,
    user: CurrentUserDep,
    metrics_service: MetricsServiceDep,
) -> MetricOut:
    """Append one metric value (1-10). Out-of-range values return 400."""
    metric = metrics_service.record_metric(user.id, body.type, body.value, body.notes)
    return MetricOut.model_validate(metric)


@router.get("", response_model=list[MetricOut])
def get_metrics(
    user: CurrentUserDep,
    metrics_service: MetricsServiceDep,
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
) -> list[MetricOut]:
    """List the caller's metrics, oldest first, optionally within [startDate, endDate]."""
    time_range = None
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise ValidationError("startDate and endDate must be provided together")
        if start_date > end_date:
            raise ValidationError("startDate must not be after endDate")
        time_range = DateRange(start=start_date, end=end_date)
    metrics = metrics_service.get_metrics(user.id, time_range)
    return [MetricOut.model_validate(m) for m in metrics]


@router.get("/analysis", response_model=ProgressAnalysis)
async def get_analysis(
    user: CurrentUserDep,
    metrics_service: MetricsServiceDep,
) -> ProgressAnalysis:
    """
    Compare the last 30 days with the 30 days before: per-type trends, the three
    weakest growth areas, overall growth (0-1), and insights/recommendations.
    """
    return await metrics_service.analyze_progress(user.id)
