"""Metrics analyzer: record self-ratings and derive 30-day trends and growth areas.

Trend math (per metric type, current window = last 30 days, previous = the 30 before):
  change   = (current_avg - previous_avg) / previous_avg * 100, 2 decimals
  trend    = increasing if change > 5, decreasing if change < -5, else stable
  strength = clamp((average - 1) / 9 +/- 0.1 for increasing/decreasing, 0, 1)
Types without current-window data are left out. Without previous-window data the
previous average is taken to be the current one, i.e. 0% change and "stable".
"""

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from journalup.core.errors import AppError, ErrorCode, ValidationError
from journalup.models import Metric
from journalup.models.base import utcnow
from journalup.repositories.metrics import MetricsRepository
from journalup.schemas.metrics import (
    METRIC_TYPES,
    DateRange,
    GrowthArea,
    MetricTrend,
    ProgressAnalysis,
    TrendDirection,
)
from journalup.services.narrative import NarrativeClient
from journalup.services.prompts import ANALYSIS_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)

METRIC_VALUE_MIN = 1
METRIC_VALUE_MAX = 10
ANALYSIS_WINDOW = timedelta(days=30)
TREND_DEADBAND_PERCENT = 5.0
TREND_ADJUSTMENT = 0.1
TOP_GROWTH_AREAS = 3
RECOMMENDATIONS_MARKER = "RECOMMENDATIONS:"

GROWTH_SUGGESTIONS: dict[str, tuple[str, str, str]] = {
    "resilience": (
        "Practice mindfulness meditation to build emotional resilience",
        "Keep a resilience journal to track challenges and victories",
        "Develop a support network for difficult times",
    ),
    "learning": (
        "Set specific learning goals for each week",
        "Try new learning methods or resources",
        "Share your knowledge with others to reinforce learning",
    ),
    "challenge": (
        "Take on one new challenge each week",
        "Break down big challenges into smaller steps",
        "Celebrate small victories along the way",
    ),
    "feedback": (
        "Seek feedback from trusted peers or mentors",
        "Reflect on feedback to identify areas for improvement",
        "Act on feedback to make positive changes",
    ),
    "effort": (
        "Set realistic goals and deadlines",
        "Break tasks into smaller, manageable chunks",
        "Use a task list or planner to stay organized",
    ),
}


def _mean(values: Sequence[int | float]) -> float:
    return sum(values) / len(values)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def classify_trend(change: float) -> TrendDirection:
    if change > TREND_DEADBAND_PERCENT:
        return "increasing"
    if change < -TREND_DEADBAND_PERCENT:
        return "decreasing"
    return "stable"


def calculate_metric_trends(
    current: Iterable[Metric],
    previous: Iterable[Metric],
) -> dict[str, MetricTrend]:
    """Per-type trends, in METRIC_TYPES order; types with no current data are omitted."""
    current_by_type: dict[str, list[int]] = {t: [] for t in METRIC_TYPES}
    previous_by_type: dict[str, list[int]] = {t: [] for t in METRIC_TYPES}
    for m in current:
        if m.type in current_by_type:
            current_by_type[m.type].append(m.value)
    for m in previous:
        if m.type in previous_by_type:
            previous_by_type[m.type].append(m.value)

    trends: dict[str, MetricTrend] = {}
    for metric_type in METRIC_TYPES:
        current_values = current_by_type[metric_type]
        if not current_values:
            continue
        previous_values = previous_by_type[metric_type]
        current_avg = _mean(current_values)
        previous_avg = _mean(previous_values) if previous_values else current_avg
        # Values are >= 1, so previous_avg == 0 only with corrupt rows.
        change = 0.0 if previous_avg == 0 else (current_avg - previous_avg) / previous_avg * 100
        trends[metric_type] = MetricTrend(
            type=metric_type,
            change=round(change, 2),
            trend=classify_trend(change),
            average_value=round(current_avg, 2),
            data_points=len(current_values),
        )
    return trends


def _trend_adjustment(trend: MetricTrend) -> float:
    if trend.trend == "increasing":
        return TREND_ADJUSTMENT
    if trend.trend == "decreasing":
        return -TREND_ADJUSTMENT
    return 0.0


def _normalized_value(trend: MetricTrend) -> float:
    """Map an average on the 1-10 scale to 0-1."""
    return (trend.average_value - METRIC_VALUE_MIN) / (METRIC_VALUE_MAX - METRIC_VALUE_MIN)


def calculate_strength(trend: MetricTrend) -> float:
    return _clamp(_normalized_value(trend) + _trend_adjustment(trend))


def calculate_growth_areas(trends: dict[str, MetricTrend]) -> list[GrowthArea]:
    """The weakest (lowest strength) types first; at most TOP_GROWTH_AREAS of them."""
    areas = [
        GrowthArea(
            type=metric_type,
            strength=calculate_strength(trend),
            suggestions=list(GROWTH_SUGGESTIONS[metric_type]),
        )
        for metric_type, trend in trends.items()
    ]
    areas.sort(key=lambda a: a.strength)
    return areas[:TOP_GROWTH_AREAS]


def calculate_overall_growth(trends: dict[str, MetricTrend]) -> float:
    if not trends:
        return 0.0
    factors = [_normalized_value(t) + _trend_adjustment(t) for t in trends.values()]
    return _clamp(_mean(factors))


def build_analysis_prompt(
    trends: dict[str, MetricTrend],
    growth_areas: list[GrowthArea],
) -> str:
    trend_lines = "\n".join(
        f"- {t.type}: {t.trend} ({t.change}% change)" for t in trends.values()
    )
    growth_area_lines = "\n".join(
        f"- {a.type} (strength: {a.strength * 100:.0f}%)" for a in growth_areas
    )
    return ANALYSIS_PROMPT_TEMPLATE.format(
        trend_lines=trend_lines,
        growth_area_lines=growth_area_lines,
    )


def _bullet_lines(block: str) -> list[str]:
    lines = []
    for line in block.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("- "):
            line = line[2:].strip()
        lines.append(line)
    return lines


def parse_narrative(text: str) -> tuple[list[str], list[str]]:
    """Split LLM output into (insights, recommendations) around the RECOMMENDATIONS: marker."""
    insights_block, _, recommendations_block = text.partition(RECOMMENDATIONS_MARKER)
    return _bullet_lines(insights_block), _bullet_lines(recommendations_block)


def static_insights(trends: dict[str, MetricTrend]) -> list[str]:
    """Insights without an LLM: one line per type that moved outside the deadband."""
    insights = []
    for trend in trends.values():
        if abs(trend.change) <= TREND_DEADBAND_PERCENT:
            continue
        direction = "improved" if trend.trend == "increasing" else "decreased"
        magnitude = "significantly" if abs(trend.change) > 20 else "slightly"
        insights.append(
            f"Your {trend.type} has {magnitude} {direction} ({abs(trend.change)}% change)."
        )
    return insights


def static_recommendations(growth_areas: list[GrowthArea]) -> list[str]:
    return [s for area in growth_areas for s in area.suggestions[:2]]


class MetricsService:
    def __init__(
        self,
        repository: MetricsRepository,
        narrative: NarrativeClient | None = None,
    ) -> None:
        self.repository = repository
        self.narrative = narrative

    def record_metric(
        self,
        user_id: uuid.UUID,
        metric_type: str,
        value: int,
        notes: str | None = None,
    ) -> Metric:
        if metric_type not in METRIC_TYPES:
            raise ValidationError(f"Unknown metric type: {metric_type}")
        if not METRIC_VALUE_MIN <= value <= METRIC_VALUE_MAX:
            raise ValidationError("Metric value must be between 1 and 10")
        return self.repository.record(user_id, metric_type, value, notes)

    def get_metrics(
        self,
        user_id: uuid.UUID,
        time_range: DateRange | None = None,
    ) -> list[Metric]:
        if time_range is None:
            return self.repository.list_for_user(user_id)
        return self.repository.list_for_user(user_id, time_range.start, time_range.end)

    async def analyze_progress(
        self,
        user_id: uuid.UUID,
        now: datetime | None = None,
    ) -> ProgressAnalysis:
        """
        Compare the last 30 days with the 30 days before and summarize growth.

        Insights and recommendations come from one LLM call when a narrative
        client is configured; its failure raises AppError(METRICS_ERROR).
        """
        end = now or utcnow()
        current_range = DateRange(start=end - ANALYSIS_WINDOW, end=end)
        previous_range = DateRange(
            start=current_range.start - ANALYSIS_WINDOW,
            end=current_range.start,
        )

        current = self.get_metrics(user_id, current_range)
        previous = self.get_metrics(user_id, previous_range)

        trends = calculate_metric_trends(current, previous)
        growth_areas = calculate_growth_areas(trends)
        overall_growth = calculate_overall_growth(trends)
        insights, recommendations = await self._insights(trends, growth_areas)

        return ProgressAnalysis(
            time_range=current_range,
            metrics=trends,
            top_growth_areas=growth_areas,
            overall_growth=overall_growth,
            insights=insights,
            recommendations=recommendations,
        )

    async def _insights(
        self,
        trends: dict[str, MetricTrend],
        growth_areas: list[GrowthArea],
    ) -> tuple[list[str], list[str]]:
        if not trends:
            return [], []
        if self.narrative is None:
            return static_insights(trends), static_recommendations(growth_areas)

        prompt = build_analysis_prompt(trends, growth_areas)
        try:
            text = await self.narrative.generate(prompt)
        except AppError as e:
            logger.error("Failed to analyze metrics: %s", e.message)
            raise AppError(
                500,
                ErrorCode.METRICS_ERROR,
                "Failed to analyze metrics",
                cause=e,
            ) from e
        return parse_narrative(text)
