"""Metrics analyzer: trend math, growth areas, recording rules and analyze_progress."""

import asyncio
import unittest
import uuid
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from journalup.core.errors import AppError, ErrorCode, ValidationError
from journalup.models import Metric
from journalup.services.metrics import (
    GROWTH_SUGGESTIONS,
    MetricsService,
    calculate_growth_areas,
    calculate_metric_trends,
    calculate_overall_growth,
    calculate_strength,
    classify_trend,
    parse_narrative,
    static_insights,
)
from journalup.services.narrative import NarrativeServiceError

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


def _metrics(metric_type: str, *values: int) -> list[Metric]:
    return [Metric(type=metric_type, value=v) for v in values]


class TestClassifyTrend(unittest.TestCase):
    """Changes within +/-5% are stable."""

    def test_deadband_boundaries(self) -> None:
        self.assertEqual(classify_trend(5.0), "stable")
        self.assertEqual(classify_trend(-5.0), "stable")
        self.assertEqual(classify_trend(5.01), "increasing")
        self.assertEqual(classify_trend(-5.01), "decreasing")
        self.assertEqual(classify_trend(0.0), "stable")


class TestMetricTrends(unittest.TestCase):
    def test_no_previous_data_means_zero_change(self) -> None:
        trends = calculate_metric_trends(_metrics("effort", 5, 7), [])
        effort = trends["effort"]
        self.assertEqual(effort.change, 0)
        self.assertEqual(effort.trend, "stable")
        self.assertEqual(effort.average_value, 6)
        self.assertEqual(effort.data_points, 2)

    def test_increase_over_previous_window(self) -> None:
        trends = calculate_metric_trends(_metrics("learning", 8), _metrics("learning", 5))
        self.assertEqual(trends["learning"].change, 60.0)
        self.assertEqual(trends["learning"].trend, "increasing")

    def test_decrease_over_previous_window(self) -> None:
        trends = calculate_metric_trends(_metrics("feedback", 4), _metrics("feedback", 8, 8))
        self.assertEqual(trends["feedback"].change, -50.0)
        self.assertEqual(trends["feedback"].trend, "decreasing")

    def test_change_is_rounded_to_two_decimals(self) -> None:
        trends = calculate_metric_trends(_metrics("effort", 7), _metrics("effort", 3))
        self.assertEqual(trends["effort"].change, 133.33)

    def test_types_without_current_data_are_omitted(self) -> None:
        trends = calculate_metric_trends(_metrics("effort", 5), _metrics("resilience", 5))
        self.assertEqual(list(trends), ["effort"])


class TestGrowthAreas(unittest.TestCase):
    def test_strength_is_clamped(self) -> None:
        top = calculate_metric_trends(_metrics("effort", 10), _metrics("effort", 5))["effort"]
        bottom = calculate_metric_trends(_metrics("effort", 1), _metrics("effort", 5))["effort"]
        self.assertEqual(calculate_strength(top), 1.0)
        self.assertEqual(calculate_strength(bottom), 0.0)

    def test_stable_strength_is_normalized_average(self) -> None:
        trend = calculate_metric_trends(_metrics("effort", 5, 7), [])["effort"]
        self.assertAlmostEqual(calculate_strength(trend), 5 / 9)

    def test_at_most_three_weakest_areas_ascending(self) -> None:
        current = (
            _metrics("resilience", 9)
            + _metrics("learning", 2)
            + _metrics("challenge", 7)
            + _metrics("feedback", 4)
            + _metrics("effort", 5)
        )
        areas = calculate_growth_areas(calculate_metric_trends(current, []))
        self.assertEqual([a.type for a in areas], ["learning", "feedback", "effort"])
        strengths = [a.strength for a in areas]
        self.assertEqual(strengths, sorted(strengths))
        self.assertEqual(areas[0].suggestions, list(GROWTH_SUGGESTIONS["learning"]))

    def test_overall_growth(self) -> None:
        self.assertEqual(calculate_overall_growth({}), 0.0)
        trends = calculate_metric_trends(_metrics("effort", 5, 7), [])
        self.assertAlmostEqual(calculate_overall_growth(trends), 5 / 9)


class TestParseNarrative(unittest.TestCase):
    def test_splits_on_recommendations_marker(self) -> None:
        text = "- Effort is up.\n\n- Learning is steady.\nRECOMMENDATIONS:\n- Rest more.\n- Read daily."
        insights, recommendations = parse_narrative(text)
        self.assertEqual(insights, ["Effort is up.", "Learning is steady."])
        self.assertEqual(recommendations, ["Rest more.", "Read daily."])

    def test_missing_marker_yields_no_recommendations(self) -> None:
        insights, recommendations = parse_narrative("Only insights here.")
        self.assertEqual(insights, ["Only insights here."])
        self.assertEqual(recommendations, [])


class TestStaticInsights(unittest.TestCase):
    def test_only_moves_outside_deadband_are_reported(self) -> None:
        trends = calculate_metric_trends(
            _metrics("effort", 8) + _metrics("learning", 5),
            _metrics("effort", 5) + _metrics("learning", 5),
        )
        insights = static_insights(trends)
        self.assertEqual(len(insights), 1)
        self.assertIn("effort", insights[0])
        self.assertIn("significantly improved", insights[0])


class TestRecordMetric(unittest.TestCase):
    """Value must be within 1..10 and the type known; valid values reach the repository."""

    def setUp(self) -> None:
        self.repository = MagicMock()
        self.service = MetricsService(self.repository)
        self.user_id = uuid.uuid4()

    def test_out_of_range_values_are_rejected(self) -> None:
        for value in (0, 11, -3):
            with self.assertRaises(ValidationError) as ctx:
                self.service.record_metric(self.user_id, "effort", value)
            self.assertEqual(ctx.exception.status_code, 400)
        self.repository.record.assert_not_called()

    def test_boundary_values_are_accepted(self) -> None:
        self.service.record_metric(self.user_id, "effort", 1)
        self.service.record_metric(self.user_id, "effort", 10, "good week")
        self.assertEqual(self.repository.record.call_count, 2)
        self.repository.record.assert_called_with(self.user_id, "effort", 10, "good week")

    def test_unknown_type_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.service.record_metric(self.user_id, "sleep", 5)


class TestAnalyzeProgress(unittest.TestCase):
    def setUp(self) -> None:
        self.repository = MagicMock()
        self.repository.list_for_user.side_effect = [
            _metrics("effort", 8),
            _metrics("effort", 5),
        ]
        self.user_id = uuid.uuid4()

    def test_windows_and_narrative(self) -> None:
        narrative = MagicMock()
        narrative.generate = AsyncMock(
            return_value="- Effort rose.\nRECOMMENDATIONS:\n- Keep the streak."
        )
        service = MetricsService(self.repository, narrative)

        analysis = asyncio.run(service.analyze_progress(self.user_id, now=NOW))

        self.assertEqual(analysis.time_range.end, NOW)
        self.assertEqual(analysis.time_range.start, NOW - timedelta(days=30))
        current_call, previous_call = self.repository.list_for_user.call_args_list
        self.assertEqual(current_call.args, (self.user_id, NOW - timedelta(days=30), NOW))
        self.assertEqual(
            previous_call.args,
            (self.user_id, NOW - timedelta(days=60), NOW - timedelta(days=30)),
        )
        self.assertEqual(analysis.metrics["effort"].change, 60.0)
        self.assertEqual(analysis.metrics["effort"].trend, "increasing")
        self.assertEqual(analysis.insights, ["Effort rose."])
        self.assertEqual(analysis.recommendations, ["Keep the streak."])
        narrative.generate.assert_awaited_once()
        self.assertIn("effort: increasing (60.0% change)", narrative.generate.await_args.args[0])

    def test_narrative_failure_raises_metrics_error(self) -> None:
        narrative = MagicMock()
        narrative.generate = AsyncMock(side_effect=NarrativeServiceError("AI service is unreachable."))
        service = MetricsService(self.repository, narrative)

        with self.assertRaises(AppError) as ctx:
            asyncio.run(service.analyze_progress(self.user_id, now=NOW))
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.code, ErrorCode.METRICS_ERROR)
        self.assertEqual(ctx.exception.message, "Failed to analyze metrics")

    def test_without_narrative_uses_static_text(self) -> None:
        service = MetricsService(self.repository)
        analysis = asyncio.run(service.analyze_progress(self.user_id, now=NOW))
        self.assertEqual(len(analysis.insights), 1)
        self.assertEqual(
            analysis.recommendations,
            list(GROWTH_SUGGESTIONS["effort"][:2]),
        )

    def test_no_data_skips_narrative(self) -> None:
        self.repository.list_for_user.side_effect = [[], []]
        narrative = MagicMock()
        narrative.generate = AsyncMock()
        service = MetricsService(self.repository, narrative)

        analysis = asyncio.run(service.analyze_progress(self.user_id, now=NOW))

        self.assertEqual(analysis.metrics, {})
        self.assertEqual(analysis.top_growth_areas, [])
        self.assertEqual(analysis.overall_growth, 0.0)
        narrative.generate.assert_not_awaited()
