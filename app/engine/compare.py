"""Before/after comparison of two date windows.

Deltas are raw signed differences (current - baseline). No significance
testing is done and none should be implied when presenting them.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from app.engine import coverage, series, trends
from app.engine.errors import InvalidArgumentError
from app.engine.models import ComparisonResult, DailyDataPoint, Deltas, Metric, PeriodSummary
from app.engine.numeric import round_half_up

CURRENT_LABEL = "Current Period"
BASELINE_LABEL = "Previous Period"


def summarize_period(
    label: str,
    start: date,
    end: date,
    points: Sequence[DailyDataPoint],
) -> PeriodSummary:
    """Averages, calorie variability and coverage for one window.

    The window is zero-filled first, so averages are per calendar day.
    """
    if end < start:
        raise InvalidArgumentError("end", f"{end.isoformat()} is before start {start.isoformat()}")

    dense = series.densify(points, start, end)
    report = coverage.coverage_report(dense)

    def avg(metric: Metric) -> float:
        return round_half_up(trends.mean(series.metric_values(dense, metric)), 1)

    return PeriodSummary(
        label=label,
        start=start,
        end=end,
        avg_calories=avg(Metric.calories),
        avg_protein=avg(Metric.protein),
        avg_carbs=avg(Metric.carbs),
        avg_fat=avg(Metric.fat),
        logged_days=report.logged_days,
        total_days=report.total_days,
        calorie_variability=round_half_up(
            trends.std_dev(series.metric_values(dense, Metric.calories)), 1
        ),
    )


def compare_periods(current: PeriodSummary, baseline: PeriodSummary) -> ComparisonResult:
    if current.start <= baseline.end and baseline.start <= current.end:
        raise InvalidArgumentError("period2", "comparison windows must not overlap")

    def diff(a: float, b: float) -> float:
        return round_half_up(a - b, 1)

    return ComparisonResult(
        period1=current,
        period2=baseline,
        deltas=Deltas(
            calories=diff(current.avg_calories, baseline.avg_calories),
            protein=diff(current.avg_protein, baseline.avg_protein),
            carbs=diff(current.avg_carbs, baseline.avg_carbs),
            fat=diff(current.avg_fat, baseline.avg_fat),
            variability=diff(current.calorie_variability, baseline.calorie_variability),
        ),
    )


def preset_windows(today: date, days: int) -> tuple[date, date, date, date]:
    """(current_start, current_end, baseline_start, baseline_end) for last N days vs the N before."""
    if days < 1:
        raise InvalidArgumentError("days", f"must be at least 1, got {days!r}")
    current_end = today
    current_start = today - timedelta(days=days - 1)
    baseline_end = current_start - timedelta(days=1)
    baseline_start = baseline_end - timedelta(days=days - 1)
    return current_start, current_end, baseline_start, baseline_end
