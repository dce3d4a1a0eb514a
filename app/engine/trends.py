"""Per-metric trend statistics over a dense daily series.

Gap days are part of the series with value 0: "nothing logged" counts as
zero intake for the mean, the deviation and the trend halves.
"""

from __future__ import annotations

import statistics
from typing import Sequence

from app.engine.models import DailyDataPoint, Metric, Trend, TrendStats
from app.engine.numeric import clamp, round_int

DEFAULT_TREND_THRESHOLD_PCT = 5.0


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean. Empty input yields 0."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N). Empty input yields 0."""
    if not values:
        return 0.0
    return statistics.pstdev(values)


def consistency_score(avg: float, deviation: float) -> int:
    """0-100, higher when the deviation is small relative to the mean.

    score = 100 - (deviation / mean) * 100, clamped. A mean of 0 scores 0.
    """
    if avg <= 0:
        return 0
    volatility = deviation / avg * 100.0
    return round_int(clamp(100.0 - volatility, 0.0, 100.0))


def classify_trend(
    values: Sequence[float],
    threshold_pct: float = DEFAULT_TREND_THRESHOLD_PCT,
) -> Trend:
    """Compare the first-half mean against the second-half mean.

    Halves are taken by index; for an odd length the middle value belongs
    to neither half. Fewer than 2 values is always stable.
    """
    if len(values) < 2:
        return Trend.stable

    half = len(values) // 2
    first_avg = mean(values[:half])
    second_avg = mean(values[-half:])

    if first_avg == 0.0:
        return Trend.up if second_avg > 0 else Trend.stable

    change_pct = (second_avg - first_avg) / first_avg * 100.0
    if change_pct > threshold_pct:
        return Trend.up
    if change_pct < -threshold_pct:
        return Trend.down
    return Trend.stable


def trend_stats(
    values: Sequence[float],
    threshold_pct: float = DEFAULT_TREND_THRESHOLD_PCT,
) -> TrendStats:
    avg = mean(values)
    deviation = std_dev(values)
    return TrendStats(
        mean=avg,
        std_dev=deviation,
        consistency_score=consistency_score(avg, deviation),
        trend=classify_trend(values, threshold_pct),
    )


def series_stats(
    series: Sequence[DailyDataPoint],
    threshold_pct: float = DEFAULT_TREND_THRESHOLD_PCT,
) -> dict[Metric, TrendStats]:
    """TrendStats for every metric of a series."""
    return {
        metric: trend_stats([p.value(metric) for p in series], threshold_pct)
        for metric in Metric
    }
