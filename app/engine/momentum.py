"""Momentum score: a 0-100 blend of recent logging and adherence factors."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from app.engine import trends
from app.engine.models import DailyDataPoint, EngineModel, Trend
from app.engine.numeric import round_half_up, round_int

DEFAULT_WINDOW_DAYS = 14

# Factor weights; improvement is rescaled from [-1, 1] to [0, 1] first.
WEIGHTS = {
    "logging_consistency": 35,
    "protein_adherence": 25,
    "calorie_stability": 15,
    "recent_activity": 15,
    "improvement": 10,
}

LEVELS = (
    (70, "strong"),
    (50, "building"),
    (25, "steady"),
)


class MomentumFactors(EngineModel):
    logging_consistency: float = 0.0
    protein_adherence: float = 0.0
    calorie_stability: float = 0.0
    recent_activity: float = 0.0
    improvement: float = 0.0


class MomentumReport(EngineModel):
    score: int
    level: str
    trend: Trend
    days_logged_7d: int
    factors: MomentumFactors


def _logged_between(logged: set[date], today: date, first_offset: int, count: int) -> int:
    return sum(1 for i in range(first_offset, first_offset + count) if today - timedelta(days=i) in logged)


def momentum_level(score: int) -> str:
    for floor, name in LEVELS:
        if score >= floor:
            return name
    return "starting"


def compute_momentum(
    points: Sequence[DailyDataPoint],
    today: date,
    protein_target: float,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> MomentumReport:
    """Score the trailing window (14 days by default) of a series ending `today`.

    Only days with at least one meal count as logged; adherence and
    stability are computed over logged days only.
    """
    window_start = today - timedelta(days=window_days - 1)
    logged_points = [p for p in points if p.meal_count > 0 and window_start <= p.date <= today]
    logged = {p.date for p in logged_points}

    last7 = _logged_between(logged, today, 0, 7)
    prev7 = _logged_between(logged, today, 7, 7)

    factors = {
        "logging_consistency": last7 / 7,
        "protein_adherence": 0.0,
        "calorie_stability": 0.0,
        "recent_activity": _logged_between(logged, today, 0, 3) / 3,
        "improvement": (last7 - prev7) / 7,
    }

    if logged_points and protein_target > 0:
        ratios = [min(1.0, p.protein / protein_target) for p in logged_points]
        factors["protein_adherence"] = trends.mean(ratios)

    if len(logged_points) >= 3:
        calories = [p.calories for p in logged_points]
        avg = trends.mean(calories)
        if avg > 0:
            factors["calorie_stability"] = max(0.0, 1 - trends.std_dev(calories) / avg)

    score = round_int(
        sum(WEIGHTS[name] * value for name, value in factors.items() if name != "improvement")
        + WEIGHTS["improvement"] * (factors["improvement"] + 1) / 2
    )

    if factors["improvement"] > 0.1:
        trend = Trend.up
    elif factors["improvement"] < -0.1:
        trend = Trend.down
    else:
        trend = Trend.stable

    return MomentumReport(
        score=score,
        level=momentum_level(score),
        trend=trend,
        days_logged_7d=last7,
        factors=MomentumFactors(**{k: round_half_up(v, 2) for k, v in factors.items()}),
    )
