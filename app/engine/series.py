"""Build dense, date-indexed daily series from meal records.

Every calendar day in the requested range gets exactly one point; days with
nothing logged are zero-filled rather than dropped.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from enum import Enum
from typing import Sequence

from pydantic import Field

from app.engine.errors import InvalidArgumentError
from app.engine.models import DailyDataPoint, EngineModel, Metric


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"
    other = "other"


class MealRecord(EngineModel):
    """A single meal with its active nutrition estimate, already day-bucketed by the caller."""

    eaten_on: date
    meal_type: MealType = MealType.other
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)


def date_range(start: date, end: date) -> list[date]:
    """Inclusive list of days from start to end; empty when end < start."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def build_daily_series(meals: Iterable[MealRecord], start: date, end: date) -> list[DailyDataPoint]:
    """Aggregate meals into one point per day over [start, end]. Meals outside are ignored."""
    totals: dict[date, dict[str, float]] = {
        day: {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0, "meal_count": 0}
        for day in date_range(start, end)
    }
    for meal in meals:
        bucket = totals.get(meal.eaten_on)
        if bucket is None:
            continue
        bucket["calories"] += meal.calories
        bucket["protein"] += meal.protein
        bucket["carbs"] += meal.carbs
        bucket["fat"] += meal.fat
        bucket["meal_count"] += 1

    return [DailyDataPoint(date=day, **values) for day, values in totals.items()]


def densify(points: Iterable[DailyDataPoint], start: date, end: date) -> list[DailyDataPoint]:
    """Zero-fill a sparse, already aggregated series over [start, end].

    Points outside the range are dropped. Two points for the same day are
    a caller error.
    """
    by_day: dict[date, DailyDataPoint] = {}
    for point in points:
        if point.date in by_day:
            raise InvalidArgumentError("date", f"duplicate data point for {point.date.isoformat()}")
        by_day[point.date] = point

    return [by_day.get(day) or DailyDataPoint(date=day) for day in date_range(start, end)]


def metric_values(series: Sequence[DailyDataPoint], metric: Metric) -> list[float]:
    return [p.value(metric) for p in series]
