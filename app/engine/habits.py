"""Logging-habit summary over a trailing window of days."""

from __future__ import annotations

import datetime as dt
from collections import Counter
from collections.abc import Iterable
from datetime import date, timedelta

from app.engine.errors import InvalidArgumentError
from app.engine.models import EngineModel
from app.engine.numeric import round_half_up
from app.engine.series import MealRecord, MealType, date_range

DEFAULT_WINDOW_DAYS = 30

_TRACKED_TYPES = (MealType.breakfast, MealType.lunch, MealType.dinner, MealType.snack)
# Snacks never count as the anchor meal; ties go to the later meal.
_ANCHOR_CANDIDATES = (MealType.breakfast, MealType.lunch, MealType.dinner)


class HeatmapDay(EngineModel):
    date: dt.date
    logged: bool


class HabitSummary(EngineModel):
    active_days: int
    total_days: int
    avg_days_per_week: float
    meal_consistency: dict[str, float]
    most_consistent_meal: str | None
    best_week_days: int
    heatmap: list[HeatmapDay]
    total_meals: int


def summarize_habits(
    meals: Iterable[MealRecord],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> HabitSummary:
    if window_days < 1:
        raise InvalidArgumentError("window_days", f"must be at least 1, got {window_days!r}")

    start = today - timedelta(days=window_days - 1)
    in_window = [m for m in meals if start <= m.eaten_on <= today]
    active = {m.eaten_on for m in in_window}
    by_type = Counter(m.meal_type for m in in_window)

    consistency = {
        t.value: round_half_up(by_type[t] / len(active), 2) if active else 0.0
        for t in _TRACKED_TYPES
    }

    most_consistent: str | None = None
    if in_window:
        best = 0.0
        for t in _ANCHOR_CANDIDATES:
            if most_consistent is None or consistency[t.value] >= best:
                most_consistent, best = t.value, consistency[t.value]

    weekly: Counter[int] = Counter()
    heatmap: list[HeatmapDay] = []
    for day in date_range(start, today):
        logged = day in active
        heatmap.append(HeatmapDay(date=day, logged=logged))
        weekly[(today - day).days // 7] += int(logged)

    return HabitSummary(
        active_days=len(active),
        total_days=window_days,
        avg_days_per_week=round_half_up(len(active) / window_days * 7, 1),
        meal_consistency=consistency,
        most_consistent_meal=most_consistent,
        best_week_days=max(weekly.values(), default=0),
        heatmap=heatmap,
        total_meals=len(in_window),
    )
