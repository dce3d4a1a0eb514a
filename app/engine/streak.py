"""Consecutive-day logging streak ending today."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from app.engine.errors import InvalidArgumentError
from app.engine.models import StreakState

DEFAULT_WINDOW_DAYS = 7


def compute_streak(
    active_days: Iterable[date],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> StreakState:
    """Count consecutive active days walking back from `today`.

    Today without activity is pending, not broken: the walk continues to
    yesterday. Any earlier gap ends the streak. Only the last
    `window_days` days (today included) are examined.
    """
    if window_days < 1:
        raise InvalidArgumentError("window_days", f"must be at least 1, got {window_days!r}")

    window_start = today - timedelta(days=window_days - 1)
    in_window = {d for d in active_days if window_start <= d <= today}

    streak = 0
    for offset in range(window_days):
        day = today - timedelta(days=offset)
        if day in in_window:
            streak += 1
        elif offset > 0:
            break

    return StreakState(streak=streak, days_with_meals=len(in_window))
