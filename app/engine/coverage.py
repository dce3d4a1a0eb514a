"""Logged-day coverage of a date range. Qualifies how far trend stats can be trusted."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from app.engine.models import ConfidenceReport, DailyDataPoint, Level
from app.engine.numeric import round_int

HIGH_COVERAGE_PCT = 80
MEDIUM_COVERAGE_PCT = 50


def days_in_range(start: date, end: date) -> int:
    """Inclusive calendar-day count; 0 when end precedes start."""
    if end < start:
        return 0
    return (end - start).days + 1


def coverage_level(percentage: float) -> Level:
    if percentage >= HIGH_COVERAGE_PCT:
        return Level.high
    if percentage >= MEDIUM_COVERAGE_PCT:
        return Level.medium
    return Level.low


def coverage_report(
    series: Sequence[DailyDataPoint],
    total_days: int | None = None,
) -> ConfidenceReport:
    """Coverage of `series` over a range of `total_days` (defaults to len(series)).

    A day is logged when it has at least one meal. Zero total days yields 0%.
    """
    logged = sum(1 for p in series if p.meal_count > 0)
    total = len(series) if total_days is None else total_days
    percentage = round_int(logged / total * 100.0) if total > 0 else 0
    return ConfidenceReport(
        logged_days=logged,
        total_days=total,
        percentage=percentage,
        level=coverage_level(percentage),
    )
