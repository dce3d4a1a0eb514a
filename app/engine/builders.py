"""Report builders: assemble engine results into response envelopes.

Pure glue: every number comes from the engine modules. Configured
defaults (goals, thresholds, windows) are read from settings here and
passed into the engine explicitly.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from app.config import settings
from app.engine import compare, confidence, coverage, filters, nutrition, series, streak, trends
from app.engine.errors import InvalidArgumentError
from app.engine.goals import DailyGoals
from app.engine.habits import HabitSummary, summarize_habits
from app.engine.models import BodyProfile, ComparisonResult, DailyDataPoint, StreakState
from app.engine.momentum import MomentumReport, compute_momentum
from app.engine.numeric import round_half_up
from app.engine.presets import get_trend_range
from app.engine.schemas import (
    CompareRequest,
    ConfidenceExplanation,
    ConfidenceRequest,
    FilterRequest,
    FilterResult,
    HabitsRequest,
    MomentumRequest,
    StreakRequest,
    TargetsReport,
    TrendsReport,
    TrendsRequest,
    WeightRequest,
)
from app.engine.weight import WeightTrend, weight_trend

_logger = logging.getLogger(__name__)


def default_goals() -> DailyGoals:
    return DailyGoals(
        calories=settings.default_goal_calories,
        protein=settings.default_goal_protein,
        carbs=settings.default_goal_carbs,
        fat=settings.default_goal_fat,
    )


def build_targets(profile: BodyProfile) -> TargetsReport:
    bmr = nutrition.basal_metabolic_rate(
        profile.weight_kg, profile.height_cm, profile.age_years, profile.sex
    )
    tdee = nutrition.total_daily_energy_expenditure(bmr, profile.activity_level)
    kcal = nutrition.target_calories(tdee, profile.goal_type, profile.weekly_pace_kg)
    targets = nutrition.macro_targets(kcal, profile.weight_kg, profile.goal_type)
    return TargetsReport(
        bmr=round_half_up(bmr, 1),
        tdee=tdee,
        goal_label=nutrition.goal_label(profile.goal_type),
        targets=targets,
    )


def trend_window(request: TrendsRequest) -> tuple[date, date]:
    """Explicit start/end win; otherwise the range preset ending `today` (30 days by default)."""
    if request.start is not None and request.end is not None:
        return request.start, request.end
    if request.today is None:
        raise InvalidArgumentError("today", "required when start and end are not both given")
    preset = get_trend_range(request.range_id)
    return request.today - timedelta(days=preset.days - 1), request.today


def build_trends(request: TrendsRequest) -> TrendsReport:
    start, end = trend_window(request)
    dense = series.densify(request.data_points, start, end)
    stats = trends.series_stats(dense, settings.trend_threshold_pct)
    report = coverage.coverage_report(dense, coverage.days_in_range(start, end))
    _logger.debug(
        "Trends %s..%s: %d days, %d logged",
        start,
        end,
        report.total_days,
        report.logged_days,
    )
    return TrendsReport(
        start_date=start,
        end_date=end,
        goals=request.goals or default_goals(),
        data_points=dense,
        stats={metric.value: s for metric, s in stats.items()},
        confidence=report,
    )


def build_comparison(request: CompareRequest) -> ComparisonResult:
    p1, p2 = request.period1, request.period2
    current = compare.summarize_period(
        p1.label or compare.CURRENT_LABEL, p1.start, p1.end, p1.data_points
    )
    baseline = compare.summarize_period(
        p2.label or compare.BASELINE_LABEL, p2.start, p2.end, p2.data_points
    )
    return compare.compare_periods(current, baseline)


def build_filter(request: FilterRequest) -> FilterResult:
    spec = filters.parse_filter_spec(request.filter)
    matched = filters.apply_filter(request.data_points, spec)
    _logger.debug("Filter %s matched %d of %d days", spec.kind, len(matched), len(request.data_points))
    return FilterResult(
        kind=spec.kind,
        matches=matched,
        count=len(matched),
        total=len(request.data_points),
    )


def build_streak(request: StreakRequest) -> StreakState:
    return streak.compute_streak(request.active_days, request.today, settings.streak_window_days)


def build_confidence(request: ConfidenceRequest) -> ConfidenceExplanation:
    return ConfidenceExplanation(
        level=confidence.classify(request.confidence),
        title=confidence.title(request.confidence),
        reasons=confidence.explain(request.confidence, request.has_photo, request.has_description),
    )


def build_habits(request: HabitsRequest) -> HabitSummary:
    return summarize_habits(request.meals, request.today, settings.habit_window_days)


def build_momentum(request: MomentumRequest) -> MomentumReport:
    target = request.protein_target
    if target is None:
        target = settings.default_goal_protein
    return compute_momentum(
        request.data_points, request.today, target, settings.momentum_window_days
    )


def build_weight(request: WeightRequest) -> WeightTrend:
    return weight_trend(request.entries, request.goal_type, request.target_weight_kg)


def compare_preset_request(today: date, days: int, points: list[DailyDataPoint]) -> CompareRequest:
    """CompareRequest for "last N days vs previous N days" over one series."""
    c_start, c_end, b_start, b_end = compare.preset_windows(today, days)
    return CompareRequest(
        period1={"start": c_start, "end": c_end, "data_points": [p for p in points if c_start <= p.date <= c_end]},
        period2={"start": b_start, "end": b_end, "data_points": [p for p in points if b_start <= p.date <= b_end]},
    )
