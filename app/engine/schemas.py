"""Request bodies and response envelopes for the engine HTTP surface."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import Field

from app.engine.goals import DailyGoals
from app.engine.models import (
    BodyProfile,
    ConfidenceReport,
    DailyDataPoint,
    EngineModel,
    GoalType,
    Level,
    MacroTargets,
    TrendStats,
)
from app.engine.series import MealRecord
from app.engine.weight import WeightEntry

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TrendsRequest(EngineModel):
    """Either an explicit start/end, or `today` plus a range preset id (7d, 30d, 90d, 180d)."""

    start: dt.date | None = None
    end: dt.date | None = None
    today: dt.date | None = None
    range_id: str | None = Field(default=None, alias="range")
    data_points: list[DailyDataPoint] = Field(default_factory=list)
    goals: DailyGoals | None = None


class PeriodRequest(EngineModel):
    label: str | None = None
    start: dt.date
    end: dt.date
    data_points: list[DailyDataPoint] = Field(default_factory=list)


class CompareRequest(EngineModel):
    period1: PeriodRequest
    period2: PeriodRequest


class FilterRequest(EngineModel):
    data_points: list[DailyDataPoint] = Field(default_factory=list)
    # Raw interpreter output; validated by filters.parse_filter_spec.
    filter: dict[str, Any] = Field(default_factory=lambda: {"kind": "none"})


class StreakRequest(EngineModel):
    today: dt.date
    active_days: list[dt.date] = Field(default_factory=list)


class ConfidenceRequest(EngineModel):
    confidence: float = Field(ge=0, le=1)
    has_photo: bool = False
    has_description: bool = False


class HabitsRequest(EngineModel):
    today: dt.date
    meals: list[MealRecord] = Field(default_factory=list)


class MomentumRequest(EngineModel):
    today: dt.date
    data_points: list[DailyDataPoint] = Field(default_factory=list)
    protein_target: float | None = None


class WeightRequest(EngineModel):
    entries: list[WeightEntry] = Field(default_factory=list)
    goal_type: GoalType = GoalType.maintain
    target_weight_kg: float | None = None


TargetsRequest = BodyProfile


class ComparePresetRequest(EngineModel):
    today: dt.date
    data_points: list[DailyDataPoint] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TargetsReport(EngineModel):
    bmr: float
    tdee: int
    goal_label: str
    targets: MacroTargets


class TrendsReport(EngineModel):
    start_date: dt.date
    end_date: dt.date
    goals: DailyGoals
    data_points: list[DailyDataPoint]
    stats: dict[str, TrendStats]
    confidence: ConfidenceReport


class FilterResult(EngineModel):
    kind: str
    matches: list[DailyDataPoint]
    count: int
    total: int


class ConfidenceExplanation(EngineModel):
    level: Level
    title: str
    reasons: list[str]
