"""Engine HTTP router: stateless computations over caller-supplied data."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.auth import verify_api_key
from app.engine import builders
from app.engine.habits import HabitSummary
from app.engine.models import ComparisonResult, StreakState
from app.engine.momentum import MomentumReport
from app.engine.presets import get_compare_preset, list_presets
from app.engine.schemas import (
    CompareRequest,
    ComparePresetRequest,
    ConfidenceExplanation,
    ConfidenceRequest,
    FilterRequest,
    FilterResult,
    HabitsRequest,
    MomentumRequest,
    StreakRequest,
    TargetsReport,
    TargetsRequest,
    TrendsReport,
    TrendsRequest,
    WeightRequest,
)
from app.engine.weight import WeightTrend

router = APIRouter(prefix="/engine", tags=["engine"], dependencies=[Depends(verify_api_key)])


# ---------------------------------------------------------------------------
# Targets & confidence
# ---------------------------------------------------------------------------


@router.post("/targets", response_model=TargetsReport)
async def targets(profile: TargetsRequest) -> TargetsReport:
    return builders.build_targets(profile)


@router.post("/confidence", response_model=ConfidenceExplanation)
async def confidence(body: ConfidenceRequest) -> ConfidenceExplanation:
    return builders.build_confidence(body)


# ---------------------------------------------------------------------------
# Trends, comparison, filters
# ---------------------------------------------------------------------------


@router.post("/trends", response_model=TrendsReport)
async def trends(body: TrendsRequest) -> TrendsReport:
    return builders.build_trends(body)


@router.post("/compare", response_model=ComparisonResult)
async def compare(body: CompareRequest) -> ComparisonResult:
    return builders.build_comparison(body)


@router.post("/compare/presets/{preset_id}", response_model=ComparisonResult)
async def compare_preset(preset_id: str, body: ComparePresetRequest) -> ComparisonResult:
    """Last N days vs the N days before; unknown presets fall back to 14 days."""
    preset = get_compare_preset(preset_id)
    request = builders.compare_preset_request(body.today, preset.days, body.data_points)
    return builders.build_comparison(request)


@router.post("/filter", response_model=FilterResult)
async def filter_days(body: FilterRequest) -> FilterResult:
    return builders.build_filter(body)


# ---------------------------------------------------------------------------
# Habits
# ---------------------------------------------------------------------------


@router.post("/streak", response_model=StreakState)
async def streak(body: StreakRequest) -> StreakState:
    return builders.build_streak(body)


@router.post("/habits", response_model=HabitSummary)
async def habits(body: HabitsRequest) -> HabitSummary:
    return builders.build_habits(body)


@router.post("/momentum", response_model=MomentumReport)
async def momentum(body: MomentumRequest) -> MomentumReport:
    return builders.build_momentum(body)


@router.post("/weight", response_model=WeightTrend)
async def weight(body: WeightRequest) -> WeightTrend:
    return builders.build_weight(body)


# ---------------------------------------------------------------------------
# /engine/presets
# ---------------------------------------------------------------------------


@router.get("/presets")
async def presets_list() -> dict[str, list[dict]]:
    return {
        group: [{"id": p.id, "label": p.label, "days": p.days} for p in presets]
        for group, presets in list_presets().items()
    }
