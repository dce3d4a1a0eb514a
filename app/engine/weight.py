"""Body-weight trend context: net change, direction and alignment with the goal."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from pydantic import Field

from app.engine.errors import require_member
from app.engine.models import EngineModel, GoalType
from app.engine.numeric import round_half_up

# kg of net change below which the weight is considered steady
DIRECTION_TOLERANCE_KG = 0.2
ON_TRACK_MIN_CHANGE_KG = 0.1
MAINTAIN_TOLERANCE_KG = 0.5


class WeightEntry(EngineModel):
    date: dt.date
    weight_kg: float = Field(gt=0)


class WeightTrend(EngineModel):
    entry_count: int = 0
    first_weight: float | None = None
    last_weight: float | None = None
    total_change: float = 0.0
    day_span: int = 0
    direction: str = "maintaining"
    on_track: bool = False
    distance_to_target: float | None = None


def weight_direction(change_kg: float) -> str:
    if change_kg > DIRECTION_TOLERANCE_KG:
        return "gaining"
    if change_kg < -DIRECTION_TOLERANCE_KG:
        return "losing"
    return "maintaining"


def is_on_track(goal_type: GoalType | str, change_kg: float) -> bool:
    goal = require_member(GoalType, goal_type, "goal_type")
    if goal is GoalType.gain:
        return change_kg > ON_TRACK_MIN_CHANGE_KG
    if goal is GoalType.lose:
        return change_kg < -ON_TRACK_MIN_CHANGE_KG
    return abs(change_kg) < MAINTAIN_TOLERANCE_KG


def weight_trend(
    entries: Iterable[WeightEntry],
    goal_type: GoalType | str,
    target_weight_kg: float | None = None,
) -> WeightTrend:
    goal = require_member(GoalType, goal_type, "goal_type")
    ordered = sorted(entries, key=lambda e: e.date)
    if not ordered:
        return WeightTrend()

    first, last = ordered[0], ordered[-1]
    change = last.weight_kg - first.weight_kg
    distance = None
    if target_weight_kg is not None:
        distance = round_half_up(abs(target_weight_kg - last.weight_kg), 1)

    return WeightTrend(
        entry_count=len(ordered),
        first_weight=first.weight_kg,
        last_weight=last.weight_kg,
        total_change=round_half_up(change, 1),
        day_span=(last.date - first.date).days,
        direction=weight_direction(change),
        on_track=is_on_track(goal, change),
        distance_to_target=distance,
    )
