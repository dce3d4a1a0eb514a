"""Fallback daily goals used when a user has no saved targets."""

from __future__ import annotations

from app.engine.models import EngineModel, MacroTargets


class DailyGoals(EngineModel):
    calories: float = 2000.0
    protein: float = 150.0
    carbs: float = 200.0
    fat: float = 70.0

    @classmethod
    def from_targets(cls, targets: MacroTargets) -> "DailyGoals":
        return cls(
            calories=targets.calories,
            protein=targets.protein,
            carbs=targets.carbs,
            fat=targets.fat,
        )
