"""Engine records as Pydantic v2 models.

Attribute names are snake_case; serialized field names are camelCase
(stdDev, consistencyScore, loggedDays, ...) because clients and the coach
prompt builders read them verbatim.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Sex(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    athlete = "athlete"


class GoalType(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"


class Metric(str, Enum):
    calories = "calories"
    protein = "protein"
    carbs = "carbs"
    fat = "fat"


class ThresholdOperator(str, Enum):
    above = "above"
    below = "below"
    equals = "equals"


class Trend(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"


class Level(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class EngineModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class BodyProfile(EngineModel):
    sex: Sex
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age_years: float = Field(gt=0)
    activity_level: ActivityLevel
    goal_type: GoalType
    weekly_pace_kg: float = Field(default=0.5, ge=0)


class DailyDataPoint(EngineModel):
    """One calendar day of logged intake. Gap days carry zeros and meal_count=0."""

    date: dt.date
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    meal_count: int = Field(default=0, ge=0)

    def value(self, metric: Metric) -> float:
        return getattr(self, metric.value)


class DayOfWeekFilter(EngineModel):
    kind: Literal["day_of_week"] = "day_of_week"
    days: frozenset[int]

    @field_validator("days")
    @classmethod
    def _days_in_week(cls, days: frozenset[int]) -> frozenset[int]:
        bad = sorted(d for d in days if d < 0 or d > 6)
        if bad:
            raise ValueError(f"weekday indices must be 0-6, got {bad}")
        return days


class ThresholdFilter(EngineModel):
    kind: Literal["threshold"] = "threshold"
    metric: Metric
    operator: ThresholdOperator
    value: float


class NoFilter(EngineModel):
    kind: Literal["none"] = "none"


FilterSpec = Annotated[
    Union[DayOfWeekFilter, ThresholdFilter, NoFilter],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class MacroTargets(EngineModel):
    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)
    fat: int = Field(ge=0)
    carbs_clamped: bool = False  # True when the carb remainder went negative


class TrendStats(EngineModel):
    mean: float = 0.0
    std_dev: float = 0.0
    consistency_score: int = Field(default=0, ge=0, le=100)
    trend: Trend = Trend.stable


class ConfidenceReport(EngineModel):
    logged_days: int = 0
    total_days: int = 0
    percentage: int = 0
    level: Level = Level.low


class StreakState(EngineModel):
    streak: int = Field(default=0, ge=0)
    days_with_meals: int = Field(default=0, ge=0)


class PeriodSummary(EngineModel):
    label: str
    start: dt.date
    end: dt.date
    avg_calories: float = 0.0
    avg_protein: float = 0.0
    avg_carbs: float = 0.0
    avg_fat: float = 0.0
    logged_days: int = 0
    total_days: int = 0
    calorie_variability: float = 0.0


class Deltas(EngineModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    variability: float = 0.0


class ComparisonResult(EngineModel):
    period1: PeriodSummary
    period2: PeriodSummary
    deltas: Deltas
