"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from app.engine.models import DailyDataPoint
from app.engine.series import MealRecord, MealType
from app.main import app

TODAY = date(2026, 2, 15)  # a Sunday


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Builders for test data
# ---------------------------------------------------------------------------


def make_point(
    day: date,
    calories: float = 0.0,
    protein: float = 0.0,
    carbs: float = 0.0,
    fat: float = 0.0,
    meal_count: int | None = None,
) -> DailyDataPoint:
    """A data point; meal_count defaults to 1 when any calories were logged."""
    if meal_count is None:
        meal_count = 1 if calories > 0 else 0
    return DailyDataPoint(
        date=day,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        meal_count=meal_count,
    )


def make_series(calories: list[float], start: date = TODAY, **macros: list[float]) -> list[DailyDataPoint]:
    """Consecutive days from `start`, one per calorie value."""
    points = []
    for i, kcal in enumerate(calories):
        extra = {name: values[i] for name, values in macros.items()}
        points.append(make_point(start + timedelta(days=i), calories=kcal, **extra))
    return points


def make_meal(
    day: date,
    meal_type: MealType = MealType.lunch,
    calories: float = 500.0,
    protein: float = 30.0,
    carbs: float = 50.0,
    fat: float = 20.0,
) -> MealRecord:
    return MealRecord(
        eaten_on=day,
        meal_type=meal_type,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


def point_json(point: DailyDataPoint) -> dict:
    return point.model_dump(mode="json", by_alias=True)
