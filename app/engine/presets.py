"""Hardcoded range presets. Configuration only."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RangePreset:
    id: str
    label: str
    days: int


TREND_RANGES: dict[str, RangePreset] = {
    "7d": RangePreset(id="7d", label="Last 7 days", days=7),
    "30d": RangePreset(id="30d", label="Last 30 days", days=30),
    "90d": RangePreset(id="90d", label="Last 90 days", days=90),
    "180d": RangePreset(id="180d", label="Last 180 days", days=180),
}

COMPARE_PRESETS: dict[str, RangePreset] = {
    "14d": RangePreset(id="14d", label="Last 14 days vs Previous 14 days", days=14),
    "30d": RangePreset(id="30d", label="Last 30 days vs Previous 30 days", days=30),
}

DEFAULT_TREND_RANGE = "30d"
DEFAULT_COMPARE_PRESET = "14d"


def get_trend_range(range_id: str | None) -> RangePreset:
    """Unknown or missing ids fall back to the 30-day range."""
    return TREND_RANGES.get(range_id or "", TREND_RANGES[DEFAULT_TREND_RANGE])


def get_compare_preset(preset_id: str | None) -> RangePreset:
    return COMPARE_PRESETS.get(preset_id or "", COMPARE_PRESETS[DEFAULT_COMPARE_PRESET])


def list_presets() -> dict[str, list[RangePreset]]:
    return {"trends": list(TREND_RANGES.values()), "compare": list(COMPARE_PRESETS.values())}
