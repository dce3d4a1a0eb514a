"""Evaluate structured day-selection filters against a daily series.

Filter specs come from the natural-language query interpreter
and are only consumed here.
"""

from __future__ import annotations

import operator
from datetime import date
from typing import Any, Callable, Sequence

from pydantic import TypeAdapter, ValidationError

from app.engine.errors import InvalidArgumentError, require_member
from app.engine.models import (
    DailyDataPoint,
    DayOfWeekFilter,
    FilterSpec,
    Metric,
    NoFilter,
    ThresholdFilter,
    ThresholdOperator,
)

_COMPARATORS: dict[ThresholdOperator, Callable[[float, float], bool]] = {
    ThresholdOperator.above: operator.gt,
    ThresholdOperator.below: operator.lt,
    ThresholdOperator.equals: operator.eq,
}

_FILTER_ADAPTER: TypeAdapter[FilterSpec] = TypeAdapter(FilterSpec)

# Kinds the interpreter may emit that have no evaluator yet.
_PASSTHROUGH_KINDS = {"range"}


def weekday_index(day: date) -> int:
    """Sunday-based weekday: 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def matches(point: DailyDataPoint, spec: FilterSpec) -> bool:
    if isinstance(spec, NoFilter):
        return True
    if isinstance(spec, DayOfWeekFilter):
        return weekday_index(point.date) in spec.days
    if isinstance(spec, ThresholdFilter):
        return _COMPARATORS[spec.operator](point.value(spec.metric), spec.value)
    raise InvalidArgumentError("filter", f"unsupported filter spec {type(spec).__name__}")


def apply_filter(series: Sequence[DailyDataPoint], spec: FilterSpec) -> list[DailyDataPoint]:
    """Order-preserving subsequence of `series` matching `spec`.

    A ``none`` spec returns the whole series. The input is never mutated.
    """
    if isinstance(spec, NoFilter):
        return list(series)
    return [point for point in series if matches(point, spec)]


def parse_filter_spec(payload: dict[str, Any]) -> FilterSpec:
    """Validate an interpreter payload into a FilterSpec.

    Accepts the tagged shape (``{"kind": "threshold", ...}``) and the
    interpreter's flat shape (``{"filterType": "threshold",
    "thresholdMetric": ..., "thresholdOperator": ..., "thresholdValue": ...}``).
    """
    if "kind" not in payload and "filterType" in payload:
        payload = _from_flat_shape(payload)

    kind = payload.get("kind")
    if not isinstance(kind, str):
        raise InvalidArgumentError("kind", f"filter kind must be a string, got {kind!r}")
    if kind in _PASSTHROUGH_KINDS:
        return NoFilter()
    if kind not in ("day_of_week", "threshold", "none"):
        raise InvalidArgumentError("kind", f"unknown filter kind {kind!r}")
    if kind == "threshold":
        require_member(Metric, payload.get("metric"), "metric")
        require_member(ThresholdOperator, payload.get("operator"), "operator")

    try:
        return _FILTER_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"] if part != kind) or "filter"
        raise InvalidArgumentError(field, first["msg"]) from exc


def _from_flat_shape(payload: dict[str, Any]) -> dict[str, Any]:
    kind = payload.get("filterType")
    if kind == "day_of_week":
        return {"kind": kind, "days": payload.get("daysOfWeek") or []}
    if kind == "threshold":
        return {
            "kind": kind,
            "metric": payload.get("thresholdMetric"),
            "operator": payload.get("thresholdOperator"),
            "value": payload.get("thresholdValue"),
        }
    return {"kind": kind}
