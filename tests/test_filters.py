"""Tests for day-selection filter evaluation."""

from datetime import date, timedelta

import pytest

from app.engine.errors import InvalidArgumentError
from app.engine.filters import apply_filter, parse_filter_spec, weekday_index
from app.engine.models import (
    DayOfWeekFilter,
    Metric,
    NoFilter,
    ThresholdFilter,
    ThresholdOperator,
)

from tests.conftest import TODAY, make_point, make_series


class TestWeekdayIndex:
    def test_sunday_is_zero(self):
        assert weekday_index(date(2026, 2, 15)) == 0

    def test_saturday_is_six(self):
        assert weekday_index(date(2026, 2, 21)) == 6

    def test_monday_is_one(self):
        assert weekday_index(date(2026, 2, 16)) == 1


class TestApplyFilter:
    def test_none_returns_full_series(self):
        points = make_series([1200, 0, 1600, 1500])
        result = apply_filter(points, NoFilter())
        assert result == points
        assert result is not points

    def test_threshold_above(self):
        points = make_series([1200, 1600, 1500])
        spec = ThresholdFilter(metric=Metric.calories, operator=ThresholdOperator.above, value=1500)
        result = apply_filter(points, spec)
        assert result == [points[1]]

    def test_threshold_below(self):
        points = make_series([1200, 1600, 1500])
        spec = ThresholdFilter(metric="calories", operator="below", value=1500)
        assert apply_filter(points, spec) == [points[0]]

    def test_threshold_equals(self):
        points = make_series([1200, 1600, 1500])
        spec = ThresholdFilter(metric="calories", operator="equals", value=1500)
        assert apply_filter(points, spec) == [points[2]]

    def test_threshold_on_protein(self):
        points = make_series([2000, 2000, 2000], protein=[90, 160, 120])
        spec = ThresholdFilter(metric="protein", operator="above", value=100)
        assert [p.protein for p in apply_filter(points, spec)] == [160, 120]

    def test_weekends(self):
        # TODAY is a Sunday; 14 days cover two full weekends
        points = make_series([2000] * 14)
        result = apply_filter(points, DayOfWeekFilter(days={0, 6}))
        assert [p.date for p in result] == [
            TODAY,
            TODAY + timedelta(days=6),
            TODAY + timedelta(days=7),
            TODAY + timedelta(days=13),
        ]

    def test_preserves_order_and_source(self):
        points = make_series([1000, 3000, 2000, 4000])
        snapshot = list(points)
        spec = ThresholdFilter(metric="calories", operator="above", value=1500)
        result = apply_filter(points, spec)
        assert [p.calories for p in result] == [3000, 2000, 4000]
        assert points == snapshot

    def test_gap_days_can_match(self):
        points = [make_point(TODAY, calories=0)]
        spec = ThresholdFilter(metric="calories", operator="below", value=1000)
        assert apply_filter(points, spec) == points

    def test_empty_series(self):
        assert apply_filter([], DayOfWeekFilter(days={1})) == []


class TestParseFilterSpec:
    def test_tagged_threshold(self):
        spec = parse_filter_spec({"kind": "threshold", "metric": "fat", "operator": "below", "value": 50})
        assert spec == ThresholdFilter(metric=Metric.fat, operator=ThresholdOperator.below, value=50)

    def test_tagged_day_of_week(self):
        spec = parse_filter_spec({"kind": "day_of_week", "days": [1, 2, 3, 4, 5]})
        assert isinstance(spec, DayOfWeekFilter)
        assert spec.days == frozenset({1, 2, 3, 4, 5})

    def test_none(self):
        assert parse_filter_spec({"kind": "none"}) == NoFilter()

    def test_flat_shape(self):
        spec = parse_filter_spec(
            {
                "filterType": "threshold",
                "thresholdMetric": "calories",
                "thresholdOperator": "above",
                "thresholdValue": 2200,
                "interpretation": "Days over 2200 kcal",
            }
        )
        assert spec == ThresholdFilter(metric="calories", operator="above", value=2200)

    def test_flat_day_of_week(self):
        spec = parse_filter_spec({"filterType": "day_of_week", "daysOfWeek": [0, 6]})
        assert spec == DayOfWeekFilter(days={0, 6})

    def test_range_falls_back_to_none(self):
        assert parse_filter_spec({"filterType": "range"}) == NoFilter()

    def test_unknown_kind(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"kind": "month"})
        assert exc.value.field == "kind"

    def test_non_string_kind(self):
        for kind in (["threshold"], {"kind": "none"}, 3, None):
            with pytest.raises(InvalidArgumentError) as exc:
                parse_filter_spec({"kind": kind})
            assert exc.value.field == "kind"

    def test_non_string_flat_kind(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"filterType": ["day_of_week"], "daysOfWeek": [0]})
        assert exc.value.field == "kind"

    def test_unknown_metric(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"kind": "threshold", "metric": "sugar", "operator": "above", "value": 1})
        assert exc.value.field == "metric"

    def test_unknown_operator(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"kind": "threshold", "metric": "fat", "operator": "between", "value": 1})
        assert exc.value.field == "operator"

    def test_missing_value(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"kind": "threshold", "metric": "fat", "operator": "above"})
        assert exc.value.field == "value"

    def test_weekday_out_of_range(self):
        with pytest.raises(InvalidArgumentError) as exc:
            parse_filter_spec({"kind": "day_of_week", "days": [7]})
        assert exc.value.field == "days"
