"""Tests for energy and macro target math."""

from __future__ import annotations

import logging

import pytest

from app.engine.errors import InvalidArgumentError
from app.engine.models import ActivityLevel, BodyProfile, GoalType, Sex
from app.engine.nutrition import (
    basal_metabolic_rate,
    goal_label,
    macro_targets,
    progress_percent,
    target_calories,
    targets_for_profile,
    total_daily_energy_expenditure,
)


class TestBasalMetabolicRate:
    def test_male(self):
        # 10*80 + 6.25*180 - 5*30 + 5
        assert basal_metabolic_rate(80, 180, 30, "male") == 1780.0

    def test_female(self):
        # 10*60 + 6.25*165 - 5*25 - 161
        assert basal_metabolic_rate(60, 165, 25, Sex.female) == 1345.25

    def test_male_female_gap_is_166(self):
        for weight, height, age in [(50, 150, 20), (80, 180, 30), (120, 200, 65)]:
            male = basal_metabolic_rate(weight, height, age, "male")
            female = basal_metabolic_rate(weight, height, age, "female")
            assert male - female == 166.0

    def test_monotonic_in_weight_height_age(self):
        base = basal_metabolic_rate(70, 170, 40, "female")
        assert basal_metabolic_rate(71, 170, 40, "female") > base
        assert basal_metabolic_rate(70, 171, 40, "female") > base
        assert basal_metabolic_rate(70, 170, 41, "female") < base

    @pytest.mark.parametrize(
        "args,field",
        [
            ((0, 170, 30, "male"), "weight_kg"),
            ((70, -1, 30, "male"), "height_cm"),
            ((70, 170, 0, "male"), "age_years"),
            ((70, 170, 30, "other"), "sex"),
        ],
    )
    def test_invalid_inputs_name_the_field(self, args, field):
        with pytest.raises(InvalidArgumentError) as exc:
            basal_metabolic_rate(*args)
        assert exc.value.field == field


class TestTotalDailyEnergyExpenditure:
    @pytest.mark.parametrize(
        "level,expected",
        [
            ("sedentary", 2136),
            ("light", 2448),
            ("moderate", 2759),
            ("active", 3071),
            ("athlete", 3382),
        ],
    )
    def test_multipliers(self, level, expected):
        assert total_daily_energy_expenditure(1780.0, level) == expected

    def test_accepts_enum(self):
        assert total_daily_energy_expenditure(1000.0, ActivityLevel.sedentary) == 1200

    def test_unknown_level(self):
        with pytest.raises(InvalidArgumentError) as exc:
            total_daily_energy_expenditure(1780.0, "very_active")
        assert exc.value.field == "activity_level"


class TestTargetCalories:
    def test_lose_half_kg(self):
        # 0.5 * 7700 / 7 = 550
        assert target_calories(2500, "lose", 0.5) == 1950

    def test_gain_quarter_kg(self):
        # 0.25 * 7700 / 7 = 275
        assert target_calories(2500, GoalType.gain, 0.25) == 2775

    def test_default_pace(self):
        assert target_calories(2500, "lose") == 1950

    def test_maintain_ignores_pace(self):
        for pace in (0.0, 0.5, 1.0, 3.0):
            assert target_calories(2345, "maintain", pace) == 2345

    def test_rounds_to_nearest(self):
        assert target_calories(2000.6, "gain", 0.5) == 2551
        assert target_calories(2000.4, "gain", 0.5) == 2550

    def test_unknown_goal(self):
        with pytest.raises(InvalidArgumentError) as exc:
            target_calories(2000, "bulk")
        assert exc.value.field == "goal_type"


class TestMacroTargets:
    def test_maintain(self):
        t = macro_targets(2000, 70, "maintain")
        assert t.protein == 98  # 70 * 1.4
        assert t.fat == 62  # 2000 * 0.28 / 9 = 62.2
        assert t.carbs == 262  # (2000 - 392 - 560) / 4
        assert t.calories == 2000
        assert t.carbs_clamped is False

    def test_lose_uses_two_grams_per_kg(self):
        t = macro_targets(1800, 80, "lose")
        assert t.protein == 160
        assert t.fat == 56
        assert t.carbs == 164  # (1800 - 640 - 504) / 4

    def test_protein_and_fat_within_budget_for_maintain(self):
        for weight in range(40, 151, 10):
            for calories in range(1200, 4001, 200):
                t = macro_targets(calories, weight, "maintain")
                assert t.protein * 4 + t.fat * 9 <= calories
                assert t.carbs >= 0

    def test_negative_carbs_are_clamped(self):
        t = macro_targets(1200, 200, "maintain")
        assert t.carbs == 0
        assert t.carbs_clamped is True
        # protein/fat untouched, so the total may exceed the budget
        assert t.protein == 280
        assert t.fat == 37
        assert t.protein * 4 + t.fat * 9 > 1200

    def test_clamp_is_logged(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("app"), "propagate", True)
        with caplog.at_level("WARNING", logger="app.engine.nutrition"):
            macro_targets(1000, 150, "gain")
        assert "clamping to 0" in caplog.text

    def test_non_positive_weight(self):
        with pytest.raises(InvalidArgumentError):
            macro_targets(2000, 0, "maintain")


class TestProgressPercent:
    def test_basic(self):
        assert progress_percent(1000, 2000) == 50

    def test_rounding(self):
        assert progress_percent(1, 3) == 33
        assert progress_percent(2, 3) == 67

    def test_clamped_high(self):
        assert progress_percent(2500, 2000) == 100

    def test_clamped_low(self):
        assert progress_percent(-50, 2000) == 0

    def test_zero_goal(self):
        assert progress_percent(500, 0) == 0


class TestTargetsForProfile:
    def test_chain(self):
        profile = BodyProfile(
            sex="male",
            weight_kg=80,
            height_cm=180,
            age_years=30,
            activity_level="moderate",
            goal_type="lose",
        )
        t = targets_for_profile(profile)
        # BMR 1780 -> TDEE 2759 -> 2209 kcal
        assert t.calories == 2209
        assert t.protein == 160

    def test_camel_case_input(self):
        profile = BodyProfile.model_validate(
            {
                "sex": "female",
                "weightKg": 60,
                "heightCm": 165,
                "ageYears": 25,
                "activityLevel": "light",
                "goalType": "maintain",
                "weeklyPaceKg": 0.25,
            }
        )
        assert profile.weekly_pace_kg == 0.25


class TestGoalLabel:
    def test_labels(self):
        assert goal_label("lose") == "Weight Loss"
        assert goal_label(GoalType.maintain) == "Maintain Weight"
        assert goal_label("gain") == "Weight Gain"
