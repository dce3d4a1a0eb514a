"""Energy and macro target math. Pure functions, no I/O."""

from __future__ import annotations

import logging

from app.engine.errors import InvalidArgumentError, require_member, require_positive
from app.engine.models import ActivityLevel, BodyProfile, GoalType, MacroTargets, Sex
from app.engine.numeric import clamp, round_int

_logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,  # little or no exercise
    ActivityLevel.light: 1.375,  # 1-3 days/week
    ActivityLevel.moderate: 1.55,  # 3-5 days/week
    ActivityLevel.active: 1.725,  # 6-7 days/week
    ActivityLevel.athlete: 1.9,  # hard training or physical job
}

# Approximate energy content of 1 kg of body mass.
KCAL_PER_KG = 7700.0

PROTEIN_PER_KG: dict[GoalType, float] = {
    GoalType.lose: 2.0,
    GoalType.maintain: 1.4,
    GoalType.gain: 2.0,
}

FAT_CALORIE_SHARE = 0.28
KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARBS = 4.0
KCAL_PER_G_FAT = 9.0

GOAL_LABELS: dict[GoalType, str] = {
    GoalType.lose: "Weight Loss",
    GoalType.maintain: "Maintain Weight",
    GoalType.gain: "Weight Gain",
}


def basal_metabolic_rate(
    weight_kg: float,
    height_cm: float,
    age_years: float,
    sex: Sex | str,
) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    require_positive(weight_kg, "weight_kg")
    require_positive(height_cm, "height_cm")
    require_positive(age_years, "age_years")
    sex = require_member(Sex, sex, "sex")

    base = 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years
    if sex is Sex.male:
        return base + 5.0
    return base - 161.0


def total_daily_energy_expenditure(bmr: float, activity_level: ActivityLevel | str) -> int:
    level = require_member(ActivityLevel, activity_level, "activity_level")
    return round_int(bmr * ACTIVITY_MULTIPLIERS[level])


def target_calories(
    tdee: float,
    goal_type: GoalType | str,
    weekly_pace_kg: float = 0.5,
) -> int:
    """Daily calorie target; maintain ignores the pace entirely."""
    goal = require_member(GoalType, goal_type, "goal_type")
    if goal is GoalType.maintain:
        return round_int(tdee)

    daily_delta = abs(weekly_pace_kg) * KCAL_PER_KG / 7.0
    if goal is GoalType.lose:
        return round_int(tdee - daily_delta)
    return round_int(tdee + daily_delta)


def macro_targets(target_kcal: float, weight_kg: float, goal_type: GoalType | str) -> MacroTargets:
    """Split a calorie target into protein/carbs/fat grams.

    Protein is set per kg of body weight, fat is a fixed share of calories,
    carbs take the remainder. When the remainder is negative carbs are
    clamped to 0 and ``carbs_clamped`` is set; protein and fat are left
    as computed, so the total may exceed the calorie target.
    """
    goal = require_member(GoalType, goal_type, "goal_type")
    require_positive(weight_kg, "weight_kg")
    if target_kcal < 0:
        raise InvalidArgumentError("target_calories", f"must not be negative, got {target_kcal!r}")

    protein = round_int(weight_kg * PROTEIN_PER_KG[goal])
    fat_kcal = target_kcal * FAT_CALORIE_SHARE
    fat = round_int(fat_kcal / KCAL_PER_G_FAT)

    carb_kcal = target_kcal - protein * KCAL_PER_G_PROTEIN - fat_kcal
    carbs = round_int(carb_kcal / KCAL_PER_G_CARBS)
    clamped = carbs < 0
    if clamped:
        _logger.warning(
            "Carb remainder negative (target=%s kcal, weight=%s kg, goal=%s); clamping to 0",
            target_kcal,
            weight_kg,
            goal.value,
        )
        carbs = 0

    return MacroTargets(
        calories=round_int(target_kcal),
        protein=protein,
        carbs=carbs,
        fat=fat,
        carbs_clamped=clamped,
    )


def progress_percent(current: float, goal: float) -> int:
    """Percent of goal reached, 0-100. A zero goal yields 0."""
    if goal == 0:
        return 0
    return int(clamp(round_int(current / goal * 100.0), 0, 100))


def targets_for_profile(profile: BodyProfile) -> MacroTargets:
    bmr = basal_metabolic_rate(profile.weight_kg, profile.height_cm, profile.age_years, profile.sex)
    tdee = total_daily_energy_expenditure(bmr, profile.activity_level)
    calories = target_calories(tdee, profile.goal_type, profile.weekly_pace_kg)
    return macro_targets(calories, profile.weight_kg, profile.goal_type)


def goal_label(goal_type: GoalType | str) -> str:
    return GOAL_LABELS[require_member(GoalType, goal_type, "goal_type")]
