"""
core/macro_calc.py
────────────────────────────────────────────────────────────────────────
Source-of-truth for daily calorie and macro targets.

1. BMR  (Mifflin–St Jeor – the one formula used everywhere)
2. TDEE (activity multiplier)
3. Goal adjustment (±500 kcal) clamped to [1200, 4000]
4. Protein 0.8 g/lb · fat 25 % kcal · carbs = remainder
"""

from __future__ import annotations

import logging

from core.models.results import MacroTargets
from core.models.user import ActivityLevel, Gender, Goal, UserProfile

Logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.light: 1.375,
    ActivityLevel.moderate: 1.55,
    ActivityLevel.active: 1.725,
    ActivityLevel.very_active: 1.9,
}

# "other" sits halfway between the male (+5) and female (-161) offsets
_BMR_OFFSET: dict[Gender, float] = {
    Gender.male: 5,
    Gender.female: -161,
    Gender.other: -78,
}

GOAL_ADJUSTMENT_KCAL = 500
MIN_CALORIES = 1200
MAX_CALORIES = 4000
LB_PER_KG = 2.2
PROTEIN_G_PER_LB = 0.8
FAT_CALORIE_SHARE = 0.25
KCAL_PER_G = {"protein": 4, "carbs": 4, "fat": 9}
MEALS_PER_DAY = 3


def bmr(p: UserProfile) -> float:
    base = 10 * p.weight + 6.25 * p.height - 5 * p.age
    return base + _BMR_OFFSET[p.gender]


def tdee(p: UserProfile) -> float:
    return bmr(p) * ACTIVITY_MULTIPLIERS[p.activity_level]


def clamp_calories(kcal: float) -> float:
    return max(MIN_CALORIES, min(MAX_CALORIES, kcal))


def target_calories(p: UserProfile) -> int:
    kcal = tdee(p)
    if p.goal == Goal.lose:
        kcal -= GOAL_ADJUSTMENT_KCAL
    elif p.goal == Goal.gain:
        kcal += GOAL_ADJUSTMENT_KCAL
    return round(clamp_calories(kcal))


def protein_grams(weight_kg: float, g_per_lb: float = PROTEIN_G_PER_LB) -> float:
    return weight_kg * LB_PER_KG * g_per_lb


def split_calories(kcal: float, protein_g: float) -> tuple[int, int, int]:
    """(protein, carbs, fat) grams: fat 25 % of kcal, carbs take the rest."""
    fat_g = FAT_CALORIE_SHARE * kcal / KCAL_PER_G["fat"]
    carbs_g = (kcal - protein_g * KCAL_PER_G["protein"] - fat_g * KCAL_PER_G["fat"]) / KCAL_PER_G["carbs"]
    return round(protein_g), max(round(carbs_g), 0), round(fat_g)


def calculate_macros(p: UserProfile) -> MacroTargets:
    bmr_val = bmr(p)
    tdee_val = tdee(p)
    kcal = target_calories(p)
    protein, carbs, fat = split_calories(kcal, protein_grams(p.weight))

    Logger.debug(
        "macros: bmr=%.1f tdee=%.1f kcal=%d p=%d c=%d f=%d",
        bmr_val, tdee_val, kcal, protein, carbs, fat,
    )
    return MacroTargets(
        bmr=round(bmr_val),
        tdee=round(tdee_val),
        calories=kcal,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


def per_meal_targets(p: UserProfile, meals: int = MEALS_PER_DAY) -> dict[str, float]:
    """Daily targets divided evenly across *meals*."""
    daily = calculate_macros(p)
    return {
        "calories": daily.calories / meals,
        "protein": daily.protein / meals,
        "carbs": daily.carbs / meals,
        "fat": daily.fat / meals,
    }
