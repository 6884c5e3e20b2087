"""
core/forecasts.py
────────────────────────────────────────────────────────────────────────
Heuristic forecasts: weight-change rate from a calorie deficit, macro
split, workout readiness, recovery time, adherence probability, meal
times and supplement suggestions.

None of these are fitted models. Scores start from a fixed baseline, take rule-based
adjustments and are clipped into their valid range.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import numpy as np

from core.models.user import ActivityLevel, Goal, UserProfile
from core.series import ChronologicalSeries, SampleLike

KCAL_PER_LB = 3500
KG_PER_LB = 0.453592
WEEKS_PER_MONTH = 4.33

_RATE_ACTIVITY = {
    ActivityLevel.sedentary: 0.9,
    ActivityLevel.light: 0.95,
    ActivityLevel.moderate: 1.0,
    ActivityLevel.active: 1.05,
    ActivityLevel.very_active: 1.1,
}

_INTENSITY = {"low": 0.5, "moderate": 1.0, "high": 1.5, "extreme": 2.0}
_DIFFICULTY = {"easy": 20, "moderate": 10, "hard": -10, "extreme": -25}


def predict_weight_change_rate(
    daily_deficit: float, activity_level: ActivityLevel = ActivityLevel.moderate
) -> Dict[str, Any]:
    """kg/week lost (positive) or gained (negative) for a daily deficit."""
    kg_per_week = daily_deficit * 7 / KCAL_PER_LB * KG_PER_LB

    # metabolic adaptation to large deficits
    if abs(daily_deficit) > 1000:
        adaptation = 0.8
    elif abs(daily_deficit) > 750:
        adaptation = 0.9
    else:
        adaptation = 1.0

    rate = kg_per_week * adaptation * _RATE_ACTIVITY[ActivityLevel(activity_level)]
    if abs(rate) > 1.0:
        advice = "This rate might be too aggressive. Consider a more moderate approach."
    elif abs(rate) < 0.25:
        advice = "Progress might be slow at this rate. Consider adjusting your calorie deficit."
    else:
        advice = "This is a healthy and sustainable rate of change."

    return {
        "weekly_rate": round(rate, 3),
        "monthly_rate": round(rate * WEEKS_PER_MONTH, 3),
        "realistic": abs(rate) <= 1.0,
        "recommendation": advice,
    }


def predict_optimal_macro_split(profile: UserProfile, workout_type: str | None = None) -> Dict[str, Any]:
    """Percent of calories from protein / carbs / fat."""
    if profile.goal == Goal.gain:
        ratios = np.array([0.35, 0.45, 0.20])
    elif profile.goal == Goal.lose:
        ratios = np.array([0.40, 0.30, 0.30])
    else:
        ratios = np.array([0.30, 0.40, 0.30])

    reasons: List[str] = []
    if profile.goal == Goal.gain:
        reasons += ["Higher protein for muscle synthesis", "Increased carbs for energy and recovery"]
    elif profile.goal == Goal.lose:
        reasons += ["Higher protein to preserve muscle mass", "Moderate carbs to maintain energy"]

    if workout_type == "endurance":
        ratios += [0.0, 0.10, -0.10]
        reasons.append("Extra carbohydrates for sustained energy")
    elif workout_type == "strength":
        ratios += [0.05, -0.05, 0.0]
        reasons.append("Additional protein for muscle repair")

    protein, carbs, fat = ratios / ratios.sum()
    return {
        "protein": round(protein * 100),
        "carbs": round(carbs * 100),
        "fat": round(fat * 100),
        "reasoning": reasons,
    }


def predict_workout_performance(
    samples: Iterable[SampleLike],
    average_sleep_hours: float | None = None,
    protein_met: bool = False,
    hydration_met: bool = False,
    calories_met: bool = False,
) -> Dict[str, Any]:
    score = 50.0
    week = ChronologicalSeries.of(samples).most_recent(7)
    if len(week):
        # missing energy counts as a neutral 5; the week is always /7
        energy = sum(s.energy_level or 5 for s in week) / 7
        score += (energy - 5) * 5

    if average_sleep_hours is not None:
        if 7 <= average_sleep_hours <= 9:
            score += 10
        elif average_sleep_hours < 6:
            score -= 15

    score += 5 * protein_met + 5 * hydration_met + 10 * calories_met
    score = float(np.clip(score, 0, 100))

    if score >= 80:
        advice = "Excellent conditions for a high-intensity workout!"
    elif score >= 60:
        advice = "Good energy levels - perfect for moderate intensity training."
    elif score >= 40:
        advice = "Consider a lighter workout or active recovery today."
    else:
        advice = "Rest might be more beneficial today. Listen to your body."
    return {"score": round(score, 1), "recommendation": advice}


def predict_recovery_time(
    intensity: str,
    muscle_soreness: int,
    sleep_quality: int,
    protein_met: bool = False,
    hydration_met: bool = False,
) -> Dict[str, Any]:
    hours = 24 * _INTENSITY.get(intensity, 1.0)

    if muscle_soreness > 7:
        hours += 24
    elif muscle_soreness > 5:
        hours += 12

    if sleep_quality < 5:
        hours += 12
    elif sleep_quality >= 8:
        hours -= 6

    if protein_met and hydration_met:
        hours -= 6

    if hours <= 24:
        advice = "You should be ready for another workout tomorrow!"
    elif hours <= 48:
        advice = "Consider light activity tomorrow, full intensity in 2 days."
    else:
        advice = "Take 2-3 days for recovery. Focus on stretching and light movement."
    return {"hours": float(np.clip(hours, 12, 72)), "recommendation": advice}


def predict_adherence(
    past_adherence: float | None,
    goal_difficulty: str,
    support_system: bool,
    motivation: int,
) -> Dict[str, Any]:
    probability = 50.0
    # history is the strongest predictor
    if past_adherence:
        probability = past_adherence * 0.7 + probability * 0.3
    probability += _DIFFICULTY.get(goal_difficulty, 0)
    if support_system:
        probability += 15
    probability += (motivation - 5) * 3

    if probability < 50:
        tips = [
            "Consider setting smaller, more achievable milestones",
            "Find an accountability partner or join a support group",
            "Track your progress daily to stay motivated",
        ]
    elif probability < 75:
        tips = [
            "You're on the right track! Stay consistent",
            "Reward yourself for reaching milestones",
            "Plan for potential obstacles in advance",
        ]
    else:
        tips = [
            "Excellent adherence potential!",
            "Consider setting more challenging goals",
            "Share your success to inspire others",
        ]
    return {"probability": round(float(np.clip(probability, 0, 100)), 1), "tips": tips}


def predict_meal_times(
    goal: Goal, morning_workout: bool = False, evening_workout: bool = False
) -> Dict[str, str]:
    """HH:MM meal slots shifted around workouts and trimmed by goal."""
    times = {
        "breakfast": "07:00",
        "snack1": "10:00",
        "lunch": "12:30",
        "snack2": "15:30",
        "dinner": "18:30",
        "snack3": "20:30",
    }
    if morning_workout:
        times.update(breakfast="06:00", snack1="09:00")
    if evening_workout:
        times.update(dinner="19:30", snack3="21:00")

    goal = Goal(goal)
    if goal == Goal.lose:
        del times["snack3"]
    elif goal == Goal.gain:
        times["snack4"] = "22:00"
    return times


def _supplement(name: str, dosage: str, timing: str, reason: str) -> Dict[str, str]:
    return {"name": name, "dosage": dosage, "timing": timing, "reason": reason}


def predict_supplement_needs(profile: UserProfile, diet: str | None = None) -> List[Dict[str, str]]:
    out: List[Dict[str, str]] = []
    if profile.goal == Goal.gain:
        out.append(_supplement(
            "Creatine Monohydrate", "5g daily", "Post-workout or anytime",
            "Supports muscle growth and strength",
        ))
    if profile.activity_level in (ActivityLevel.active, ActivityLevel.very_active):
        out.append(_supplement(
            "Whey Protein", "25-30g per serving", "Post-workout",
            "Quick absorption for muscle recovery",
        ))
    if diet in ("vegan", "vegetarian"):
        out.append(_supplement(
            "Vitamin B12", "2.4mcg daily", "With meals", "Often lacking in plant-based diets",
        ))
        out.append(_supplement(
            "Iron", "18mg daily", "With vitamin C, avoid with calcium",
            "Plant-based iron is less bioavailable",
        ))

    # general health, for everyone
    out.append(_supplement(
        "Vitamin D3", "1000-2000 IU daily", "With fat-containing meal",
        "Supports bone health and immunity",
    ))
    out.append(_supplement(
        "Omega-3", "1-2g daily", "With meals", "Anti-inflammatory and heart health",
    ))
    return out
