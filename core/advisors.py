"""
core/advisors.py
────────────────────────────────────────────────────────────────────────
Rule-based advice built on the numeric outputs of the other modules.

Everything here is a pure function of its arguments. The one random
choice (`motivational_message`) takes an injectable `random.Random`, so
tests pass a seeded instance and get a fixed message.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List

import numpy as np

from core.deficit import days_until
from core.errors import InvalidParameterError
from core.macro_calc import (
    MAX_CALORIES,
    MEALS_PER_DAY,
    MIN_CALORIES,
    calculate_macros,
    protein_grams,
)
from core.models.progress import Mood
from core.models.results import TrendSummary
from core.models.user import Goal, UserProfile
from core.plateau import detect_plateau
from core.prediction import predict_weight
from core.series import ChronologicalSeries, SampleLike
from core.trend import calculate_trend

_LOG = logging.getLogger(__name__)

MOOD_SCORES: Dict[Mood, int] = {
    Mood.excellent: 5,
    Mood.good: 4,
    Mood.neutral: 3,
    Mood.tired: 2,
    Mood.exhausted: 1,
}

MOTIVATIONAL_MESSAGES = (
    "Keep up the great work!",
    "Every day is a step closer to your goal!",
    "Consistency is key to success!",
    "You're making amazing progress!",
    "Stay focused on your goals!",
)

_GOAL_DIRECTION = {
    Goal.lose: "losing",
    Goal.gain: "gaining",
    Goal.maintain: "maintaining",
}

ANALYSIS_MIN_SAMPLES = 7
GOAL_ADJUST_MIN_SAMPLES = 14
WATER_ML_PER_KG = 35
CALORIE_NUDGE = 200


# ─────────────────────────── classification ─────────────────────────── #
def goal_aligned(goal: Goal, direction: str) -> bool:
    return _GOAL_DIRECTION[goal] == direction


def workout_ratio(series: ChronologicalSeries) -> float:
    if not len(series):
        return 0.0
    return sum(s.workout_completed for s in series) / len(series)


def calculate_consistency(samples: Iterable[SampleLike]) -> float:
    """Share of entries that fall on distinct calendar days (0–100)."""
    series = ChronologicalSeries.of(samples)
    if not len(series):
        return 0.0
    days = {s.date.date() for s in series}
    return round(len(days) / len(series) * 100, 1)


def calculate_success_rate(profile: UserProfile, samples: Iterable[SampleLike]) -> Dict[str, Any]:
    """How much of the required change has been achieved so far."""
    series = ChronologicalSeries.of(samples)
    if not len(series) or profile.target_weight is None:
        return {"rate": 0.0, "on_track": False}

    start = series.first.weight
    required = abs(profile.target_weight - start)
    achieved = abs(series.last.weight - start)
    rate = 100.0 if required == 0 else min(100.0, achieved / required * 100)

    on_track = False
    if len(series) >= 2:
        on_track = goal_aligned(profile.goal, calculate_trend(series).direction)
    return {"rate": round(rate, 1), "on_track": on_track}


def average_mood(samples: Iterable[SampleLike]) -> str:
    series = ChronologicalSeries.of(samples)
    scores = [MOOD_SCORES[s.mood] for s in series if s.mood is not None]
    if not scores:
        return Mood.neutral.value

    avg = float(np.mean(scores))
    if avg >= 4.5:
        return Mood.excellent.value
    if avg >= 3.5:
        return Mood.good.value
    if avg >= 2.5:
        return Mood.neutral.value
    if avg >= 1.5:
        return Mood.tired.value
    return Mood.exhausted.value


def weekly_trends(samples: Iterable[SampleLike]) -> Dict[str, Any]:
    week = ChronologicalSeries.of(samples).most_recent(7)
    if not len(week):
        return {"avg_weight": None, "workouts_completed": 0, "avg_mood": Mood.neutral.value}
    return {
        "avg_weight": round(float(week.weights.mean()), 1),
        "workouts_completed": sum(s.workout_completed for s in week),
        "avg_mood": average_mood(week),
    }


# ─────────────────────────── recommendations ────────────────────────── #
def generate_recommendations(
    profile: UserProfile, samples: Iterable[SampleLike], trend: TrendSummary
) -> List[str]:
    series = ChronologicalSeries.of(samples)
    out: List[str] = []
    if trend.pace == "fast":
        out.append("Your weight change is rapid. Ensure you're losing/gaining healthily.")
    if workout_ratio(series) < 0.3:
        out.append("Try to increase your workout frequency for better results.")
    if profile.goal == Goal.lose and trend.direction != "losing":
        out.append("Consider reducing calorie intake or increasing activity.")
    elif profile.goal == Goal.gain and trend.direction != "gaining":
        out.append("Consider increasing calorie intake to support weight gain.")
    return out


def macro_reasoning(
    profile: UserProfile, trend: TrendSummary, samples: Iterable[SampleLike]
) -> List[str]:
    series = ChronologicalSeries.of(samples)
    reasons: List[str] = []
    if not goal_aligned(profile.goal, trend.direction):
        reasons.append("Adjusting calories to better align with your goal.")
    if workout_ratio(series) > 0.5:
        reasons.append("Increased protein to support your active lifestyle.")
    return reasons


def optimize_macros(profile: UserProfile, samples: Iterable[SampleLike]) -> Dict[str, Any]:
    """Nudge the baseline targets by observed progress."""
    series = ChronologicalSeries.of(samples)
    trend = calculate_trend(series)
    current = calculate_macros(profile)

    calories = current.calories
    if profile.goal == Goal.lose and trend.direction != "losing":
        calories = max(MIN_CALORIES, calories - CALORIE_NUDGE)
    elif profile.goal == Goal.gain and trend.direction != "gaining":
        calories = min(MAX_CALORIES, calories + CALORIE_NUDGE)

    protein = current.protein
    if workout_ratio(series) > 0.5:
        protein = round(protein_grams(profile.weight, g_per_lb=1.0))

    optimized = {
        "calories": calories,
        "protein": protein,
        "carbs": round(calories * 0.4 / 4),
        "fat": round(calories * 0.3 / 9),
    }
    return {
        "current": current.model_dump(),
        "optimized": optimized,
        "reasoning": macro_reasoning(profile, trend, series),
    }


def adjust_goals(
    profile: UserProfile, samples: Iterable[SampleLike], now: datetime | None = None
) -> Dict[str, Any]:
    """Compare the observed weekly rate with the rate the target date needs."""
    series = ChronologicalSeries.of(samples)
    if len(series) < GOAL_ADJUST_MIN_SAMPLES:
        return {"message": "Need at least 2 weeks of data to adjust goals"}
    if profile.target_weight is None or profile.target_date is None:
        raise InvalidParameterError("target_weight and target_date are required to adjust goals")

    now = now or datetime.now(timezone.utc)
    days_left = days_until(profile.target_date, now)
    if days_left <= 0:
        raise InvalidParameterError(
            "target date must be in the future", {"days_to_target": days_left}
        )

    current_rate = abs(calculate_trend(series).weekly_change)
    remaining = abs(profile.weight - profile.target_weight)
    target_rate = remaining / (days_left / 7)
    _LOG.debug("goal rate check: current=%.2f required=%.2f kg/week", current_rate, target_rate)

    result: Dict[str, Any] = {
        "target_weight": profile.target_weight,
        "target_date": profile.target_date,
        "adjustment_needed": False,
        "current_rate": current_rate,
        "required_rate": round(target_rate, 2),
    }
    if current_rate < target_rate * 0.5:
        result["adjustment_needed"] = True
        if current_rate > 0:
            result["target_date"] = now + timedelta(weeks=remaining / current_rate)
        result["recommendation"] = (
            "Based on your current progress, consider extending your "
            "target date or increasing your efforts."
        )
    elif current_rate > target_rate * 1.5:
        result["adjustment_needed"] = True
        result["recommendation"] = (
            "You're progressing faster than expected. "
            "Make sure this pace is sustainable and healthy."
        )
    else:
        result["recommendation"] = "You're on track to reach your goal!"
    return result


# ───────────────────────────── insights ─────────────────────────────── #
def daily_insights(profile: UserProfile) -> Dict[str, Any]:
    return {
        "calorie_target": calculate_macros(profile).calories,
        "water_goal_ml": round(profile.weight * WATER_ML_PER_KG),
        "step_goal": 10000,
        "sleep_recommendation": "7-9 hours",
    }


def nutrition_insights(profile: UserProfile) -> Dict[str, Any]:
    macros = calculate_macros(profile)
    return {
        "protein_per_meal": round(macros.protein / MEALS_PER_DAY),
        "carb_timing": "Consider having more carbs around workouts",
        "hydration": f"Aim for {round(profile.weight * WATER_ML_PER_KG)}ml of water daily",
    }


def motivational_message(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    return rng.choice(MOTIVATIONAL_MESSAGES)


def analyze_progress(
    profile: UserProfile, samples: Iterable[SampleLike], now: datetime | None = None
) -> Dict[str, Any]:
    series = ChronologicalSeries.of(samples)
    if len(series) < ANALYSIS_MIN_SAMPLES:
        return {"message": "Continue logging for at least a week to get detailed analysis"}

    trend = calculate_trend(series)
    prediction = predict_weight(series, days_ahead=7, now=now)
    return {
        "weight_trend": trend.model_dump(),
        "predictions": [p.model_dump() for p in prediction.predictions],
        "low_confidence": prediction.low_confidence,
        "consistency": calculate_consistency(series),
        "recommendations": generate_recommendations(profile, series, trend),
        "plateau": detect_plateau(series).model_dump(),
        "success_rate": calculate_success_rate(profile, series),
    }


def generate_insights(
    profile: UserProfile,
    samples: Iterable[SampleLike],
    rng: random.Random | None = None,
) -> Dict[str, Any]:
    return {
        "daily_insights": daily_insights(profile),
        "weekly_trends": weekly_trends(samples),
        "nutrition_insights": nutrition_insights(profile),
        "motivational_message": motivational_message(rng),
    }


# ───────────────────────────── planning ─────────────────────────────── #
MEAL_SHARES = {"breakfast": 0.25, "lunch": 0.35, "dinner": 0.30, "snacks": 0.10}


def generate_meal_plan(
    profile: UserProfile, days: int = 7, now: datetime | None = None
) -> List[Dict[str, Any]]:
    """Split the daily targets across meals, repeated for *days* days."""
    if days < 1:
        raise InvalidParameterError("days must be at least 1", {"days": days})

    now = now or datetime.now(timezone.utc)
    totals = calculate_macros(profile).model_dump()
    meals = {
        meal: {macro: round(totals[macro] * share) for macro in ("calories", "protein", "carbs", "fat")}
        for meal, share in MEAL_SHARES.items()
    }
    return [
        {
            "day": i + 1,
            "date": now + timedelta(days=i),
            "meals": {meal: dict(split) for meal, split in meals.items()},
            "totals": dict(totals),
        }
        for i in range(days)
    ]


_CARDIO = {
    Goal.lose: {
        "frequency": "4-5 times per week",
        "duration": "30-45 minutes",
        "intensity": "Moderate to high",
        "types": ["Running", "Cycling", "HIIT", "Swimming"],
    },
    Goal.gain: {
        "frequency": "2-3 times per week",
        "duration": "20-30 minutes",
        "intensity": "Low to moderate",
        "types": ["Walking", "Light cycling", "Yoga"],
    },
    Goal.maintain: {
        "frequency": "3-4 times per week",
        "duration": "30 minutes",
        "intensity": "Moderate",
        "types": ["Jogging", "Cycling", "Swimming", "Dancing"],
    },
}

_WEEKLY_SCHEDULE = {
    Goal.lose: (
        "Cardio + Core", "Strength Training - Upper Body", "HIIT",
        "Strength Training - Lower Body", "Cardio", "Full Body Strength",
        "Rest or Light Yoga",
    ),
    Goal.gain: (
        "Chest & Triceps", "Back & Biceps", "Legs", "Shoulders & Abs",
        "Arms", "Legs", "Rest",
    ),
    Goal.maintain: (
        "Full Body Strength", "Cardio", "Upper Body Strength", "Yoga or Rest",
        "Lower Body Strength", "Cardio", "Rest or Light Activity",
    ),
}

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def recommend_cardio(goal: Goal) -> Dict[str, Any]:
    return dict(_CARDIO[Goal(goal)])


def recommend_strength(goal: Goal) -> Dict[str, str]:
    if Goal(goal) == Goal.gain:
        return {"frequency": "4-5 times per week", "split": "Push/Pull/Legs", "sets": "4-5", "reps": "6-12"}
    return {"frequency": "3-4 times per week", "split": "Full body", "sets": "3-4", "reps": "12-15"}


def recommend_flexibility() -> Dict[str, Any]:
    return {
        "frequency": "Daily",
        "duration": "10-15 minutes",
        "types": ["Static stretching", "Dynamic stretching", "Yoga", "Foam rolling"],
    }


def weekly_workout_schedule(goal: Goal) -> Dict[str, str]:
    return dict(zip(WEEKDAYS, _WEEKLY_SCHEDULE[Goal(goal)]))


def workout_recommendations(profile: UserProfile) -> Dict[str, Any]:
    return {
        "cardio": recommend_cardio(profile.goal),
        "strength": recommend_strength(profile.goal),
        "flexibility": recommend_flexibility(),
        "weekly_schedule": weekly_workout_schedule(profile.goal),
    }
