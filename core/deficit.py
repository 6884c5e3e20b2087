"""
core/deficit.py
────────────────────────────────────────────────────────────────────────
Daily calorie deficit (or surplus) needed to hit a target weight by a
target date, plus the adjusted daily intake built on top of it.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

from core.errors import InvalidParameterError
from core.macro_calc import calculate_macros, clamp_calories, protein_grams
from core.models.results import DeficitPlan
from core.models.user import UserProfile

_LOG = logging.getLogger(__name__)

KCAL_PER_LB = 3500
LB_PER_KG = 2.2
MAX_SAFE_DAILY_DEFICIT = 1000
SECONDS_PER_DAY = 24 * 60 * 60


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def days_until(target_date: datetime, now: datetime | None = None) -> int:
    now = _aware(now or datetime.now(timezone.utc))
    delta = _aware(target_date) - now
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def calculate_calorie_deficit(
    current_weight: float,
    target_weight: float,
    target_date: datetime,
    now: datetime | None = None,
) -> DeficitPlan:
    days = days_until(target_date, now)
    if days <= 0:
        raise InvalidParameterError(
            "target date must be in the future",
            {"target_date": _aware(target_date).isoformat(), "days_to_target": days},
        )

    weight_to_lose = current_weight - target_weight
    weekly_loss = weight_to_lose / days * 7
    daily_deficit = weekly_loss * KCAL_PER_LB / 7 / LB_PER_KG
    feasible = abs(daily_deficit) <= MAX_SAFE_DAILY_DEFICIT

    _LOG.debug(
        "deficit: %.1f→%.1f kg in %d days, weekly=%.2f daily=%.1f feasible=%s",
        current_weight, target_weight, days, weekly_loss, daily_deficit, feasible,
    )
    return DeficitPlan(
        daily_deficit=round(daily_deficit, 1),
        weekly_loss=round(weekly_loss, 2),
        days_to_target=days,
        feasible=feasible,
    )


def recommend_calories(profile: UserProfile, now: datetime | None = None) -> dict:
    """Daily intake adjusted so the profile's target date is reachable."""
    if profile.target_weight is None or profile.target_date is None:
        raise InvalidParameterError(
            "target_weight and target_date are required for a calorie recommendation",
            {"target_weight": profile.target_weight, "target_date": profile.target_date},
        )

    plan = calculate_calorie_deficit(profile.weight, profile.target_weight, profile.target_date, now)
    base = calculate_macros(profile)
    adjusted = round(clamp_calories(base.calories - plan.daily_deficit))

    if plan.feasible:
        message = f"To reach your goal, aim for {adjusted} calories per day."
    else:
        message = "Your goal timeline may be too aggressive. Consider extending your target date."

    return {
        "calories": adjusted,
        "protein": round(protein_grams(profile.weight)),
        "carbs": round(adjusted * 0.4 / 4),
        "fat": round(adjusted * 0.3 / 9),
        "recommendation": message,
        "weekly_weight_change": plan.weekly_loss,
        "days_to_target": plan.days_to_target,
        "feasible": plan.feasible,
    }
