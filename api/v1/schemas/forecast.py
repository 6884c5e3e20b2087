# api/v1/schemas/forecast.py
from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, Field

from core.models.progress import ProgressSample
from core.models.user import ActivityLevel, Goal, UserProfile


class RateIn(BaseModel):
    daily_deficit: float
    activity_level: ActivityLevel = ActivityLevel.moderate


class MacroSplitIn(BaseModel):
    profile: UserProfile
    workout_type: Literal["endurance", "strength"] | None = None


class PerformanceIn(BaseModel):
    samples: list[ProgressSample] = []
    average_sleep_hours: float | None = Field(None, ge=0, le=24)
    protein_met: bool = False
    hydration_met: bool = False
    calories_met: bool = False


class RecoveryIn(BaseModel):
    intensity: Literal["low", "moderate", "high", "extreme"] = "moderate"
    muscle_soreness: int = Field(..., ge=1, le=10)
    sleep_quality: int = Field(..., ge=1, le=10)
    protein_met: bool = False
    hydration_met: bool = False


class AdherenceIn(BaseModel):
    past_adherence: float | None = Field(None, ge=0, le=100)
    goal_difficulty: Literal["easy", "moderate", "hard", "extreme"] = "moderate"
    support_system: bool = False
    motivation: int = Field(5, ge=1, le=10)


class MealTimesIn(BaseModel):
    goal: Goal = Goal.maintain
    morning_workout: bool = False
    evening_workout: bool = False


class SupplementsIn(BaseModel):
    profile: UserProfile
    diet: Literal["omnivore", "vegetarian", "vegan"] | None = None
