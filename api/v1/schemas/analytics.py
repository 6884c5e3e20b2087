# api/v1/schemas/analytics.py
from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, Field

from core.models.progress import ProgressSample
from core.models.recipe import RecipeCandidate
from core.models.user import UserProfile


class SamplesIn(BaseModel):
    samples: list[ProgressSample]


class PredictIn(SamplesIn):
    days_ahead: int | None = Field(None, examples=[30])


class DeficitIn(BaseModel):
    current_weight: float = Field(..., gt=0)
    target_weight: float = Field(..., gt=0)
    target_date: datetime


class ProfileIn(BaseModel):
    profile: UserProfile


class ProfileSamplesIn(ProfileIn):
    samples: list[ProgressSample] = []


class ClusterIn(ProfileIn):
    recipes: list[RecipeCandidate] = []
    k: int = 3


class ClusterOut(BaseModel):
    clusters: list[dict]


class CalorieRecommendationOut(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int
    recommendation: str
    weekly_weight_change: float
    days_to_target: int
    feasible: bool


class MealPlanIn(ProfileIn):
    days: int = Field(7, ge=1, le=28)
