from __future__ import annotations
from datetime import datetime
from typing import Literal

from pydantic import BaseModel

Direction = Literal["losing", "gaining", "maintaining"]
Pace = Literal["fast", "moderate"]


class TrendSummary(BaseModel):
    total_change: float
    weekly_change: float
    direction: Direction
    pace: Pace


class PredictedPoint(BaseModel):
    day: int
    date: datetime
    weight: float


class PredictionResult(BaseModel):
    predictions: list[PredictedPoint]
    equation: str
    r2: float
    low_confidence: bool
    trend: TrendSummary


class MacroTargets(BaseModel):
    bmr: int
    tdee: int
    calories: int
    protein: int
    carbs: int
    fat: int


class DeficitPlan(BaseModel):
    daily_deficit: float
    weekly_loss: float
    days_to_target: int
    feasible: bool


class PlateauReport(BaseModel):
    plateau_detected: bool
    duration: int
    variance: float | None = None
    average_weight: float | None = None
    message: str
    recommendations: list[str] = []
