# api/v1/forecasts.py
from __future__ import annotations
from typing import Any

from fastapi import APIRouter

from api.v1.schemas import (
    AdherenceIn,
    MacroSplitIn,
    MealTimesIn,
    PerformanceIn,
    RateIn,
    RecoveryIn,
    SupplementsIn,
)
from core import forecasts as fc

router = APIRouter()


@router.post("/weight-change-rate")
def weight_change_rate(body: RateIn) -> dict[str, Any]:
    return fc.predict_weight_change_rate(body.daily_deficit, body.activity_level)


@router.post("/macro-split")
def macro_split(body: MacroSplitIn) -> dict[str, Any]:
    return fc.predict_optimal_macro_split(body.profile, body.workout_type)


@router.post("/performance")
def performance(body: PerformanceIn) -> dict[str, Any]:
    return fc.predict_workout_performance(
        body.samples,
        body.average_sleep_hours,
        protein_met=body.protein_met,
        hydration_met=body.hydration_met,
        calories_met=body.calories_met,
    )


@router.post("/recovery")
def recovery(body: RecoveryIn) -> dict[str, Any]:
    return fc.predict_recovery_time(**body.model_dump())


@router.post("/adherence")
def adherence(body: AdherenceIn) -> dict[str, Any]:
    return fc.predict_adherence(**body.model_dump())


@router.post("/meal-times")
def meal_times(body: MealTimesIn) -> dict[str, str]:
    return fc.predict_meal_times(**body.model_dump())


@router.post("/supplements")
def supplements(body: SupplementsIn) -> list[dict[str, str]]:
    return fc.predict_supplement_needs(body.profile, body.diet)
