# api/v1/macros.py
from __future__ import annotations
from typing import Any

from fastapi import APIRouter

from api.v1.schemas import MealPlanIn, ProfileIn, ProfileSamplesIn
from core.advisors import generate_meal_plan, optimize_macros
from core.macro_calc import calculate_macros
from core.models.results import MacroTargets

router = APIRouter()


@router.post("", response_model=MacroTargets)
def macros(body: ProfileIn) -> MacroTargets:
    return calculate_macros(body.profile)


@router.post("/optimize")
def optimize(body: ProfileSamplesIn) -> dict[str, Any]:
    return optimize_macros(body.profile, body.samples)


@router.post("/meal-plan")
def meal_plan(body: MealPlanIn) -> list[dict[str, Any]]:
    return generate_meal_plan(body.profile, body.days)
