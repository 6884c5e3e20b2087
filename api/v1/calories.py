# api/v1/calories.py
from __future__ import annotations

from fastapi import APIRouter

from api.v1.schemas import CalorieRecommendationOut, DeficitIn, ProfileIn
from core.deficit import calculate_calorie_deficit, recommend_calories
from core.models.results import DeficitPlan

router = APIRouter()


@router.post("/deficit", response_model=DeficitPlan)
def deficit(body: DeficitIn) -> DeficitPlan:
    return calculate_calorie_deficit(body.current_weight, body.target_weight, body.target_date)


@router.post("/recommendation", response_model=CalorieRecommendationOut)
def recommendation(body: ProfileIn) -> CalorieRecommendationOut:
    return CalorieRecommendationOut(**recommend_calories(body.profile))
