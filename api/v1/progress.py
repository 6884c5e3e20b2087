# api/v1/progress.py
from __future__ import annotations
from typing import Any

from fastapi import APIRouter

from api.v1.schemas import ProfileIn, ProfileSamplesIn, SamplesIn
from core.advisors import (
    adjust_goals,
    analyze_progress,
    generate_insights,
    workout_recommendations,
)
from core.models.results import PlateauReport
from core.plateau import detect_plateau

router = APIRouter()


@router.post("/plateau", response_model=PlateauReport)
def plateau(body: SamplesIn) -> PlateauReport:
    return detect_plateau(body.samples)


@router.post("/analysis")
def analysis(body: ProfileSamplesIn) -> dict[str, Any]:
    return analyze_progress(body.profile, body.samples)


@router.post("/goals")
def goals(body: ProfileSamplesIn) -> dict[str, Any]:
    return adjust_goals(body.profile, body.samples)


@router.post("/insights")
def insights(body: ProfileSamplesIn) -> dict[str, Any]:
    return generate_insights(body.profile, body.samples)


@router.post("/workouts")
def workouts(body: ProfileIn) -> dict[str, Any]:
    return workout_recommendations(body.profile)
