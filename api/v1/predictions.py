# api/v1/predictions.py
from __future__ import annotations

from fastapi import APIRouter

from api.v1.schemas import PredictIn, SamplesIn
from core.models.results import PredictionResult, TrendSummary
from core.prediction import predict_weight
from core.trend import calculate_trend

router = APIRouter()


@router.post("/weight", response_model=PredictionResult)
def weight(body: PredictIn) -> PredictionResult:
    return predict_weight(body.samples, body.days_ahead)


@router.post("/trend", response_model=TrendSummary)
def trend(body: SamplesIn) -> TrendSummary:
    return calculate_trend(body.samples)
