# api/v1/router.py
from fastapi import APIRouter

from . import calories, forecasts, macros, predictions, progress, recipes

api_router = APIRouter()

api_router.include_router(predictions.router, prefix="/predictions", tags=["Predictions"])
api_router.include_router(calories.router, prefix="/calories", tags=["Calories"])
api_router.include_router(macros.router, prefix="/macros", tags=["Macros"])
api_router.include_router(recipes.router, prefix="/recipes", tags=["Recipes"])
api_router.include_router(progress.router, prefix="/progress", tags=["Progress"])
api_router.include_router(forecasts.router, prefix="/forecasts", tags=["Forecasts"])
