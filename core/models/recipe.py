from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Nutrition(BaseModel):
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class RecipeCandidate(BaseModel):
    id: int | str
    title: str
    nutrition: Nutrition = Field(default_factory=Nutrition)

    # image, readyInMinutes, sourceUrl … pass straight through
    model_config = ConfigDict(extra="allow")
