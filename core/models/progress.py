from __future__ import annotations
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mood(str, Enum):
    excellent = "excellent"
    good = "good"
    neutral = "neutral"
    tired = "tired"
    exhausted = "exhausted"


class ProgressSample(BaseModel):
    date: datetime
    weight: float = Field(..., gt=0, description="kg")
    body_fat: float | None = None
    muscle_mass: float | None = None
    mood: Mood | None = None
    energy_level: int | None = Field(None, ge=1, le=10)
    workout_completed: bool = False
    daily_steps: int | None = Field(None, ge=0)
    water_intake: int | None = Field(None, ge=0, description="ml")
    sleep_hours: float | None = Field(None, ge=0)

    # logged entries are only changed through an explicit update upstream
    model_config = ConfigDict(frozen=True)

    @field_validator("date")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        # naive timestamps are UTC; keeps mixed input sortable
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)
