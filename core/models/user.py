from __future__ import annotations
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "veryActive"


class Goal(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"


class UserProfile(BaseModel):
    weight: float = Field(..., gt=0, description="kg")
    height: float = Field(..., gt=0, description="cm")
    age: int = Field(..., gt=0)
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.moderate
    goal: Goal = Goal.maintain
    target_weight: float | None = Field(None, gt=0)
    target_date: datetime | None = None
