"""
Snapshot payloads accepted by the stateless insights endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from lifetrack.schemas.nutrition import MealRecord, NutritionGoals, WaterLog
from lifetrack.schemas.workout import WorkoutSession


class WorkoutSnapshot(BaseModel):
    """All sessions to analyse, in any order."""

    sessions: list[WorkoutSession] = Field(default_factory=list)


class NutritionSnapshot(BaseModel):
    """Meals, water logs and goals covering the requested window."""

    meals: list[MealRecord] = Field(default_factory=list)
    water_logs: list[WaterLog] = Field(default_factory=list)
    goals: Optional[NutritionGoals] = Field(None, description="Active goals; defaults are used when omitted")
