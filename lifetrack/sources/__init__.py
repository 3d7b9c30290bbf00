"""Record sources feeding snapshots to the analytics core."""

from lifetrack.sources.base import NutritionRecordSource, WorkoutRecordSource
from lifetrack.sources.memory import InMemoryNutritionSource, InMemoryWorkoutSource

__all__ = [
    "NutritionRecordSource",
    "WorkoutRecordSource",
    "InMemoryNutritionSource",
    "InMemoryWorkoutSource",
]
