"""Pydantic schemas for input records and derived analytics."""

from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    Grade,
    Macro,
    MacroTrend,
    MealItem,
    MealRecord,
    NutritionGoals,
    NutritionInsights,
    NutritionScore,
    ResolvedGoals,
    StreakData,
    StreakType,
    Trend,
    WaterLog,
)
from lifetrack.schemas.workout import (
    ExerciseDefinition,
    ExerciseEntry,
    ExerciseProgress,
    ProcessedSession,
    TrainingCycleStatus,
    WorkoutInsights,
    WorkoutSession,
)

__all__ = [
    "DailyNutritionTotals",
    "Grade",
    "Macro",
    "MacroTrend",
    "MealItem",
    "MealRecord",
    "NutritionGoals",
    "NutritionInsights",
    "NutritionScore",
    "ResolvedGoals",
    "StreakData",
    "StreakType",
    "Trend",
    "WaterLog",
    "ExerciseDefinition",
    "ExerciseEntry",
    "ExerciseProgress",
    "ProcessedSession",
    "TrainingCycleStatus",
    "WorkoutInsights",
    "WorkoutSession",
]
