"""Analytics core — training cycle, volume/PR, nutrition trends, adherence, streaks."""

from lifetrack.analytics.report import compute_nutrition_insights, compute_workout_insights
from lifetrack.analytics.training_cycle import CycleConfig, WeekStrategyRegistry, compute_cycle_status

__all__ = [
    "CycleConfig",
    "WeekStrategyRegistry",
    "compute_cycle_status",
    "compute_nutrition_insights",
    "compute_workout_insights",
]
