"""
Nutrition aggregator.

Sums meal items and water logs into one :class:`DailyNutritionTotals`
bucket per calendar day of a fixed window.  Days without entries stay at
zero, so the series always has exactly ``len(window)`` elements and the
last element is "today".
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from lifetrack.analytics.numeric import round_half_up
from lifetrack.analytics.time_window import bucket_by_day
from lifetrack.core.config import settings
from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    MealRecord,
    NutritionGoals,
    ResolvedGoals,
    WaterLog,
    WeeklyDataPoint,
)

logger = logging.getLogger(__name__)

# Calorie goal tolerance: a day counts as on-target within ±10%.
GOAL_TOLERANCE = 0.10


def default_goals() -> ResolvedGoals:
    """Goals built from the configured defaults (2000/150/200/65/2500)."""
    return ResolvedGoals(
        calories_target=settings.DEFAULT_CALORIES_TARGET,
        protein_target=settings.DEFAULT_PROTEIN_TARGET,
        carbs_target=settings.DEFAULT_CARBS_TARGET,
        fat_target=settings.DEFAULT_FAT_TARGET,
        water_target_ml=settings.DEFAULT_WATER_TARGET_ML,
    )


def resolve_goals(goals: Optional[NutritionGoals]) -> ResolvedGoals:
    """Fill every unset or zero target with its default."""
    defaults = default_goals()
    if goals is None:
        return defaults
    return ResolvedGoals(**{
        name: getattr(goals, name) or getattr(defaults, name)
        for name in ResolvedGoals.model_fields
    })


def within_tolerance(value: float, target: float, tolerance: float = GOAL_TOLERANCE) -> bool:
    """True iff *value* lies in ``[target × (1 - tol), target × (1 + tol)]``."""
    return target * (1 - tolerance) <= value <= target * (1 + tolerance)


def goal_achieved(day: DailyNutritionTotals, goals: ResolvedGoals) -> bool:
    """Whether the day's calories are within ±10% of the calorie target."""
    return within_tolerance(day.calories, goals.calories_target)


def aggregate_daily_totals(
    meals: list[MealRecord],
    water_logs: list[WaterLog],
    window: list[datetime.date],
) -> list[DailyNutritionTotals]:
    """Sum meal macros and water per day of *window*.

    Returns one :class:`DailyNutritionTotals` per window day, ascending.
    """
    meal_buckets = bucket_by_day(meals, window, key=lambda m: m.date)
    water_buckets = bucket_by_day(water_logs, window, key=lambda w: w.date)

    totals = []
    for day in window:
        items = [item for meal in meal_buckets[day] for item in meal.items]
        totals.append(DailyNutritionTotals(
            date=day,
            calories=sum(i.calories for i in items),
            protein=sum(i.protein for i in items),
            carbs=sum(i.carbs for i in items),
            fat=sum(i.fat for i in items),
            water=sum(w.amount_ml for w in water_buckets[day]),
        ))

    logger.debug("Aggregated %d meals and %d water logs into %d days",
                 len(meals), len(water_logs), len(totals))
    return totals


def to_weekly_data(totals: list[DailyNutritionTotals], goals: ResolvedGoals) -> list[WeeklyDataPoint]:
    """Display rows: values rounded to whole units plus the goal flag."""
    return [
        WeeklyDataPoint(
            date=day.date,
            day_name=day.date.strftime("%A"),
            calories=round_half_up(day.calories),
            protein=round_half_up(day.protein),
            carbs=round_half_up(day.carbs),
            fat=round_half_up(day.fat),
            water=round_half_up(day.water),
            goal_achieved=goal_achieved(day, goals),
        )
        for day in totals
    ]


def average(values: list[float]) -> float:
    """Arithmetic mean; 0 for an empty list."""
    return sum(values) / len(values) if values else 0.0
