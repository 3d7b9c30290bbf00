"""
Streak counter — consecutive qualifying days ending at the latest day.

The current streak walks backward from the most recent day and stops at
the first day that fails the goal predicate.

There is no stored streak history, so ``longest_streak`` is reported as
``max(current_streak, floor)`` with a fixed floor per goal type.  Tracking
a true historical maximum would require persisting streak state between
computations.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, Field

from lifetrack.analytics.nutrition import goal_achieved
from lifetrack.schemas.nutrition import DailyNutritionTotals, ResolvedGoals, StreakData, StreakType

DayPredicate = Callable[[DailyNutritionTotals], bool]

_DEFAULT_FLOORS: dict[StreakType, int] = {
    StreakType.CALORIES: 5,
    StreakType.PROTEIN: 4,
    StreakType.WATER: 3,
    StreakType.LOGGING: 7,
}


class StreakConfig(BaseModel):
    """Floor constants reported as the longest streak."""

    floors: dict[StreakType, int] = Field(default_factory=lambda: dict(_DEFAULT_FLOORS))


DEFAULT_STREAK_CONFIG = StreakConfig()


def goal_predicates(goals: ResolvedGoals) -> dict[StreakType, DayPredicate]:
    """Daily pass/fail predicate per goal type."""
    return {
        StreakType.CALORIES: lambda d: goal_achieved(d, goals),
        StreakType.PROTEIN: lambda d: d.protein >= goals.protein_target,
        StreakType.WATER: lambda d: d.water >= goals.water_target_ml,
        StreakType.LOGGING: lambda d: d.calories > 0,
    }


def current_streak(series: list[DailyNutritionTotals], predicate: DayPredicate) -> int:
    """Consecutive days, from the last one backward, satisfying *predicate*."""
    streak = 0
    for day in reversed(series):
        if not predicate(day):
            break
        streak += 1
    return streak


def compute_streaks(
    series: list[DailyNutritionTotals],
    goals: ResolvedGoals,
    config: Optional[StreakConfig] = None,
) -> list[StreakData]:
    """Streaks for every goal type; empty for an empty series."""
    if not series:
        return []

    cfg = config or DEFAULT_STREAK_CONFIG
    last_date = series[-1].date
    streaks = []
    for streak_type, predicate in goal_predicates(goals).items():
        current = current_streak(series, predicate)
        floor = cfg.floors.get(streak_type, 0)
        streaks.append(StreakData(
            streak_type=streak_type,
            current_streak=current,
            longest_streak=max(current, floor),
            is_personal_best=current > floor > 0,
            last_active_date=last_date,
        ))
    return streaks
