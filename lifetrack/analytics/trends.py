"""
Macro trend classifier.

For each macro the classifier reports today's value, the window average,
today's deviation from that average and how many days landed within ±10%
of target.

Trend labels compare the window average with the target:

- **calories**: ``rising`` above target, ``falling`` below 90% of target,
  ``stable`` in between;
- **protein**: ``rising`` at or above target, otherwise ``falling``;
- **carbs** and **fat**: always ``stable``.

Only calories and protein get a direction.  Carbs and fat have no
classification rule yet and report ``stable`` regardless of intake.
"""

from __future__ import annotations

from lifetrack.analytics.nutrition import GOAL_TOLERANCE, average, within_tolerance
from lifetrack.analytics.numeric import round_half_up, safe_div
from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    Macro,
    MacroTrend,
    ResolvedGoals,
    Trend,
)


def consistency(values: list[float], target: float) -> int:
    """Percentage (0-100) of *values* within ±10% of *target*."""
    if not values:
        return 0
    in_range = sum(1 for v in values if within_tolerance(v, target))
    return round_half_up(100.0 * in_range / len(values))


def percent_change(current: float, baseline: float) -> float:
    """``100 × (current − baseline) / baseline``; 0 when baseline is 0."""
    return 100.0 * safe_div(current - baseline, baseline)


def classify_trend(macro: Macro, weekly_average: float, target: float) -> Trend:
    """Direction label for *macro* given its window average."""
    if macro is Macro.CALORIES:
        if weekly_average > target:
            return Trend.RISING
        if weekly_average < target * (1 - GOAL_TOLERANCE):
            return Trend.FALLING
        return Trend.STABLE
    if macro is Macro.PROTEIN:
        return Trend.RISING if weekly_average >= target else Trend.FALLING
    return Trend.STABLE


def compute_macro_trend(macro: Macro, series: list[DailyNutritionTotals], goals: ResolvedGoals) -> MacroTrend:
    """Trend for one macro over a non-empty day series."""
    values = [getattr(day, macro.value) for day in series]
    target = goals.target_for(macro)
    current = values[-1]
    weekly_average = average(values)

    return MacroTrend(
        macro=macro,
        current=current,
        target=target,
        weekly_average=weekly_average,
        trend=classify_trend(macro, weekly_average, target),
        percent_change=percent_change(current, weekly_average),
        consistency=consistency(values, target),
    )


def compute_macro_trends(series: list[DailyNutritionTotals], goals: ResolvedGoals) -> list[MacroTrend]:
    """Trends for calories, protein, carbs and fat; empty for an empty series."""
    if not series:
        return []
    return [compute_macro_trend(macro, series, goals) for macro in Macro]
