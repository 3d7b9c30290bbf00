"""
Weekly nutrition insights — rule-based notes, macro split and summary.

Rules (evaluated in this order):

1. ``warning``     — protein below 80% of target on 3 or more days.
2. ``achievement`` — calorie goal met on 5 or more days.
3. ``tip``         — fewer than 5 days with anything logged.
4. ``suggestion``  — average fat share of macro calories above 35%.
"""

from __future__ import annotations

from lifetrack.analytics.adherence import CARBS_KCAL, FAT_KCAL, PROTEIN_KCAL
from lifetrack.analytics.nutrition import average, goal_achieved
from lifetrack.analytics.numeric import safe_div
from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    InsightPriority,
    InsightType,
    MacroDistribution,
    MacroShare,
    MealInsight,
    NutritionScore,
    ResolvedGoals,
    WeeklySummary,
)

_LOW_PROTEIN_RATIO = 0.8
_LOW_PROTEIN_DAYS = 3
_GOOD_WEEK_DAYS = 5
_MIN_LOGGED_DAYS = 5
_MAX_FAT_SHARE = 35.0


def fat_calorie_share(day: DailyNutritionTotals) -> float:
    """Fat share of the day's macro calories, in percent (0 if none)."""
    fat_kcal = day.fat * FAT_KCAL
    total = day.protein * PROTEIN_KCAL + day.carbs * CARBS_KCAL + fat_kcal
    return 100.0 * safe_div(fat_kcal, total)


def generate_insights(series: list[DailyNutritionTotals], goals: ResolvedGoals) -> list[MealInsight]:
    """Apply the weekly rules to a day series."""
    if not series:
        return []

    insights: list[MealInsight] = []

    low_protein_days = sum(1 for d in series if d.protein < goals.protein_target * _LOW_PROTEIN_RATIO)
    if low_protein_days >= _LOW_PROTEIN_DAYS:
        insights.append(MealInsight(
            id="low-protein",
            type=InsightType.WARNING,
            title="Low protein intake",
            description=(f"Protein was below target on {low_protein_days} of {len(series)} days. "
                         "Try adding eggs, chicken or legumes."),
            priority=InsightPriority.HIGH,
            actionable=True,
            action="Show protein recommendations",
        ))

    goal_days = sum(1 for d in series if goal_achieved(d, goals))
    if goal_days >= _GOOD_WEEK_DAYS:
        insights.append(MealInsight(
            id="great-week",
            type=InsightType.ACHIEVEMENT,
            title="Great week!",
            description=f"You hit your calorie goal on {goal_days} days this week. Keep it up!",
            priority=InsightPriority.MEDIUM,
        ))

    days_logged = sum(1 for d in series if d.calories > 0)
    if days_logged < _MIN_LOGGED_DAYS:
        insights.append(MealInsight(
            id="log-consistently",
            type=InsightType.TIP,
            title="Log consistently",
            description="Logging every day makes your eating habits easier to understand and your goals easier to hit.",
            priority=InsightPriority.LOW,
            actionable=True,
            action="Enable reminders",
        ))

    average_fat_share = safe_div(sum(fat_calorie_share(d) for d in series), len(series))
    if average_fat_share > _MAX_FAT_SHARE:
        insights.append(MealInsight(
            id="fat-balance",
            type=InsightType.SUGGESTION,
            title="Balance your fats",
            description="Your fat share is above the recommended range. Swap saturated fats for healthier ones.",
            priority=InsightPriority.MEDIUM,
            actionable=True,
            action="Show tips",
        ))

    return insights


def macro_distribution(day: DailyNutritionTotals) -> MacroDistribution:
    """Calorie split of a single day (usually today)."""
    protein_kcal = day.protein * PROTEIN_KCAL
    carbs_kcal = day.carbs * CARBS_KCAL
    fat_kcal = day.fat * FAT_KCAL
    total = protein_kcal + carbs_kcal + fat_kcal or 1.0

    return MacroDistribution(
        protein=MacroShare(grams=day.protein, calories=protein_kcal, percentage=100.0 * protein_kcal / total),
        carbs=MacroShare(grams=day.carbs, calories=carbs_kcal, percentage=100.0 * carbs_kcal / total),
        fat=MacroShare(grams=day.fat, calories=fat_kcal, percentage=100.0 * fat_kcal / total),
    )


def best_day(series: list[DailyNutritionTotals], goals: ResolvedGoals) -> str:
    """Weekday name of the first on-target day, else of the first day."""
    if not series:
        return ""
    best = next((d for d in series if goal_achieved(d, goals)), series[0])
    return best.date.strftime("%A")


def weekly_summary(
    series: list[DailyNutritionTotals],
    goals: ResolvedGoals,
    insights: list[MealInsight],
    score: NutritionScore,
) -> WeeklySummary:
    calories = [d.calories for d in series]
    protein = [d.protein for d in series]
    return WeeklySummary(
        week_start=series[0].date if series else None,
        week_end=series[-1].date if series else None,
        total_calories=sum(calories),
        avg_calories=average(calories),
        total_protein=sum(protein),
        avg_protein=average(protein),
        days_logged=sum(1 for c in calories if c > 0),
        goals_met_count=sum(1 for d in series if goal_achieved(d, goals)),
        best_day=best_day(series, goals),
        insights=insights,
        score=score,
    )
