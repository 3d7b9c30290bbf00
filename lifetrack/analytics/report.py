"""
Insights assembly — combines the analytics components into the read-only
objects consumed by the presentation layer.

Workout side::

    sessions ─ sort ─┬─ training cycle (week numbers, deload)
                     └─ volume & PR engine ──> WorkoutInsights

Nutrition side::

    meals + water ─ window ─ daily totals ─┬─ macro trends
                                           ├─ adherence score
                                           ├─ streaks
                                           └─ insights / recommendations ──> NutritionInsights
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Optional

from lifetrack.analytics.adherence import compute_nutrition_score
from lifetrack.analytics.insights import generate_insights, macro_distribution, weekly_summary
from lifetrack.analytics.nutrition import aggregate_daily_totals, average, resolve_goals, to_weekly_data
from lifetrack.analytics.recommendations import recommend_foods
from lifetrack.analytics.streaks import compute_streaks
from lifetrack.analytics.time_window import build_window
from lifetrack.analytics.training_cycle import (
    CycleConfig,
    DEFAULT_CYCLE_CONFIG,
    compute_cycle_status,
    is_deload_week,
    sort_sessions,
)
from lifetrack.analytics.trends import compute_macro_trends
from lifetrack.analytics.volume import DefinitionLookup, VolumeConfig, process_sessions
from lifetrack.catalog.programs import get_program
from lifetrack.core.config import settings
from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    MealRecord,
    NutritionGoals,
    NutritionInsights,
    WaterLog,
)
from lifetrack.schemas.workout import WorkoutInsights, WorkoutSession


def compute_workout_insights(
    sessions: list[WorkoutSession],
    strategy: Optional[str] = None,
    definitions_for: DefinitionLookup = get_program,
    cycle_config: Optional[CycleConfig] = None,
    volume_config: Optional[VolumeConfig] = None,
) -> WorkoutInsights:
    """Cycle position plus per-session volume/PR analysis.

    Raises:
        KeyError: *strategy* is not a registered week-numbering strategy.
    """
    cfg = cycle_config or DEFAULT_CYCLE_CONFIG
    ordered = sort_sessions(sessions)
    cycle = compute_cycle_status(ordered, strategy=strategy, config=cfg)

    processed = [
        p.model_copy(update={"week_number": week, "is_deload": is_deload_week(week, cfg.deload_frequency)})
        for p, week in zip(process_sessions(ordered, definitions_for, volume_config), cycle.session_weeks)
    ]

    return WorkoutInsights(
        cycle=cycle,
        sessions=processed,
        total_sessions=len(processed),
        sessions_per_program=dict(Counter(s.program_tag for s in ordered)),
    )


def compute_nutrition_insights(
    meals: list[MealRecord],
    water_logs: list[WaterLog],
    goals: Optional[NutritionGoals],
    as_of: datetime.date,
    days: Optional[int] = None,
) -> NutritionInsights:
    """Full nutrition dashboard for the *days*-day window ending at *as_of*."""
    resolved = resolve_goals(goals)
    window = build_window(as_of, days if days is not None else settings.NUTRITION_WINDOW_DAYS)
    series = aggregate_daily_totals(meals, water_logs, window)
    today = series[-1] if series else DailyNutritionTotals(date=as_of)

    score = compute_nutrition_score(series, resolved, average([d.water for d in series]))
    insights = generate_insights(series, resolved)

    return NutritionInsights(
        goals=resolved,
        daily_totals=series,
        weekly_data=to_weekly_data(series, resolved),
        macro_trends=compute_macro_trends(series, resolved),
        score=score,
        streaks=compute_streaks(series, resolved),
        insights=insights,
        recommendations=recommend_foods(today, resolved),
        macro_distribution=macro_distribution(today),
        weekly_summary=weekly_summary(series, resolved, insights, score),
    )
