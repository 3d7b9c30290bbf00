"""
Insights service.

Pulls a snapshot from the record sources and hands it to the analytics
core.  Nothing is cached or written back; every call recomputes from the
current snapshot.
"""

import datetime
import logging
from typing import Optional

from lifetrack.analytics.report import compute_nutrition_insights, compute_workout_insights
from lifetrack.analytics.time_window import build_window
from lifetrack.analytics.volume import DefinitionLookup
from lifetrack.catalog.programs import get_program
from lifetrack.core.config import settings
from lifetrack.schemas.nutrition import NutritionInsights
from lifetrack.schemas.workout import WorkoutInsights
from lifetrack.sources.base import NutritionRecordSource, WorkoutRecordSource

logger = logging.getLogger(__name__)


class InsightsService:
    """Builds workout and nutrition insights for a user."""

    def __init__(
        self,
        workout_source: Optional[WorkoutRecordSource] = None,
        nutrition_source: Optional[NutritionRecordSource] = None,
        definitions_for: DefinitionLookup = get_program,
    ):
        self.workout_source = workout_source
        self.nutrition_source = nutrition_source
        self.definitions_for = definitions_for

    # ------------------------------------------------------------------
    # Workouts
    # ------------------------------------------------------------------

    def get_workout_insights(self, user_id: str, strategy: Optional[str] = None) -> WorkoutInsights:
        """Cycle position and per-session progress for *user_id*.

        Raises:
            RuntimeError: no workout source configured.
            KeyError: unknown week-numbering *strategy*.
        """
        if self.workout_source is None:
            raise RuntimeError("InsightsService has no workout source")

        sessions = self.workout_source.get_sessions(user_id)

        unknown_tags = sorted({s.program_tag for s in sessions if self.definitions_for(s.program_tag) is None})
        if unknown_tags:
            logger.warning("User %s has sessions with unknown program tags: %s", user_id, unknown_tags)

        insights = compute_workout_insights(sessions, strategy=strategy, definitions_for=self.definitions_for)
        logger.info("Workout insights for user %s: %d sessions, week %d (%s)",
                    user_id, insights.total_sessions, insights.cycle.current_week, insights.cycle.strategy)
        return insights

    # ------------------------------------------------------------------
    # Nutrition
    # ------------------------------------------------------------------

    def get_nutrition_insights(
        self,
        user_id: str,
        as_of: Optional[datetime.date] = None,
        days: Optional[int] = None,
    ) -> NutritionInsights:
        """Nutrition dashboard for the window ending at *as_of* (default today).

        Raises:
            RuntimeError: no nutrition source configured.
        """
        if self.nutrition_source is None:
            raise RuntimeError("InsightsService has no nutrition source")

        ref_date = as_of or datetime.date.today()
        window_days = days if days is not None else settings.NUTRITION_WINDOW_DAYS
        window = build_window(ref_date, window_days)
        start = window[0] if window else ref_date

        meals = self.nutrition_source.get_meals_by_date_range(user_id, start, ref_date)
        water_logs = self.nutrition_source.get_water_by_date_range(user_id, start, ref_date)
        goals = self.nutrition_source.get_active_goals(user_id)
        if goals is None:
            logger.warning("User %s has no active nutrition goals; using defaults", user_id)

        insights = compute_nutrition_insights(meals, water_logs, goals, ref_date, window_days)
        logger.info("Nutrition insights for user %s (%s..%s): score %d (%s)",
                    user_id, start, ref_date, insights.score.overall, insights.score.grade.value)
        return insights
