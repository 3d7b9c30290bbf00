"""
In-memory record sources.

Used by the simulation script and the tests to feed
:class:`~lifetrack.services.insights_service.InsightsService`.
"""

import datetime
from typing import Optional

from lifetrack.schemas.nutrition import MealRecord, NutritionGoals, WaterLog
from lifetrack.schemas.workout import WorkoutSession
from lifetrack.sources.base import NutritionRecordSource, WorkoutRecordSource


class InMemoryWorkoutSource(WorkoutRecordSource):
    """Workout sessions held in a dict keyed by user id."""

    def __init__(self, sessions: Optional[dict[str, list[WorkoutSession]]] = None):
        self._sessions = {user: list(items) for user, items in (sessions or {}).items()}

    def add(self, user_id: str, session: WorkoutSession) -> None:
        self._sessions.setdefault(user_id, []).append(session)

    def get_sessions(self, user_id: str) -> list[WorkoutSession]:
        return list(self._sessions.get(user_id, []))


class InMemoryNutritionSource(NutritionRecordSource):
    """Meals, water logs and goals held in dicts keyed by user id."""

    def __init__(self):
        self._meals: dict[str, list[MealRecord]] = {}
        self._water: dict[str, list[WaterLog]] = {}
        self._goals: dict[str, NutritionGoals] = {}

    def add_meal(self, user_id: str, meal: MealRecord) -> None:
        self._meals.setdefault(user_id, []).append(meal)

    def add_water(self, user_id: str, log: WaterLog) -> None:
        self._water.setdefault(user_id, []).append(log)

    def set_goals(self, user_id: str, goals: Optional[NutritionGoals]) -> None:
        if goals is None:
            self._goals.pop(user_id, None)
        else:
            self._goals[user_id] = goals

    def get_meals_by_date_range(self, user_id: str, start: datetime.date, end: datetime.date) -> list[MealRecord]:
        meals = [m for m in self._meals.get(user_id, []) if start <= m.date <= end]
        return sorted(meals, key=lambda m: m.date)

    def get_water_by_date_range(self, user_id: str, start: datetime.date, end: datetime.date) -> list[WaterLog]:
        return [w for w in self._water.get(user_id, []) if start <= w.date <= end]

    def get_active_goals(self, user_id: str) -> Optional[NutritionGoals]:
        return self._goals.get(user_id)
