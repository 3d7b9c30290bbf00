"""
Abstract record sources.

The analytics core never talks to storage.  The surrounding application
supplies snapshots through these interfaces; a hosted-database adapter
and the in-memory implementation in :mod:`lifetrack.sources.memory` are
interchangeable.
"""

import datetime
from abc import ABC, abstractmethod
from typing import Optional

from lifetrack.schemas.nutrition import MealRecord, NutritionGoals, WaterLog
from lifetrack.schemas.workout import WorkoutSession


class WorkoutRecordSource(ABC):
    """Yields logged workout sessions for one user/program scope."""

    @abstractmethod
    def get_sessions(self, user_id: str) -> list[WorkoutSession]:
        """All sessions of *user_id*, in any order."""
        ...


class NutritionRecordSource(ABC):
    """Yields meals, water logs and goals for one user."""

    @abstractmethod
    def get_meals_by_date_range(self, user_id: str, start: datetime.date, end: datetime.date) -> list[MealRecord]:
        """Meals dated within ``[start, end]``."""
        ...

    @abstractmethod
    def get_water_by_date_range(self, user_id: str, start: datetime.date, end: datetime.date) -> list[WaterLog]:
        """Water logs dated within ``[start, end]``."""
        ...

    @abstractmethod
    def get_active_goals(self, user_id: str) -> Optional[NutritionGoals]:
        """The single active goal set, or ``None`` when unset."""
        ...
