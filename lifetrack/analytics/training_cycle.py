"""
Training cycle tracker — week number and deload position.

Two week-numbering schemes exist and serve different reports, so both are
exposed as named strategies and the caller picks one explicitly:

``session_count``
    A "week" is a block of ``sessions_per_week`` consecutive sessions,
    independent of the calendar::

        week_number(i) = floor(i / sessions_per_week) + 1      (i is 0-based)

``calendar``
    A week is seven calendar days counted from the first session::

        week_number = max(1, ceil(days_since_first_session / 7))

Deload weeks fall on every ``deload_frequency``-th week::

    is_deload_week(w)     = w > 0 and w % deload_frequency == 0
    weeks_until_deload(w) = (deload_frequency - w % deload_frequency) % deload_frequency

``weeks_until_deload`` reports 0 when the current week *is* a deload week.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

from lifetrack.core.config import settings
from lifetrack.schemas.workout import TrainingCycleStatus, WorkoutSession

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================


class CycleConfig(BaseModel):
    """Cadence constants for the training cycle."""

    sessions_per_week: int = Field(settings.SESSIONS_PER_WEEK, ge=1, le=14)
    deload_frequency: int = Field(settings.DELOAD_FREQUENCY, ge=2, le=16)


DEFAULT_CYCLE_CONFIG = CycleConfig()


# ======================================================================
# Pure week arithmetic
# ======================================================================


def week_number(index: int, sessions_per_week: int = DEFAULT_CYCLE_CONFIG.sessions_per_week) -> int:
    """Session-count week number for the 0-based session *index*."""
    return index // sessions_per_week + 1


def is_deload_week(week: int, deload_frequency: int = DEFAULT_CYCLE_CONFIG.deload_frequency) -> bool:
    """True iff *week* is a positive multiple of *deload_frequency*."""
    return week > 0 and week % deload_frequency == 0


def weeks_until_deload(week: int, deload_frequency: int = DEFAULT_CYCLE_CONFIG.deload_frequency) -> int:
    """Weeks left before the next deload week; 0 during a deload week."""
    remaining = deload_frequency - (week % deload_frequency)
    return 0 if remaining == deload_frequency else remaining


def calendar_week_number(days_since_first_session: int) -> int:
    """Calendar week number, the first session's week being week 1."""
    return max(1, math.ceil(days_since_first_session / 7))


# ======================================================================
# Strategies
# ======================================================================


class WeekNumberingStrategy(ABC):
    """Assigns a week number to every session of an ascending list."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique strategy identifier."""
        ...

    @abstractmethod
    def week_numbers(self, sessions: list[WorkoutSession], config: CycleConfig) -> list[int]:
        """Return one week number per session, same order as *sessions*."""
        ...


class SessionCountStrategy(WeekNumberingStrategy):
    """Weeks are blocks of ``sessions_per_week`` sessions."""

    @property
    def name(self) -> str:
        return "session_count"

    def week_numbers(self, sessions: list[WorkoutSession], config: CycleConfig) -> list[int]:
        return [week_number(i, config.sessions_per_week) for i in range(len(sessions))]


class CalendarStrategy(WeekNumberingStrategy):
    """Weeks are 7-day spans counted from the first session's date."""

    @property
    def name(self) -> str:
        return "calendar"

    def week_numbers(self, sessions: list[WorkoutSession], config: CycleConfig) -> list[int]:
        if not sessions:
            return []
        first_day = sessions[0].timestamp.date()
        return [calendar_week_number((s.timestamp.date() - first_day).days) for s in sessions]


class WeekStrategyRegistry:
    """Registry of available week-numbering strategies."""

    _strategies: dict[str, WeekNumberingStrategy] = {}

    @classmethod
    def register(cls, strategy: WeekNumberingStrategy) -> None:
        """Register a strategy.

        Raises :class:`ValueError` if the name is already taken.
        """
        if strategy.name in cls._strategies:
            raise ValueError(f"Week strategy '{strategy.name}' already registered")
        cls._strategies[strategy.name] = strategy

    @classmethod
    def get(cls, name: str) -> Optional[WeekNumberingStrategy]:
        return cls._strategies.get(name)

    @classmethod
    def get_or_raise(cls, name: str) -> WeekNumberingStrategy:
        """Get a strategy by *name*.

        Raises :class:`KeyError` if not found.
        """
        strategy = cls._strategies.get(name)
        if not strategy:
            raise KeyError(f"Week strategy '{name}' not registered. "
                           f"Available: {cls.available()}")
        return strategy

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._strategies.keys())


WeekStrategyRegistry.register(SessionCountStrategy())
WeekStrategyRegistry.register(CalendarStrategy())


# ======================================================================
# Main entry point
# ======================================================================


def sort_sessions(sessions: list[WorkoutSession]) -> list[WorkoutSession]:
    """Return *sessions* in ascending timestamp order (stable)."""
    return sorted(sessions, key=lambda s: s.timestamp)


def compute_cycle_status(
    sessions: list[WorkoutSession],
    strategy: Optional[str] = None,
    config: Optional[CycleConfig] = None,
) -> TrainingCycleStatus:
    """Compute week numbers and deload position for a session list.

    Args:
        sessions: Logged sessions; sorted ascending here before numbering.
        strategy: ``'session_count'`` or ``'calendar'`` (defaults to
            ``settings.DEFAULT_WEEK_STRATEGY``).
        config: Optional :class:`CycleConfig` override.

    Returns:
        :class:`TrainingCycleStatus` for the most recent session.  An empty
        list yields week 0, which is never a deload week.
    """
    cfg = config or DEFAULT_CYCLE_CONFIG
    numbering = WeekStrategyRegistry.get_or_raise(strategy or settings.DEFAULT_WEEK_STRATEGY)

    ordered = sort_sessions(sessions)
    weeks = numbering.week_numbers(ordered, cfg)
    current = weeks[-1] if weeks else 0

    logger.debug("Cycle status: %d sessions, strategy=%s, week=%d", len(ordered), numbering.name, current)

    return TrainingCycleStatus(
        strategy=numbering.name,
        current_week=current,
        is_deload_week=is_deload_week(current, cfg.deload_frequency),
        weeks_until_deload=weeks_until_deload(current, cfg.deload_frequency),
        session_weeks=weeks,
    )
