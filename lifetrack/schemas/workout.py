"""
Workout log schemas.

Raw input records (:class:`WorkoutSession`, :class:`ExerciseEntry`) are
frozen once logged.  The derived models (:class:`ProcessedSession`,
:class:`ExerciseProgress`, :class:`TrainingCycleStatus`) are recomputed
on every call and never persisted.
"""

from __future__ import annotations

import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Input records
# ======================================================================


class ExerciseEntry(BaseModel):
    """A single logged exercise inside a workout session."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str = Field(..., description="Name as typed by the user")
    weight: Optional[float] = Field(None, description="Working weight in kilograms; missing when not recorded")
    completed: bool = Field(False, description="Whether all target sets were completed")


class WorkoutSession(BaseModel):
    """A logged workout session."""

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime.datetime
    program_tag: str = Field(..., description="Program/day tag, e.g. 'PUSH'")
    exercise_entries: list[ExerciseEntry] = Field(default_factory=list)


class ExerciseDefinition(BaseModel):
    """Catalog entry prescribing sets and reps for an exercise."""

    model_config = ConfigDict(frozen=True)

    name: str
    sets: int = Field(3, ge=0)
    rep_range: Optional[Union[int, float, str]] = Field(
        None,
        description="Scalar rep count or a 'min-max' range string, e.g. '10-12'",
    )
    is_compound: bool = False
    aliases: tuple[str, ...] = Field(
        (), description="Alternative names (e.g. a translated name) matched like ``name``",
    )


# ======================================================================
# Derived models
# ======================================================================


class WeightObservation(BaseModel):
    """One point of an exercise's weight history."""

    timestamp: datetime.datetime
    weight: float


class ExerciseProgress(BaseModel):
    """Per-exercise breakdown of a processed session."""

    name: str = Field(..., description="Exercise name as logged")
    current_weight: float
    sets: int
    reps: float = Field(..., description="Resolved rep count used for volume")
    volume: float = Field(..., description="sets × reps × weight")
    is_pr: bool
    previous_weight: Optional[float] = Field(
        None, description="Weight logged for this exercise in the previous session of the same program",
    )
    delta: Optional[float] = Field(None, description="current_weight − previous_weight")
    history: list[WeightObservation] = Field(
        default_factory=list,
        description="Recent weight observations up to and including this session",
    )


class ProcessedSession(BaseModel):
    """Analytics view of one :class:`WorkoutSession`."""

    id: str
    timestamp: datetime.datetime
    program_tag: str
    total_volume: float
    is_pr: bool
    improvement_percent: Optional[float] = Field(
        None, description="Volume change vs. the previous session with the same program tag",
    )
    week_number: int = 0
    is_deload: bool = False
    exercises: list[ExerciseProgress] = Field(default_factory=list)
    raw_entries: list[ExerciseEntry] = Field(
        default_factory=list,
        description="All logged entries, matched or not, for display",
    )


class TrainingCycleStatus(BaseModel):
    """Position in the training cycle as of the latest session."""

    strategy: str = Field(..., description="Week-numbering strategy used")
    current_week: int = Field(..., ge=0)
    is_deload_week: bool
    weeks_until_deload: int = Field(..., ge=0)
    session_weeks: list[int] = Field(
        default_factory=list,
        description="Week number per session, in ascending timestamp order",
    )


class WorkoutInsights(BaseModel):
    """Read-only workout analytics handed to the presentation layer."""

    cycle: TrainingCycleStatus
    sessions: list[ProcessedSession]
    total_sessions: int
    sessions_per_program: dict[str, int] = Field(default_factory=dict)
