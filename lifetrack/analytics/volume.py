"""
Session volume and personal-record (PR) engine.

Volume is the training-load proxy ``sets × reps × weight``.  Sessions are
processed in one chronological pass; all running state (max weight per
exercise, max volume per program, weight history, last volume per program)
lives in an explicit :class:`PRTracker` passed through the pass.

Algorithm per session
---------------------

1. Match each logged entry to the program's catalog definitions by
   normalized name.  Unmatched entries and entries with a missing weight
   or ``weight <= 0`` are skipped for volume and PR purposes (they stay
   in ``raw_entries``).
2. ``reps`` comes from the definition's ``rep_range``: a scalar is used
   as is, ``"min-max"`` uses the mean of the bounds, anything else falls
   back to ``default_reps``.
3. Exercise PR: the weight strictly exceeds the running maximum **and**
   that maximum is non-zero, so the first observation of a key is never
   a PR.  The running maximum is raised whenever exceeded.
4. Session PR: any exercise PR, or the session volume beats the program's
   running maximum volume under the same non-zero-baseline rule.
5. ``improvement_percent`` compares against the nearest earlier session
   with the same program tag; ``None`` when there is none or its volume
   was 0.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Union

from pydantic import BaseModel, Field

from lifetrack.catalog.programs import find_definition, get_program, normalize_exercise_name
from lifetrack.core.config import settings
from lifetrack.schemas.workout import (
    ExerciseDefinition,
    ExerciseProgress,
    ProcessedSession,
    WeightObservation,
    WorkoutSession,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================


class VolumeConfig(BaseModel):
    """Configuration for the volume/PR engine."""

    default_reps: float = Field(settings.DEFAULT_REPS, gt=0)
    history_length: int = Field(settings.HISTORY_LENGTH, ge=1, le=50)


DEFAULT_VOLUME_CONFIG = VolumeConfig()

DefinitionLookup = Callable[[str], Optional[list[ExerciseDefinition]]]

ExerciseKey = tuple[str, str]


# ======================================================================
# Accumulators
# ======================================================================


class PRTracker:
    """Running state for one chronological pass over sessions."""

    def __init__(self) -> None:
        self.max_weight: dict[ExerciseKey, float] = {}
        self.max_volume: dict[str, float] = {}
        self.last_volume: dict[str, float] = {}
        self.weight_history: dict[ExerciseKey, list[WeightObservation]] = {}

    def observe_weight(self, key: ExerciseKey, weight: float) -> bool:
        """Record *weight* for *key*; return whether it is a PR."""
        running = self.max_weight.get(key, 0.0)
        if weight > running:
            self.max_weight[key] = weight
        return weight > running > 0

    def observe_volume(self, program_tag: str, volume: float) -> bool:
        """Record a session volume; return whether it beats the program's best."""
        running = self.max_volume.get(program_tag, 0.0)
        if volume > running:
            self.max_volume[program_tag] = volume
        return volume > running > 0

    def improvement(self, program_tag: str, volume: float) -> Optional[float]:
        """Percent change vs. the previous session of *program_tag*, then remember *volume*."""
        previous = self.last_volume.get(program_tag)
        self.last_volume[program_tag] = volume
        if not previous:
            return None
        return 100.0 * (volume - previous) / previous


# ======================================================================
# Rep resolution
# ======================================================================

_RANGE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[-–]\s*(\d+(?:\.\d+)?)\s*$")
_NUMBER_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*$")


def resolve_rep_count(
    rep_range: Union[int, float, str, None],
    default: float = DEFAULT_VOLUME_CONFIG.default_reps,
) -> float:
    """Turn a definition's ``rep_range`` into a single rep count.

    >>> resolve_rep_count(8)
    8.0
    >>> resolve_rep_count("10-12")
    11.0
    >>> resolve_rep_count("AMRAP")
    10.0
    """
    if isinstance(rep_range, bool) or rep_range is None:
        return float(default)
    if isinstance(rep_range, (int, float)):
        return float(rep_range)

    match = _RANGE_PATTERN.match(rep_range)
    if match:
        low, high = float(match.group(1)), float(match.group(2))
        return (low + high) / 2.0

    match = _NUMBER_PATTERN.match(rep_range)
    if match:
        return float(match.group(1))

    return float(default)


# ======================================================================
# Per-session processing
# ======================================================================


def process_session(
    session: WorkoutSession,
    definitions: Optional[list[ExerciseDefinition]],
    tracker: PRTracker,
    config: Optional[VolumeConfig] = None,
) -> ProcessedSession:
    """Compute volume, PR flags and improvement for one session.

    *tracker* must already hold the state of every earlier session and is
    updated in place.
    """
    cfg = config or DEFAULT_VOLUME_CONFIG
    definitions = definitions or []

    total_volume = 0.0
    exercise_pr = False
    exercises: list[ExerciseProgress] = []

    for entry in session.exercise_entries:
        definition = find_definition(definitions, entry.exercise_name)
        if definition is None or not entry.weight or entry.weight <= 0:
            continue

        key = (session.program_tag, normalize_exercise_name(entry.exercise_name))
        reps = resolve_rep_count(definition.rep_range, cfg.default_reps)
        volume = definition.sets * reps * entry.weight
        total_volume += volume

        is_pr = tracker.observe_weight(key, entry.weight)
        exercise_pr = exercise_pr or is_pr

        history = tracker.weight_history.setdefault(key, [])
        previous_weight = history[-1].weight if history else None
        history.append(WeightObservation(timestamp=session.timestamp, weight=entry.weight))

        exercises.append(ExerciseProgress(
            name=entry.exercise_name,
            current_weight=entry.weight,
            sets=definition.sets,
            reps=reps,
            volume=volume,
            is_pr=is_pr,
            previous_weight=previous_weight,
            delta=entry.weight - previous_weight if previous_weight is not None else None,
            history=history[-cfg.history_length:],
        ))

    volume_pr = tracker.observe_volume(session.program_tag, total_volume)
    improvement = tracker.improvement(session.program_tag, total_volume)

    return ProcessedSession(
        id=session.id,
        timestamp=session.timestamp,
        program_tag=session.program_tag,
        total_volume=total_volume,
        is_pr=exercise_pr or volume_pr,
        improvement_percent=improvement,
        exercises=exercises,
        raw_entries=list(session.exercise_entries),
    )


# ======================================================================
# Main entry point
# ======================================================================


def process_sessions(
    sessions: list[WorkoutSession],
    definitions_for: DefinitionLookup = get_program,
    config: Optional[VolumeConfig] = None,
) -> list[ProcessedSession]:
    """Process *sessions* in the given (ascending timestamp) order.

    Args:
        sessions: Sessions sorted ascending by timestamp.
        definitions_for: Maps a program tag to its exercise definitions;
            ``None`` means the tag is unknown and nothing in the session
            matches.
        config: Optional :class:`VolumeConfig` override.

    Returns:
        One :class:`ProcessedSession` per input session, same order.
    """
    tracker = PRTracker()
    processed = []
    for session in sessions:
        definitions = definitions_for(session.program_tag)
        if definitions is None:
            logger.debug("Session %s has unknown program tag '%s'", session.id, session.program_tag)
        processed.append(process_session(session, definitions, tracker, config))
    return processed
