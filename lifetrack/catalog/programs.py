"""
Built-in program catalog for the workout log.

Maps a program/day tag (``PULL``, ``PUSH``, ``LEGS``) to the ordered list
of :class:`~lifetrack.schemas.workout.ExerciseDefinition` prescribed for
that day.  Logged entries are matched against these definitions with
:func:`normalize_exercise_name`; every comparison site goes through that
one function.

To add a program, call :func:`register_program` at import time.
"""

from __future__ import annotations

from typing import Optional

from lifetrack.schemas.workout import ExerciseDefinition

# ======================================================================
# Name matching
# ======================================================================


def normalize_exercise_name(name: str) -> str:
    """Case-fold and trim an exercise name for comparison."""
    return name.strip().casefold()


def find_definition(definitions: list[ExerciseDefinition], exercise_name: str) -> Optional[ExerciseDefinition]:
    """Return the definition whose name or alias matches *exercise_name*, or ``None``."""
    wanted = normalize_exercise_name(exercise_name)
    for definition in definitions:
        names = (definition.name, *definition.aliases)
        if any(normalize_exercise_name(name) == wanted for name in names):
            return definition
    return None


# ======================================================================
# Catalog storage
# ======================================================================

PROGRAM_CATALOG: dict[str, list[ExerciseDefinition]] = {}


def register_program(tag: str, definitions: list[ExerciseDefinition]) -> None:
    """Register the exercise list for a program tag.

    Raises :class:`ValueError` if the tag is already registered.
    """
    if tag in PROGRAM_CATALOG:
        raise ValueError(f"Program '{tag}' already registered")
    PROGRAM_CATALOG[tag] = list(definitions)


def get_program(tag: str) -> Optional[list[ExerciseDefinition]]:
    """Look up a program by tag.  Returns ``None`` if not found."""
    return PROGRAM_CATALOG.get(tag)


def available_programs() -> list[str]:
    """Return the registered program tags in rotation order."""
    return list(PROGRAM_CATALOG.keys())


# ======================================================================
# Built-in programs (push / pull / legs rotation)
# ======================================================================

_D = ExerciseDefinition

_PROGRAMS: dict[str, list[ExerciseDefinition]] = {
    "PULL": [
        _D(name="Back Rows", sets=1, rep_range=8, is_compound=True),
        _D(name="Pullover", sets=1, rep_range=10),
        _D(name="Cable Shrugs", sets=1, rep_range=10),
        _D(name="Biceps (Barbell Curl)", sets=1, rep_range=10),
        _D(name="Biceps (Cable/Machine)", sets=1, rep_range=10),
    ],
    "PUSH": [
        _D(name="Chest Press", sets=1, rep_range=8, is_compound=True),
        _D(name="Pec Deck Fly", sets=1, rep_range=10),
        _D(name="Egyptian/Machine Lateral Raises", sets=1, rep_range=8),
        _D(name="Shoulder Press", sets=1, rep_range=10, is_compound=True),
        _D(name="Triceps Cable Pushdowns", sets=1, rep_range=8),
        _D(name="Single Arm Cable Triceps", sets=1, rep_range=10),
    ],
    "LEGS": [
        _D(name="Hack Squat / Squat / Leg Press", sets=1, rep_range=8, is_compound=True),
        _D(name="RDL", sets=1, rep_range=8, is_compound=True),
        _D(name="Leg Extension", sets=1, rep_range="10-12"),
        _D(name="Leg Curl", sets=1, rep_range="10-12"),
        _D(name="Gastrocnemius (Calves)", sets=1, rep_range="12-15"),
    ],
}

for _tag, _definitions in _PROGRAMS.items():
    register_program(_tag, _definitions)
