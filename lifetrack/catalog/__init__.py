"""Reference catalog of programs and their prescribed exercises."""

from lifetrack.catalog.programs import (
    PROGRAM_CATALOG,
    find_definition,
    get_program,
    normalize_exercise_name,
    register_program,
)

__all__ = [
    "PROGRAM_CATALOG",
    "find_definition",
    "get_program",
    "normalize_exercise_name",
    "register_program",
]
