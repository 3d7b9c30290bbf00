"""Tests for the built-in program catalog."""

import pytest

from lifetrack.analytics.volume import resolve_rep_count
from lifetrack.catalog.programs import (
    PROGRAM_CATALOG,
    available_programs,
    find_definition,
    get_program,
    normalize_exercise_name,
    register_program,
)
from lifetrack.schemas.workout import ExerciseDefinition


class TestBuiltinPrograms:
    def test_rotation_registered(self):
        assert available_programs()[:3] == ["PULL", "PUSH", "LEGS"]

    @pytest.mark.parametrize("tag, count", [("PULL", 5), ("PUSH", 6), ("LEGS", 5)])
    def test_exercise_counts(self, tag, count):
        assert len(get_program(tag)) == count

    def test_unknown_program(self):
        assert get_program("CARDIO") is None

    def test_every_rep_range_resolves(self):
        for definitions in PROGRAM_CATALOG.values():
            for definition in definitions:
                assert resolve_rep_count(definition.rep_range) > 0

    def test_leg_ranges(self):
        legs = {d.name: d for d in get_program("LEGS")}
        assert resolve_rep_count(legs["Leg Curl"].rep_range) == 11.0
        assert resolve_rep_count(legs["Gastrocnemius (Calves)"].rep_range) == 13.5


class TestRegistration:
    def test_duplicate_tag_raises(self):
        with pytest.raises(ValueError):
            register_program("PUSH", [])

    def test_register_new_program(self):
        tag = "TEST_UPPER"
        register_program(tag, [ExerciseDefinition(name="Dips", sets=3, rep_range=12)])
        try:
            assert get_program(tag)[0].name == "Dips"
            assert tag in available_programs()
        finally:
            PROGRAM_CATALOG.pop(tag)


class TestNameMatching:
    @pytest.mark.parametrize("raw", ["RDL", "rdl", "  Rdl ", "RDL\t"])
    def test_normalize(self, raw):
        assert normalize_exercise_name(raw) == "rdl"

    def test_find_definition(self):
        definition = find_definition(get_program("PUSH"), "chest press ")
        assert definition is not None
        assert definition.is_compound is True

    def test_find_definition_by_alias(self):
        rows = ExerciseDefinition(name="Back Rows", sets=1, rep_range=8, aliases=("חתירה",))
        assert find_definition([rows], " חתירה ") is rows
        assert find_definition([rows], "back rows") is rows

    def test_find_definition_missing(self):
        assert find_definition(get_program("PUSH"), "Deadlift") is None
