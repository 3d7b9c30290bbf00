"""Tests for the streak counter."""

import datetime

import pytest

from lifetrack.analytics.nutrition import resolve_goals
from lifetrack.analytics.streaks import StreakConfig, compute_streaks, current_streak
from lifetrack.schemas.nutrition import DailyNutritionTotals, StreakType

TODAY = datetime.date(2026, 3, 15)
GOALS = resolve_goals(None)

GOOD = dict(calories=2000, protein=150, carbs=200, fat=65, water=2500)
EMPTY = dict(calories=0, protein=0, carbs=0, fat=0, water=0)


def _series(*days: dict) -> list[DailyNutritionTotals]:
    start = TODAY - datetime.timedelta(days=len(days) - 1)
    return [DailyNutritionTotals(date=start + datetime.timedelta(days=i), **d) for i, d in enumerate(days)]


def _by_type(streaks):
    return {s.streak_type: s for s in streaks}


class TestCurrentStreak:
    def test_counts_back_from_last_day(self):
        series = _series(GOOD, GOOD, EMPTY, GOOD, GOOD)
        assert current_streak(series, lambda d: d.calories > 0) == 2

    def test_failing_last_day_is_zero(self):
        series = _series(GOOD, GOOD, EMPTY)
        assert current_streak(series, lambda d: d.calories > 0) == 0

    def test_empty(self):
        assert current_streak([], lambda d: True) == 0


class TestComputeStreaks:
    def test_empty_series(self):
        assert compute_streaks([], GOALS) == []

    def test_one_entry_per_goal_type(self):
        streaks = compute_streaks(_series(GOOD), GOALS)
        assert [s.streak_type for s in streaks] == [
            StreakType.CALORIES, StreakType.PROTEIN, StreakType.WATER, StreakType.LOGGING,
        ]

    def test_perfect_week(self):
        streaks = _by_type(compute_streaks(_series(*[GOOD] * 7), GOALS))
        assert all(s.current_streak == 7 for s in streaks.values())
        assert streaks[StreakType.CALORIES].longest_streak == 7
        assert streaks[StreakType.CALORIES].is_personal_best is True
        assert streaks[StreakType.LOGGING].longest_streak == 7
        assert streaks[StreakType.LOGGING].is_personal_best is False

    @pytest.mark.parametrize(
        "streak_type, floor",
        [(StreakType.CALORIES, 5), (StreakType.PROTEIN, 4), (StreakType.WATER, 3), (StreakType.LOGGING, 7)],
    )
    def test_longest_falls_back_to_floor(self, streak_type, floor):
        streaks = _by_type(compute_streaks(_series(*[EMPTY] * 7), GOALS))
        assert streaks[streak_type].current_streak == 0
        assert streaks[streak_type].longest_streak == floor
        assert streaks[streak_type].is_personal_best is False

    def test_longest_never_below_current(self):
        for n in range(1, 10):
            for s in compute_streaks(_series(*[GOOD] * n), GOALS):
                assert s.longest_streak >= s.current_streak

    def test_goal_types_evaluated_independently(self):
        # Calories on target but no water logged today.
        today = dict(GOOD, water=0)
        streaks = _by_type(compute_streaks(_series(GOOD, GOOD, today), GOALS))
        assert streaks[StreakType.CALORIES].current_streak == 3
        assert streaks[StreakType.WATER].current_streak == 0

    def test_calorie_streak_respects_tolerance(self):
        over = dict(GOOD, calories=2300)
        streaks = _by_type(compute_streaks(_series(GOOD, over, GOOD), GOALS))
        assert streaks[StreakType.CALORIES].current_streak == 1
        assert streaks[StreakType.LOGGING].current_streak == 3

    def test_last_active_date_is_latest_day(self):
        streaks = compute_streaks(_series(GOOD, GOOD), GOALS)
        assert all(s.last_active_date == TODAY for s in streaks)

    def test_custom_floors(self):
        cfg = StreakConfig(floors={StreakType.LOGGING: 2})
        streaks = _by_type(compute_streaks(_series(*[GOOD] * 3), GOALS, config=cfg))
        assert streaks[StreakType.LOGGING].is_personal_best is True
        assert streaks[StreakType.CALORIES].longest_streak == 3
