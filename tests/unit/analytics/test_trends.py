"""Tests for the macro trend classifier."""

import datetime

import pytest

from lifetrack.analytics.nutrition import resolve_goals
from lifetrack.analytics.trends import (
    classify_trend,
    compute_macro_trends,
    consistency,
    percent_change,
)
from lifetrack.schemas.nutrition import DailyNutritionTotals, Macro, Trend

TODAY = datetime.date(2026, 3, 15)
GOALS = resolve_goals(None)


def _series(calories: list[float], protein: float | list[float] = 150.0) -> list[DailyNutritionTotals]:
    proteins = protein if isinstance(protein, list) else [protein] * len(calories)
    start = TODAY - datetime.timedelta(days=len(calories) - 1)
    return [
        DailyNutritionTotals(date=start + datetime.timedelta(days=i), calories=c, protein=p, carbs=200, fat=65)
        for i, (c, p) in enumerate(zip(calories, proteins))
    ]


class TestConsistency:
    def test_all_on_target_is_100(self):
        assert consistency([2000] * 7, 2000) == 100

    def test_empty_is_zero(self):
        assert consistency([], 2000) == 0

    def test_partial(self):
        # 3 of 7 within ±10% -> 42.86 -> 43
        assert consistency([2000, 1900, 2100, 0, 0, 0, 0], 2000) == 43

    def test_bounds_inclusive(self):
        assert consistency([1800, 2200], 2000) == 100

    @pytest.mark.parametrize("values", [[0] * 7, [5000, 0, 1], [1234.5]])
    def test_range(self, values):
        assert 0 <= consistency(values, 2000) <= 100


class TestPercentChange:
    def test_zero_baseline(self):
        assert percent_change(500, 0) == 0.0

    def test_change(self):
        assert percent_change(110, 100) == pytest.approx(10.0)


class TestClassifyTrend:
    @pytest.mark.parametrize(
        "avg, expected",
        [(2001, Trend.RISING), (2000, Trend.STABLE), (1800, Trend.STABLE), (1799, Trend.FALLING)],
    )
    def test_calories(self, avg, expected):
        assert classify_trend(Macro.CALORIES, avg, 2000) is expected

    @pytest.mark.parametrize("avg, expected", [(150, Trend.RISING), (200, Trend.RISING), (149, Trend.FALLING)])
    def test_protein_has_no_stable_state(self, avg, expected):
        assert classify_trend(Macro.PROTEIN, avg, 150) is expected

    @pytest.mark.parametrize("macro", [Macro.CARBS, Macro.FAT])
    @pytest.mark.parametrize("avg", [0, 50, 500])
    def test_carbs_and_fat_always_stable(self, macro, avg):
        assert classify_trend(macro, avg, 100) is Trend.STABLE


class TestComputeMacroTrends:
    def test_empty_series(self):
        assert compute_macro_trends([], GOALS) == []

    def test_one_trend_per_macro_in_order(self):
        trends = compute_macro_trends(_series([2000] * 7), GOALS)
        assert [t.macro for t in trends] == [Macro.CALORIES, Macro.PROTEIN, Macro.CARBS, Macro.FAT]

    def test_steady_week(self):
        calories = compute_macro_trends(_series([2000] * 7), GOALS)[0]
        assert calories.current == 2000
        assert calories.weekly_average == 2000
        assert calories.percent_change == 0
        assert calories.consistency == 100
        assert calories.trend is Trend.STABLE

    def test_current_is_last_day(self):
        calories = compute_macro_trends(_series([1000, 1000, 1000, 1000, 1000, 1000, 3000]), GOALS)[0]
        assert calories.current == 3000
        assert calories.weekly_average == pytest.approx(9000 / 7)
        assert calories.percent_change == pytest.approx(100 * (3000 - 9000 / 7) / (9000 / 7))
        assert calories.trend is Trend.FALLING

    def test_all_zero_week_has_no_division_error(self):
        trends = compute_macro_trends(_series([0] * 7, protein=0), GOALS)
        assert all(t.percent_change == 0 for t in trends)
        assert trends[1].trend is Trend.FALLING

    def test_targets_taken_from_goals(self):
        trends = compute_macro_trends(_series([2000] * 7), GOALS)
        assert [t.target for t in trends] == [2000, 150, 200, 65]
