"""
Adherence scorer — weighted 0-100 nutrition score with letter grade.

Sub-scores (each 0-100) over the day series:

* **calorie_accuracy** — share of days within ±10% of the calorie target.
* **protein_goal** — share of days meeting or exceeding the protein target.
* **macro_balance** — average protein share of macro calories (4/4/9 kcal
  per gram for protein/carbs/fat).  100 inside 25-35%, otherwise
  ``max(0, 100 − 3 × |30 − share|)``.
* **consistency** — share of days with any logged calories.
* **hydration** — average water intake vs. target, capped at 100.

``overall`` is the half-up rounded weighted sum of the unrounded
sub-scores; the breakdown reports each sub-score rounded the same way.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from lifetrack.analytics.nutrition import goal_achieved
from lifetrack.analytics.numeric import round_half_up, safe_div
from lifetrack.schemas.nutrition import (
    DailyNutritionTotals,
    Grade,
    NutritionScore,
    ResolvedGoals,
    ScoreBreakdown,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_WEIGHTS: dict[str, float] = {
    "calorie_accuracy": 0.25,
    "protein_goal": 0.25,
    "macro_balance": 0.20,
    "consistency": 0.20,
    "hydration": 0.10,
}

# kcal per gram.
PROTEIN_KCAL = 4.0
CARBS_KCAL = 4.0
FAT_KCAL = 9.0

# Protein share of macro calories considered balanced (percent).
_BALANCED_PROTEIN_SHARE = (25.0, 35.0)
_IDEAL_PROTEIN_SHARE = 30.0
_BALANCE_PENALTY_PER_POINT = 3.0

# Highest first, inclusive lower bound.
_GRADE_THRESHOLDS: list[tuple[Grade, int]] = [
    (Grade.A_PLUS, 95),
    (Grade.A, 85),
    (Grade.B_PLUS, 80),
    (Grade.B, 70),
    (Grade.C_PLUS, 65),
    (Grade.C, 55),
    (Grade.D, 45),
]


class AdherenceConfig(BaseModel):
    """Sub-score weights for the overall adherence score."""

    weights: dict[str, float] = Field(default_factory=lambda: dict(_DEFAULT_WEIGHTS))


DEFAULT_ADHERENCE_CONFIG = AdherenceConfig()


# ======================================================================
# Grade mapping
# ======================================================================


def grade_for(score: int) -> Grade:
    """Map an integer score to its letter grade."""
    for grade, lower_bound in _GRADE_THRESHOLDS:
        if score >= lower_bound:
            return grade
    return Grade.F


# ======================================================================
# Sub-scores
# ======================================================================


def protein_calorie_share(day: DailyNutritionTotals) -> float:
    """Protein share of the day's macro calories, in percent (0 if none)."""
    protein_kcal = day.protein * PROTEIN_KCAL
    total = protein_kcal + day.carbs * CARBS_KCAL + day.fat * FAT_KCAL
    return 100.0 * safe_div(protein_kcal, total)


def macro_balance_score(average_protein_share: float) -> float:
    low, high = _BALANCED_PROTEIN_SHARE
    if low <= average_protein_share <= high:
        return 100.0
    return max(0.0, 100.0 - _BALANCE_PENALTY_PER_POINT * abs(_IDEAL_PROTEIN_SHARE - average_protein_share))


def _share_of_days(flags: list[bool]) -> float:
    return 100.0 * safe_div(sum(flags), len(flags))


def compute_sub_scores(
    series: list[DailyNutritionTotals],
    goals: ResolvedGoals,
    average_water: float,
) -> dict[str, float]:
    """Unrounded sub-scores keyed by breakdown field name."""
    days = len(series)
    average_share = safe_div(sum(protein_calorie_share(d) for d in series), days)

    return {
        "calorie_accuracy": min(100.0, _share_of_days([goal_achieved(d, goals) for d in series])),
        "protein_goal": min(100.0, _share_of_days([d.protein >= goals.protein_target for d in series])),
        "macro_balance": macro_balance_score(average_share),
        "consistency": _share_of_days([d.calories > 0 for d in series]),
        "hydration": min(100.0, 100.0 * safe_div(average_water, goals.water_target_ml)),
    }


# ======================================================================
# Main entry point
# ======================================================================


def compute_nutrition_score(
    series: list[DailyNutritionTotals],
    goals: ResolvedGoals,
    average_water: float,
    config: Optional[AdherenceConfig] = None,
) -> NutritionScore:
    """Composite adherence score for a day series.

    Args:
        series: Day series, typically the 7-day window.
        goals: Resolved nutrition goals.
        average_water: Mean daily water intake over the series (ml).
        config: Optional weight override.

    Returns:
        :class:`NutritionScore`; an empty series scores 0 with grade F.
    """
    if not series:
        return NutritionScore(overall=0, breakdown=ScoreBreakdown(), grade=Grade.F)

    cfg = config or DEFAULT_ADHERENCE_CONFIG
    sub_scores = compute_sub_scores(series, goals, average_water)

    weighted = sum(value * cfg.weights.get(name, 0.0) for name, value in sub_scores.items())
    overall = min(100, max(0, round_half_up(weighted)))

    logger.debug("Adherence sub-scores: %s -> %d", sub_scores, overall)

    return NutritionScore(
        overall=overall,
        breakdown=ScoreBreakdown(**{name: round_half_up(value) for name, value in sub_scores.items()}),
        grade=grade_for(overall),
    )
