"""
Food recommendations for the macros lagging behind today.

Suggestions come from a small static table; nothing is personalised
beyond today's protein and carbs.
"""

from __future__ import annotations

from lifetrack.schemas.nutrition import DailyNutritionTotals, FoodRecommendation, ResolvedGoals

MAX_RECOMMENDATIONS = 4

# Protein below this share of target triggers protein suggestions.
_LOW_PROTEIN_RATIO = 0.7
# Carbs (grams) below this trigger a complex-carb suggestion.
_LOW_CARBS_GRAMS = 100.0

_R = FoodRecommendation

PROTEIN_FOODS: list[FoodRecommendation] = [
    _R(id="greek-yogurt", name="Greek Yogurt", reason="High in protein, works as a snack or breakfast",
       macro_boost="protein", calories=100, protein=17, carbs=6, fat=1, tags=["dairy", "snack", "quick"]),
    _R(id="chicken-breast", name="Chicken Breast", reason="Excellent protein source with little fat",
       macro_boost="protein", calories=165, protein=31, carbs=0, fat=4, tags=["main course", "low fat"]),
    _R(id="eggs", name="Eggs", reason="Quality protein with essential vitamins",
       macro_boost="protein", calories=155, protein=13, carbs=1, fat=11, tags=["breakfast", "quick", "versatile"]),
]

CARB_FOODS: list[FoodRecommendation] = [
    _R(id="oatmeal", name="Oatmeal", reason="Complex carbs for long-lasting energy",
       macro_boost="carbs", calories=150, protein=5, carbs=27, fat=3, tags=["breakfast", "fiber", "energy"]),
]

BALANCED_FOODS: list[FoodRecommendation] = [
    _R(id="salmon", name="Salmon", reason="Balanced and rich in omega-3",
       macro_boost="balanced", calories=208, protein=20, carbs=0, fat=13, tags=["omega-3", "main course", "healthy"]),
]


def recommend_foods(today: DailyNutritionTotals, goals: ResolvedGoals) -> list[FoodRecommendation]:
    """Up to :data:`MAX_RECOMMENDATIONS` suggestions for *today*."""
    recommendations: list[FoodRecommendation] = []
    if today.protein < goals.protein_target * _LOW_PROTEIN_RATIO:
        recommendations.extend(PROTEIN_FOODS)
    if today.carbs < _LOW_CARBS_GRAMS:
        recommendations.extend(CARB_FOODS)
    recommendations.extend(BALANCED_FOODS)
    return recommendations[:MAX_RECOMMENDATIONS]
