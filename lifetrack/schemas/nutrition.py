"""
Nutrition log schemas.

Raw records come from the meal and water loggers; everything below the
*Derived models* banner is computed by :mod:`lifetrack.analytics` and
never persisted.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ======================================================================
# Enums
# ======================================================================


class Macro(str, Enum):
    """Tracked nutrient categories."""
    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"


class Trend(str, Enum):
    """Direction of a macro relative to its target."""
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class Grade(str, Enum):
    """Letter grade of the adherence score."""
    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C_PLUS = "C+"
    C = "C"
    D = "D"
    F = "F"


class StreakType(str, Enum):
    """Daily goals tracked by the streak counter."""
    CALORIES = "calories"
    PROTEIN = "protein"
    WATER = "water"
    LOGGING = "logging"


class InsightType(str, Enum):
    TIP = "tip"
    WARNING = "warning"
    ACHIEVEMENT = "achievement"
    SUGGESTION = "suggestion"


class InsightPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ======================================================================
# Input records
# ======================================================================


class MealItem(BaseModel):
    """A single food item inside a meal."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class MealRecord(BaseModel):
    """A logged meal (breakfast, lunch, ...) with its items."""

    date: datetime.date
    meal_type: str = "snack"
    items: list[MealItem] = Field(default_factory=list)


class WaterLog(BaseModel):
    """A water-intake entry."""

    date: datetime.date
    amount_ml: float = 0.0


class NutritionGoals(BaseModel):
    """The user's active nutrition goals.

    Any field left unset (or set to 0) is replaced by the configured
    default in :func:`lifetrack.analytics.nutrition.resolve_goals`.
    """

    calories_target: Optional[float] = None
    protein_target: Optional[float] = None
    carbs_target: Optional[float] = None
    fat_target: Optional[float] = None
    water_target_ml: Optional[float] = None


class ResolvedGoals(BaseModel):
    """Nutrition goals with every target filled in."""

    calories_target: float
    protein_target: float
    carbs_target: float
    fat_target: float
    water_target_ml: float

    def target_for(self, macro: Macro) -> float:
        return getattr(self, f"{macro.value}_target")


# ======================================================================
# Derived models
# ======================================================================


class DailyNutritionTotals(BaseModel):
    """Summed intake for one calendar day (zero when nothing was logged)."""

    date: datetime.date
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    water: float = 0.0


class WeeklyDataPoint(BaseModel):
    """Display row of the day series, values rounded to whole units."""

    date: datetime.date
    day_name: str
    calories: int
    protein: int
    carbs: int
    fat: int
    water: int
    goal_achieved: bool


class MacroTrend(BaseModel):
    """Trend of a single macro over the window."""

    macro: Macro
    current: float = Field(..., description="Today's value")
    target: float
    weekly_average: float
    trend: Trend
    percent_change: float = Field(..., description="Today vs. weekly average, in percent")
    consistency: int = Field(..., ge=0, le=100, description="Share of days within ±10% of target")


class ScoreBreakdown(BaseModel):
    """Sub-scores of the adherence score (each 0-100)."""

    calorie_accuracy: int = Field(0, ge=0, le=100)
    protein_goal: int = Field(0, ge=0, le=100)
    macro_balance: int = Field(0, ge=0, le=100)
    consistency: int = Field(0, ge=0, le=100)
    hydration: int = Field(0, ge=0, le=100)


class NutritionScore(BaseModel):
    """Composite adherence score with letter grade."""

    overall: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    grade: Grade


class StreakData(BaseModel):
    """Consecutive-day streak for one goal type.

    ``longest_streak`` is ``max(current_streak, floor)``; there is no
    historical memory behind it.
    """

    streak_type: StreakType
    current_streak: int = Field(..., ge=0)
    longest_streak: int = Field(..., ge=0)
    is_personal_best: bool = False
    last_active_date: Optional[datetime.date] = None


class MacroShare(BaseModel):
    grams: float
    calories: float
    percentage: float


class MacroDistribution(BaseModel):
    """Today's calorie split across protein, carbs and fat."""

    protein: MacroShare
    carbs: MacroShare
    fat: MacroShare


class MealInsight(BaseModel):
    """Rule-based note about the week."""

    id: str
    type: InsightType
    title: str
    description: str
    priority: InsightPriority
    actionable: bool = False
    action: Optional[str] = None


class FoodRecommendation(BaseModel):
    """Static food suggestion that boosts a lagging macro."""

    id: str
    name: str
    reason: str
    macro_boost: str = Field(..., description="'protein', 'carbs', 'fat' or 'balanced'")
    calories: float
    protein: float
    carbs: float
    fat: float
    tags: list[str] = Field(default_factory=list)


class WeeklySummary(BaseModel):
    """Headline numbers of the window."""

    week_start: Optional[datetime.date]
    week_end: Optional[datetime.date]
    total_calories: float
    avg_calories: float
    total_protein: float
    avg_protein: float
    days_logged: int
    goals_met_count: int
    best_day: str
    insights: list[MealInsight] = Field(default_factory=list)
    score: NutritionScore


class NutritionInsights(BaseModel):
    """Read-only nutrition analytics handed to the presentation layer."""

    goals: ResolvedGoals
    daily_totals: list[DailyNutritionTotals]
    weekly_data: list[WeeklyDataPoint]
    macro_trends: list[MacroTrend]
    score: NutritionScore
    streaks: list[StreakData]
    insights: list[MealInsight]
    recommendations: list[FoodRecommendation]
    macro_distribution: MacroDistribution
    weekly_summary: WeeklySummary
