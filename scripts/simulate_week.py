"""Simulate three weeks of push/pull/legs training and one week of meals.

Prints the workout progress table and the nutrition dashboard produced by
:class:`~lifetrack.services.insights_service.InsightsService`.

Usage:
    python scripts/simulate_week.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lifetrack.core.logging import setup_logging
from lifetrack.schemas.nutrition import MealItem, MealRecord, NutritionGoals, WaterLog
from lifetrack.schemas.workout import ExerciseEntry, WorkoutSession
from lifetrack.services.insights_service import InsightsService
from lifetrack.sources.memory import InMemoryNutritionSource, InMemoryWorkoutSource

USER = "demo"
TODAY = datetime.date(2026, 3, 15)

# ─── (program, [(exercise, starting weight)]) in rotation order ──────
ROTATION = [
    ("PULL", [("Back Rows", 60.0), ("Pullover", 25.0), ("Biceps (Barbell Curl)", 30.0)]),
    ("PUSH", [("Chest Press", 70.0), ("Shoulder Press", 40.0), ("Pec Deck Fly", 45.0)]),
    ("LEGS", [("Hack Squat / Squat / Leg Press", 120.0), ("Leg Extension", 50.0), ("Leg Curl", 40.0)]),
]

# ─── (day offset, [(calories, protein, carbs, fat)], water ml) ───────
MEALS = [
    (6, [(650, 45, 70, 20), (800, 50, 90, 25), (500, 20, 60, 15)], 2000),
    (5, [(700, 50, 80, 22), (900, 60, 95, 28)], 2600),
    (4, [(600, 40, 60, 18), (750, 55, 70, 20), (600, 50, 55, 15)], 2500),
    (3, [], 1000),
    (2, [(550, 35, 65, 18), (1000, 70, 100, 30), (400, 40, 20, 12)], 2800),
    (1, [(650, 45, 70, 20), (850, 60, 90, 25), (450, 45, 30, 12)], 3000),
    (0, [(600, 50, 55, 18), (900, 65, 85, 26), (500, 40, 40, 14)], 2700),
]


def _build_workouts() -> InMemoryWorkoutSource:
    source = InMemoryWorkoutSource()
    start = datetime.datetime.combine(TODAY, datetime.time(18, 0)) - datetime.timedelta(days=20)
    for i in range(9):
        program, exercises = ROTATION[i % len(ROTATION)]
        cycle = i // len(ROTATION)
        entries = [ExerciseEntry(exercise_name=name, weight=base + 2.5 * cycle, completed=True)
                   for name, base in exercises]
        source.add(USER, WorkoutSession(id=f"s{i + 1}", timestamp=start + datetime.timedelta(days=2 * i),
                                        program_tag=program, exercise_entries=entries))
    return source


def _build_nutrition() -> InMemoryNutritionSource:
    source = InMemoryNutritionSource()
    for offset, meals, water in MEALS:
        day = TODAY - datetime.timedelta(days=offset)
        for calories, protein, carbs, fat in meals:
            source.add_meal(USER, MealRecord(date=day, items=[
                MealItem(calories=calories, protein=protein, carbs=carbs, fat=fat),
            ]))
        source.add_water(USER, WaterLog(date=day, amount_ml=water))
    source.set_goals(USER, NutritionGoals(calories_target=2000, protein_target=150))
    return source


def main() -> None:
    setup_logging()
    service = InsightsService(_build_workouts(), _build_nutrition())

    workouts = service.get_workout_insights(USER)
    print(f"Week {workouts.cycle.current_week} "
          f"({'deload' if workouts.cycle.is_deload_week else f'{workouts.cycle.weeks_until_deload} weeks to deload'})")
    print(f"{'date':<12}{'program':<8}{'volume':>10}{'change':>10}  PR")
    for s in workouts.sessions:
        change = f"{s.improvement_percent:+.1f}%" if s.improvement_percent is not None else "first"
        print(f"{s.timestamp.date()!s:<12}{s.program_tag:<8}{s.total_volume:>10.0f}{change:>10}  "
              f"{'*' if s.is_pr else ''}")

    print()
    nutrition = service.get_nutrition_insights(USER, as_of=TODAY)
    print(f"Score {nutrition.score.overall} ({nutrition.score.grade.value}): "
          f"{nutrition.score.breakdown.model_dump()}")
    for trend in nutrition.macro_trends:
        print(f"  {trend.macro.value:<9} avg {trend.weekly_average:7.1f}  {trend.trend.value:<8} "
              f"consistency {trend.consistency}%")
    for streak in nutrition.streaks:
        print(f"  streak {streak.streak_type.value:<9} {streak.current_streak} (best {streak.longest_streak})")
    for insight in nutrition.insights:
        print(f"  [{insight.type.value}] {insight.title}")


if __name__ == "__main__":
    main()
