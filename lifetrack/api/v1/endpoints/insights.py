"""
Insights endpoints — workout progress and nutrition dashboard.

Both endpoints are stateless: the request body carries the full snapshot
and nothing is stored.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from lifetrack.analytics.report import compute_nutrition_insights, compute_workout_insights
from lifetrack.core.config import settings
from lifetrack.schemas.nutrition import NutritionInsights
from lifetrack.schemas.snapshot import NutritionSnapshot, WorkoutSnapshot
from lifetrack.schemas.workout import WorkoutInsights

router = APIRouter()


@router.post(
    "/workouts",
    summary="Compute training-cycle position, session volume and PRs.",
    response_model=WorkoutInsights,
)
def post_workout_insights(
    snapshot: WorkoutSnapshot,
    strategy: Optional[str] = Query(
        None, description="Week numbering: 'session_count' or 'calendar' (defaults to settings)"
    ),
):
    try:
        return compute_workout_insights(snapshot.sessions, strategy=strategy)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.args[0]) from exc


@router.post(
    "/nutrition",
    summary="Compute macro trends, adherence score and streaks.",
    response_model=NutritionInsights,
)
def post_nutrition_insights(
    snapshot: NutritionSnapshot,
    as_of: Optional[datetime.date] = Query(None, description="Last day of the window (defaults to today)"),
    days: int = Query(settings.NUTRITION_WINDOW_DAYS, ge=1, le=90, description="Window length in days"),
):
    ref_date = as_of or datetime.date.today()
    return compute_nutrition_insights(snapshot.meals, snapshot.water_logs, snapshot.goals, ref_date, days)
