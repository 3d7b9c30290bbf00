"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from lifetrack.api.v1.endpoints import insights

api_router = APIRouter()

api_router.include_router(
    insights.router, prefix="/insights", tags=["Insights"]
)
