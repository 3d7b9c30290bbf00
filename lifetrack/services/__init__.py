"""Business logic services."""

from lifetrack.services.insights_service import InsightsService

__all__ = [
    "InsightsService",
]
