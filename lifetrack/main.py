"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI

from lifetrack.api.v1.router import api_router
from lifetrack.core.config import settings
from lifetrack.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Analytics core for workout and nutrition logs.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.include_router(api_router, prefix="/api/v1")

logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "lifetrack-insights",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
