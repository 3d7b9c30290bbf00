"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "LifeTrack Insights"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["LifeTrack contributors"]
    PROJECT_URL: str = "https://github.com/lifetrack/lifetrack-insights"

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field("text", description="'text' or 'json'")

    # Training cycle
    SESSIONS_PER_WEEK: int = Field(3, ge=1, le=14)
    DELOAD_FREQUENCY: int = Field(6, ge=2, le=16)
    DEFAULT_WEEK_STRATEGY: str = "session_count"

    # Volume & PR engine
    DEFAULT_REPS: float = Field(10.0, gt=0)
    HISTORY_LENGTH: int = Field(5, ge=1, le=50)

    # Nutrition
    NUTRITION_WINDOW_DAYS: int = Field(7, ge=1, le=90)
    DEFAULT_CALORIES_TARGET: float = 2000.0
    DEFAULT_PROTEIN_TARGET: float = 150.0
    DEFAULT_CARBS_TARGET: float = 200.0
    DEFAULT_FAT_TARGET: float = 65.0
    DEFAULT_WATER_TARGET_ML: float = 2500.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
