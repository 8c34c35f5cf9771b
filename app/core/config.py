"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Pre-Seminary Workout"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Instructor Team"]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./workout.db"

    # Session rules
    SESSION_LENGTH_MINUTES: int = 45
    LOG_STORE_CAPACITY: int = 500
    DEFAULT_EFFORT_RATING: int = 5
    RECENT_SERIES_LIMIT: int = 10

    # Frame loop driving the live timer
    FRAME_INTERVAL_SECONDS: float = 0.25
    FRAME_LOOP_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
