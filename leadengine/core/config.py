from typing import List

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every lead-automation policy constant lives here so it can be tuned
    per deployment or overridden in tests.
    """

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    LOG_LEVEL: str = "INFO"

    # SLA policy
    FIRST_CONTACT_SLA_MINUTES: int = 15
    FOLLOW_UP_SLA_HOURS: int = 24

    # Duplicate detection policy
    DUPLICATE_WINDOW_DAYS: int = 14
    NAME_SIMILARITY_THRESHOLD: float = 0.8
    PHONE_SUFFIX_LENGTH: int = Field(4, ge=1)

    # Scoring policy
    PREMIUM_CITIES: List[str] = ["Bangalore", "Mumbai", "Delhi", "Hyderabad"]
    PREMIUM_CITY_POINTS: int = 10
    PREFERRED_MODEL_POINTS: int = 15
    REPEAT_LEAD_POINTS: int = 20
    DEFAULT_CHANNEL_POINTS: int = 10
    MAX_LEAD_SCORE: int = 100

    DEFAULT_TIMEZONE: str = "Asia/Kolkata"

    # CORS configuration, comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"
    IMPORT_RATE_LIMIT: str = "30/minute"


settings = Settings()
