"""
Configuration settings for the Crustaceans API.

Load settings from environment variables.
"""

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Application Configuration
    APP_NAME: str = os.getenv("APP_NAME", "Crustaceans API")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    APP_PORT: int = int(os.getenv("APP_PORT", "3000"))

    # URLs
    APP_URL: str = os.getenv("APP_URL", "http://localhost:3000")
    DEV_URL: str = os.getenv("DEV_URL", "http://localhost:5173")
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Database Configuration
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite+aiosqlite:///./data/crustaceans.db"
    )
    SEED_DATABASE: bool = os.getenv("SEED_DATABASE", "True").lower() == "true"

    # Logging
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Pagination
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # API Settings
    API_V1_PREFIX: str = "/api/v1"

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()


if settings.DEFAULT_PAGE_LIMIT < 1 or settings.DEFAULT_PAGE_LIMIT > settings.MAX_PAGE_LIMIT:
    raise ValueError(
        f"DEFAULT_PAGE_LIMIT must be between 1 and MAX_PAGE_LIMIT ({settings.MAX_PAGE_LIMIT})"
    )
