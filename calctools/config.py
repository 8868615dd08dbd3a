"""
Application configuration.
Values come from CALCTOOLS_* environment variables or a .env file.
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Service settings.
    (Environment variables take precedence over the .env file.)
    """

    PROJECT_NAME: str = "calc-tools"

    # API
    API_PREFIX: str = "/api"

    # Server
    PORT: int = 5000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # JSON lines instead of the console renderer

    # CORS (for frontend development)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(
        env_prefix="CALCTOOLS_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


def get_settings() -> Settings:
    """Build settings from the environment."""
    return Settings()
