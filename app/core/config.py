"""Application settings loaded from environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. Loaded from .env and environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    APP_NAME: str = "Mani Project"
    APP_VERSION: str = "0.0.1-SNAPSHOT"

    # Server bind (8080 matches the servlet container default the frontend expects)
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS: comma-separated origins (e.g. http://localhost:5173). When empty, no CORS middleware.
    CORS_ORIGINS: str = ""

    # Logging (optional)
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
