"""Module: config."""

from pydantic_settings import BaseSettings

# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # Primary SQLAlchemy connection string for the backend database.
    database_url: str
    # Dosing interval applied to a pet's primary medication unless the pet overrides it.
    default_interval_days: int = 30
    # Language used for display dates when a request does not ask for one.
    default_locale: str = "en"
    # How far back medication statistics look when no start date is given.
    stats_lookback_days: int = 365
    log_level: str = "INFO"
    # Frontend origins allowed by the CORS middleware.
    cors_origins: list[str] = [
        "http://localhost:8081",
        "http://127.0.0.1:8081",
        "http://localhost:19006",
    ]

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

# Global settings instance imported by app modules at runtime.
settings = Settings()
