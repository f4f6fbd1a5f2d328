from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False  # Auto-reload on code changes (dev only)
    cors_origins: List[str] = ["*"]  # Allowed CORS origins (restrict in prod)

    # ---- registry ----
    seed_movies: bool = True  # Load the two sample movies at startup

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, etc.
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Build settings from the environment and the optional .env file."""
    return Settings()
