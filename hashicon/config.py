"""Service configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hashicon_env: str = "development"
    hashicon_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering defaults for the HTTP API
    default_size: int = 256
    default_padding: float = 0.08
    max_size: int = 2048

    # Identicons never change for a given input
    cache_max_age: int = 86400

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
