"""Application configuration settings."""

import string
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "shortlink.db"

    # Application
    app_title: str = "Shortlink Service"
    app_version: str = "0.1.0"
    app_description: str = "Edge service that turns long URLs into short reversible codes"
    log_level: str = "INFO"

    # Short codes. The secret has no default: codes issued under one salt
    # only decode under that same salt.
    hash_secret: Optional[str] = None
    hash_min_length: int = 7
    hash_alphabet: str = string.digits + string.ascii_lowercase + string.ascii_uppercase

    # Links
    public_base_url: Optional[str] = None
    max_url_length: int = 2048
    allowed_url_schemes: list[str] = ["http", "https"]
    short_code_write_attempts: int = 2
    # Rows left without a short code that startup repairs; 0 disables
    backfill_on_startup_limit: int = 100

    # Redirects
    redirect_status_code: int = 301
    redirect_cache_max_age: int = 86400

    # CORS
    cors_allowed_origins: list[str] = [
        "https://sa.api.br",
        "https://ue.ia.br",
        "http://127.0.0.1:5500",
        "http://localhost:8787",
    ]
    cors_max_age: int = 86400


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
