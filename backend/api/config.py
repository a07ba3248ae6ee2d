"""
Server settings for the HTTP layer.

Everything here is read from TIRIWE_* variables; Supabase credentials
and page names are in shared.config.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TIRIWE_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False  # also exposes /api/docs
    reload: bool = False
    log_level: str = "INFO"

    # Page shells are served from a different origin in development
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = ["Authorization", "Content-Type"]


@lru_cache
def get_settings() -> APISettings:
    return APISettings()
