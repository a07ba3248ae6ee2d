"""
Centralized configuration for the Tiriwe backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, PAGE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Tiriwe API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Pages
    page_landing: str = "index.html"
    page_dashboard: str = "dashboard.html"
    page_settings: str = "settings.html"
    page_sos: str = "sos.html"
    page_interactions: str = "interactions.html"
    page_profile: str = "profile.html"

    # Pages that don't require authentication ("" is the site root)
    public_pages: list[str] = ["index.html", ""]

    # Data store
    profiles_table: str = "users"
    feedback_lock_rpc: str = "check_feedback_lock"
    pending_feedback_rpc: str = "get_pending_feedback"

    # Brand
    brand_name: str = "Tiriwe"
    brand_tagline: str = "I exist because we exist"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
