"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Tiriwe API"
        assert settings.debug is False
        assert settings.app_version == "0.1.0"
        assert settings.profiles_table == "users"

    def test_default_pages(self):
        """The landing page and the site root are the only public pages."""
        settings = Settings(_env_file=None)
        assert settings.page_landing == "index.html"
        assert settings.page_dashboard == "dashboard.html"
        assert settings.page_settings == "settings.html"
        assert settings.public_pages == ["index.html", ""]

    def test_default_feedback_procedures(self):
        settings = Settings(_env_file=None)
        assert settings.feedback_lock_rpc == "check_feedback_lock"
        assert settings.pending_feedback_rpc == "get_pending_feedback"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PAGE_DASHBOARD": "home.html"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.page_dashboard == "home.html"

    def test_loads_public_pages_from_env(self):
        """List settings are parsed from JSON."""
        with patch.dict(os.environ, {"PUBLIC_PAGES": '["index.html", "", "about.html"]'}):
            settings = Settings(_env_file=None)
            assert settings.public_pages == ["index.html", "", "about.html"]

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_ANON_KEY": "test-anon-key",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "SUPABASE_JWT_SECRET": "test-jwt-secret",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_anon_key == "test-anon-key"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.supabase_jwt_secret == "test-jwt-secret"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        # Clear the cache first
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
