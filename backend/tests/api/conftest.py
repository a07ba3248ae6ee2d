"""Fixtures for API route tests."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api import create_app
from shared.config import Settings
from tests.helpers.fakes import TEST_JWT_SECRET


@pytest.fixture
def app():
    """Fresh application per test so dependency overrides never leak."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def supabase_unconfigured():
    """
    Real container wiring with no Supabase URL or keys.

    Tokens can still be verified (the JWT secret is set), but every
    client factory raises RuntimeError.
    """
    settings = Settings(
        _env_file=None,
        supabase_url="",
        supabase_anon_key="",
        supabase_service_role_key="",
        supabase_jwt_secret=TEST_JWT_SECRET,
    )
    with patch("api.dependencies.get_settings", return_value=settings), \
            patch("shared.database.get_settings", return_value=settings):
        yield settings
