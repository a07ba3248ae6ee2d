"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
profiles in each completeness state, the default page registry and a
factory for page-load pipelines built around the in-memory fakes.
"""

from datetime import datetime
from typing import Optional

import pytest

from api.dependencies import reset_container
from modules.access.pages import PageRegistry
from modules.auth.models import Identity, Profile
from modules.bootstrap.pipeline import PageLoadPipeline
from shared.database import reset_client_cache
from tests.helpers.fakes import (
    FIXED_NOW,
    FakeFeedbackService,
    FakeIdentityProvider,
    FakeProfileStore,
)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached clients and the service container around each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def identity() -> Identity:
    return Identity(id="auth-123", email="test@example.com")


@pytest.fixture
def complete_profile() -> Profile:
    return Profile(
        id="profile-1",
        auth_id="auth-123",
        display_name="Aroha",
        avatar_emoji="🌿",
        metadata={"setup_complete": True},
    )


@pytest.fixture
def incomplete_profile() -> Profile:
    return Profile(id="profile-1", auth_id="auth-123", display_name="Aroha")


@pytest.fixture
def page_registry() -> PageRegistry:
    return PageRegistry(
        landing="index.html",
        dashboard="dashboard.html",
        settings="settings.html",
        public_pages=["index.html", ""],
        extra_protected=["sos.html", "interactions.html", "profile.html"],
    )


@pytest.fixture
def make_pipeline(page_registry, fixed_now):
    """Factory building a pipeline around fakes."""

    def _make(
        identity: Optional[Identity] = None,
        profile: Optional[Profile] = None,
        feedback: Optional[FakeFeedbackService] = None,
        identity_provider: Optional[FakeIdentityProvider] = None,
        profile_store: Optional[FakeProfileStore] = None,
    ) -> PageLoadPipeline:
        provider = identity_provider or FakeIdentityProvider(identity)
        if profile_store is None:
            profiles = {identity.id: profile} if identity and profile else {}
            profile_store = FakeProfileStore(profiles)
        return PageLoadPipeline(
            identity=provider,
            profiles=profile_store,
            feedback=feedback or FakeFeedbackService(),
            pages=page_registry,
            clock=lambda: fixed_now,
        )

    return _make
