"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires the Supabase-backed
collaborators into the session services. Page-load pipelines are
built per request from the visitor's bearer token; the collaborators
behind them are shared.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from modules.auth.interfaces import IIdentityProvider
from shared.config import Settings, get_settings
from .middleware.auth import get_access_token

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.access.pages import PageRegistry
    from modules.auth.interfaces import IProfileStore
    from modules.auth.service import AccountService, LastActiveWriter, SessionResolver
    from modules.bootstrap.pipeline import PageLoadPipeline
    from modules.feedback.gate import FeedbackGate
    from modules.feedback.interfaces import IFeedbackService


class ServiceContainer:
    """
    Container for shared service instances.

    Services are created lazily on first access and cached. Supabase
    clients are created on first query, so an unconfigured deployment
    degrades (anonymous visitors, no banner) instead of failing requests.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._profile_store: "IProfileStore | None" = None
        self._feedback_service: "IFeedbackService | None" = None
        self._page_registry: "PageRegistry | None" = None
        self._last_active: "LastActiveWriter | None" = None

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def profiles(self) -> "IProfileStore":
        """Get the profile store instance."""
        if self._profile_store is None:
            from modules.auth.providers import SupabaseProfileStore
            from shared.database import get_supabase_client
            self._profile_store = SupabaseProfileStore(
                table=self.settings.profiles_table,
                client_factory=get_supabase_client,
            )
        return self._profile_store

    @property
    def feedback(self) -> "IFeedbackService":
        """Get the feedback service instance."""
        if self._feedback_service is None:
            from modules.feedback.service import SupabaseFeedbackService
            from shared.database import get_supabase_client
            self._feedback_service = SupabaseFeedbackService(
                client_factory=get_supabase_client,
                lock_rpc=self.settings.feedback_lock_rpc,
                pending_rpc=self.settings.pending_feedback_rpc,
            )
        return self._feedback_service

    @property
    def pages(self) -> "PageRegistry":
        """Get the page registry."""
        if self._page_registry is None:
            from modules.access.pages import PageRegistry
            self._page_registry = PageRegistry.from_settings(self.settings)
        return self._page_registry

    @property
    def last_active(self) -> "LastActiveWriter":
        """
        Get the process-wide last-active writer.

        Shared only so shutdown can drain in-flight writes; it carries no
        session state between page loads.
        """
        if self._last_active is None:
            from modules.auth.service import LastActiveWriter
            self._last_active = LastActiveWriter(self.profiles)
        return self._last_active

    def identity_provider(self, access_token: Optional[str]) -> IIdentityProvider:
        """Build the identity provider for one visitor's token."""
        from modules.auth.providers import SupabaseIdentityProvider
        from shared.database import get_supabase_anon_client, get_supabase_client
        return SupabaseIdentityProvider(
            access_token,
            jwt_secret=self.settings.supabase_jwt_secret,
            client_factory=get_supabase_anon_client,
            admin_client_factory=get_supabase_client,
        )

    def session_resolver(self, identity: IIdentityProvider) -> "SessionResolver":
        from modules.auth.service import SessionResolver
        return SessionResolver(identity, self.profiles, self.last_active)

    def page_load(self, identity: IIdentityProvider) -> "PageLoadPipeline":
        """Build a fresh pipeline for one page load."""
        from modules.bootstrap.pipeline import PageLoadPipeline
        return PageLoadPipeline(
            identity=identity,
            profiles=self.profiles,
            feedback=self.feedback,
            pages=self.pages,
            last_active=self.last_active,
        )

    async def drain_background(self) -> None:
        """Wait for outstanding last-active writes, if any were started."""
        if self._last_active is not None:
            await self._last_active.drain()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._profile_store = None
        self._feedback_service = None
        self._page_registry = None
        self._last_active = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for application settings."""
    return get_settings()


def get_identity_provider(
    access_token: Optional[str] = Depends(get_access_token),
) -> IIdentityProvider:
    """FastAPI dependency for the visitor's identity provider."""
    return get_container().identity_provider(access_token)


def get_page_load_pipeline(
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> "PageLoadPipeline":
    """FastAPI dependency for a per-request page-load pipeline."""
    return get_container().page_load(identity)


def get_session_resolver(
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> "SessionResolver":
    """FastAPI dependency for the session resolver."""
    return get_container().session_resolver(identity)


def get_account_service(
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> "AccountService":
    """FastAPI dependency for the account flows."""
    from modules.auth.service import AccountService
    return AccountService(identity, get_container().session_resolver(identity))


def get_feedback_gate() -> "FeedbackGate":
    """FastAPI dependency for the feedback gate."""
    from modules.feedback.gate import FeedbackGate
    return FeedbackGate(get_container().feedback)
