"""
Authentication module interfaces.

The page-load pipeline depends on these protocols, not on Supabase.
Tests substitute in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthResult, Identity, Profile


@runtime_checkable
class IIdentityProvider(Protocol):
    """
    Interface to the identity provider.

    Credential verification and token issuance live behind this
    contract; the core only consumes the results.
    """

    async def get_current_session(self) -> Optional[Identity]:
        """
        Return the identity behind the current session.

        Returns:
            Identity if a valid session exists, None otherwise

        Raises:
            SessionUnavailableError: If the provider cannot be consulted
        """
        ...

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a new account. Failures are returned, not raised."""
        ...

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password. Failures are returned, not raised."""
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...

    async def request_password_reset(self, email: str) -> AuthResult:
        """Send a password reset email."""
        ...


@runtime_checkable
class IProfileStore(Protocol):
    """Interface to the application profile records."""

    async def fetch_by_identity_id(self, identity_id: str) -> Optional[Profile]:
        """
        Get the profile belonging to an identity.

        Soft-deleted profiles are never returned.

        Raises:
            ProfileUnavailableError: If the store cannot be queried
        """
        ...

    async def touch_last_active(self, profile_id: str) -> None:
        """
        Record that the profile was just active.

        Raises:
            ProfileUnavailableError: If the write fails
        """
        ...
