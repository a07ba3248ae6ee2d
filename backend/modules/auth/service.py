"""
Session resolution and account flows.

SessionResolver builds the per-load Session; AccountService wraps the
sign-up / log-in / log-out / password-reset flows around the same
collaborators.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import ServiceUnavailableError

from .interfaces import IIdentityProvider, IProfileStore
from .models import AuthResult, Identity, Profile, Session

logger = logging.getLogger(__name__)


class LastActiveWriter:
    """
    Fire-and-forget writer for the profile's last-active timestamp.

    Writes run as background tasks; nothing on the page-load path
    awaits them and their failures are only logged.

    The API keeps one writer per process so shutdown can drain it, so
    several page loads may feed the same instance. It holds in-flight
    task handles only, never a session or profile, and no load reads
    another load's writes.
    """

    def __init__(self, profiles: IProfileStore):
        self._profiles = profiles
        self._tasks: set[asyncio.Task] = set()

    def touch(self, profile_id: str) -> None:
        task = asyncio.create_task(self._write(profile_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for outstanding writes (shutdown and tests only)."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def _write(self, profile_id: str) -> None:
        try:
            await self._profiles.touch_last_active(profile_id)
        except Exception as e:
            logger.error(f"Failed to update last_active_at for {profile_id}: {e}")


class SessionResolver:
    """
    Resolves the visitor's session once per page load.

    Outcomes are Anonymous, Authenticated with profile, or Authenticated
    without profile. Provider failures never escape: an unreachable
    identity provider means Anonymous, an unreachable profile store
    means "profile absent".
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        profiles: IProfileStore,
        last_active: Optional[LastActiveWriter] = None,
    ):
        self._identity = identity
        self._profiles = profiles
        self._last_active = last_active or LastActiveWriter(profiles)

    @property
    def last_active(self) -> LastActiveWriter:
        return self._last_active

    async def resolve(self) -> Session:
        """
        Ask the identity provider for a session and load its profile.

        Returns:
            Session for this page load
        """
        try:
            identity = await self._identity.get_current_session()
        except ServiceUnavailableError as e:
            logger.warning(f"Session check failed, continuing as anonymous: {e.message}")
            return Session.anonymous()
        except Exception as e:
            logger.error(f"Unexpected session check error, continuing as anonymous: {e}")
            return Session.anonymous()

        if identity is None:
            logger.debug("No session")
            return Session.anonymous()

        profile = await self.load_profile(identity)
        if profile is None:
            logger.warning(f"Auth session exists but no user profile found for {identity.id}")
            return Session.authenticated(identity)

        logger.info(f"Session restored: {profile.display_name or identity.email}")
        self._last_active.touch(profile.id)
        return Session.authenticated(identity, profile)

    async def load_profile(self, identity: Identity) -> Optional[Profile]:
        """Fetch the identity's profile; any failure counts as absent."""
        try:
            return await self._profiles.fetch_by_identity_id(identity.id)
        except Exception as e:
            logger.warning(f"Failed to load user profile for {identity.id}: {e}")
            return None


class AccountService:
    """Sign-up, log-in, log-out and password reset for a visitor."""

    def __init__(self, identity: IIdentityProvider, resolver: SessionResolver):
        self._identity = identity
        self._resolver = resolver

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """
        Register a new account.

        The data store's provisioning trigger creates the profile row,
        so no profile is loaded here.
        """
        return await self._identity.sign_up(email, password)

    async def log_in(self, email: str, password: str) -> AuthResult:
        """
        Sign in, then load the profile and mark it active.

        A missing profile is not a login failure; the next page load
        routes the visitor according to the access rules.
        """
        result = await self._identity.sign_in(email, password)
        if not result.ok or result.identity is None:
            return result

        profile = await self._resolver.load_profile(result.identity)
        if profile is not None:
            self._resolver.last_active.touch(profile.id)

        logger.info(
            f"Login successful: {(profile.display_name if profile else None) or result.identity.email}"
        )
        return result.model_copy(update={"profile": profile})

    async def log_out(self) -> Session:
        """Sign out and return the session that replaces the current one."""
        await self._identity.sign_out()
        logger.info("Logged out")
        return Session.anonymous()

    async def reset_password(self, email: str) -> AuthResult:
        """Request a password reset email."""
        return await self._identity.request_password_reset(email)
