"""
Supabase-backed implementations of the auth interfaces.

The Supabase Python client is synchronous; calls are pushed onto a
worker thread so independent queries can overlap on the event loop.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError
from supabase import AuthError, Client

from shared.repository import BaseRepository

from .exceptions import ProfileUnavailableError, SessionUnavailableError
from .interfaces import IIdentityProvider, IProfileStore
from .models import AuthResult, Credentials, Identity, JWTPayload, Profile

logger = logging.getLogger(__name__)


def _identity_from_user(user: Any) -> Optional[Identity]:
    if user is None:
        return None
    return Identity(id=str(user.id), email=getattr(user, "email", None))


def _invalid_credentials(error: PydanticValidationError) -> AuthResult:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "input"
    return AuthResult.failure(f"Invalid {field}: {first['msg']}", code="INVALID_INPUT")


def _service_unavailable(flow: str, error: Exception) -> AuthResult:
    logger.warning(f"{flow} failed, identity provider unavailable: {error}")
    return AuthResult.failure(
        "Authentication service unavailable. Please try again later.",
        code="SERVICE_UNAVAILABLE",
    )


class SupabaseIdentityProvider(IIdentityProvider):
    """
    Identity provider backed by Supabase Auth.

    The current session is the bearer access token the visitor sent,
    validated locally against the project's JWT secret.
    """

    def __init__(
        self,
        access_token: Optional[str],
        jwt_secret: str,
        client_factory: Callable[[], Client],
        admin_client_factory: Optional[Callable[[], Client]] = None,
    ):
        self._access_token = access_token
        self._jwt_secret = jwt_secret
        self._client_factory = client_factory
        self._admin_client_factory = admin_client_factory

    async def get_current_session(self) -> Optional[Identity]:
        if not self._access_token:
            return None

        if not self._jwt_secret:
            raise SessionUnavailableError("Server authentication not configured")

        try:
            claims = jwt.decode(
                self._access_token,
                self._jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Access token expired; treating visitor as anonymous")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected access token: {e}")
            return None

        try:
            payload = JWTPayload(**claims)
        except PydanticValidationError as e:
            logger.warning(f"Rejected access token with unexpected claims: {e.error_count()} errors")
            return None

        return Identity(id=payload.sub, email=payload.email)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        try:
            credentials = Credentials(email=email, password=password)
        except PydanticValidationError as e:
            return _invalid_credentials(e)

        try:
            client = self._client_factory()
            response = await asyncio.to_thread(
                client.auth.sign_up,
                {"email": credentials.email, "password": credentials.password},
            )
        except AuthError as e:
            logger.error(f"Signup failed: {e.message}")
            return AuthResult.failure(e.message, code="SIGNUP_FAILED")
        except Exception as e:
            return _service_unavailable("Signup", e)

        logger.info(f"Signup successful: {credentials.email}")
        return self._result(response)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            credentials = Credentials(email=email, password=password)
        except PydanticValidationError as e:
            return _invalid_credentials(e)

        try:
            client = self._client_factory()
            response = await asyncio.to_thread(
                client.auth.sign_in_with_password,
                {"email": credentials.email, "password": credentials.password},
            )
        except AuthError as e:
            logger.error(f"Login failed: {e.message}")
            return AuthResult.failure(e.message, code="LOGIN_FAILED")
        except Exception as e:
            return _service_unavailable("Login", e)

        return self._result(response)

    async def sign_out(self) -> None:
        if not self._access_token or self._admin_client_factory is None:
            return
        # The token is discarded client-side either way.
        try:
            admin = self._admin_client_factory()
            await asyncio.to_thread(admin.auth.admin.sign_out, self._access_token)
        except AuthError as e:
            logger.warning(f"Sign out could not revoke session: {e.message}")
        except Exception as e:
            logger.warning(f"Sign out could not reach identity provider: {e}")

    async def request_password_reset(self, email: str) -> AuthResult:
        try:
            client = self._client_factory()
            await asyncio.to_thread(client.auth.reset_password_for_email, email)
        except AuthError as e:
            return AuthResult.failure(e.message, code="RESET_FAILED")
        except Exception as e:
            return _service_unavailable("Password reset", e)
        return AuthResult()

    @staticmethod
    def _result(response: Any) -> AuthResult:
        session = getattr(response, "session", None)
        return AuthResult(
            identity=_identity_from_user(getattr(response, "user", None)),
            access_token=getattr(session, "access_token", None),
            refresh_token=getattr(session, "refresh_token", None),
        )


class SupabaseProfileStore(BaseRepository[Profile], IProfileStore):
    """Profile store over the public users table."""

    table = "users"

    async def fetch_by_identity_id(self, identity_id: str) -> Optional[Profile]:
        try:
            result = await asyncio.to_thread(
                self._query()
                .select("*")
                .eq("auth_id", identity_id)
                .is_("deleted_at", "null")
                .limit(1)
                .execute
            )
        except Exception as e:
            raise ProfileUnavailableError(f"Failed to load user profile: {e}") from e

        return self._first(result.data)

    async def touch_last_active(self, profile_id: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            await asyncio.to_thread(
                self._query()
                .update({"last_active_at": now.isoformat()})
                .eq("id", profile_id)
                .execute
            )
        except Exception as e:
            raise ProfileUnavailableError(f"Failed to update last_active_at: {e}") from e

    def _map_row(self, row: dict[str, Any]) -> Profile:
        return Profile.model_validate(row)
