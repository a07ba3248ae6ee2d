"""
Authentication module data models.

These models define the identity, profile and per-load session structures
used by the auth module and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (auth user ID)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


class Identity(BaseModel):
    """
    The identity provider's view of a signed-in visitor.

    Opaque to the rest of the system apart from the stable id used to
    look up the application profile.
    """

    id: str = Field(..., description="Auth user ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email address")

    model_config = {"frozen": True}


class Profile(BaseModel):
    """
    Application-level user record (the public.users row).

    Distinct from the Identity: a visitor can hold a valid identity
    while their profile row is missing.
    """

    id: str = Field(..., description="Profile ID")
    auth_id: Optional[str] = Field(None, description="Identity this profile belongs to")
    display_name: Optional[str] = Field(None, description="Display name")
    avatar_emoji: Optional[str] = Field(None, description="Avatar shown in the nav bar")
    home_location: Optional[Any] = Field(None, description="Home location, if configured")
    metadata: dict[str, Any] = Field(default_factory=dict)
    last_active_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("id", "auth_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: Any) -> Any:
        return value or {}


def is_profile_complete(profile: Optional[Profile]) -> bool:
    """
    Check if a profile is complete enough to use the app.

    Complete means the first settings save has flagged
    metadata.setup_complete, or a home location has been set.
    Computed from the profile every time; never cached.
    """
    if profile is None:
        return False
    if profile.metadata.get("setup_complete") is True:
        return True
    return profile.home_location is not None


class SessionKind(str, Enum):
    """How far the resolve step got for the current visitor."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED_WITH_PROFILE = "authenticated_with_profile"
    AUTHENTICATED_WITHOUT_PROFILE = "authenticated_without_profile"


class Session(BaseModel):
    """
    Session for a single page load.

    Anonymous when identity is None. An identity without a profile is
    a distinct state (provisioning race or failed trigger), not an error.
    """

    identity: Optional[Identity] = None
    profile: Optional[Profile] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _profile_needs_identity(self) -> "Session":
        if self.profile is not None and self.identity is None:
            raise ValueError("An anonymous session cannot carry a profile")
        return self

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def authenticated(cls, identity: Identity, profile: Optional[Profile] = None) -> "Session":
        return cls(identity=identity, profile=profile)

    @property
    def kind(self) -> SessionKind:
        if self.identity is None:
            return SessionKind.ANONYMOUS
        if self.profile is None:
            return SessionKind.AUTHENTICATED_WITHOUT_PROFILE
        return SessionKind.AUTHENTICATED_WITH_PROFILE

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def profile_complete(self) -> bool:
        return is_profile_complete(self.profile)


class Credentials(BaseModel):
    """Email/password pair submitted to sign-up and log-in."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class AuthFailure(BaseModel):
    """User-facing failure from an auth flow."""

    message: str
    code: str = "AUTH_FAILED"


class AuthResult(BaseModel):
    """
    Structured result of a sign-up, log-in or password reset.

    Failures (bad credentials, validation errors) are carried in `error`
    rather than raised, so callers can display them.
    """

    identity: Optional[Identity] = None
    profile: Optional[Profile] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    error: Optional[AuthFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str, code: str = "AUTH_FAILED") -> "AuthResult":
        return cls(error=AuthFailure(message=message, code=code))
