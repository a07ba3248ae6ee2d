"""
Authentication module.

Resolves the visitor's session, loads their application profile and
runs the account flows (sign up, log in, log out, password reset).

Public API:
- IIdentityProvider / IProfileStore: Interfaces to external collaborators
- Identity, Profile, Session, SessionKind: Session data model
- is_profile_complete: Profile completeness rule
- SessionResolver, AccountService: Services
- SupabaseIdentityProvider, SupabaseProfileStore: Supabase implementations
"""

from .interfaces import IIdentityProvider, IProfileStore
from .models import (
    AuthFailure,
    AuthResult,
    Credentials,
    Identity,
    JWTPayload,
    Profile,
    Session,
    SessionKind,
    is_profile_complete,
)
from .exceptions import (
    SessionUnavailableError,
    ProfileUnavailableError,
    NotAuthenticatedError,
)
from .service import AccountService, LastActiveWriter, SessionResolver
from .providers import SupabaseIdentityProvider, SupabaseProfileStore

__all__ = [
    # Interfaces
    "IIdentityProvider",
    "IProfileStore",
    # Models
    "AuthFailure",
    "AuthResult",
    "Credentials",
    "Identity",
    "JWTPayload",
    "Profile",
    "Session",
    "SessionKind",
    "is_profile_complete",
    # Exceptions
    "SessionUnavailableError",
    "ProfileUnavailableError",
    "NotAuthenticatedError",
    # Services
    "AccountService",
    "LastActiveWriter",
    "SessionResolver",
    "SupabaseIdentityProvider",
    "SupabaseProfileStore",
]
