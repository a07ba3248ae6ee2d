"""
Authentication module exceptions.

Raised by the Supabase-backed identity provider and profile store.
SessionResolver catches them and degrades; they never reach a page.
"""

from shared.exceptions import AuthenticationError, ServiceUnavailableError


class SessionUnavailableError(ServiceUnavailableError):
    """Raised when the identity provider cannot answer whether a session exists."""

    def __init__(self, message: str = "Identity provider unavailable"):
        super().__init__(message, service="identity", code="SESSION_UNAVAILABLE")


class ProfileUnavailableError(ServiceUnavailableError):
    """Raised when the profile store query or write fails."""

    def __init__(self, message: str = "Profile store unavailable"):
        super().__init__(message, service="profiles", code="PROFILE_UNAVAILABLE")


class NotAuthenticatedError(AuthenticationError):
    """Raised by API endpoints that need a signed-in visitor with a profile."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")
