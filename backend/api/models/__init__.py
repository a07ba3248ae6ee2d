"""API models package."""

from .errors import ErrorResponse
from .session import (
    BootstrapResponse,
    FeedbackBannerResponse,
    LogoutResponse,
    PasswordResetRequest,
    SignInRequest,
)

__all__ = [
    "ErrorResponse",
    "BootstrapResponse",
    "FeedbackBannerResponse",
    "LogoutResponse",
    "PasswordResetRequest",
    "SignInRequest",
]
