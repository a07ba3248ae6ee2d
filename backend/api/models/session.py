"""
Request and response models for the session, auth and feedback routes.
"""

from typing import Literal, Optional
from pydantic import BaseModel

from modules.access.models import PageKind
from modules.auth.models import Profile, SessionKind
from modules.feedback.models import BannerState
from modules.presentation.banner import BannerView
from modules.presentation.nav import NavView


class SignInRequest(BaseModel):
    """
    Email/password body for sign-up and log-in.

    Plain strings on purpose: malformed input comes back as an
    AuthResult error rather than a 422.
    """

    email: str
    password: str


class PasswordResetRequest(BaseModel):
    email: str


class LogoutResponse(BaseModel):
    redirect_to: str


class BootstrapResponse(BaseModel):
    """Result of the page-load pipeline for one page."""

    outcome: Literal["allow", "redirect"]
    page: str
    page_kind: PageKind
    session_kind: SessionKind
    redirect_to: Optional[str] = None
    profile: Optional[Profile] = None
    profile_complete: bool = False
    banner: Optional[BannerView] = None
    nav: Optional[NavView] = None


class FeedbackBannerResponse(BaseModel):
    state: BannerState
    banner: Optional[BannerView] = None
