"""
Account endpoints: sign up, log in, log out, password reset.

Credential and validation failures come back in the AuthResult body
with a 200 status so the page can show them.
"""

from fastapi import APIRouter, Depends

from modules.auth.models import AuthResult
from modules.auth.service import AccountService
from shared.config import Settings
from ..dependencies import get_account_service, get_app_settings
from ..models.session import LogoutResponse, PasswordResetRequest, SignInRequest

router = APIRouter()


@router.post("/signup", response_model=AuthResult)
async def sign_up(
    body: SignInRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AuthResult:
    """Register a new account."""
    return await accounts.sign_up(body.email, body.password)


@router.post("/login", response_model=AuthResult)
async def log_in(
    body: SignInRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AuthResult:
    """Log in and return the session tokens and profile."""
    return await accounts.log_in(body.email, body.password)


@router.post("/logout", response_model=LogoutResponse)
async def log_out(
    accounts: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_app_settings),
) -> LogoutResponse:
    """Log out; the page then navigates to the landing page."""
    await accounts.log_out()
    return LogoutResponse(redirect_to=settings.page_landing)


@router.post("/reset-password", response_model=AuthResult)
async def reset_password(
    body: PasswordResetRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AuthResult:
    """Send a password reset email."""
    return await accounts.reset_password(body.email)
