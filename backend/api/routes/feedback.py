"""
Feedback banner endpoint.

For pages that refresh the banner after an interaction without a full
reload.
"""

from fastapi import APIRouter, Depends

from modules.auth.exceptions import NotAuthenticatedError
from modules.auth.service import SessionResolver
from modules.feedback.gate import FeedbackGate
from modules.presentation.banner import render_banner
from shared.config import Settings
from ..dependencies import get_app_settings, get_feedback_gate, get_session_resolver
from ..models.errors import ErrorResponse
from ..models.session import FeedbackBannerResponse

router = APIRouter()


@router.get(
    "/banner",
    response_model=FeedbackBannerResponse,
    responses={401: {"model": ErrorResponse}},
)
async def feedback_banner(
    resolver: SessionResolver = Depends(get_session_resolver),
    gate: FeedbackGate = Depends(get_feedback_gate),
    settings: Settings = Depends(get_app_settings),
) -> FeedbackBannerResponse:
    """
    Current feedback banner for the signed-in user.

    Requires a session with a profile.
    """
    session = await resolver.resolve()
    if session.profile is None:
        raise NotAuthenticatedError()

    state = await gate.evaluate(session.profile.id)
    return FeedbackBannerResponse(
        state=state,
        banner=render_banner(state, settings.page_interactions),
    )
