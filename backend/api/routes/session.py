"""
Session bootstrap endpoint.

Page shells call this on every load with the page they are showing
and act on the outcome: follow the redirect, or render with the
banner and nav returned.
"""

from fastapi import APIRouter, Depends, Query

from modules.access.models import PageKind
from modules.bootstrap.pipeline import PageLoadPipeline
from modules.presentation.nav import build_nav
from shared.config import Settings
from ..dependencies import get_app_settings, get_page_load_pipeline
from ..models.session import BootstrapResponse

router = APIRouter()


@router.get("/bootstrap", response_model=BootstrapResponse)
async def bootstrap(
    page: str = Query("", description="Page name or path being loaded"),
    pipeline: PageLoadPipeline = Depends(get_page_load_pipeline),
    settings: Settings = Depends(get_app_settings),
) -> BootstrapResponse:
    """Run the page-load pipeline for the caller's session."""
    result = await pipeline.run(page)
    session = result.session

    if not result.allowed:
        return BootstrapResponse(
            outcome="redirect",
            page=result.page,
            page_kind=result.page_kind,
            session_kind=session.kind,
            redirect_to=result.decision.redirect_to,
        )

    nav = None
    if result.page_kind is not PageKind.PUBLIC and session.profile is not None:
        nav = build_nav(result.page, session.profile, settings)

    return BootstrapResponse(
        outcome="allow",
        page=result.page,
        page_kind=result.page_kind,
        session_kind=session.kind,
        profile=session.profile,
        profile_complete=session.profile_complete,
        banner=await pipeline.render_banner(settings.page_interactions),
        nav=nav,
    )
