"""
Liveness and readiness endpoints.

Readiness reports configuration only; it never calls Supabase, so a
slow data store cannot make the probe itself hang.
"""

from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings
from shared.database import is_configured
from ..dependencies import get_app_settings

router = APIRouter()

ComponentStatus = Literal["configured", "missing"]


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadinessResponse(BaseModel):
    """
    Which collaborators the service is set up to reach.

    `status` is "degraded" when something is missing: pages still load,
    but every visitor is treated as anonymous.
    """

    status: Literal["ready", "degraded"]
    data_store: ComponentStatus
    token_validation: ComponentStatus


def _component(ok: bool) -> ComponentStatus:
    return "configured" if ok else "missing"


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Returns 200 while the process is up."""
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_app_settings)) -> ReadinessResponse:
    data_store = is_configured(settings)
    token_validation = bool(settings.supabase_jwt_secret)
    return ReadinessResponse(
        status="ready" if data_store and token_validation else "degraded",
        data_store=_component(data_store),
        token_validation=_component(token_validation),
    )
