"""
Tiriwe API application.

Mounts the session, account and feedback routers under /api and maps
TiriweError subclasses to JSON error bodies.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.exceptions import TiriweError
from .config import APISettings, get_settings
from .dependencies import get_container
from .routes import auth, feedback, health, session

logger = logging.getLogger(__name__)

ROUTERS = (
    (health.router, "/api", "health"),
    (auth.router, "/api/auth", "auth"),
    (session.router, "/api/session", "session"),
    (feedback.router, "/api/feedback", "feedback"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Tiriwe API listening on {settings.host}:{settings.port}")
    yield
    # In-flight last-active writes finish before the loop closes
    await get_container().drain_background()
    logger.info("Tiriwe API stopped")


async def tiriwe_error_handler(request: Request, exc: TiriweError) -> JSONResponse:
    """Render a TiriweError with its own status code and to_dict() body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _add_cors(app: FastAPI, settings: APISettings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )


def create_app() -> FastAPI:
    """Build the application; tests call this for an isolated instance."""
    settings = get_settings()

    app = FastAPI(
        title="Tiriwe API",
        description="Session bootstrap and access gating for the Tiriwe site",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    _add_cors(app, settings)
    app.add_exception_handler(TiriweError, tiriwe_error_handler)

    for router, prefix, tag in ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])

    return app


app = create_app()
