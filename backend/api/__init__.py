"""
Tiriwe API package.

Provides the FastAPI application for session bootstrap and account flows.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
