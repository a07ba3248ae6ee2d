"""
Supabase client factory.

Two kinds of client:
- service-role: one cached client for profile reads, the last-active
  write and the feedback procedures (bypasses RLS)
- anon-key: a new client per auth flow, because sign-in stores the
  visitor's session on the client object
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

_service_client: Optional[Client] = None


def _connect(settings: Settings, key: str, key_env: str) -> Client:
    """Create a client, refusing to run half-configured."""
    if not settings.supabase_url or not key:
        raise RuntimeError(
            "Supabase configuration missing. "
            f"Set SUPABASE_URL and {key_env} environment variables."
        )
    return create_client(settings.supabase_url, key)


def get_supabase_client() -> Client:
    """
    Shared service-role client, created on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        _service_client = _connect(
            settings, settings.supabase_service_role_key, "SUPABASE_SERVICE_ROLE_KEY"
        )
    return _service_client


def get_supabase_anon_client() -> Client:
    """
    Fresh anon-key client for one sign-up, sign-in or reset call.

    Never cached, so no visitor's session ends up on another's client.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_ANON_KEY is unset
    """
    settings = get_settings()
    return _connect(settings, settings.supabase_anon_key, "SUPABASE_ANON_KEY")


def is_configured(settings: Optional[Settings] = None) -> bool:
    """True when the service-role client can be created."""
    settings = settings or get_settings()
    return bool(settings.supabase_url and settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Drop the cached service-role client (tests, config reloads)."""
    global _service_client
    _service_client = None
