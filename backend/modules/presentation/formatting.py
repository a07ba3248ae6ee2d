"""
Display formatting helpers shared by page views.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from dateutil import parser as date_parser
from pydantic import BaseModel


DateLike = Union[str, datetime, None]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse(value: DateLike) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return date_parser.isoparse(value)


def format_time_remaining(expires_at: datetime, now: Optional[datetime] = None) -> str:
    """
    Format the time left until expires_at.

    More than 24 whole hours reads as "2d 3h", anything shorter as
    "1h 30m". Zero or negative time reads as "expired".
    """
    now = _as_utc(now or datetime.now(timezone.utc))
    diff = _as_utc(expires_at) - now
    if diff <= timedelta(0):
        return "expired"

    total_minutes = int(diff.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours > 24:
        days, hours = divmod(hours, 24)
        return f"{days}d {hours}h"
    return f"{hours}h {minutes}m"


def format_distance(km: float) -> str:
    """Format a distance: metres under 1 km, one decimal under 10 km."""
    if km < 1:
        return f"{math.floor(km * 1000 + 0.5)}m"
    if km < 10:
        return f"{km:.1f}km"
    return f"{math.floor(km + 0.5)}km"


def format_date(value: DateLike) -> str:
    """Format a date as "5 Mar 2025". Empty input gives ""."""
    parsed = _parse(value)
    if parsed is None:
        return ""
    return f"{parsed.day} {parsed:%b %Y}"


def format_datetime(value: DateLike) -> str:
    """Format a date with time as "5 Mar 2025, 14:05". Empty input gives ""."""
    parsed = _parse(value)
    if parsed is None:
        return ""
    return f"{parsed.day} {parsed:%b %Y, %H:%M}"


class VerificationInfo(BaseModel):
    """Display data for a profile verification level."""

    name: str
    icon: str
    color: str

    model_config = {"frozen": True}


VERIFICATION_LEVELS: dict[str, VerificationInfo] = {
    "unverified": VerificationInfo(name="Unverified", icon="👤", color="#9E9E9E"),
    "photo_added": VerificationInfo(name="Photo Added", icon="📷", color="#42A5F5"),
    "verified_once": VerificationInfo(name="Verified x1", icon="✓", color="#66BB6A"),
    "verified_twice": VerificationInfo(name="Verified x2", icon="✓✓", color="#43A047"),
    "community_verified": VerificationInfo(name="Community Verified", icon="★", color="#2E7D32"),
}


def verification_info(level: Optional[str]) -> VerificationInfo:
    """Look up a verification level; unknown levels display as unverified."""
    return VERIFICATION_LEVELS.get(level or "", VERIFICATION_LEVELS["unverified"])
