"""
Presentation helpers.

View models and formatting for what pages render after the gates
have decided: feedback banner, navigation bar, dates and distances.
"""

from .banner import BannerView, render_banner
from .formatting import (
    VerificationInfo,
    format_date,
    format_datetime,
    format_distance,
    format_time_remaining,
    verification_info,
)
from .nav import NavLink, NavView, build_nav

__all__ = [
    "BannerView",
    "render_banner",
    "VerificationInfo",
    "format_date",
    "format_datetime",
    "format_distance",
    "format_time_remaining",
    "verification_info",
    "NavLink",
    "NavView",
    "build_nav",
]
