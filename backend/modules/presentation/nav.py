"""
Shared navigation bar view for signed-in pages.
"""

from typing import Optional
from pydantic import BaseModel

from modules.auth.models import Profile
from shared.config import Settings


DEFAULT_AVATAR = "👤"
DEFAULT_DISPLAY_NAME = "User"


class NavLink(BaseModel):
    label: str
    href: str
    active: bool = False


class NavView(BaseModel):
    """Navigation bar contents for one page."""

    brand: str
    tagline: str
    brand_href: str
    links: list[NavLink]
    profile: NavLink
    settings: NavLink
    display_name: str
    avatar: str


def build_nav(page: str, profile: Optional[Profile], settings: Settings) -> NavView:
    """
    Build the nav bar for a page, marking the current page's link active.

    Args:
        page: Current page name
        profile: Signed-in user's profile, if loaded
        settings: Page names and brand
    """

    def link(label: str, href: str) -> NavLink:
        return NavLink(label=label, href=href, active=page == href)

    return NavView(
        brand=settings.brand_name,
        tagline=settings.brand_tagline,
        brand_href=settings.page_dashboard,
        links=[
            link("🏠 Dashboard", settings.page_dashboard),
            link("🚨 SOS", settings.page_sos),
            link("🤝 Interactions", settings.page_interactions),
        ],
        profile=link("Profile", settings.page_profile),
        settings=link("Settings", settings.page_settings),
        display_name=(profile.display_name if profile else None) or DEFAULT_DISPLAY_NAME,
        avatar=(profile.avatar_emoji if profile else None) or DEFAULT_AVATAR,
    )
