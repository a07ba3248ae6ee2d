"""
Feedback banner rendering.
"""

from typing import Optional
from pydantic import BaseModel

from modules.feedback.models import BannerKind, BannerState


class BannerView(BaseModel):
    """What a page needs to draw the feedback banner."""

    kind: BannerKind
    css_class: str
    message: str
    link_label: str
    link_href: str

    model_config = {"frozen": True}


def render_banner(state: BannerState, interactions_page: str) -> Optional[BannerView]:
    """
    Build the banner view for a banner state.

    Returns None when no banner should be shown.
    """
    if state.kind is BannerKind.LOCKED:
        return BannerView(
            kind=state.kind,
            css_class="tiriwe-fb-banner locked",
            message="🔒 Feedback required. Complete your pending feedback to continue using Tiriwe.",
            link_label="Give Feedback Now",
            link_href=interactions_page,
        )

    if state.kind is BannerKind.REMINDER:
        suffix = f" ({state.remaining} remaining)" if state.remaining else ""
        return BannerView(
            kind=state.kind,
            css_class="tiriwe-fb-banner reminder",
            message=f"⏰ Feedback pending{suffix}.",
            link_label="Give Feedback",
            link_href=interactions_page,
        )

    return None
