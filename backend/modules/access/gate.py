"""
Access gate.

Pure decision function from (session, page) to allow-or-redirect.
Applying the decision (navigating) is the caller's job.
"""

import logging

from modules.auth.models import Session, SessionKind

from .exceptions import UnhandledGateCaseError
from .models import GateDecision, PageKind
from .pages import PageRegistry

logger = logging.getLogger(__name__)


class AccessGate:
    """
    Decides whether a visitor may see a page.

    Rules, in order:
    1. Public page: anonymous visitors stay; complete profiles go to the
       dashboard, incomplete ones to settings. A visitor whose identity
       has no profile stays on the public page.
    2. Protected or settings page without a session: landing.
    3. Protected or settings page with an identity but no profile: landing.
    4. Protected page with an incomplete profile: settings.
    5. Settings page with a profile: allowed.
    6. Protected page with a complete profile: allowed.
    """

    def __init__(self, pages: PageRegistry):
        self._pages = pages

    @property
    def pages(self) -> PageRegistry:
        return self._pages

    def decide(self, session: Session, page: str) -> GateDecision:
        """
        Decide access for a page load.

        Args:
            session: Session resolved for this load
            page: Page name or URL path being requested

        Returns:
            GateDecision (allow, or redirect target)

        Raises:
            UnhandledGateCaseError: If no rule covers the combination
        """
        page_kind = self._pages.classify(page)
        decision = self.decide_kind(session, page_kind)
        logger.debug(
            f"Access decision for {page!r} ({page_kind.value}, {session.kind.value}): "
            f"{decision.rule} -> {decision.redirect_to or 'allow'}"
        )
        return decision

    def decide_kind(self, session: Session, page_kind: PageKind) -> GateDecision:
        kind = session.kind
        complete = session.profile_complete

        if page_kind is PageKind.PUBLIC:
            if kind is SessionKind.ANONYMOUS:
                return GateDecision.allow("public_anonymous")
            if kind is SessionKind.AUTHENTICATED_WITHOUT_PROFILE:
                return GateDecision.allow("public_without_profile")
            if kind is SessionKind.AUTHENTICATED_WITH_PROFILE:
                if complete:
                    return GateDecision.redirect(self._pages.dashboard, "public_complete")
                return GateDecision.redirect(self._pages.settings, "public_incomplete")

        if page_kind in (PageKind.PROTECTED, PageKind.SETTINGS):
            if kind is SessionKind.ANONYMOUS:
                return GateDecision.redirect(self._pages.landing, "anonymous")
            if kind is SessionKind.AUTHENTICATED_WITHOUT_PROFILE:
                return GateDecision.redirect(self._pages.landing, "missing_profile")

            if kind is SessionKind.AUTHENTICATED_WITH_PROFILE:
                if page_kind is PageKind.SETTINGS:
                    return GateDecision.allow("settings")
                if not complete:
                    return GateDecision.redirect(self._pages.settings, "incomplete_profile")
                return GateDecision.allow("protected_complete")

        raise UnhandledGateCaseError(kind.value, getattr(page_kind, "value", str(page_kind)), complete)
