"""
Page-load pipeline.

Runs once per page load:

    SessionResolver -> AccessGate -> [allowed with a profile] FeedbackGate -> ready

A redirect ends the pipeline: the readiness signal is superseded, the
navigator receives the target, and the feedback gate is never asked.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from modules.access.gate import AccessGate
from modules.access.models import GateDecision, PageKind
from modules.access.pages import PageRegistry, page_from_path
from modules.auth.interfaces import IIdentityProvider, IProfileStore
from modules.auth.models import Profile, Session
from modules.auth.service import LastActiveWriter, SessionResolver
from modules.feedback.gate import Clock, FeedbackGate
from modules.feedback.interfaces import IFeedbackService
from modules.feedback.models import BannerState
from modules.presentation.banner import BannerView, render_banner

from .exceptions import PageLoadAlreadyRunError
from .notifier import ReadyNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageLoadResult:
    """Everything the gates decided for one page load."""

    page: str
    page_kind: PageKind
    session: Session
    decision: GateDecision
    banner: BannerState

    @property
    def allowed(self) -> bool:
        return self.decision.allowed


class Navigator:
    """
    Navigation primitive.

    Records the single page a load is sent to; the caller (HTTP layer
    or page shell) applies it.
    """

    def __init__(self) -> None:
        self.target: Optional[str] = None

    def navigate_to(self, page: str) -> None:
        logger.info(f"Navigating to {page}")
        self.target = page


class PageLoadPipeline:
    """
    Session bootstrap and access gating for a single page load.

    Collaborators are injected so tests can pass fakes. Create one
    pipeline per load; nothing is shared between loads.
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        profiles: IProfileStore,
        feedback: IFeedbackService,
        pages: PageRegistry,
        navigator: Optional[Navigator] = None,
        clock: Optional[Clock] = None,
        last_active: Optional[LastActiveWriter] = None,
    ):
        self.resolver = SessionResolver(identity, profiles, last_active)
        self.access_gate = AccessGate(pages)
        self.feedback_gate = FeedbackGate(feedback, clock)
        self.navigator = navigator or Navigator()
        self.ready: ReadyNotifier[PageLoadResult] = ReadyNotifier()
        self._pages = pages
        self._session: Optional[Session] = None
        self._started = False

    @property
    def session(self) -> Optional[Session]:
        """Session for this load, once resolved."""
        return self._session

    @property
    def profile(self) -> Optional[Profile]:
        return self._session.profile if self._session else None

    async def run(self, path: str) -> PageLoadResult:
        """
        Resolve, gate and (when allowed) evaluate feedback for a page.

        Args:
            path: Requested page name or URL path

        Returns:
            PageLoadResult; `decision.redirect_to` is set for redirects

        Raises:
            PageLoadAlreadyRunError: If this pipeline already ran
        """
        if self._started:
            raise PageLoadAlreadyRunError()
        self._started = True

        page = page_from_path(path)
        page_kind = self._pages.classify(page)

        self._session = await self.resolver.resolve()
        decision = self.access_gate.decide(self._session, page)

        if not decision.allowed:
            self.ready.supersede(decision.redirect_to)
            self.navigator.navigate_to(decision.redirect_to)
            return PageLoadResult(
                page=page,
                page_kind=page_kind,
                session=self._session,
                decision=decision,
                banner=BannerState.none(),
            )

        banner = BannerState.none()
        if self._session.profile is not None:
            banner = await self.feedback_gate.evaluate(self._session.profile.id)

        result = PageLoadResult(
            page=page,
            page_kind=page_kind,
            session=self._session,
            decision=decision,
            banner=banner,
        )
        self.ready.resolve(result)
        return result

    async def render_banner(self, interactions_page: str) -> Optional[BannerView]:
        """
        Banner for this load, for page code to draw once ready.

        Raises:
            PageLoadSupersededError: If the load redirected
        """
        result = await self.ready.wait()
        return render_banner(result.banner, interactions_page)
