"""
Page registry.

Maps every named page of the site to exactly one access classification.
Pages nobody classified are treated as protected.
"""

from typing import Iterable, Optional

from shared.config import Settings

from .models import PageKind


def page_from_path(path: Optional[str]) -> str:
    """
    Reduce a URL path to the page filename it names.

    "/app/dashboard.html" -> "dashboard.html", "/" -> "".
    """
    if not path:
        return ""
    path = path.split("?", 1)[0].split("#", 1)[0]
    return path.rsplit("/", 1)[-1]


class PageRegistry:
    """
    Static page classification plus the three redirect targets.

    Built once from configuration; never mutated per request.
    """

    def __init__(
        self,
        landing: str,
        dashboard: str,
        settings: str,
        public_pages: Iterable[str],
        extra_protected: Iterable[str] = (),
    ):
        self.landing = landing
        self.dashboard = dashboard
        self.settings = settings

        self._kinds: dict[str, PageKind] = {}
        for page in extra_protected:
            self._kinds[page] = PageKind.PROTECTED
        self._kinds[dashboard] = PageKind.PROTECTED
        for page in public_pages:
            self._kinds[page] = PageKind.PUBLIC
        self._kinds[landing] = PageKind.PUBLIC
        self._kinds[settings] = PageKind.SETTINGS

    @classmethod
    def from_settings(cls, settings: Settings) -> "PageRegistry":
        return cls(
            landing=settings.page_landing,
            dashboard=settings.page_dashboard,
            settings=settings.page_settings,
            public_pages=settings.public_pages,
            extra_protected=[
                settings.page_sos,
                settings.page_interactions,
                settings.page_profile,
            ],
        )

    def classify(self, page: str) -> PageKind:
        """Classification of a page name or path; unknown pages are protected."""
        return self._kinds.get(page_from_path(page), PageKind.PROTECTED)

    def pages(self, kind: PageKind) -> list[str]:
        return [page for page, page_kind in self._kinds.items() if page_kind is kind]
