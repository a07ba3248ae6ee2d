"""
Bootstrap module exceptions.
"""

from shared.exceptions import TiriweError


class ReadyAlreadyResolvedError(TiriweError):
    """Raised when a readiness signal is resolved or superseded twice."""

    def __init__(self, state: str):
        super().__init__(
            f"Readiness signal already {state}",
            code="READY_ALREADY_RESOLVED",
            details={"state": state},
        )


class PageLoadSupersededError(TiriweError):
    """Raised to anyone waiting on readiness when the load redirected instead."""

    def __init__(self, redirect_to: str):
        super().__init__(
            f"Page load superseded by redirect to {redirect_to}",
            code="PAGE_LOAD_SUPERSEDED",
            details={"redirect_to": redirect_to},
        )
        self.redirect_to = redirect_to


class PageLoadAlreadyRunError(TiriweError):
    """Raised when a page-load pipeline instance is run a second time."""

    def __init__(self):
        super().__init__(
            "A page-load pipeline runs once; create a new one per load",
            code="PAGE_LOAD_ALREADY_RUN",
        )
