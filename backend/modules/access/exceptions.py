"""
Access module exceptions.
"""

from shared.exceptions import TiriweError


class UnhandledGateCaseError(TiriweError):
    """Raised when no access rule matches a session/page combination."""

    def __init__(self, session_kind: str, page_kind: str, complete: bool):
        super().__init__(
            f"No access rule for session={session_kind} page={page_kind} complete={complete}",
            code="UNHANDLED_GATE_CASE",
            details={
                "session_kind": session_kind,
                "page_kind": page_kind,
                "profile_complete": complete,
            },
        )
