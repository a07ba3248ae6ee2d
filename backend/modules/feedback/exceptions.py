"""
Feedback module exceptions.
"""

from shared.exceptions import ServiceUnavailableError


class FeedbackUnavailableError(ServiceUnavailableError):
    """
    Raised when a feedback remote procedure fails or is not provisioned.

    Distinct from a "not locked" / "nothing pending" answer; the gate
    degrades it to the permissive value.
    """

    def __init__(self, procedure: str, message: str):
        super().__init__(
            f"Feedback check {procedure} unavailable: {message}",
            service="feedback",
            code="FEEDBACK_UNAVAILABLE",
            details={"procedure": procedure},
        )
        self.procedure = procedure
