"""
Feedback module interface.

The feedback gate depends on IFeedbackService, not on the Supabase
remote procedures directly.
"""

from typing import Protocol, runtime_checkable

from .models import PendingItem


@runtime_checkable
class IFeedbackService(Protocol):
    """Remote procedures computing feedback obligations for a user."""

    async def is_locked(self, user_id: str) -> bool:
        """
        Whether overdue feedback should lock the app for this user.

        Raises:
            FeedbackUnavailableError: If the lock check cannot be answered
        """
        ...

    async def list_pending(self, user_id: str) -> list[PendingItem]:
        """
        Interactions still waiting on feedback, soonest-expiring first.

        Raises:
            FeedbackUnavailableError: If the list cannot be fetched
        """
        ...
