"""
Feedback gate.

Turns the two feedback remote procedures into a banner state. Both
queries are best-effort: a client cannot enforce a lock it failed to
confirm, so any failure counts as "no restriction". The hard lock
shown here is advisory UI; the database enforces the real one.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from modules.presentation.formatting import format_time_remaining

from .exceptions import FeedbackUnavailableError
from .interfaces import IFeedbackService
from .models import BannerState, FeedbackState, PendingItem

logger = logging.getLogger(__name__)


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def derive_banner_state(state: FeedbackState, now: datetime) -> BannerState:
    """
    Derive the banner for a feedback state.

    The pending list is the ground truth: with nothing pending there is
    no banner even if the lock flag is set.
    """
    if not state.pending:
        return BannerState.none()

    if state.locked:
        return BannerState.locked()

    soonest = state.pending[0]
    if soonest.grace_expires_at is None:
        return BannerState.reminder()

    return BannerState.reminder(
        remaining=format_time_remaining(soonest.grace_expires_at, now),
        expires_at=soonest.grace_expires_at,
    )


class FeedbackGate:
    """Evaluates the feedback banner for an allowed, authenticated visit."""

    def __init__(self, feedback: IFeedbackService, clock: Optional[Clock] = None):
        self._feedback = feedback
        self._clock = clock or utc_now

    async def fetch_state(self, user_id: str) -> FeedbackState:
        """Query lock status and pending items concurrently."""
        locked, pending = await asyncio.gather(
            self._is_locked(user_id),
            self._list_pending(user_id),
        )
        if locked and not pending:
            logger.warning(f"Feedback lock set for {user_id} with no pending feedback; ignoring")
        return FeedbackState(locked=locked, pending=pending)

    async def evaluate(self, user_id: str) -> BannerState:
        """
        Compute the banner state for a user.

        Args:
            user_id: Profile ID the feedback procedures are keyed by

        Returns:
            BannerState (none, reminder, or locked)
        """
        state = await self.fetch_state(user_id)
        banner = derive_banner_state(state, self._clock())
        logger.debug(f"Feedback banner for {user_id}: {banner.kind.value}")
        return banner

    async def _is_locked(self, user_id: str) -> bool:
        try:
            return await self._feedback.is_locked(user_id)
        except FeedbackUnavailableError as e:
            logger.warning(e.message)
        except Exception as e:
            logger.warning(f"Feedback lock check failed: {e}")
        return False

    async def _list_pending(self, user_id: str) -> list[PendingItem]:
        try:
            return await self._feedback.list_pending(user_id)
        except FeedbackUnavailableError as e:
            logger.warning(e.message)
        except Exception as e:
            logger.warning(f"Pending feedback check failed: {e}")
        return []
