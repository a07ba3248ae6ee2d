"""
Feedback service backed by Supabase remote procedures.
"""

import asyncio
from typing import Any, Callable, Optional

from supabase import Client

from .exceptions import FeedbackUnavailableError
from .interfaces import IFeedbackService
from .models import PendingItem


class SupabaseFeedbackService(IFeedbackService):
    """
    Calls the check_feedback_lock and get_pending_feedback database
    functions. Either may be missing on a database that predates the
    feedback migration; that is reported as unavailable. So is a client
    that cannot be created because Supabase is not configured.
    """

    def __init__(
        self,
        db: Optional[Client] = None,
        lock_rpc: str = "check_feedback_lock",
        pending_rpc: str = "get_pending_feedback",
        client_factory: Optional[Callable[[], Client]] = None,
    ):
        if db is None and client_factory is None:
            raise ValueError("SupabaseFeedbackService needs a client or a client_factory")
        self._client = db
        self._client_factory = client_factory
        self._lock_rpc = lock_rpc
        self._pending_rpc = pending_rpc

    async def is_locked(self, user_id: str) -> bool:
        data = await self._call(self._lock_rpc, user_id)
        return data is True

    async def list_pending(self, user_id: str) -> list[PendingItem]:
        data = await self._call(self._pending_rpc, user_id)
        return [PendingItem.model_validate(row) for row in data or []]

    async def _call(self, procedure: str, user_id: str) -> Any:
        try:
            if self._client is None:
                self._client = self._client_factory()
            result = await asyncio.to_thread(
                self._client.rpc(procedure, {"check_user_id": user_id}).execute
            )
        except Exception as e:
            raise FeedbackUnavailableError(procedure, str(e)) from e
        return result.data
