"""
Feedback module.

Checks whether a user owes mandatory feedback and derives the banner
(reminder or hard lock) their pages show.

Public API:
- IFeedbackService: Interface to the feedback remote procedures
- PendingItem, FeedbackState, BannerKind, BannerState: Models
- FeedbackGate, derive_banner_state: Banner evaluation
- SupabaseFeedbackService: Supabase RPC implementation
"""

from .interfaces import IFeedbackService
from .models import BannerKind, BannerState, FeedbackState, PendingItem
from .exceptions import FeedbackUnavailableError
from .gate import FeedbackGate, derive_banner_state
from .service import SupabaseFeedbackService

__all__ = [
    "IFeedbackService",
    "BannerKind",
    "BannerState",
    "FeedbackState",
    "PendingItem",
    "FeedbackUnavailableError",
    "FeedbackGate",
    "derive_banner_state",
    "SupabaseFeedbackService",
]
