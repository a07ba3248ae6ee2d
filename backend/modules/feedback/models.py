"""
Feedback module data models.

FeedbackState is what the remote procedures report for one page load;
BannerState is derived from it and has no lifecycle of its own.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class PendingItem(BaseModel):
    """An interaction that still needs feedback from the user."""

    id: str = Field(..., description="Interaction ID")
    grace_expires_at: Optional[datetime] = Field(
        None, description="When the grace period ends and the hard lock starts"
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value)


class FeedbackState(BaseModel):
    """
    Lock flag and pending items for a user.

    `pending` keeps the remote procedure's order (soonest-expiring
    first); only the first item is inspected.
    """

    locked: bool = False
    pending: list[PendingItem] = Field(default_factory=list)

    model_config = {"frozen": True}


class BannerKind(str, Enum):
    """Which feedback banner, if any, a page shows."""

    NONE = "none"
    REMINDER = "reminder"  # Grace period still running
    LOCKED = "locked"      # Grace period expired; hard lock


class BannerState(BaseModel):
    """
    Banner derived from a FeedbackState.

    `remaining` is only set for reminders, and only when the first
    pending item has a grace expiry.
    """

    kind: BannerKind = BannerKind.NONE
    remaining: Optional[str] = None
    expires_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @classmethod
    def none(cls) -> "BannerState":
        return cls()

    @classmethod
    def locked(cls) -> "BannerState":
        return cls(kind=BannerKind.LOCKED)

    @classmethod
    def reminder(
        cls,
        remaining: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> "BannerState":
        return cls(kind=BannerKind.REMINDER, remaining=remaining, expires_at=expires_at)
