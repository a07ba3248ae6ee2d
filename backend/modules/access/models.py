"""
Access module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class PageKind(str, Enum):
    """Access classification of a page."""

    PUBLIC = "public"      # Landing pages; meaningless once logged in
    SETTINGS = "settings"  # Always reachable with a profile, to finish setup
    PROTECTED = "protected"


class GateDecision(BaseModel):
    """
    Outcome of the access gate.

    A redirect is terminal: nothing else in the page-load pipeline
    runs after one is produced.
    """

    redirect_to: Optional[str] = Field(None, description="Target page, None to allow")
    rule: str = Field(..., description="Name of the access rule that matched")

    model_config = {"frozen": True}

    @classmethod
    def allow(cls, rule: str) -> "GateDecision":
        return cls(rule=rule)

    @classmethod
    def redirect(cls, page: str, rule: str) -> "GateDecision":
        return cls(redirect_to=page, rule=rule)

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None
