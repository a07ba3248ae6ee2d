"""
Access module.

Classifies pages and decides, for a resolved session, whether a page
load is allowed or redirected.

Public API:
- PageKind, GateDecision: Models
- PageRegistry, page_from_path: Page classification
- AccessGate: Decision function
"""

from .models import GateDecision, PageKind
from .pages import PageRegistry, page_from_path
from .gate import AccessGate
from .exceptions import UnhandledGateCaseError

__all__ = [
    "GateDecision",
    "PageKind",
    "PageRegistry",
    "page_from_path",
    "AccessGate",
    "UnhandledGateCaseError",
]
