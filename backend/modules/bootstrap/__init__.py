"""
Bootstrap module.

Wires the session resolver, access gate and feedback gate into the
per-load pipeline and exposes its readiness signal.

Public API:
- PageLoadPipeline, PageLoadResult, Navigator: Pipeline
- ReadyNotifier, ReadyState: Readiness signal
"""

from .notifier import ReadyNotifier, ReadyState
from .pipeline import Navigator, PageLoadPipeline, PageLoadResult
from .exceptions import (
    PageLoadAlreadyRunError,
    PageLoadSupersededError,
    ReadyAlreadyResolvedError,
)

__all__ = [
    "ReadyNotifier",
    "ReadyState",
    "Navigator",
    "PageLoadPipeline",
    "PageLoadResult",
    "PageLoadAlreadyRunError",
    "PageLoadSupersededError",
    "ReadyAlreadyResolvedError",
]
