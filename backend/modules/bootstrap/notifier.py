"""
Single-fire readiness signal.

Page logic that depends on the gates waits on this instead of polling
session state. The signal resolves at most once; late subscribers get
the resolved value straight away. A redirect supersedes it, and then
it never fires.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from .exceptions import PageLoadSupersededError, ReadyAlreadyResolvedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadyState(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    SUPERSEDED = "superseded"


class ReadyNotifier(Generic[T]):
    """
    Broadcast-once completion signal with replay for late observers.

    Example:
        ready = ReadyNotifier()
        ready.subscribe(lambda result: render(result))
        ...
        ready.resolve(result)      # render() runs now
        ready.subscribe(other)     # other() runs immediately
        await ready.wait()         # returns result without blocking
    """

    def __init__(self) -> None:
        self._state = ReadyState.PENDING
        self._value: Optional[T] = None
        self._redirect_to: Optional[str] = None
        self._event = asyncio.Event()
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def state(self) -> ReadyState:
        return self._state

    @property
    def is_resolved(self) -> bool:
        return self._state is ReadyState.RESOLVED

    @property
    def is_superseded(self) -> bool:
        return self._state is ReadyState.SUPERSEDED

    @property
    def value(self) -> Optional[T]:
        return self._value

    def resolve(self, value: T) -> None:
        """
        Fire the signal.

        Raises:
            ReadyAlreadyResolvedError: If it already fired or was superseded
        """
        if self._state is not ReadyState.PENDING:
            raise ReadyAlreadyResolvedError(self._state.value)

        self._state = ReadyState.RESOLVED
        self._value = value
        subscribers, self._subscribers = self._subscribers, []
        self._event.set()

        for callback in subscribers:
            self._notify(callback, value)

    def supersede(self, redirect_to: str) -> None:
        """
        Mark the load as redirected. Subscribers are dropped without
        being called; waiters get PageLoadSupersededError.
        """
        if self._state is not ReadyState.PENDING:
            raise ReadyAlreadyResolvedError(self._state.value)

        self._state = ReadyState.SUPERSEDED
        self._redirect_to = redirect_to
        self._subscribers.clear()
        self._event.set()

    def subscribe(self, callback: Callable[[T], None]) -> None:
        """Call `callback` once with the resolved value (immediately if already resolved)."""
        if self._state is ReadyState.RESOLVED:
            self._notify(callback, self._value)
        elif self._state is ReadyState.PENDING:
            self._subscribers.append(callback)

    async def wait(self) -> T:
        """
        Wait for the signal.

        Raises:
            PageLoadSupersededError: If a redirect superseded the load
        """
        await self._event.wait()
        if self._state is ReadyState.SUPERSEDED:
            raise PageLoadSupersededError(self._redirect_to or "")
        return self._value

    @staticmethod
    def _notify(callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception:
            logger.exception("Ready subscriber failed")
