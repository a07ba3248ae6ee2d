"""Tests for the readiness signal."""

import asyncio

import pytest

from modules.bootstrap.exceptions import PageLoadSupersededError, ReadyAlreadyResolvedError
from modules.bootstrap.notifier import ReadyNotifier, ReadyState


class TestReadyNotifier:
    def test_starts_pending(self):
        ready = ReadyNotifier()
        assert ready.state is ReadyState.PENDING
        assert ready.value is None

    def test_subscribers_called_once_on_resolve(self):
        ready = ReadyNotifier()
        seen = []
        ready.subscribe(seen.append)

        ready.resolve("payload")

        assert seen == ["payload"]
        assert ready.is_resolved

    def test_late_subscriber_gets_value_immediately(self):
        ready = ReadyNotifier()
        ready.resolve("payload")

        seen = []
        ready.subscribe(seen.append)

        assert seen == ["payload"]

    def test_resolves_only_once(self):
        ready = ReadyNotifier()
        seen = []
        ready.subscribe(seen.append)
        ready.resolve("first")

        with pytest.raises(ReadyAlreadyResolvedError):
            ready.resolve("second")

        assert seen == ["first"]
        assert ready.value == "first"

    def test_superseded_never_fires(self):
        ready = ReadyNotifier()
        seen = []
        ready.subscribe(seen.append)

        ready.supersede("index.html")
        ready.subscribe(seen.append)

        assert seen == []
        assert ready.is_superseded
        with pytest.raises(ReadyAlreadyResolvedError):
            ready.resolve("late")
        assert seen == []

    def test_failing_subscriber_does_not_block_others(self, caplog):
        ready = ReadyNotifier()
        seen = []

        def broken(_):
            raise RuntimeError("page script error")

        ready.subscribe(broken)
        ready.subscribe(seen.append)
        ready.resolve("payload")

        assert seen == ["payload"]
        assert "Ready subscriber failed" in caplog.text

    @pytest.mark.asyncio
    async def test_wait_after_resolve(self):
        ready = ReadyNotifier()
        ready.resolve("payload")
        assert await ready.wait() == "payload"

    @pytest.mark.asyncio
    async def test_waiters_wake_on_resolve(self):
        ready = ReadyNotifier()
        waiters = [asyncio.create_task(ready.wait()) for _ in range(3)]
        await asyncio.sleep(0)

        ready.resolve("payload")

        assert await asyncio.gather(*waiters) == ["payload"] * 3

    @pytest.mark.asyncio
    async def test_waiters_released_on_supersede(self):
        """Waiting never hangs: a redirect releases waiters with an error."""
        ready = ReadyNotifier()
        waiter = asyncio.create_task(ready.wait())
        await asyncio.sleep(0)

        ready.supersede("index.html")

        with pytest.raises(PageLoadSupersededError) as exc_info:
            await waiter
        assert exc_info.value.redirect_to == "index.html"
