"""Unit tests for the service access-token cache."""
import asyncio

import pytest

from storefront_security.kernel.time import FrozenClock
from storefront_security.security.tokens import ServiceTokenCache


class CountingFetcher:
    def __init__(self, expires_in: float = 3600.0) -> None:
        self.calls = 0
        self.expires_in = expires_in

    async def __call__(self) -> tuple[str, float]:
        self.calls += 1
        await asyncio.sleep(0)
        return f"token-{self.calls}", self.expires_in


class TestServiceTokenCache:
    def test_fetches_once_while_fresh(self):
        fetcher = CountingFetcher()
        cache = ServiceTokenCache(fetcher, clock=FrozenClock(1000))

        async def run():
            return [await cache.get() for _ in range(3)]

        assert asyncio.run(run()) == ["token-1"] * 3
        assert fetcher.calls == 1
        assert cache.current.expires_at == 1000 + 3600

    def test_refreshes_inside_margin(self):
        fetcher = CountingFetcher(expires_in=60)
        clock = FrozenClock(1000)
        cache = ServiceTokenCache(fetcher, clock=clock, refresh_margin=5)

        async def run():
            first = await cache.get()
            clock.advance(seconds=54)
            still = await cache.get()
            clock.advance(seconds=1)
            refreshed = await cache.get()
            return first, still, refreshed

        assert asyncio.run(run()) == ("token-1", "token-1", "token-2")

    def test_concurrent_callers_share_refresh(self):
        fetcher = CountingFetcher()
        cache = ServiceTokenCache(fetcher, clock=FrozenClock(1000))

        async def run():
            return await asyncio.gather(*(cache.get() for _ in range(5)))

        assert asyncio.run(run()) == ["token-1"] * 5
        assert fetcher.calls == 1

    def test_invalidate_forces_refetch(self):
        fetcher = CountingFetcher()
        cache = ServiceTokenCache(fetcher, clock=FrozenClock(1000))

        async def run():
            await cache.get()
            cache.invalidate()
            return await cache.get()

        assert asyncio.run(run()) == "token-2"

    def test_fetch_failure_propagates_and_caches_nothing(self):
        async def failing():
            raise RuntimeError("auth endpoint down")

        cache = ServiceTokenCache(failing, clock=FrozenClock(1000))
        with pytest.raises(RuntimeError):
            asyncio.run(cache.get())
        assert cache.current is None

    def test_negative_margin_rejected(self):
        with pytest.raises(ValueError):
            ServiceTokenCache(CountingFetcher(), refresh_margin=-1)
