from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from storefront_security.kernel.time import Clock, SystemClock
from storefront_security.observability.logging import get_logger

__all__ = [
    "CachedToken",
    "ServiceTokenCache",
    "TokenFetcher",
]

# Returns ``(access_token, expires_in_seconds)``.
TokenFetcher = Callable[[], Awaitable[tuple[str, float]]]

_log = get_logger(__name__)


@dataclass(frozen=True)
class CachedToken:
    value: str
    expires_at: float  # epoch seconds

    def is_fresh(self, now: float, margin: float) -> bool:
        return now < self.expires_at - margin


class ServiceTokenCache:
    """Holds one access token for an external service and refreshes it lazily.

    The token is refetched once ``now`` is within *refresh_margin* seconds of
    its expiry. Concurrent callers share a single refresh.
    """

    def __init__(
        self,
        fetcher: TokenFetcher,
        *,
        clock: Clock | None = None,
        refresh_margin: float = 5.0,
        name: str = "service",
    ) -> None:
        if refresh_margin < 0:
            raise ValueError("refresh_margin must not be negative")
        self._fetcher = fetcher
        self._clock = clock or SystemClock()
        self._margin = refresh_margin
        self._name = name
        self._token: CachedToken | None = None
        self._lock = asyncio.Lock()

    @property
    def current(self) -> CachedToken | None:
        return self._token

    async def get(self) -> str:
        token = self._token
        if token is not None and token.is_fresh(self._clock.timestamp(), self._margin):
            return token.value

        async with self._lock:
            # Another caller may have refreshed while we waited.
            token = self._token
            now = self._clock.timestamp()
            if token is not None and token.is_fresh(now, self._margin):
                return token.value
            value, expires_in = await self._fetcher()
            self._token = CachedToken(value=value, expires_at=now + float(expires_in))
            _log.info("service_token_refreshed", service=self._name, expires_in=expires_in)
            return value

    def invalidate(self) -> None:
        self._token = None
