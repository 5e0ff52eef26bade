"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: wall clock used for ``iat``/``exp`` and cache expiry."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...
    def epoch_seconds(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return self.now().timestamp()

    def epoch_seconds(self) -> int:
        return int(self.timestamp())


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime | int | float) -> None:
        if not isinstance(fixed, datetime):
            fixed = datetime.fromtimestamp(fixed, tz=UTC)
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def epoch_seconds(self) -> int:
        return int(self._fixed.timestamp())

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
