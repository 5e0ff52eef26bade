"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime

from storefront_security.kernel.time import FrozenClock, SystemClock


class TestSystemClock:
    def test_now_is_utc_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_epoch_seconds_is_int(self) -> None:
        ts = SystemClock().epoch_seconds()
        assert isinstance(ts, int)
        assert ts > 1_600_000_000


class TestFrozenClock:
    def test_accepts_epoch(self) -> None:
        clock = FrozenClock(1000)
        assert clock.epoch_seconds() == 1000
        assert clock.now() == datetime.fromtimestamp(1000, tz=UTC)

    def test_accepts_datetime(self) -> None:
        fixed = datetime(2026, 1, 1, tzinfo=UTC)
        assert FrozenClock(fixed).now() == fixed

    def test_advance(self) -> None:
        clock = FrozenClock(1000)
        clock.advance(seconds=30)
        assert clock.epoch_seconds() == 1030
        assert clock.timestamp() == 1030.0
