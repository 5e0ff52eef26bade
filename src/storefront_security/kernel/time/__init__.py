"""Kernel time – Clock port + implementations."""
from storefront_security.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
