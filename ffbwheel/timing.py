"""Non-blocking periodic and one-shot timers over a wrapping 32-bit clock."""

import time
from typing import Callable

_MASK32 = 0xFFFFFFFF


def monotonic_us() -> int:
    """Microseconds since an arbitrary point, wrapping at 32 bits."""
    return (time.monotonic_ns() // 1_000) & _MASK32


def monotonic_ms() -> int:
    """Milliseconds since an arbitrary point, wrapping at 32 bits."""
    return (time.monotonic_ns() // 1_000_000) & _MASK32


def _elapsed(now: int, since: int) -> int:
    return (now - since) & _MASK32


class IntervalTrigger:
    """Fires once per interval; missed periods are caught up one call at a time."""

    def __init__(self, interval: int, clock: Callable[[], int] = monotonic_us):
        self._interval = interval
        self._clock = clock
        self._prev = 0
        self._running = False

    def init(self) -> None:
        """Start timing from the current clock value."""
        self._prev = self._clock() & _MASK32
        self._running = True

    def has_expired(self) -> bool:
        """Return True if an interval has elapsed, advancing the reference."""
        if not self._running:
            return False
        if _elapsed(self._clock(), self._prev) >= self._interval:
            self._prev = (self._prev + self._interval) & _MASK32
            return True
        return False


class OneShotTrigger:
    """Fires once after a delay, then stays silent until restarted."""

    def __init__(self, delay: int, clock: Callable[[], int] = monotonic_us):
        self._delay = delay
        self._clock = clock
        self._prev = 0
        self._running = False

    def start(self) -> None:
        """Begin the delay from the current clock value."""
        self._prev = self._clock() & _MASK32
        self._running = True

    def has_expired(self) -> bool:
        """Return True exactly once when the delay has passed."""
        if not self._running:
            return False
        if _elapsed(self._clock(), self._prev) >= self._delay:
            self._running = False
            return True
        return False

    def stop(self) -> None:
        """Cancel a pending delay."""
        self._running = False

    def is_running(self) -> bool:
        """True between start() and expiry or stop()."""
        return self._running