"""Request rate limiting for the login endpoint."""

from __future__ import annotations

import logging
import time
from collections import defaultdict, deque
from threading import Lock
from typing import Callable, Deque, Protocol

from ..config import Settings

logger = logging.getLogger(__name__)


class RateLimiter(Protocol):
    def allow(self, key: str) -> bool: ...


class SlidingWindowRateLimiter:
    """Thread-safe in-process sliding window limiter.

    Keys whose newest request has left the window are swept at most once per
    window, so idle client addresses do not accumulate.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialise limiter parameters and per-key storage."""
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        self._events: defaultdict[str, Deque[float]] = defaultdict(deque)
        self._last_sweep = clock()
        self._lock = Lock()

    def allow(self, key: str) -> bool:
        """Return ``True`` when the request is within the configured rate limit."""
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self._window:
                self._sweep(now)
            window = self._events[key]
            while window and now - window[0] >= self._window:
                window.popleft()
            if len(window) >= self._max_requests:
                if not window:
                    del self._events[key]
                return False
            window.append(now)
            return True

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._events)

    def _sweep(self, now: float) -> None:
        stale = [
            key
            for key, window in self._events.items()
            if not window or now - window[-1] >= self._window
        ]
        for key in stale:
            del self._events[key]
        self._last_sweep = now


def build_rate_limiter(settings: Settings) -> RateLimiter | None:
    """Instantiate the configured limiter, or ``None`` when disabled."""
    backend = settings.rate_limit_backend
    if backend in ("", "none", "off"):
        logger.info("login rate limiting disabled")
        return None
    if backend != "memory":
        logger.warning("unknown rate limit backend %r, using in-memory limiter", backend)

    logger.info("login rate limiter using in-memory backend")
    return SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
