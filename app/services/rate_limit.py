"""In-process sliding window rate limiter (per key, e.g. client IP)."""

import threading
import time
from collections import deque
from collections.abc import Callable


class SlidingWindowRateLimiter:
    """
    Allow at most `limit` hits per key within the last `window_seconds`.

    limit=0 disables limiting. State lives in this process only; with several
    workers each one counts separately.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def hit(self, key: str) -> bool:
        """Record an attempt for key. Returns False when the attempt exceeds the limit."""
        if self.limit <= 0:
            return True
        now = self._clock()
        cutoff = now - self.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= self.limit:
                return False
            hits.append(now)
            return True

    def _sweep(self, cutoff: float) -> None:
        # Caller holds the lock. A key whose newest hit is outside the window is idle.
        idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in idle:
            del self._hits[key]

    def tracked_keys(self) -> int:
        """Number of keys currently holding attempt history."""
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        """Forget all recorded attempts."""
        with self._lock:
            self._hits.clear()
