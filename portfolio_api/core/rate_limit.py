"""Fixed-window request counters keyed by client address."""

import threading
import time
from collections.abc import Callable


class FixedWindowRateLimiter:
    """
    Counts hits per key inside a fixed window of window_seconds.

    A key is limited once it has reached `limit` hits in its current window;
    the counter resets when the window elapses. Expired windows are dropped at
    most once per window_seconds, on the next hit.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}
        self._lock = threading.Lock()
        self._last_prune = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def _current(self, key: str, now: float) -> tuple[float, int]:
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            return (now, 0)
        return (started, count)

    def _prune(self, now: float) -> None:
        expired = [
            key
            for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
        self._last_prune = now

    def is_limited(self, key: str) -> bool:
        with self._lock:
            _, count = self._current(key, self._clock())
            return count >= self.limit

    def hit(self, key: str) -> bool:
        """Record one hit; return True if the key was already over its limit."""
        with self._lock:
            now = self._clock()
            if now - self._last_prune >= self.window_seconds:
                self._prune(now)
            started, count = self._current(key, now)
            if count >= self.limit:
                self._windows[key] = (started, count)
                return True
            self._windows[key] = (started, count + 1)
            return False

    def retry_after(self, key: str) -> int:
        with self._lock:
            now = self._clock()
            started, _ = self._current(key, now)
            return max(1, int(self.window_seconds - (now - started)))

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
