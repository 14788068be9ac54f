"""Per-connection inbound message budget."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from src.errors import RateLimitError


class SlidingWindowRateLimiter:
    """At most `limit` messages in any rolling `window_seconds`; zero in either disables it."""

    def __init__(self, *, limit: int, window_seconds: float, now_fn: Callable[[], float] | None = None) -> None:
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self._now = now_fn or time.monotonic
        # Only the newest `limit` arrivals can decide the next one.
        self._recent: deque[float] = deque(maxlen=self.limit or 1)

    @property
    def enabled(self) -> bool:
        return self.limit > 0 and self.window_seconds > 0

    def consume(self) -> None:
        if not self.enabled:
            return
        now = self._now()
        if len(self._recent) == self.limit:
            oldest = self._recent[0]
            if now - oldest < self.window_seconds:
                raise RateLimitError(
                    retry_in=oldest + self.window_seconds - now,
                    limit=self.limit,
                    window_seconds=self.window_seconds,
                )
        self._recent.append(now)


__all__ = ["SlidingWindowRateLimiter"]
