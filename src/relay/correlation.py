"""Pending request bookkeeping: request id -> requester identity."""

from __future__ import annotations

import time
from collections.abc import Callable

from src.state.pending import PendingRequest

TimeFn = Callable[[], float]


class CorrelationTable:
    """Route a single response back to whoever asked.

    Last writer wins on a reused request id. With `ttl_s` > 0, entries older
    than the TTL are treated as absent and swept on the next `put`.
    """

    def __init__(self, *, ttl_s: float = 0.0, now_fn: TimeFn | None = None) -> None:
        self._ttl_s = max(0.0, float(ttl_s))
        self._now = now_fn or time.monotonic
        self._entries: dict[str, PendingRequest] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._entries

    def put(self, request_id: str, requester_id: str) -> bool:
        if not request_id:
            return False
        if self._ttl_s > 0:
            self._sweep_expired()
        self._entries[request_id] = PendingRequest(requester_id=requester_id, created_at=self._now())
        return True

    def take_and_clear(self, request_id: str) -> str | None:
        entry = self._entries.pop(request_id, None)
        if entry is None or self._is_expired(entry):
            return None
        return entry.requester_id

    def purge_connection(self, requester_id: str) -> int:
        stale = [rid for rid, entry in self._entries.items() if entry.requester_id == requester_id]
        for rid in stale:
            del self._entries[rid]
        return len(stale)

    def _is_expired(self, entry: PendingRequest) -> bool:
        return self._ttl_s > 0 and (self._now() - entry.created_at) >= self._ttl_s

    def _sweep_expired(self) -> None:
        expired = [rid for rid, entry in self._entries.items() if self._is_expired(entry)]
        for rid in expired:
            del self._entries[rid]


__all__ = ["CorrelationTable"]
