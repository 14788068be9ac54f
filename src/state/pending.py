"""Correlation table entries (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PendingRequest:
    # Identity, not the connection object: a stale entry never keeps a closed
    # connection alive.
    requester_id: str
    created_at: float


__all__ = ["PendingRequest"]
