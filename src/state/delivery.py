"""Delivery modes produced by the envelope classifier (dataclasses only).

Exactly one mode applies to any authenticated envelope; see
`src.relay.classifier.classify` for the precedence order.
"""

from __future__ import annotations

from typing import TypeAlias
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Targeted:
    """Deliver to the single open connection whose identity is `target_id`."""

    target_id: str


@dataclass(frozen=True, slots=True)
class Query:
    """A request: remember the sender under `request_id`, broadcast to the rest.

    `request_id` is None when the sender did not supply one; the router then
    generates a fallback id.
    """

    request_id: str | None


@dataclass(frozen=True, slots=True)
class Response:
    """A reply to an earlier Query, delivered only to the waiting requester."""

    request_id: str


@dataclass(frozen=True, slots=True)
class Unsolicited:
    """Data with no request id: echo to the sender and broadcast to the rest."""


@dataclass(frozen=True, slots=True)
class Broadcast:
    """Everything else: deliver to every open connection except the sender."""


Delivery: TypeAlias = Targeted | Query | Response | Unsolicited | Broadcast

__all__ = ["Broadcast", "Delivery", "Query", "Response", "Targeted", "Unsolicited"]
