"""Envelope classification into exactly one delivery mode."""

from __future__ import annotations

from typing import Any

from src.config.websocket import KEY_ACTION, PAYLOAD_KEYS, KEY_SOCKET_ID, KEY_REQUEST_ID
from src.state.delivery import Query, Delivery, Response, Targeted, Broadcast, Unsolicited


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def has_payload(envelope: dict[str, Any]) -> bool:
    # A key holding null still counts as present.
    return any(key in envelope for key in PAYLOAD_KEYS)


def classify(envelope: dict[str, Any]) -> Delivery:
    """Return the delivery mode for an already-authenticated envelope.

    First match wins, and the order matters because one envelope can satisfy
    several rules:

    1. non-empty ``socketId``                     -> Targeted
    2. non-empty ``action``                       -> Query
    3. ``requestId`` plus serial/screenshot data  -> Response
    4. serial/screenshot data alone               -> Unsolicited
    5. anything else                              -> Broadcast

    Non-string ids are treated as absent.
    """
    target_id = _non_empty_str(envelope.get(KEY_SOCKET_ID))
    if target_id is not None:
        return Targeted(target_id=target_id)

    request_id = _non_empty_str(envelope.get(KEY_REQUEST_ID))
    if _non_empty_str(envelope.get(KEY_ACTION)) is not None:
        return Query(request_id=request_id)

    if has_payload(envelope):
        if request_id is not None:
            return Response(request_id=request_id)
        return Unsolicited()

    return Broadcast()


__all__ = ["classify", "has_payload"]
