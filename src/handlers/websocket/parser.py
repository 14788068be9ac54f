"""Inbound frame decoding."""

from __future__ import annotations

from typing import Any

import orjson

from src.config.websocket import MAX_ENVELOPE_DEPTH


def _nesting_exceeds(value: Any, limit: int) -> bool:
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        if depth > limit:
            return True
        stack.extend((child, depth + 1) for child in children)
    return False


def parse_envelope(raw: str | bytes) -> dict[str, Any]:
    """Decode one frame into an envelope mapping.

    Raises ValueError with a client-facing reason when the frame is not a JSON
    object, or is nested too deeply to be relayed.
    """
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")
    if _nesting_exceeds(msg, MAX_ENVELOPE_DEPTH):
        raise ValueError(f"message nested deeper than {MAX_ENVELOPE_DEPTH} levels")
    return msg


__all__ = ["parse_envelope"]
