"""Router behaviour configuration."""

from __future__ import annotations

# Broadcast {"type": "disconnect", "timestamp": ...} when a peer leaves.
ENV_RELAY_DISCONNECT_NOTICE = "RELAY_DISCONNECT_NOTICE"
DEFAULT_RELAY_DISCONNECT_NOTICE = True

# Unanswered requests wait forever unless this is > 0.
ENV_RELAY_REQUEST_TTL_S = "RELAY_REQUEST_TTL_S"
DEFAULT_RELAY_REQUEST_TTL_S = 0.0

__all__ = [
    "ENV_RELAY_DISCONNECT_NOTICE",
    "DEFAULT_RELAY_DISCONNECT_NOTICE",
    "ENV_RELAY_REQUEST_TTL_S",
    "DEFAULT_RELAY_REQUEST_TTL_S",
]
