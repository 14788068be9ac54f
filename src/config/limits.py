"""Admission control and rate limit configuration."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
DEFAULT_MAX_CONCURRENT_CONNECTIONS = 500

# Screenshot frames and serial bursts are chatty; a dashboard polling serial
# data every 50ms sends ~1200 messages/minute.
ENV_WS_MESSAGE_WINDOW_SECONDS = "WS_MESSAGE_WINDOW_SECONDS"
DEFAULT_WS_MESSAGE_WINDOW_SECONDS = 60.0
ENV_WS_MAX_MESSAGES_PER_WINDOW = "WS_MAX_MESSAGES_PER_WINDOW"
DEFAULT_WS_MAX_MESSAGES_PER_WINDOW = 6000

__all__ = [
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "ENV_WS_MESSAGE_WINDOW_SECONDS",
    "DEFAULT_WS_MESSAGE_WINDOW_SECONDS",
    "ENV_WS_MAX_MESSAGES_PER_WINDOW",
    "DEFAULT_WS_MAX_MESSAGES_PER_WINDOW",
]
