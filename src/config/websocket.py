"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Envelope keys (inbound)
KEY_API_KEY = "apiKey"
KEY_ACTION = "action"
KEY_REQUEST_ID = "requestId"
KEY_SOCKET_ID = "socketId"
KEY_SERIAL_DATA = "serialData"
KEY_SCREENSHOT_DATA = "screenshotData"

# Envelope keys (outbound only)
KEY_IS_FROM_SELF = "isFromSelf"
KEY_ERROR = "error"
KEY_TYPE = "type"
KEY_TIMESTAMP = "timestamp"

# Either of these makes an envelope a data payload (response or unsolicited).
PAYLOAD_KEYS: tuple[str, ...] = (KEY_SERIAL_DATA, KEY_SCREENSHOT_DATA)

MSG_TYPE_DISCONNECT = "disconnect"

# Close codes
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Error messages ({"error": ...} replies)
WS_ERROR_AUTH_FAILED = "Unauthorized: missing or invalid apiKey"
WS_ERROR_INVALID_MESSAGE = "invalid message"
WS_ERROR_RATE_LIMITED = "rate limited"
WS_ERROR_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."

# Deepest container nesting accepted in an inbound envelope (the encoder stops well short of the decoder).
MAX_ENVELOPE_DEPTH = 64

# Listening endpoints; every path feeds the same connection pool.
ENV_RELAY_WS_PATHS = "RELAY_WS_PATHS"
DEFAULT_RELAY_WS_PATHS: tuple[str, ...] = ("/", "/ws")

# Idle watchdog (0 disables)
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
DEFAULT_WS_IDLE_TIMEOUT_S = 0.0
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
DEFAULT_WS_WATCHDOG_TICK_S = 5.0
ENV_WS_MAX_CONNECTION_DURATION_S = "WS_MAX_CONNECTION_DURATION_S"
DEFAULT_WS_MAX_CONNECTION_DURATION_S = 0.0

# Per-peer outbound buffer. A full buffer drops envelopes for that peer only.
ENV_WS_OUTBOUND_QUEUE_MAX = "WS_OUTBOUND_QUEUE_MAX"
DEFAULT_WS_OUTBOUND_QUEUE_MAX = 256

__all__ = [
    "KEY_API_KEY",
    "KEY_ACTION",
    "KEY_REQUEST_ID",
    "KEY_SOCKET_ID",
    "KEY_SERIAL_DATA",
    "KEY_SCREENSHOT_DATA",
    "KEY_IS_FROM_SELF",
    "KEY_ERROR",
    "KEY_TYPE",
    "KEY_TIMESTAMP",
    "PAYLOAD_KEYS",
    "MSG_TYPE_DISCONNECT",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_ERROR_AUTH_FAILED",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_RATE_LIMITED",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "MAX_ENVELOPE_DEPTH",
    "ENV_RELAY_WS_PATHS",
    "DEFAULT_RELAY_WS_PATHS",
    "ENV_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "ENV_WS_MAX_CONNECTION_DURATION_S",
    "DEFAULT_WS_MAX_CONNECTION_DURATION_S",
    "ENV_WS_OUTBOUND_QUEUE_MAX",
    "DEFAULT_WS_OUTBOUND_QUEUE_MAX",
]
