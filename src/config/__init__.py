"""Configuration module exports (env names and defaults only)."""

from .secrets import ENV_RELAY_API_KEY
from .limits import DEFAULT_MAX_CONCURRENT_CONNECTIONS
from .websocket import DEFAULT_RELAY_WS_PATHS

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_RELAY_WS_PATHS",
    "ENV_RELAY_API_KEY",
]
