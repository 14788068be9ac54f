"""Listen address configuration for the uvicorn entry point."""

from __future__ import annotations

ENV_RELAY_HOST = "RELAY_HOST"
DEFAULT_RELAY_HOST = "0.0.0.0"

ENV_RELAY_PORT = "RELAY_PORT"
DEFAULT_RELAY_PORT = 3103

__all__ = ["ENV_RELAY_HOST", "DEFAULT_RELAY_HOST", "ENV_RELAY_PORT", "DEFAULT_RELAY_PORT"]
