"""Environment helpers for the live client scripts."""

from __future__ import annotations

import os as _os
from urllib.parse import urlparse, urlunparse

DEFAULT_SERVER = "127.0.0.1:3103"
DEFAULT_WS_PATH = "/ws"


def derive_default_server() -> str:
    """Server endpoint from RELAY_SERVER, else host/port from the server's own env vars."""
    server = _os.getenv("RELAY_SERVER")
    if server:
        return server
    host = _os.getenv("RELAY_HOST")
    if host and host != "0.0.0.0":
        return f"{host}:{_os.getenv('RELAY_PORT', '3103')}"
    return DEFAULT_SERVER


def resolve_api_key() -> str:
    return (_os.getenv("RELAY_API_KEY") or "").strip()


def build_ws_url(server: str, *, secure: bool = False, path: str = DEFAULT_WS_PATH) -> str:
    server = (server or "").strip().rstrip("/")
    if server.startswith(("ws://", "wss://", "http://", "https://")):
        parsed = urlparse(server)
        scheme = "wss" if parsed.scheme in {"wss", "https"} or secure else "ws"
        return urlunparse((scheme, parsed.netloc, parsed.path or path, "", parsed.query, ""))
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{server}{path}"


__all__ = ["build_ws_url", "derive_default_server", "resolve_api_key"]
