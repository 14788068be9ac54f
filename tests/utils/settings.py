"""Explicit settings for in-process app tests."""

from __future__ import annotations

from pathlib import Path

from src.state.settings import (
    AppSettings,
    AuthSettings,
    RelaySettings,
    LimitsSettings,
    ServerSettings,
    StorageSettings,
    WebSocketSettings,
)

API_KEY = "secret"


def make_settings(tmp_path: Path, *, max_concurrent_connections: int = 50) -> AppSettings:
    return AppSettings(
        auth=AuthSettings(api_key=API_KEY),
        server=ServerSettings(host="127.0.0.1", port=0, ws_paths=("/", "/ws")),
        limits=LimitsSettings(
            max_concurrent_connections=max_concurrent_connections,
            ws_message_window_seconds=60.0,
            ws_max_messages_per_window=1000,
        ),
        websocket=WebSocketSettings(
            idle_timeout_s=0.0,
            watchdog_tick_s=5.0,
            max_connection_duration_s=0.0,
            outbound_queue_max=64,
        ),
        relay=RelaySettings(disconnect_notice=True, request_ttl_s=0.0),
        storage=StorageSettings(
            screenshot_dir=tmp_path / "screenshots",
            client_config_path=tmp_path / "config.json",
        ),
    )


__all__ = ["API_KEY", "make_settings"]
