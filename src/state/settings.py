"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    api_key: str


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_paths: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float
    outbound_queue_max: int


@dataclass(frozen=True, slots=True)
class RelaySettings:
    disconnect_notice: bool
    request_ttl_s: float


@dataclass(frozen=True, slots=True)
class StorageSettings:
    screenshot_dir: Path
    client_config_path: Path


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    server: ServerSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    relay: RelaySettings
    storage: StorageSettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "LimitsSettings",
    "RelaySettings",
    "ServerSettings",
    "StorageSettings",
    "WebSocketSettings",
]
