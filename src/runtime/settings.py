"""Load runtime settings.

Env names and defaults live in `src/config/*`; this module resolves them into
the frozen dataclasses in `src/state/settings.py`. Unset, blank or unparsable
values fall back to the default.
"""

from __future__ import annotations

import os
from pathlib import Path

from src.config.secrets import ENV_RELAY_API_KEY
from src.config.server import ENV_RELAY_HOST, ENV_RELAY_PORT, DEFAULT_RELAY_HOST, DEFAULT_RELAY_PORT
from src.state.settings import (
    AppSettings,
    AuthSettings,
    RelaySettings,
    LimitsSettings,
    ServerSettings,
    StorageSettings,
    WebSocketSettings,
)
from src.config.relay import (
    ENV_RELAY_REQUEST_TTL_S,
    DEFAULT_RELAY_REQUEST_TTL_S,
    ENV_RELAY_DISCONNECT_NOTICE,
    DEFAULT_RELAY_DISCONNECT_NOTICE,
)
from src.config.storage import (
    ENV_RELAY_SCREENSHOT_DIR,
    DEFAULT_RELAY_SCREENSHOT_DIR,
    ENV_RELAY_CLIENT_CONFIG_PATH,
    DEFAULT_RELAY_CLIENT_CONFIG_PATH,
)
from src.config.websocket import (
    ENV_RELAY_WS_PATHS,
    DEFAULT_RELAY_WS_PATHS,
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    ENV_WS_OUTBOUND_QUEUE_MAX,
    DEFAULT_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_OUTBOUND_QUEUE_MAX,
    ENV_WS_MAX_CONNECTION_DURATION_S,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)
from src.config.limits import (
    ENV_WS_MESSAGE_WINDOW_SECONDS,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    ENV_WS_MAX_MESSAGES_PER_WINDOW,
    DEFAULT_WS_MESSAGE_WINDOW_SECONDS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_WS_MAX_MESSAGES_PER_WINDOW,
)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off", "disabled", "disable", "none", "null"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def _path_env(name: str, default: Path) -> Path:
    raw = (os.getenv(name) or "").strip()
    return Path(raw).expanduser() if raw else default


def _normalize_ws_path(path: str) -> str:
    path = path.strip()
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def _ws_paths_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    paths: list[str] = []
    for part in raw.split(","):
        if not part.strip():
            continue
        path = _normalize_ws_path(part)
        if path not in paths:
            paths.append(path)
    return tuple(paths) or default


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(api_key=(os.getenv(ENV_RELAY_API_KEY) or "").strip())


def _load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=_str_env(ENV_RELAY_HOST, DEFAULT_RELAY_HOST),
        port=_int_env(ENV_RELAY_PORT, DEFAULT_RELAY_PORT),
        ws_paths=_ws_paths_env(ENV_RELAY_WS_PATHS, DEFAULT_RELAY_WS_PATHS),
    )


def _load_limits_settings() -> LimitsSettings:
    return LimitsSettings(
        max_concurrent_connections=max(
            1, _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
        ),
        ws_message_window_seconds=_float_env(ENV_WS_MESSAGE_WINDOW_SECONDS, DEFAULT_WS_MESSAGE_WINDOW_SECONDS),
        ws_max_messages_per_window=_int_env(ENV_WS_MAX_MESSAGES_PER_WINDOW, DEFAULT_WS_MAX_MESSAGES_PER_WINDOW),
    )


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        idle_timeout_s=_float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S),
        watchdog_tick_s=_float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S),
        max_connection_duration_s=_float_env(ENV_WS_MAX_CONNECTION_DURATION_S, DEFAULT_WS_MAX_CONNECTION_DURATION_S),
        outbound_queue_max=max(1, _int_env(ENV_WS_OUTBOUND_QUEUE_MAX, DEFAULT_WS_OUTBOUND_QUEUE_MAX)),
    )


def _load_relay_settings() -> RelaySettings:
    return RelaySettings(
        disconnect_notice=_bool_env(ENV_RELAY_DISCONNECT_NOTICE, DEFAULT_RELAY_DISCONNECT_NOTICE),
        request_ttl_s=max(0.0, _float_env(ENV_RELAY_REQUEST_TTL_S, DEFAULT_RELAY_REQUEST_TTL_S)),
    )


def _load_storage_settings() -> StorageSettings:
    return StorageSettings(
        screenshot_dir=_path_env(ENV_RELAY_SCREENSHOT_DIR, DEFAULT_RELAY_SCREENSHOT_DIR),
        client_config_path=_path_env(ENV_RELAY_CLIENT_CONFIG_PATH, DEFAULT_RELAY_CLIENT_CONFIG_PATH),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        server=_load_server_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        relay=_load_relay_settings(),
        storage=_load_storage_settings(),
    )


__all__ = ["load_settings"]
