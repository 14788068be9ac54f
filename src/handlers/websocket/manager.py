"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from src.state.runtime import RuntimeDeps
from src.relay.connection import RelayConnection
from src.handlers.limits import SlidingWindowRateLimiter
from src.config.websocket import WS_CLOSE_BUSY_CODE, WS_ERROR_SERVER_AT_CAPACITY

from .errors import reject_connection
from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


def _create_rate_limiter(runtime_deps: RuntimeDeps) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=runtime_deps.settings.limits.ws_max_messages_per_window,
        window_seconds=runtime_deps.settings.limits.ws_message_window_seconds,
    )


async def _admit_connection(ws: WebSocket, runtime_deps: RuntimeDeps, origin_endpoint: str) -> RelayConnection | None:
    registry = runtime_deps.registry
    if not registry.has_capacity():
        logger.warning("rejecting connection on %s: at capacity (%s)", origin_endpoint, len(registry))
        await reject_connection(ws, message=WS_ERROR_SERVER_AT_CAPACITY, close_code=WS_CLOSE_BUSY_CODE)
        return None

    connection = RelayConnection(
        ws,
        origin_endpoint=origin_endpoint,
        queue_max=runtime_deps.settings.websocket.outbound_queue_max,
    )
    registry.register(connection)
    try:
        await ws.accept()
    except Exception:
        runtime_deps.router.disconnect(connection)
        raise
    connection.start()
    return connection


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps, *, origin_endpoint: str) -> None:
    connection = await _admit_connection(ws, runtime_deps, origin_endpoint)
    if connection is None:
        return

    lifecycle = WebSocketLifecycle(
        ws,
        idle_timeout_s=runtime_deps.settings.websocket.idle_timeout_s,
        watchdog_tick_s=runtime_deps.settings.websocket.watchdog_tick_s,
        max_connection_duration_s=runtime_deps.settings.websocket.max_connection_duration_s,
    )
    lifecycle.start()

    logger.info(
        "WebSocket connection %s accepted on %s. Active: %s",
        connection.identity,
        origin_endpoint,
        len(runtime_deps.registry),
    )
    try:
        await run_message_loop(ws, connection, lifecycle, _create_rate_limiter(runtime_deps), runtime_deps.router)
    except Exception:
        logger.exception("WebSocket connection %s failed", connection.identity)
    finally:
        runtime_deps.router.disconnect(connection)
        with contextlib.suppress(Exception):
            await lifecycle.stop()
        with contextlib.suppress(Exception):
            await connection.close()
        logger.info(
            "WebSocket connection %s closed. Active: %s",
            connection.identity,
            len(runtime_deps.registry),
        )


__all__ = ["handle_websocket_connection"]
