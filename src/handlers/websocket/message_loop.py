"""WebSocket receive loop feeding the router."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from src.relay.router import Router
from src.relay.connection import RelayConnection
from src.config.websocket import WS_ERROR_INVALID_MESSAGE
from src.handlers.limits import SlidingWindowRateLimiter

from .parser import parse_envelope
from .limits import consume_or_reject
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


def _frame_payload(message: dict[str, Any]) -> str | bytes | None:
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text
    return message.get("bytes")


async def _receive_frame(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[str | bytes | None, bool]:
    """Wait for the next frame. Returns (payload, should_exit)."""
    if not lifecycle.enabled:
        return _frame_payload(await ws.receive()), False
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=lifecycle.tick_s * 2)
    except TimeoutError:
        return None, lifecycle.should_close()
    return _frame_payload(message), False


def _parse_or_reject(raw: str | bytes, connection: RelayConnection, router: Router) -> dict[str, Any] | None:
    try:
        return parse_envelope(raw)
    except ValueError as exc:
        logger.warning("undecodable frame from %s: %s", connection.identity, exc)
        router.reject(connection, f"{WS_ERROR_INVALID_MESSAGE}: {exc}")
        return None


async def run_message_loop(
    ws: WebSocket,
    connection: RelayConnection,
    lifecycle: WebSocketLifecycle,
    limiter: SlidingWindowRateLimiter,
    router: Router,
) -> None:
    """Route frames from one connection, strictly in arrival order, until it goes away."""
    try:
        while True:
            raw, should_exit = await _receive_frame(ws, lifecycle)
            if should_exit:
                return
            if raw is None:
                continue

            lifecycle.touch()

            if not consume_or_reject(limiter, connection, router):
                continue

            envelope = _parse_or_reject(raw, connection, router)
            if envelope is None:
                continue

            router.route(envelope, connection)
    except WebSocketDisconnect:
        return


__all__ = ["run_message_loop"]
