from __future__ import annotations

import asyncio

import pytest

from tests.utils.relay import FakeWebSocket
from src.handlers.websocket.lifecycle import WebSocketLifecycle
from src.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_CLOSE_MAX_DURATION_CODE,
    WS_CLOSE_MAX_DURATION_REASON,
)


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_on_max_duration() -> None:
    ws = FakeWebSocket()
    lifecycle = WebSocketLifecycle(
        ws,
        idle_timeout_s=9999.0,
        watchdog_tick_s=0.01,
        max_connection_duration_s=0.05,
    )
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_MAX_DURATION_CODE
    assert ws.close_reason == WS_CLOSE_MAX_DURATION_REASON
    assert lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_when_idle() -> None:
    ws = FakeWebSocket()
    lifecycle = WebSocketLifecycle(
        ws,
        idle_timeout_s=0.05,
        watchdog_tick_s=0.01,
        max_connection_duration_s=0.0,
    )
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_IDLE_CODE
    assert ws.close_reason == WS_CLOSE_IDLE_REASON

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_disabled_does_not_start() -> None:
    lifecycle = WebSocketLifecycle(
        FakeWebSocket(),
        idle_timeout_s=0.0,
        watchdog_tick_s=0.01,
        max_connection_duration_s=0.0,
    )

    assert lifecycle.enabled is False
    assert lifecycle.start() is None
    await lifecycle.stop()
