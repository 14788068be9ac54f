from __future__ import annotations

import asyncio

import pytest

from tests.utils.relay import FakeWebSocket
from src.relay.connection import RelayConnection


@pytest.mark.asyncio
async def test_writer_drains_queue_in_order() -> None:
    ws = FakeWebSocket()
    connection = RelayConnection(ws, origin_endpoint="/ws", queue_max=8)

    assert connection.send_text('{"n":1}')
    assert connection.send_text('{"n":2}')
    connection.start()

    for _ in range(100):
        if len(ws.texts) == 2:
            break
        await asyncio.sleep(0.01)
    assert ws.texts == ['{"n":1}', '{"n":2}']

    await connection.close()


@pytest.mark.asyncio
async def test_full_buffer_drops_without_blocking() -> None:
    connection = RelayConnection(FakeWebSocket(), origin_endpoint="/ws", queue_max=1)

    assert connection.send_text("a") is True
    assert connection.send_text("b") is False


@pytest.mark.asyncio
async def test_closed_connection_refuses_sends() -> None:
    connection = RelayConnection(FakeWebSocket(), origin_endpoint="/", queue_max=4)
    connection.start()

    await connection.close()
    await connection.close()

    assert connection.is_open is False
    assert connection.send_text("late") is False


@pytest.mark.asyncio
async def test_send_failure_marks_connection_closed() -> None:
    connection = RelayConnection(FakeWebSocket(fail_sends=True), origin_endpoint="/ws", queue_max=4)
    writer = connection.start()

    connection.send_text("boom")
    await asyncio.wait_for(writer, timeout=1.0)

    assert connection.is_open is False


@pytest.mark.asyncio
async def test_identity_is_bound_once() -> None:
    connection = RelayConnection(FakeWebSocket(), origin_endpoint="/ws", queue_max=4)
    connection.bind_identity("id-1")

    assert connection.identity == "id-1"
    with pytest.raises(RuntimeError):
        connection.bind_identity("id-2")
