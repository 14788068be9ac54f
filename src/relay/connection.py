"""One live relay connection with a non-blocking outbound buffer."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from fastapi import WebSocketDisconnect

logger = logging.getLogger(__name__)


class RelayConnection:
    """Wrap an accepted websocket for the router.

    `send_text` only enqueues; a dedicated writer task drains the queue onto
    the socket. Routing therefore never awaits a peer, and a slow peer can only
    fill its own buffer.
    """

    def __init__(self, ws: Any, *, origin_endpoint: str, queue_max: int) -> None:
        self._ws = ws
        self.origin_endpoint = origin_endpoint
        self._identity: str | None = None
        self._queue: asyncio.Queue[str] = asyncio.Queue(maxsize=max(1, int(queue_max)))
        self._open = True
        self._writer: asyncio.Task | None = None

    def __repr__(self) -> str:
        return f"RelayConnection(identity={self._identity!r}, origin={self.origin_endpoint!r}, open={self._open})"

    @property
    def identity(self) -> str | None:
        return self._identity

    @property
    def is_open(self) -> bool:
        return self._open

    def bind_identity(self, identity: str) -> None:
        if self._identity is not None:
            raise RuntimeError(f"connection already registered as {self._identity}")
        self._identity = identity

    def start(self) -> asyncio.Task:
        if self._writer is None:
            self._writer = asyncio.create_task(self._writer_loop())
        return self._writer

    def send_text(self, text: str) -> bool:
        if not self._open:
            return False
        try:
            self._queue.put_nowait(text)
        except asyncio.QueueFull:
            logger.warning("outbound buffer full; dropping envelope for %s", self._identity)
            return False
        return True

    async def close(self) -> None:
        self._open = False
        if self._writer is None:
            return
        self._writer.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._writer
        self._writer = None

    async def _writer_loop(self) -> None:
        try:
            while True:
                text = await self._queue.get()
                await self._ws.send_text(text)
        except asyncio.CancelledError:
            return
        except WebSocketDisconnect:
            self._open = False
        except Exception:
            logger.debug("writer for %s exiting after send failure", self._identity, exc_info=True)
            self._open = False


__all__ = ["RelayConnection"]
