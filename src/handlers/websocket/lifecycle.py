"""Per-connection idle and max-duration enforcement."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from typing import Any

from src.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_CLOSE_MAX_DURATION_CODE,
    WS_CLOSE_MAX_DURATION_REASON,
)

logger = logging.getLogger(__name__)


class WebSocketLifecycle:
    """Close a websocket that went quiet or outlived its maximum duration.

    Both limits are disabled at 0; with both disabled `start` is a no-op.
    """

    def __init__(
        self,
        websocket: Any,
        *,
        idle_timeout_s: float,
        watchdog_tick_s: float,
        max_connection_duration_s: float,
    ) -> None:
        self._ws = websocket
        self._idle_timeout_s = max(0.0, float(idle_timeout_s))
        self._watchdog_tick_s = max(0.01, float(watchdog_tick_s))
        self._max_connection_duration_s = max(0.0, float(max_connection_duration_s))
        self._connection_start = time.monotonic()
        self._last_activity = self._connection_start
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def enabled(self) -> bool:
        return self._idle_timeout_s > 0 or self._max_connection_duration_s > 0

    @property
    def tick_s(self) -> float:
        return self._watchdog_tick_s

    def touch(self) -> None:
        self._last_activity = time.monotonic()

    def should_close(self) -> bool:
        return self._stop_event.is_set()

    def start(self) -> asyncio.Task | None:
        if self.enabled and self._task is None:
            self._task = asyncio.create_task(self._watchdog_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._task
        self._task = None

    def _expired_reason(self) -> tuple[int, str] | None:
        now = time.monotonic()
        if self._max_connection_duration_s > 0 and now - self._connection_start >= self._max_connection_duration_s:
            return WS_CLOSE_MAX_DURATION_CODE, WS_CLOSE_MAX_DURATION_REASON
        if self._idle_timeout_s > 0 and now - self._last_activity >= self._idle_timeout_s:
            return WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON
        return None

    async def _watchdog_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._watchdog_tick_s)
                expired = self._expired_reason()
                if expired is None:
                    continue
                code, reason = expired
                logger.info("WebSocket %s; closing connection", reason)
                self._stop_event.set()
                with contextlib.suppress(Exception):
                    await self._ws.close(code=code, reason=reason)
                return
        except asyncio.CancelledError:
            return


__all__ = ["WebSocketLifecycle"]
