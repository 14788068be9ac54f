"""Error helpers for websockets that never made it into the registry."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

from src.config.websocket import KEY_ERROR
from src.relay.codec import encode_envelope

logger = logging.getLogger(__name__)


def build_error(message: str) -> dict[str, Any]:
    return {KEY_ERROR: message}


async def safe_send_text(ws: Any, text: str) -> bool:
    try:
        await ws.send_text(text)
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def reject_connection(ws: Any, *, message: str, close_code: int) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await safe_send_text(ws, encode_envelope(build_error(message)))
    with contextlib.suppress(Exception):
        await ws.close(code=close_code, reason=message)


__all__ = ["build_error", "reject_connection", "safe_send_text"]
