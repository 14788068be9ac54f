"""Rate limiting of inbound envelopes per connection."""

from __future__ import annotations

import math
import logging
from typing import TYPE_CHECKING

from src.errors import RateLimitError
from src.config.websocket import WS_ERROR_RATE_LIMITED
from src.handlers.limits import SlidingWindowRateLimiter

if TYPE_CHECKING:
    from src.relay.router import Router
    from src.relay.connection import RelayConnection

logger = logging.getLogger(__name__)


def consume_or_reject(
    limiter: SlidingWindowRateLimiter,
    connection: RelayConnection,
    router: Router,
) -> bool:
    """Count one inbound envelope. Over the limit, reply with an error and return False."""
    try:
        limiter.consume()
    except RateLimitError as exc:
        retry_in_s = int(max(1, math.ceil(float(exc.retry_in or 1.0))))
        logger.warning("rate limited %s (limit=%s)", connection.identity, exc.limit)
        router.reject(
            connection,
            f"{WS_ERROR_RATE_LIMITED}: at most {exc.limit} messages per {int(exc.window_seconds)} seconds; "
            f"retry in {retry_in_s} seconds",
        )
        return False
    return True


__all__ = ["consume_or_reject"]
