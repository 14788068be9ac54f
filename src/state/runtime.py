"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
import contextlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.relay.router import Router
    from src.state.settings import AppSettings
    from src.relay.registry import ConnectionRegistry
    from src.relay.correlation import CorrelationTable
    from src.storage.screenshots import ScreenshotStore


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    registry: ConnectionRegistry
    correlations: CorrelationTable
    router: Router
    screenshots: ScreenshotStore

    async def shutdown(self) -> None:
        connections = list(self.registry.all_open())
        for connection in connections:
            with contextlib.suppress(Exception):
                await connection.close()
        if connections:
            logger.info("runtime: closed %s open connection(s)", len(connections))


__all__ = ["RuntimeDeps"]
