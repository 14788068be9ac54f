"""Runtime dependency construction (registry, correlation table, router, storage)."""

from __future__ import annotations

import logging
from functools import partial

from src.state import RuntimeDeps
from src.relay.router import Router
from src.state.settings import AppSettings
from src.relay.registry import ConnectionRegistry
from src.storage.screenshots import ScreenshotStore
from src.relay.correlation import CorrelationTable
from src.handlers.websocket.auth import is_authorized

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    if not settings.auth.api_key:
        logger.warning("RELAY_API_KEY is not set; every envelope will be rejected")

    registry = ConnectionRegistry(max_connections=settings.limits.max_concurrent_connections)
    correlations = CorrelationTable(ttl_s=settings.relay.request_ttl_s)
    router = Router(
        registry,
        correlations,
        authenticate=partial(is_authorized, expected_api_key=settings.auth.api_key),
        disconnect_notice=settings.relay.disconnect_notice,
    )

    return RuntimeDeps(
        settings=settings,
        registry=registry,
        correlations=correlations,
        router=router,
        screenshots=ScreenshotStore(settings.storage.screenshot_dir),
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
