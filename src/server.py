"""Main FastAPI server for the serial/screenshot relay hub."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from src.state.settings import AppSettings
from src.runtime.settings import load_settings
from src.handlers.rest import router as rest_router
from src.runtime.logging import configure_logging
from src.runtime.dependencies import build_runtime_deps
from src.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def _websocket_endpoint(origin_endpoint: str) -> Callable[[WebSocket], Awaitable[None]]:
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(websocket.app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps, origin_endpoint=origin_endpoint)

    return websocket_endpoint


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = build_runtime_deps(settings)
        logger.info("runtime: ready, websocket endpoints %s", ", ".join(settings.server.ws_paths))
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.include_router(rest_router)
    for path in settings.server.ws_paths:
        app.add_api_websocket_route(path, _websocket_endpoint(path))
    return app


app = create_app()


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "src.server:app",
        host=settings.server.host,
        port=settings.server.port,
        ws_ping_interval=20,
        ws_ping_timeout=20,
    )


if __name__ == "__main__":
    main()
