"""REST endpoints: health, stats, static client config and screenshot files."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from fastapi.responses import FileResponse
from fastapi import Depends, Request, APIRouter, HTTPException

from src.state.runtime import RuntimeDeps
from src.storage.client_config import load_client_config
from src.errors import InvalidScreenshotError, ScreenshotNotFoundError

from .websocket.auth import validate_api_key

logger = logging.getLogger(__name__)

router = APIRouter()


class ScreenshotUpload(BaseModel):
    screenshotData: str
    apiKey: str = ""
    name: str | None = None


def get_runtime_deps(request: Request) -> RuntimeDeps:
    runtime_deps = getattr(request.app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def get_request_api_key(request: Request) -> str:
    key = (request.query_params.get("apiKey") or "").strip()
    if key:
        return key
    return (request.headers.get("x-api-key") or "").strip()


def _require_api_key(api_key: str, runtime_deps: RuntimeDeps) -> None:
    if not validate_api_key(api_key, runtime_deps.settings.auth.api_key):
        raise HTTPException(status_code=401, detail="Unauthorized")


@router.get("/")
@router.get("/health")
@router.get("/healthz")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/stats")
async def stats(runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> dict[str, int]:
    return {
        "connections": len(runtime_deps.registry),
        "pendingRequests": len(runtime_deps.correlations),
    }


@router.get("/config")
def client_config(runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> dict[str, Any]:
    path = runtime_deps.settings.storage.client_config_path
    try:
        config = load_client_config(path)
    except ValueError as exc:
        logger.error("client config unreadable: %s", exc)
        raise HTTPException(status_code=500, detail="client configuration is invalid") from exc
    if config is None:
        raise HTTPException(status_code=404, detail="client configuration not found")
    return config


@router.get("/screenshots")
def list_screenshots(runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> dict[str, list[str]]:
    return {"screenshots": runtime_deps.screenshots.list_names()}


@router.post("/screenshots", status_code=201)
def save_screenshot(
    body: ScreenshotUpload,
    request: Request,
    runtime_deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, str]:
    _require_api_key(body.apiKey.strip() or get_request_api_key(request), runtime_deps)
    try:
        name = runtime_deps.screenshots.save(body.screenshotData, name=body.name)
    except InvalidScreenshotError as exc:
        raise HTTPException(status_code=400, detail=exc.reason) from exc
    return {"name": name}


@router.get("/screenshots/{name}")
def get_screenshot(name: str, runtime_deps: RuntimeDeps = Depends(get_runtime_deps)) -> FileResponse:
    try:
        path = runtime_deps.screenshots.locate(name)
    except InvalidScreenshotError as exc:
        raise HTTPException(status_code=400, detail=exc.reason) from exc
    except ScreenshotNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"screenshot {exc.name} not found") from exc
    return FileResponse(path, media_type="image/png")


@router.delete("/screenshots/{name}")
def delete_screenshot(
    name: str,
    request: Request,
    runtime_deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, str]:
    _require_api_key(get_request_api_key(request), runtime_deps)
    try:
        runtime_deps.screenshots.delete(name)
    except InvalidScreenshotError as exc:
        raise HTTPException(status_code=400, detail=exc.reason) from exc
    except ScreenshotNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"screenshot {exc.name} not found") from exc
    return {"deleted": name}


__all__ = ["router"]
