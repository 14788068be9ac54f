"""Screenshot files saved and served by the REST endpoints."""

from __future__ import annotations

import re
import uuid
import base64
import binascii
import logging
from pathlib import Path

from src.errors import InvalidScreenshotError, ScreenshotNotFoundError
from src.config.storage import DATA_URL_PREFIX, SCREENSHOT_SUFFIX, SCREENSHOT_NAME_PATTERN

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(SCREENSHOT_NAME_PATTERN)


def decode_screenshot(data: str) -> bytes:
    """Decode a base64 PNG, with or without a ``data:image/png;base64,`` prefix."""
    raw = (data or "").strip()
    if raw.startswith(DATA_URL_PREFIX):
        raw = raw[len(DATA_URL_PREFIX) :]
    if not raw:
        raise InvalidScreenshotError(reason="screenshotData is empty")
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidScreenshotError(reason=f"screenshotData is not valid base64: {exc}") from exc


class ScreenshotStore:
    def __init__(self, directory: Path) -> None:
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def path_for(self, name: str) -> Path:
        if not isinstance(name, str) or not _NAME_RE.match(name):
            raise InvalidScreenshotError(reason=f"invalid screenshot name: {name!r}")
        return self._dir / f"{name}{SCREENSHOT_SUFFIX}"

    def save(self, data: str, name: str | None = None) -> str:
        name = name or uuid.uuid4().hex
        path = self.path_for(name)
        payload = decode_screenshot(data)
        self._dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        logger.info("saved screenshot %s (%s bytes)", name, len(payload))
        return name

    def locate(self, name: str) -> Path:
        path = self.path_for(name)
        if not path.is_file():
            raise ScreenshotNotFoundError(name=name)
        return path

    def delete(self, name: str) -> None:
        path = self.locate(name)
        path.unlink()
        logger.info("deleted screenshot %s", name)

    def list_names(self) -> list[str]:
        if not self._dir.is_dir():
            return []
        return sorted(p.stem for p in self._dir.glob(f"*{SCREENSHOT_SUFFIX}") if p.is_file())


__all__ = ["ScreenshotStore", "decode_screenshot"]
