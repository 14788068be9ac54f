"""Static client configuration served by ``GET /config``."""

from __future__ import annotations

from typing import Any
from pathlib import Path

import orjson


def load_client_config(path: Path) -> dict[str, Any] | None:
    """Return the parsed JSON object at `path`, or None if the file is missing.

    A file that exists but is not a JSON object raises ValueError.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return None
    try:
        parsed = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return parsed


__all__ = ["load_client_config"]
