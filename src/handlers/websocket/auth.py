"""Envelope authentication against the shared secret."""

from __future__ import annotations

import secrets
from typing import Any

from src.config.websocket import KEY_API_KEY


def get_api_key(envelope: dict[str, Any]) -> str:
    key = envelope.get(KEY_API_KEY)
    return key if isinstance(key, str) else ""


def validate_api_key(api_key: str, expected_api_key: str) -> bool:
    if not expected_api_key:
        # Misconfiguration: server has no key set. Treat as locked down.
        return False
    return secrets.compare_digest(api_key.encode("utf-8"), expected_api_key.encode("utf-8"))


def is_authorized(envelope: dict[str, Any], *, expected_api_key: str) -> bool:
    return validate_api_key(get_api_key(envelope), expected_api_key)


__all__ = ["get_api_key", "is_authorized", "validate_api_key"]
