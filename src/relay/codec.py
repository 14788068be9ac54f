"""Envelope encoding shared by every outbound path."""

from __future__ import annotations

from typing import Any

import orjson


def encode_envelope(envelope: dict[str, Any]) -> str:
    return orjson.dumps(envelope).decode("utf-8")


__all__ = ["encode_envelope"]
