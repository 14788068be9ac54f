from __future__ import annotations

import json

import pytest

from src.config.websocket import MAX_ENVELOPE_DEPTH
from src.handlers.websocket.parser import parse_envelope


def test_parse_envelope_ok() -> None:
    raw = json.dumps({"apiKey": "k", "action": "getSerialData", "requestId": "r1", "extra": {"x": 1}})
    msg = parse_envelope(raw)
    assert msg["action"] == "getSerialData"
    assert msg["extra"]["x"] == 1


def test_parse_envelope_accepts_bytes() -> None:
    assert parse_envelope(b'{"serialData": [1, 2]}') == {"serialData": [1, 2]}


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        json.dumps([]),
        json.dumps("just a string"),
        json.dumps(42),
        b"\xff\xfe",
    ],
)
def test_parse_envelope_invalid(raw: str | bytes) -> None:
    with pytest.raises(ValueError):
        parse_envelope(raw)


def test_parse_envelope_rejects_deep_nesting() -> None:
    raw = '{"serialData":' + "[" * 300 + "]" * 300 + "}"
    with pytest.raises(ValueError, match="nested deeper"):
        parse_envelope(raw)


def test_parse_envelope_accepts_nesting_at_limit() -> None:
    # The envelope object itself is the first level.
    raw = '{"serialData":' + "[" * (MAX_ENVELOPE_DEPTH - 1) + "]" * (MAX_ENVELOPE_DEPTH - 1) + "}"
    assert "serialData" in parse_envelope(raw)

    too_deep = '{"serialData":' + "[" * MAX_ENVELOPE_DEPTH + "]" * MAX_ENVELOPE_DEPTH + "}"
    with pytest.raises(ValueError):
        parse_envelope(too_deep)
