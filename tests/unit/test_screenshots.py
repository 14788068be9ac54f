from __future__ import annotations

import base64
from pathlib import Path

import pytest

from src.storage.client_config import load_client_config
from src.errors import InvalidScreenshotError, ScreenshotNotFoundError
from src.storage.screenshots import ScreenshotStore, decode_screenshot

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


def test_decode_accepts_data_url() -> None:
    assert decode_screenshot(f"data:image/png;base64,{PNG_B64}") == PNG_BYTES
    assert decode_screenshot(PNG_B64) == PNG_BYTES


@pytest.mark.parametrize("data", ["", "data:image/png;base64,", "not base64!!"])
def test_decode_rejects_garbage(data: str) -> None:
    with pytest.raises(InvalidScreenshotError):
        decode_screenshot(data)


def test_save_locate_list_delete(tmp_path: Path) -> None:
    store = ScreenshotStore(tmp_path / "shots")
    assert store.list_names() == []

    name = store.save(PNG_B64, name="frame-1")
    generated = store.save(PNG_B64)

    assert name == "frame-1"
    assert store.locate("frame-1").read_bytes() == PNG_BYTES
    assert store.list_names() == sorted(["frame-1", generated])

    store.delete("frame-1")
    with pytest.raises(ScreenshotNotFoundError):
        store.locate("frame-1")
    with pytest.raises(ScreenshotNotFoundError):
        store.delete("frame-1")


@pytest.mark.parametrize("name", ["../etc/passwd", "a/b", "", "x" * 129, "dot.name"])
def test_rejects_unsafe_names(tmp_path: Path, name: str) -> None:
    store = ScreenshotStore(tmp_path)
    with pytest.raises(InvalidScreenshotError):
        store.path_for(name)


def test_load_client_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    assert load_client_config(path) is None

    path.write_text('{"theme": "dark", "baudRate": 115200}')
    assert load_client_config(path) == {"theme": "dark", "baudRate": 115200}

    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_client_config(path)
