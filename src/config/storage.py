"""Screenshot and static client configuration storage."""

from __future__ import annotations

from pathlib import Path

ENV_RELAY_SCREENSHOT_DIR = "RELAY_SCREENSHOT_DIR"
DEFAULT_RELAY_SCREENSHOT_DIR = Path("screenshots")

ENV_RELAY_CLIENT_CONFIG_PATH = "RELAY_CLIENT_CONFIG_PATH"
DEFAULT_RELAY_CLIENT_CONFIG_PATH = Path("config.json")

SCREENSHOT_SUFFIX = ".png"
SCREENSHOT_NAME_PATTERN = r"^[A-Za-z0-9_-]{1,128}$"
DATA_URL_PREFIX = "data:image/png;base64,"

__all__ = [
    "ENV_RELAY_SCREENSHOT_DIR",
    "DEFAULT_RELAY_SCREENSHOT_DIR",
    "ENV_RELAY_CLIENT_CONFIG_PATH",
    "DEFAULT_RELAY_CLIENT_CONFIG_PATH",
    "SCREENSHOT_SUFFIX",
    "SCREENSHOT_NAME_PATTERN",
    "DATA_URL_PREFIX",
]
