from .screenshots import ScreenshotStore
from .client_config import load_client_config

__all__ = ["ScreenshotStore", "load_client_config"]
