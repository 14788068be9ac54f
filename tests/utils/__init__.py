from .relay import FakeConnection, FakeWebSocket
from .settings import API_KEY, make_settings

__all__ = ["API_KEY", "FakeConnection", "FakeWebSocket", "make_settings"]
