from .runtime import RuntimeDeps
from .settings import AppSettings
from .pending import PendingRequest

__all__ = ["AppSettings", "PendingRequest", "RuntimeDeps"]
