from .router import Router
from .registry import ConnectionRegistry
from .classifier import classify
from .connection import RelayConnection
from .correlation import CorrelationTable

__all__ = ["ConnectionRegistry", "CorrelationTable", "RelayConnection", "Router", "classify"]
