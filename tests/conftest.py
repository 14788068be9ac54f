from __future__ import annotations

import sys
import itertools
from pathlib import Path
from functools import partial

import pytest

from src.relay.router import Router
from tests.utils import API_KEY, FakeConnection
from src.relay.registry import ConnectionRegistry
from src.relay.correlation import CorrelationTable
from src.handlers.websocket.auth import is_authorized


def pytest_configure() -> None:
    # Keep `import src...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def registry() -> ConnectionRegistry:
    counter = itertools.count(1)
    return ConnectionRegistry(max_connections=100, identity_factory=lambda: f"id-{next(counter)}")


@pytest.fixture
def correlations() -> CorrelationTable:
    return CorrelationTable()


@pytest.fixture
def router(registry: ConnectionRegistry, correlations: CorrelationTable) -> Router:
    counter = itertools.count(1)
    return Router(
        registry,
        correlations,
        authenticate=partial(is_authorized, expected_api_key=API_KEY),
        request_id_factory=lambda: f"fallback-{next(counter)}",
    )


@pytest.fixture
def connect(registry: ConnectionRegistry):
    def _connect(*, origin_endpoint: str = "/ws", fail: bool = False) -> FakeConnection:
        connection = FakeConnection(origin_endpoint=origin_endpoint, fail=fail)
        registry.register(connection)
        return connection

    return _connect
