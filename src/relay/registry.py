"""Registry of live connections across every listening endpoint."""

from __future__ import annotations

import uuid
import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .connection import RelayConnection

logger = logging.getLogger(__name__)

IdentityFactory = Callable[[], str]


def new_identity() -> str:
    return uuid.uuid4().hex


class ConnectionRegistry:
    """Identity assignment and lookup for open connections.

    Mutated only from the event loop and never across an await, so no lock is
    needed.
    """

    def __init__(self, *, max_connections: int, identity_factory: IdentityFactory | None = None) -> None:
        self._max = max(1, int(max_connections))
        self._identity_factory = identity_factory or new_identity
        self._connections: dict[str, RelayConnection] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def has_capacity(self) -> bool:
        return len(self._connections) < self._max

    def register(self, connection: RelayConnection) -> str:
        identity = self._identity_factory()
        while identity in self._connections:
            identity = self._identity_factory()
        connection.bind_identity(identity)
        self._connections[identity] = connection
        logger.debug("registered %s via %s", identity, connection.origin_endpoint)
        return identity

    def unregister(self, connection: RelayConnection) -> bool:
        """Forget `connection`. Returns False when it was not registered."""
        identity = connection.identity
        if identity is None or self._connections.get(identity) is not connection:
            return False
        del self._connections[identity]
        return True

    def all_open(self) -> Iterator[RelayConnection]:
        snapshot = [conn for conn in self._connections.values() if conn.is_open]
        return iter(snapshot)

    def find_by_identity(self, identity: str) -> RelayConnection | None:
        connection = self._connections.get(identity)
        if connection is None or not connection.is_open:
            return None
        return connection


__all__ = ["ConnectionRegistry", "new_identity"]
