"""Envelope router: authentication, delivery and disconnect cleanup."""

from __future__ import annotations

import uuid
import logging
from datetime import datetime, timezone
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import orjson

from src.config.websocket import (
    KEY_TYPE,
    KEY_ERROR,
    KEY_SOCKET_ID,
    KEY_REQUEST_ID,
    KEY_TIMESTAMP,
    KEY_IS_FROM_SELF,
    MSG_TYPE_DISCONNECT,
    WS_ERROR_AUTH_FAILED,
    WS_ERROR_INVALID_MESSAGE,
)
from src.state.delivery import Query, Delivery, Response, Targeted, Broadcast, Unsolicited

from .codec import encode_envelope
from .classifier import classify

if TYPE_CHECKING:
    from .registry import ConnectionRegistry
    from .connection import RelayConnection
    from .correlation import CorrelationTable

logger = logging.getLogger(__name__)

Authenticator = Callable[[dict[str, Any]], bool]
RequestIdFactory = Callable[[], str]


def _fallback_request_id() -> str:
    return uuid.uuid4().hex


class Router:
    """Decide who receives each inbound envelope.

    `route` and `disconnect` never await: every peer send only enqueues (see
    `RelayConnection.send_text`), so each call completes on the event loop
    without interleaving with any other routing step. That is what keeps the
    correlation lookup-and-remove atomic.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        correlations: CorrelationTable,
        *,
        authenticate: Authenticator,
        disconnect_notice: bool = True,
        request_id_factory: RequestIdFactory | None = None,
    ) -> None:
        self._registry = registry
        self._correlations = correlations
        self._authenticate = authenticate
        self._disconnect_notice = disconnect_notice
        self._request_id_factory = request_id_factory or _fallback_request_id
        self._handlers: dict[type, Callable[[Any, dict[str, Any], RelayConnection], None]] = {
            Targeted: self._deliver_targeted,
            Query: self._deliver_query,
            Response: self._deliver_response,
            Unsolicited: self._deliver_unsolicited,
            Broadcast: self._deliver_broadcast,
        }

    def route(self, envelope: dict[str, Any], sender: RelayConnection) -> Delivery | None:
        """Route one decoded envelope from `sender`.

        Returns the resolved delivery mode, or None when the envelope was
        rejected. Every handler encodes its outbound text before touching the
        correlation table or any peer, so an envelope that cannot be encoded
        leaves no trace beyond the error reply.
        """
        if not self._authenticate(envelope):
            logger.warning("rejected envelope from %s: authentication failed", sender.identity)
            self.reject(sender, WS_ERROR_AUTH_FAILED)
            return None

        delivery = classify(envelope)
        logger.debug("routing %s from %s", type(delivery).__name__, sender.identity)
        try:
            self._handlers[type(delivery)](delivery, envelope, sender)
        except orjson.JSONEncodeError as exc:
            logger.warning("unencodable envelope from %s: %s", sender.identity, exc)
            self.reject(sender, f"{WS_ERROR_INVALID_MESSAGE}: {exc}")
            return None
        return delivery

    def reject(self, sender: RelayConnection, message: str) -> None:
        """Reply `{"error": message}` to the sender alone."""
        self._send(sender, {KEY_ERROR: message})

    def disconnect(self, connection: RelayConnection) -> bool:
        """Run disconnect cleanup. Safe to call more than once.

        Unregisters first, then purges pending requests, so no later lookup can
        resolve to the departing connection. Returns False when there was
        nothing left to clean up.
        """
        if not self._registry.unregister(connection):
            return False
        purged = self._correlations.purge_connection(connection.identity or "")
        if purged:
            logger.debug("purged %s pending request(s) for %s", purged, connection.identity)
        if self._disconnect_notice:
            notice = {
                KEY_TYPE: MSG_TYPE_DISCONNECT,
                KEY_TIMESTAMP: datetime.now(timezone.utc).isoformat(),
            }
            self._broadcast(notice, exclude=connection)
        return True

    def _deliver_targeted(self, delivery: Targeted, envelope: dict[str, Any], _sender: RelayConnection) -> None:
        target = self._registry.find_by_identity(delivery.target_id)
        if target is None:
            logger.debug("target %s not connected; dropping", delivery.target_id)
            return
        self._send(target, envelope)

    def _deliver_query(self, delivery: Query, envelope: dict[str, Any], sender: RelayConnection) -> None:
        request_id = delivery.request_id or self._request_id_factory()
        text = encode_envelope({**envelope, KEY_REQUEST_ID: request_id, KEY_SOCKET_ID: sender.identity})
        self._correlations.put(request_id, sender.identity or "")
        self._broadcast_text(text, exclude=sender)

    def _deliver_response(self, delivery: Response, envelope: dict[str, Any], _sender: RelayConnection) -> None:
        text = encode_envelope({**envelope, KEY_IS_FROM_SELF: True})
        requester_id = self._correlations.take_and_clear(delivery.request_id)
        requester = self._registry.find_by_identity(requester_id) if requester_id else None
        if requester is None:
            logger.debug("no requester waiting for %s; dropping response", delivery.request_id)
            return
        self._send_text(requester, text)

    def _deliver_unsolicited(self, _delivery: Unsolicited, envelope: dict[str, Any], sender: RelayConnection) -> None:
        echo = encode_envelope({**envelope, KEY_IS_FROM_SELF: True})
        text = encode_envelope(envelope)
        self._send_text(sender, echo)
        self._broadcast_text(text, exclude=sender)

    def _deliver_broadcast(self, _delivery: Broadcast, envelope: dict[str, Any], sender: RelayConnection) -> None:
        self._broadcast(envelope, exclude=sender)

    def _send(self, peer: RelayConnection, envelope: dict[str, Any]) -> bool:
        return self._send_text(peer, encode_envelope(envelope))

    def _send_text(self, peer: RelayConnection, text: str) -> bool:
        try:
            return peer.send_text(text)
        except Exception:
            logger.warning("send to %s failed; skipping", peer.identity, exc_info=True)
            return False

    def _broadcast(self, envelope: dict[str, Any], *, exclude: RelayConnection) -> int:
        return self._broadcast_text(encode_envelope(envelope), exclude=exclude)

    def _broadcast_text(self, text: str, *, exclude: RelayConnection) -> int:
        delivered = 0
        for peer in self._registry.all_open():
            if peer is exclude:
                continue
            if self._send_text(peer, text):
                delivered += 1
        return delivered


__all__ = ["Router"]
