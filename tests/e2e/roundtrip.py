#!/usr/bin/env python3
"""Live request/response round trip against a running relay hub.

Opens a requester and a controller, sends a query from the requester, answers
it from the controller and checks the answer reaches only the requester.
Finally closes the requester and waits for the disconnect notice.
"""

from __future__ import annotations

import sys
import uuid
import asyncio
import logging
import argparse
from pathlib import Path

import orjson
import websockets

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tests.utils.env import build_ws_url, resolve_api_key, derive_default_server  # noqa: E402

logger = logging.getLogger("roundtrip")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Relay hub query/response round trip")
    p.add_argument("--server", default=derive_default_server(), help="host:port or ws://host:port/path")
    p.add_argument("--secure", action="store_true", help="Use wss://")
    p.add_argument("--requester-path", default="/ws", help="Endpoint the requester connects to")
    p.add_argument("--controller-path", default="/", help="Endpoint the controller connects to")
    p.add_argument("--action", default="getSerialData")
    p.add_argument("--timeout", type=float, default=5.0, help="Seconds to wait for each message")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def _recv_json(ws, timeout: float) -> dict:
    msg = orjson.loads(await asyncio.wait_for(ws.recv(), timeout=timeout))
    logger.debug("recv %s", msg)
    return msg


async def run(args: argparse.Namespace) -> int:
    api_key = resolve_api_key()
    if not api_key:
        print("FAIL: RELAY_API_KEY missing (set it to the server's key)")
        return 1

    requester_url = build_ws_url(args.server, secure=args.secure, path=args.requester_path)
    controller_url = build_ws_url(args.server, secure=args.secure, path=args.controller_path)
    request_id = uuid.uuid4().hex
    print(f"requester: {requester_url}")
    print(f"controller: {controller_url}")

    async with websockets.connect(controller_url) as controller:
        async with websockets.connect(requester_url) as requester:
            query = {"apiKey": api_key, "action": args.action, "requestId": request_id}
            await requester.send(orjson.dumps(query).decode())

            forwarded = await _recv_json(controller, args.timeout)
            if forwarded.get("requestId") != request_id or not forwarded.get("socketId"):
                print(f"FAIL: unexpected query at controller: {forwarded}")
                return 2

            answer = {"apiKey": api_key, "requestId": request_id, "serialData": "ok"}
            await controller.send(orjson.dumps(answer).decode())

            reply = await _recv_json(requester, args.timeout)
            if reply.get("serialData") != "ok" or reply.get("isFromSelf") is not True:
                print(f"FAIL: unexpected reply at requester: {reply}")
                return 2
            print(f"PASS: round trip for requestId={request_id}")

        notice = await _recv_json(controller, args.timeout)
        if notice.get("type") != "disconnect":
            print(f"FAIL: expected disconnect notice, got {notice}")
            return 2
        print(f"PASS: disconnect notice at {notice.get('timestamp')}")
    return 0


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    try:
        code = asyncio.run(run(args))
    except TimeoutError:
        print("FAIL: timed out waiting for a message")
        code = 2
    except (OSError, websockets.exceptions.WebSocketException) as exc:
        print(f"FAIL: connection error: {exc}")
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
