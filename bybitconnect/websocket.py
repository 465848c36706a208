"""Streaming client: connection, authentication, subscriptions, keep-alive and reconnection."""

from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from typing import Any, Callable, Iterable, Mapping

import websocket

from .client import get_current_time, sign
from .consts import (
    NAME,
    WEBSOCKET_PRIVATE_DEMO,
    WEBSOCKET_PRIVATE_MAINNET,
    WEBSOCKET_PRIVATE_TESTNET,
    WEBSOCKET_TRADE_DEMO,
    WEBSOCKET_TRADE_MAINNET,
    WEBSOCKET_TRADE_TESTNET,
)

MessageHandler = Callable[[str], Any]

DEFAULT_PING_INTERVAL = 20
AUTH_EXPIRY_MS = 10000

_AUTHENTICATED_URLS = frozenset(
    {
        WEBSOCKET_PRIVATE_MAINNET,
        WEBSOCKET_PRIVATE_TESTNET,
        WEBSOCKET_TRADE_MAINNET,
        WEBSOCKET_TRADE_TESTNET,
        WEBSOCKET_TRADE_DEMO,
        WEBSOCKET_PRIVATE_DEMO,
    }
)
_TRANSPORT_ERRORS = (websocket.WebSocketException, OSError, ConnectionError)

logger = logging.getLogger(f"{NAME}.websocket")


def _to_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def ping_message(now: int | None = None) -> str:
    """The keep-alive frame; ``now`` is the Unix time in seconds used as request id."""
    if now is None:
        now = int(time.time())
    return _to_json({"op": "ping", "req_id": str(now)})


class WebSocket:
    """A stream connection that authenticates when needed, pings and reconnects."""

    reconnect_interval: float = 5.0

    def __init__(
        self,
        url: str,
        handler: MessageHandler | None = None,
        api_key: str = "",
        api_secret: str = "",
        ping_interval: float = DEFAULT_PING_INTERVAL,
        max_alive_time: str = "",
    ) -> None:
        self.url = url
        self.on_message = handler
        self.api_key = api_key
        self.api_secret = api_secret
        self.ping_interval = ping_interval
        self.max_alive_time = max_alive_time
        self.is_connected = False
        self._conn: Any = None
        self._stop = threading.Event()
        self._send_lock = threading.Lock()

    def set_message_handler(self, handler: MessageHandler | None) -> None:
        """Replace the callable that receives every incoming message."""
        self.on_message = handler

    def connection_url(self) -> str:
        """The URL dialled, with the maximum alive time appended when set."""
        if self.max_alive_time:
            return f"{self.url}?max_alive_time={self.max_alive_time}"
        return self.url

    def requires_authentication(self) -> bool:
        """Whether the URL is a private or trade stream."""
        return self.url in _AUTHENTICATED_URLS

    def auth_message(self, expires: int | None = None) -> dict[str, Any]:
        """The authentication request; ``expires`` is in epoch milliseconds."""
        if expires is None:
            expires = get_current_time() + AUTH_EXPIRY_MS
        signature = sign(self.api_secret, f"GET/realtime{expires}")
        return {
            "req_id": str(uuid.uuid4()),
            "op": "auth",
            "args": [self.api_key, expires, signature],
        }

    def connect(self) -> "WebSocket":
        """Dial, authenticate if needed, and start the reader, monitor and ping threads."""
        self._stop = threading.Event()
        self._open()
        self.is_connected = True
        self._start(self._read_loop, self._conn)
        self._start(self._monitor_loop, self._stop)
        self._start(self._ping_loop, self._stop)
        return self

    def disconnect(self) -> None:
        """Stop the background threads and close the connection."""
        self._stop.set()
        self.is_connected = False
        conn = self._conn
        if conn is not None:
            conn.close()

    def send_subscription(self, args: Iterable[str]) -> "WebSocket":
        """Subscribe to the given topics."""
        topics = list(args)
        logger.info("subscribe msg: %s", topics)
        try:
            self._send_json({"req_id": str(uuid.uuid4()), "op": "subscribe", "args": topics})
        except _TRANSPORT_ERRORS as exc:
            logger.error("Failed to send subscription: %s", exc)
            raise
        logger.info("Subscription sent successfully.")
        return self

    def send_request(
        self,
        op: str,
        args: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Send a custom operation with one argument object and request headers."""
        request = {
            "reqId": str(uuid.uuid4()),
            "header": dict(headers or {}),
            "op": op,
            "args": [dict(args)],
        }
        logger.info("request headers: %s", request["header"])
        logger.info("request op channel: %s", op)
        logger.info("request msg: %s", request["args"])
        self._send_json(request)

    def _open(self) -> None:
        self._conn = websocket.create_connection(self.connection_url())
        if self.requires_authentication():
            message = self.auth_message()
            logger.info("auth args: %s", message["args"])
            try:
                self._send_json(message)
            except _TRANSPORT_ERRORS as exc:
                logger.error("Failed Connection: %s", exc)
                raise ConnectionError(f"authentication failed: {exc}") from exc

    @staticmethod
    def _start(target: Callable[..., None], *args: Any) -> None:
        threading.Thread(target=target, args=args, daemon=True).start()

    def _send_json(self, value: Any) -> None:
        self._send(_to_json(value))

    def _send(self, message: str) -> None:
        conn = self._conn
        if conn is None:
            raise ConnectionError("websocket is not connected")
        with self._send_lock:
            conn.send(message)

    def _read_loop(self, conn: Any) -> None:
        while True:
            try:
                message = conn.recv()
            except _TRANSPORT_ERRORS as exc:
                logger.error("Error reading: %s", exc)
                self.is_connected = False
                return
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            handler = self.on_message
            if handler is None:
                continue
            try:
                handler(message)
            except Exception as exc:  # handler errors end the reader, as documented
                logger.error("Error handling message: %s", exc)
                return

    def _monitor_loop(self, stop: threading.Event) -> None:
        while not stop.wait(self.reconnect_interval):
            if self.is_connected:
                continue
            logger.info("Attempting to reconnect...")
            try:
                self._open()
            except _TRANSPORT_ERRORS as exc:
                logger.error("Reconnection failed: %s", exc)
                continue
            self.is_connected = True
            self._start(self._read_loop, self._conn)

    def _ping_loop(self, stop: threading.Event) -> None:
        if self.ping_interval <= 0:
            logger.info("Ping interval is set to a non-positive value.")
            return
        while not stop.wait(self.ping_interval):
            now = int(time.time())
            try:
                self._send(ping_message(now))
            except _TRANSPORT_ERRORS as exc:
                logger.error("Failed to send ping: %s", exc)
                return
            logger.debug("Ping sent with UTC time: %d", now)
        logger.debug("Ping context closed, stopping ping.")


def new_private_websocket(
    url: str,
    api_key: str,
    api_secret: str,
    handler: MessageHandler | None,
    ping_interval: float = DEFAULT_PING_INTERVAL,
    max_alive_time: str = "",
) -> WebSocket:
    """A stream connection that carries credentials for private channels."""
    return WebSocket(
        url,
        handler,
        api_key=api_key,
        api_secret=api_secret,
        ping_interval=ping_interval,
        max_alive_time=max_alive_time,
    )


def new_public_websocket(url: str, handler: MessageHandler | None) -> WebSocket:
    """A stream connection for public channels."""
    return WebSocket(url, handler)