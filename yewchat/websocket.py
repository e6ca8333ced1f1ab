"""A websocket connection that queues outgoing text and publishes incoming text."""

from __future__ import annotations

import asyncio
import logging

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed

from yewchat.event_bus import EventBus

logger = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:8080/ws/chat"
DEFAULT_CAPACITY = 1000


class WebsocketService:
    """Connects to the chat server, forwarding queued text out and incoming text to a bus."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        bus: EventBus | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self.url = url
        self.bus = bus if bus is not None else EventBus()
        self._outgoing: asyncio.Queue[str] = asyncio.Queue(maxsize=capacity)
        self._connection: ClientConnection | None = None
        self._closed = False

    def send(self, text: str) -> None:
        """Queue ``text`` for the server; raises ``asyncio.QueueFull`` when the queue is full."""
        if self._closed:
            raise RuntimeError("websocket service is closed")
        self._outgoing.put_nowait(text)

    async def run(self) -> None:
        """Connect and pump messages until the connection closes."""
        if self._closed:
            raise RuntimeError("websocket service is closed")
        async with connect(self.url) as connection:
            self._connection = connection
            writer = asyncio.create_task(self._write(connection))
            try:
                await self._read(connection)
            finally:
                writer.cancel()
                await asyncio.wait([writer])
                self._connection = None
        logger.debug("WebSocket Closed")

    async def close(self) -> None:
        """Stop accepting messages and close the connection if it is open."""
        self._closed = True
        if self._connection is not None:
            await self._connection.close()

    async def _write(self, connection: ClientConnection) -> None:
        try:
            while True:
                text = await self._outgoing.get()
                logger.debug("got event from channel! %s", text)
                await connection.send(text)
        except ConnectionClosed as exc:
            logger.error("ws: %r", exc)

    async def _read(self, connection: ClientConnection) -> None:
        try:
            async for frame in connection:
                if isinstance(frame, bytes):
                    try:
                        text = frame.decode("utf-8")
                    except UnicodeDecodeError:
                        continue
                else:
                    text = frame
                logger.debug("from websocket: %s", text)
                self.bus.send(text)
        except ConnectionClosed as exc:
            logger.error("ws: %r", exc)