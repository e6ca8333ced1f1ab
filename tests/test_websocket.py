import asyncio
import contextlib
import json
import socket

import pytest
from websockets.asyncio.server import serve

from yewchat.chat import Chat
from yewchat.event_bus import EventBus
from yewchat.protocol import MsgType, WebSocketMessage
from yewchat.websocket import DEFAULT_URL, WebsocketService


@contextlib.asynccontextmanager
async def _server(handler):
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    async with serve(handler, sock=sock):
        yield f"ws://127.0.0.1:{port}/ws/chat"


def test_default_url_points_at_local_chat_endpoint():
    service = WebsocketService()
    assert service.url == DEFAULT_URL
    assert DEFAULT_URL == "ws://127.0.0.1:8080/ws/chat"


def test_send_raises_when_queue_is_full():
    service = WebsocketService(capacity=1)
    service.send("first")
    with pytest.raises(asyncio.QueueFull):
        service.send("second")


@pytest.mark.asyncio
async def test_send_after_close_raises():
    service = WebsocketService()
    await service.close()
    with pytest.raises(RuntimeError):
        service.send("late")
    with pytest.raises(RuntimeError):
        await service.run()


@pytest.mark.asyncio
async def test_run_forwards_text_and_utf8_bytes_to_bus():
    received_by_server = []

    async def handler(connection):
        received_by_server.append(await connection.recv())
        await connection.send("hello")
        await connection.send(b"bytes-frame")
        await connection.send(b"\xff\xfe")
        await connection.send("last")

    async with _server(handler) as url:
        bus = EventBus()
        delivered = []
        bus.connect(delivered.append)
        service = WebsocketService(url, bus=bus)
        service.send("outgoing")
        await asyncio.wait_for(service.run(), timeout=5)

    assert received_by_server == ["outgoing"]
    assert delivered == ["hello", "bytes-frame", "last"]


@pytest.mark.asyncio
async def test_close_ends_run():
    got_message = asyncio.Event()

    async def handler(connection):
        await connection.recv()
        got_message.set()
        await connection.wait_closed()

    async with _server(handler) as url:
        service = WebsocketService(url)
        service.send("ping")
        task = asyncio.create_task(service.run())
        await asyncio.wait_for(got_message.wait(), timeout=5)
        await service.close()
        await asyncio.wait_for(task, timeout=5)

    assert task.done() and task.exception() is None


@pytest.mark.asyncio
async def test_chat_registers_and_receives_users_over_connection():
    received_by_server = []
    users = WebSocketMessage(MsgType.USERS, data_array=("alice", "bob")).to_json()

    async def handler(connection):
        received_by_server.append(await connection.recv())
        await connection.send(users)

    async with _server(handler) as url:
        service = WebsocketService(url)
        chat = Chat("alice", service.send, bus=service.bus)
        await asyncio.wait_for(service.run(), timeout=5)

    assert json.loads(received_by_server[0]) == {
        "messageType": "register",
        "dataArray": None,
        "data": "alice",
    }
    assert [user.name for user in chat.users] == ["alice", "bob"]