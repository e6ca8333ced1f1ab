"""The chat room state: known users, received messages and rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from html import escape

from yewchat.event_bus import EventBus
from yewchat.protocol import (
    MsgType,
    ProtocolError,
    avatar_for,
    parse_message,
    register_message,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserProfile:
    name: str
    avatar: str


@dataclass(frozen=True)
class ChatMessage:
    sender: str
    message: str


class Chat:
    """A chat room for one user, fed by payloads from the server."""

    def __init__(
        self,
        username: str,
        send: Callable[[str], object],
        bus: EventBus | None = None,
    ) -> None:
        self.username = username
        self.users: list[UserProfile] = []
        self.messages: list[ChatMessage] = []
        self._send = send
        try:
            send(register_message(username).to_json())
        except Exception as exc:  # the outgoing channel may be full or closed
            logger.error("Failed to send register message: %r", exc)
        self.handler_id = bus.connect(self.handle_message) if bus is not None else None

    def handle_message(self, payload: str) -> bool:
        """Apply a server payload; return True when the view changed."""
        if not payload.strip():
            logger.warning("Received empty WS payload; ignoring")
            return False
        try:
            message = parse_message(payload)
        except ProtocolError as exc:
            logger.error("WS JSON parse error: %s — raw: %s", exc, payload)
            return False

        if message.message_type is MsgType.USERS:
            self.users = [
                UserProfile(name, avatar_for(name)) for name in message.data_array or ()
            ]
            return True
        if message.message_type is MsgType.MESSAGE:
            if message.data_array is not None and len(message.data_array) == 2:
                sender, text = message.data_array
                self.messages.append(ChatMessage(sender, text))
                return True
        return False

    def submit_message(self, text: str) -> bool:
        """Send raw input text to the server; the view does not change."""
        try:
            self._send(text)
        except Exception as exc:  # delivery failures are dropped, as typed input is
            logger.debug("Dropped outgoing message: %r", exc)
        return False

    def avatar_of(self, name: str) -> str:
        """Return the avatar of a listed user, or an empty string."""
        return next((user.avatar for user in self.users if user.name == name), "")

    def render(self) -> str:
        """Render the chat room as HTML."""
        users = "".join(
            '<div class="flex m-3 bg-white rounded-lg p-2">'
            f'<img class="w-12 h-12 rounded-full" src="{escape(user.avatar)}" alt="avatar"/>'
            '<div class="flex-grow p-3">'
            f'<div class="flex text-xs justify-between"><div>{escape(user.name)}</div></div>'
            '<div class="text-xs text-gray-400">Hi there!</div>'
            "</div></div>"
            for user in self.users
        )
        messages = "".join(self._render_message(message) for message in self.messages)
        return (
            '<div class="flex w-screen">'
            '<div class="flex-none w-56 h-screen bg-gray-100">'
            f'<div class="text-xl p-3">Users</div>{users}</div>'
            '<div class="grow h-screen flex flex-col">'
            '<div class="w-full h-14 border-b-2 border-gray-300">'
            '<div class="text-xl p-3">💬 Chat!</div></div>'
            '<div class="w-full grow overflow-auto border-b-2 border-gray-300">'
            f"{messages}</div>"
            '<div class="w-full h-14 flex px-3 items-center">'
            '<input type="text" placeholder="Message" '
            'class="block w-full py-2 pl-4 mx-3 bg-gray-100 rounded-full outline-none"/>'
            '<button class="p-3 shadow-sm bg-blue-600 w-10 h-10 rounded-full">Send</button>'
            "</div></div></div>"
        )

    def _render_message(self, message: ChatMessage) -> str:
        if message.message.endswith(".gif"):
            body = f'<img class="mt-3" src="{escape(message.message)}"/>'
        else:
            body = escape(message.message)
        return (
            '<div class="flex items-end w-3/6 bg-gray-100 m-8 rounded-tl-lg '
            'rounded-tr-lg rounded-br-lg">'
            f'<img class="w-8 h-8 rounded-full m-3" src="{escape(self.avatar_of(message.sender))}"'
            ' alt="avatar"/>'
            f'<div class="p-3"><div class="text-sm">{escape(message.sender)}</div>'
            f'<div class="text-xs text-gray-500">{body}</div></div></div>'
        )