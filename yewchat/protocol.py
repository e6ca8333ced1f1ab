"""The JSON messages exchanged with the chat server, and avatar lookup."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

_KNOWN_AVATARS = {
    "alice": "https://example.com/alice.png",
    "bob": "https://example.com/bob.jpg",
}
_AVATAR_SERVICE = "https://avatars.dicebear.com/api/identicon/{}.svg"


class ProtocolError(ValueError):
    """Raised when a payload is not a valid chat message."""


class MsgType(Enum):
    USERS = "users"
    REGISTER = "register"
    MESSAGE = "message"


@dataclass(frozen=True)
class WebSocketMessage:
    """A message on the wire: a type plus optional list or string data."""

    message_type: MsgType
    data_array: tuple[str, ...] | None = None
    data: str | None = None

    def to_json(self) -> str:
        """Serialise to the compact camelCase JSON the server expects."""
        payload = {
            "messageType": self.message_type.value,
            "dataArray": None if self.data_array is None else list(self.data_array),
            "data": self.data,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def parse_message(text: str) -> WebSocketMessage:
    """Parse a JSON payload into a :class:`WebSocketMessage`."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"invalid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ProtocolError("expected a JSON object")
    if "messageType" not in obj:
        raise ProtocolError("missing field `messageType`")
    try:
        message_type = MsgType(obj["messageType"])
    except (ValueError, TypeError) as exc:
        raise ProtocolError(f"unknown message type: {obj['messageType']!r}") from exc

    data_array = obj.get("dataArray")
    if data_array is not None:
        if not isinstance(data_array, list) or not all(
            isinstance(item, str) for item in data_array
        ):
            raise ProtocolError("`dataArray` must be a list of strings")
        data_array = tuple(data_array)

    data = obj.get("data")
    if data is not None and not isinstance(data, str):
        raise ProtocolError("`data` must be a string")

    return WebSocketMessage(message_type, data_array, data)


def register_message(username: str) -> WebSocketMessage:
    """Build the message that registers ``username`` with the server."""
    return WebSocketMessage(MsgType.REGISTER, data=username)


def avatar_for(name: str) -> str:
    """Return an avatar URL for ``name``: a known picture or a generated identicon."""
    known = _KNOWN_AVATARS.get(name.lower())
    if known is not None:
        return known
    return _AVATAR_SERVICE.format(quote(name.strip(), safe=""))