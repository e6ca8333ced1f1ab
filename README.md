# yewchat

A small chat client that talks to a chat server over WebSocket. It registers
your username when it connects, keeps the list of users who are online (each
with an avatar URL), collects incoming chat messages and sends what you type.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
yewchat
```

Options:

- `--username NAME` logs in as `NAME`; without it you are asked for a
  username until you type a non-empty one.
- `--url URL` sets the server to connect to. The default is
  `ws://127.0.0.1:8080/ws/chat`.
- `--about` prints the About page and exits.

Once connected, the client prints `Users: ...` whenever the list of online
users changes and `sender: text` for each new chat message. Every line you
type is sent to the server as it is. End input (Ctrl-D) to close the
connection. If the server cannot be reached, the command prints an error and
exits with status 1.

## Wire format

Messages are JSON objects with camelCase keys:

- `{"messageType": "register", "data": "<username>", "dataArray": null}` is
  sent when the chat starts.
- `{"messageType": "users", "dataArray": ["alice", "bob"]}` gives the users
  who are online.
- `{"messageType": "message", "dataArray": ["<from>", "<text>"]}` carries one
  chat message.

Payloads that are empty, hold only whitespace or are not valid messages are
logged and ignored. A `message` whose `dataArray` does not hold exactly two
strings is ignored as well. Binary frames are decoded as UTF-8; frames that
do not decode are dropped.

## Using it as a library

```python
from yewchat.chat import Chat

sent = []
chat = Chat("alice", sent.append)   # sends the register message at once
chat.handle_message('{"messageType": "users", "dataArray": ["alice", "bob"]}')
chat.handle_message('{"messageType": "message", "dataArray": ["bob", "hi!"]}')
print(chat.users, chat.messages)
print(chat.render())                # the chat room as HTML
```

- `yewchat.protocol` holds `MsgType`, `WebSocketMessage` (with `to_json`),
  `parse_message`, which raises `ProtocolError` on bad input,
  `register_message` and `avatar_for`. `avatar_for` returns a fixed picture
  for `alice` and `bob` and an identicon URL for any other name.
- `yewchat.chat.Chat` applies payloads with `handle_message`, which returns
  `True` when the room changed, sends text with `submit_message`, looks up
  avatars with `avatar_of` and renders HTML with `render`. In the HTML a
  message that ends in `.gif` is shown as an image.
- `yewchat.event_bus.EventBus` passes every message sent on it to all
  subscribers added with `connect`; `disconnect` removes one.
- `yewchat.websocket.WebsocketService` handles the connection. `send` queues
  outgoing text (up to 1000 items, then `asyncio.QueueFull`), `run` connects
  and publishes incoming text on its bus until the connection closes, and
  `close` shuts it down.
- `yewchat.app` holds the `User`, `Route`, `route_for` and `LoginForm`
  helpers, the light/dark class helpers `toggle_dark_class` and
  `theme_button_label`, `about_text` and the `main` command.

## What it does not do

There is no chat server in this package; you need one running at the URL
you connect to. The terminal client has no graphical view: the HTML from
`Chat.render`, the routes and the theme helpers are there for a front end to
use, but the package does not serve or display them itself.