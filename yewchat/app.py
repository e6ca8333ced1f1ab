"""Application shell: routes, theme switching, login and a terminal client."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from yewchat.chat import Chat
from yewchat.event_bus import EventBus
from yewchat.websocket import DEFAULT_URL, WebsocketService

_ABOUT_TITLE = "Why Creativity Matters"
_ABOUT_BODY = (
    "Creativity is one of the most critical traits for success in your future career."
)
_ABOUT_LINK = "Read the WEF article →"


@dataclass
class User:
    """The user shared across the application; the name is set at login."""

    username: str = "initial"


class Route(Enum):
    LOGIN = "/"
    CHAT = "/chat"
    ABOUT = "/about"
    NOT_FOUND = "/404"


def route_for(path: str) -> Route:
    """Return the route for ``path``; unknown paths map to ``Route.NOT_FOUND``."""
    try:
        return Route(path)
    except ValueError:
        return Route.NOT_FOUND


def toggle_dark_class(classes: str, dark: bool) -> str:
    """Return the document class list with the ``dark`` class added or removed."""
    if dark:
        if "dark" in classes:
            return classes
        return classes + " dark"
    return " ".join(name for name in classes.split() if name != "dark")


def theme_button_label(dark: bool) -> str:
    """Label of the button that switches to the other theme."""
    return "☀️ Light" if dark else "🌙 Dark"


class LoginForm:
    """The login form: a username field and a submit button."""

    def __init__(self) -> None:
        self.username = ""

    def set_input(self, value: str) -> None:
        """Replace the text in the username field."""
        self.username = value

    def can_submit(self) -> bool:
        """The button is enabled only when a username has been typed."""
        return len(self.username) >= 1

    def submit(self, user: User) -> Route:
        """Store the typed name on ``user`` and return the route to go to next."""
        if not self.can_submit():
            raise ValueError("a username is required")
        user.username = self.username
        return Route.CHAT


def about_text() -> str:
    """The text of the About page."""
    return f"{_ABOUT_TITLE}\n\n{_ABOUT_BODY}\n{_ABOUT_LINK}"


async def _run_chat(username: str, url: str) -> None:
    bus = EventBus()
    service = WebsocketService(url, bus)
    chat = Chat(username, service.send, bus)
    printed = 0
    shown_users: list[str] = []

    def show(_payload: str) -> None:
        nonlocal printed, shown_users
        names = [user.name for user in chat.users]
        if names != shown_users:
            shown_users = names
            print("Users: " + ", ".join(names), flush=True)
        for message in chat.messages[printed:]:
            print(f"{message.sender}: {message.message}", flush=True)
        printed = len(chat.messages)

    bus.connect(show)
    loop = asyncio.get_running_loop()

    def read_stdin() -> None:
        try:
            for line in sys.stdin:
                loop.call_soon_threadsafe(chat.submit_message, line.rstrip("\n"))
            asyncio.run_coroutine_threadsafe(service.close(), loop)
        except RuntimeError:
            pass  # the event loop has already finished

    threading.Thread(target=read_stdin, daemon=True).start()
    await service.run()


def main(argv: Sequence[str] | None = None) -> int:
    """Log in and chat from the terminal; lines typed are sent to the server."""
    parser = argparse.ArgumentParser(prog="yewchat", description="Terminal chat client.")
    parser.add_argument("--url", default=DEFAULT_URL, help="chat server websocket URL")
    parser.add_argument("--username", help="name to log in with")
    parser.add_argument("--about", action="store_true", help="show the About page")
    args = parser.parse_args(argv)

    if args.about:
        print(about_text())
        return 0

    user = User()
    form = LoginForm()
    if args.username is not None:
        form.set_input(args.username)
    while not form.can_submit():
        try:
            form.set_input(input("Username: ").strip())
        except EOFError:
            return 1
    form.submit(user)

    try:
        asyncio.run(_run_chat(user.username, args.url))
    except OSError as exc:
        print(f"yewchat: cannot connect to {args.url}: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0