"""WebSocket chat client with a user list, avatars, an event bus and a terminal command."""

__version__ = "0.1.0"
__all__ = ["__version__"]