"""A layered application framework with typed events, console logging and a message-driven window."""

__version__ = "0.1.0"
__all__ = ["application", "events", "keycodes", "layer", "log", "window"]