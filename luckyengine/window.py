"""A window that turns queued window-system messages into engine events."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Callable

from luckyengine import log
from luckyengine.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)

EventCallback = Callable[[Event], None]

WHEEL_DELTA = 120


class Message(enum.IntEnum):
    """Window-system message codes understood by :class:`Window`."""

    SIZE = 0x0005
    CLOSE = 0x0010
    QUIT = 0x0012
    KEYDOWN = 0x0100
    KEYUP = 0x0101
    MOUSEMOVE = 0x0200
    LBUTTONDOWN = 0x0201
    LBUTTONUP = 0x0202
    RBUTTONDOWN = 0x0204
    RBUTTONUP = 0x0205
    MBUTTONDOWN = 0x0207
    MBUTTONUP = 0x0208
    MOUSEWHEEL = 0x020A


_BUTTON_PRESSES = {Message.LBUTTONDOWN, Message.MBUTTONDOWN, Message.RBUTTONDOWN}
_BUTTON_RELEASES = {Message.LBUTTONUP, Message.MBUTTONUP, Message.RBUTTONUP}


def _core_logger() -> log.Logger:
    try:
        return log.get_core_logger()
    except RuntimeError:
        log.init()
        return log.get_core_logger()


def _low_word(value: int) -> int:
    return value & 0xFFFF


def _high_word(value: int) -> int:
    return (value >> 16) & 0xFFFF


def _signed16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


@dataclass
class WindowProps:
    """Title and size a window is created with."""

    title: str = "LuckyEngine"
    width: int = 1280
    height: int = 720


class RenderContext:
    """Double-buffered drawing context bound to a window."""

    def __init__(self, window_handle: object) -> None:
        if window_handle is None:
            raise ValueError("Window handle is null!")
        self.window_handle = window_handle
        self.batching = False
        self.frames_presented = 0

    def init(self) -> None:
        """Start drawing into the back buffer."""
        self.batching = True

    def swap_buffers(self) -> None:
        """Present the back buffer."""
        self.frames_presented += 1

    def end(self) -> None:
        """Stop drawing into the back buffer."""
        self.batching = False


class Window:
    """A window fed by a message queue; messages become events on update."""

    def __init__(self, props: WindowProps | None = None) -> None:
        props = props if props is not None else WindowProps()
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._event_callback: EventCallback | None = None
        self._queue: deque[tuple[int, int, int]] = deque()
        self._open = True

        _core_logger().info(
            "Creating window " + props.title + " (", props.width, ",", props.height, ")"
        )

        self.context = RenderContext(self)
        self.context.init()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_open(self) -> bool:
        return self._open

    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event from this window."""
        self._event_callback = callback

    def post_message(self, message: int, wparam: int = 0, lparam: int = 0) -> None:
        """Queue a message to be handled on the next update."""
        self._queue.append((int(message), wparam, lparam))

    def _emit(self, event: Event) -> None:
        if self._event_callback is None:
            raise RuntimeError("no event callback set on the window")
        self._event_callback(event)

    def process_message(self, message: int, wparam: int = 0, lparam: int = 0) -> None:
        """Translate one message into an event and pass it to the callback."""
        if message == Message.CLOSE:
            self._emit(WindowCloseEvent())
        elif message == Message.SIZE:
            width, height = _low_word(lparam), _high_word(lparam)
            self._width, self._height = width, height
            self._emit(WindowResizeEvent(width, height))
        elif message == Message.KEYDOWN:
            self._emit(KeyPressedEvent(int(wparam), False))
        elif message == Message.KEYUP:
            self._emit(KeyReleasedEvent(int(wparam)))
        elif message in _BUTTON_PRESSES:
            self._emit(MouseButtonPressedEvent(int(message)))
        elif message in _BUTTON_RELEASES:
            self._emit(MouseButtonReleasedEvent(int(message)))
        elif message == Message.MOUSEWHEEL:
            delta = _signed16(_high_word(wparam))
            y_offset = int(delta / WHEEL_DELTA)
            self._emit(MouseScrolledEvent(0, float(y_offset)))
        elif message == Message.MOUSEMOVE:
            x = _signed16(_low_word(lparam))
            y = _signed16(_high_word(lparam))
            self._emit(MouseMovedEvent(float(x), float(y)))

    def on_update(self) -> None:
        """Handle all queued messages, then present the frame."""
        if not self._open:
            return
        while self._queue:
            message, wparam, lparam = self._queue.popleft()
            if message == Message.QUIT:
                self.shutdown()
                return
            self.process_message(message, wparam, lparam)
        self.context.swap_buffers()

    def shutdown(self) -> None:
        """Close the window; later calls do nothing."""
        if not self._open:
            return
        self._open = False
        self.context.end()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()