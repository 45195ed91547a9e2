"""Event types, categories and a dispatcher for routing events to handlers."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


def _num(value: float) -> str:
    """Format a number the way a default text stream would."""
    return format(value, "g")


class EventType(enum.Enum):
    """Kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(enum.IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base class of all events."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    def is_in_category(self, category: EventCategory) -> bool:
        """Return whether this event belongs to ``category``."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler when the event's type matches."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        if self.event.event_type != event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True


class _ApplicationEvent(Event):
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


class WindowResizeEvent(_ApplicationEvent):
    """The window was resized to ``width`` by ``height``."""

    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(_ApplicationEvent):
    """The window was asked to close."""

    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"


class AppTickEvent(_ApplicationEvent):
    """Application clock tick."""

    event_type = EventType.APP_TICK
    name = "AppTick"


class AppUpdateEvent(_ApplicationEvent):
    """Per-frame application update."""

    event_type = EventType.APP_UPDATE
    name = "AppUpdate"


class AppRenderEvent(_ApplicationEvent):
    """Application render pass."""

    event_type = EventType.APP_RENDER
    name = "AppRender"


class KeyEvent(Event):
    """Base class of keyboard events."""

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        if type(self) is KeyEvent:
            raise TypeError("KeyEvent is abstract; use a concrete key event")
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    """A key was pressed."""

    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, is_repeat: bool = False) -> None:
        super().__init__(key_code)
        self.is_repeat = is_repeat

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ( repeat = {int(self.is_repeat)})"


class KeyReleasedEvent(KeyEvent):
    """A key was released."""

    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class KeyTypedEvent(KeyEvent):
    """A character was typed."""

    event_type = EventType.KEY_TYPED
    name = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


class MouseMovedEvent(Event):
    """The mouse moved to ``(x, y)``."""

    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    """The mouse wheel scrolled by the given offsets."""

    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = float(x_offset)
        self.y_offset = float(y_offset)

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base class of mouse button events."""

    category_flags: ClassVar[EventCategory] = (
        EventCategory.MOUSE | EventCategory.INPUT | EventCategory.MOUSE_BUTTON
    )

    def __init__(self, button: int) -> None:
        if type(self) is MouseButtonEvent:
            raise TypeError("MouseButtonEvent is abstract; use a concrete button event")
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    """A mouse button was pressed."""

    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    """A mouse button was released."""

    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"