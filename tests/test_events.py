import pytest

from luckyengine.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


@pytest.mark.parametrize(
    "bit, category",
    [
        (1, EventCategory.APPLICATION),
        (2, EventCategory.INPUT),
        (4, EventCategory.KEYBOARD),
        (8, EventCategory.MOUSE),
        (16, EventCategory.MOUSE_BUTTON),
    ],
)
def test_category_bits_match_source(bit, category):
    assert EventCategory(bit) is category


def test_category_bits_select_events():
    assert KeyPressedEvent(1).is_in_category(EventCategory(4))
    assert MouseButtonPressedEvent(1).is_in_category(EventCategory(16))
    assert not WindowCloseEvent().is_in_category(EventCategory(2))


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowCloseEvent(), "WindowClose"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
    ],
)
def test_default_string_is_name(event, name):
    assert str(event) == name
    assert event.name == name
    assert event.is_in_category(EventCategory.APPLICATION)
    assert not event.is_in_category(EventCategory.INPUT)


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert (event.width, event.height) == (1280, 720)
    assert event.event_type is EventType.WINDOW_RESIZE


def test_key_pressed_string_shows_repeat_as_digit():
    assert str(KeyPressedEvent(65)) == "KeyPressedEvent: 65 ( repeat = 0)"
    assert str(KeyPressedEvent(65, True)) == "KeyPressedEvent: 65 ( repeat = 1)"


def test_key_events_categories():
    for event in (KeyPressedEvent(1), KeyReleasedEvent(1), KeyTypedEvent(1)):
        assert event.is_in_category(EventCategory.KEYBOARD)
        assert event.is_in_category(EventCategory.INPUT)
        assert not event.is_in_category(EventCategory.MOUSE)
        assert event.key_code == 1


def test_key_released_and_typed_strings():
    assert str(KeyReleasedEvent(27)) == "KeyReleasedEvent: 27"
    assert str(KeyTypedEvent(27)) == "KeyTypedEvent: 27"
    assert KeyTypedEvent(27).name == "KeyTyped"


def test_mouse_moved_formats_floats_like_stream():
    event = MouseMovedEvent(100, 2.5)
    assert str(event) == "MouseMovedEvent: 100, 2.5"
    assert (event.x, event.y) == (100.0, 2.5)


def test_mouse_scrolled():
    event = MouseScrolledEvent(0, -1)
    assert str(event) == "MouseScrolledEvent: 0, -1"
    assert event.y_offset == -1.0
    assert event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.MOUSE_BUTTON)


def test_mouse_button_events():
    pressed = MouseButtonPressedEvent(513)
    released = MouseButtonReleasedEvent(514)
    assert str(pressed) == "MouseButtonPressedEvent: 513"
    assert str(released) == "MouseButtonReleasedEvent: 514"
    for event in (pressed, released):
        assert event.is_in_category(EventCategory.MOUSE_BUTTON)
        assert event.is_in_category(EventCategory.INPUT)
        assert not event.is_in_category(EventCategory.KEYBOARD)


def test_abstract_bases_refuse_construction():
    with pytest.raises(TypeError):
        KeyEvent(1)
    with pytest.raises(TypeError):
        MouseButtonEvent(1)


def test_event_starts_unhandled():
    assert WindowCloseEvent().handled is False


def test_dispatch_matching_type_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_handler_result_false_leaves_unhandled():
    event = WindowResizeEvent(0, 0)
    assert EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: False) is True
    assert event.handled is False


def test_dispatch_other_type_skips_handler():
    event = KeyPressedEvent(1)
    seen = []
    dispatched = EventDispatcher(event).dispatch(
        WindowCloseEvent, lambda e: seen.append(e) or True
    )
    assert dispatched is False
    assert seen == []
    assert event.handled is False


def test_dispatch_only_first_matching_handler_runs_per_call():
    event = WindowCloseEvent()
    dispatcher = EventDispatcher(event)
    results = [
        dispatcher.dispatch(WindowResizeEvent, lambda e: True),
        dispatcher.dispatch(WindowCloseEvent, lambda e: True),
    ]
    assert results == [False, True]
    assert event.handled is True


def test_event_types_distinct_across_classes():
    events = [
        WindowResizeEvent(1, 1), WindowCloseEvent(), AppTickEvent(),
        AppUpdateEvent(), AppRenderEvent(), KeyPressedEvent(1),
        KeyReleasedEvent(1), KeyTypedEvent(1), MouseMovedEvent(0, 0),
        MouseScrolledEvent(0, 0), MouseButtonPressedEvent(1),
        MouseButtonReleasedEvent(1),
    ]
    types = {event.event_type for event in events}
    assert len(types) == len(events)
    assert EventType.NONE not in types
    assert Event.event_type is EventType.NONE