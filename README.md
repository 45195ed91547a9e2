# luckyengine

A small application framework built from typed events, a stack of layers,
a console logger, and a window that turns queued window-system messages
into events.

## Installation

```
pip install .
```

## Modules

- `luckyengine.events` – the event classes and `EventDispatcher`.
- `luckyengine.layer` – `Layer` and `LayerStack`.
- `luckyengine.window` – `Window`, `WindowProps`, `RenderContext` and the
  `Message` codes a window understands.
- `luckyengine.application` – `Application`, which ties a window and a layer
  stack together and runs the main loop.
- `luckyengine.keycodes` – `KeyCode`, an `IntEnum` of keyboard key codes
  using the host window system's virtual-key numbering.
- `luckyengine.log` – `Logger`, `Level`, `format_record` and the two shared
  loggers.

## Events

Every event has a class-level `event_type` (an `EventType`), a `name`, and
`category_flags` (an `EventCategory` flag set), plus an instance flag
`handled`. `is_in_category(category)` tests the flags. `str(event)` gives a
short description, e.g. `WindowResizeEvent: 800, 600` or
`KeyPressedEvent: 65 ( repeat = 0)`.

| Class | Data | Categories |
| --- | --- | --- |
| `WindowResizeEvent` | `width`, `height` | `APPLICATION` |
| `WindowCloseEvent`, `AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent` | – | `APPLICATION` |
| `KeyPressedEvent` | `key_code`, `is_repeat` | `KEYBOARD`, `INPUT` |
| `KeyReleasedEvent`, `KeyTypedEvent` | `key_code` | `KEYBOARD`, `INPUT` |
| `MouseMovedEvent` | `x`, `y` | `MOUSE`, `INPUT` |
| `MouseScrolledEvent` | `x_offset`, `y_offset` | `MOUSE`, `INPUT` |
| `MouseButtonPressedEvent`, `MouseButtonReleasedEvent` | `button` | `MOUSE`, `INPUT`, `MOUSE_BUTTON` |

`KeyEvent` and `MouseButtonEvent` are base classes; instantiating them
directly raises `TypeError`.

`EventDispatcher(event).dispatch(EventClass, handler)` calls `handler(event)`
only when the event's type matches `EventClass`, stores the handler's result
in `event.handled`, and returns whether the handler was called.

## Layers

Subclass `Layer` and override `on_attach`, `on_detach`, `on_update`,
`on_imgui_render` and `on_event`. The default hooks keep simple bookkeeping
(`attached`, `update_count`, `render_count`, `last_event`); call `super()` in
an override if you want it kept.

A `LayerStack` keeps ordinary layers below overlays: `push_layer` inserts
above the other ordinary layers but below every overlay, `push_overlay` puts
a layer on top. Both call `on_attach`. `pop_layer` and `pop_overlay` call
`on_detach` and remove the layer, and do nothing if it is not in the stack.
Iterating goes bottom to top, `reversed()` top to bottom, and `len()` counts
the layers. `close()` (also run on leaving a `with` block) detaches every
layer and empties the stack.

## Window

A `Window` is created from `WindowProps` (default title `"LuckyEngine"`,
1280×720) and has `width`, `height`, `title`, `is_open` and a
`RenderContext` in `context`. Messages are queued with
`post_message(message, wparam, lparam)` and handled by `on_update()`, which
turns each one into an event for the callback set with
`set_event_callback`, then presents a frame (`context.frames_presented`
counts them). `process_message` handles a single message immediately.

- `Message.SIZE` – width in the low 16 bits of `lparam`, height in the high
  16 bits; updates the window size and emits `WindowResizeEvent`.
- `Message.CLOSE` – emits `WindowCloseEvent`.
- `Message.KEYDOWN` / `KEYUP` – key code in `wparam`.
- `Message.LBUTTONDOWN`, `MBUTTONDOWN`, `RBUTTONDOWN` and the matching `UP`
  messages – the message code becomes the event's `button`.
- `Message.MOUSEWHEEL` – signed wheel delta in the high 16 bits of `wparam`,
  divided by 120 to give the `y_offset`.
- `Message.MOUSEMOVE` – signed x and y in the low and high 16 bits of
  `lparam`.
- `Message.QUIT` – shuts the window down; later updates do nothing.

A message arriving with no callback set raises `RuntimeError`.

## Application

Only one `Application` may exist at a time; a second raises `RuntimeError`.
`Application.get_instance()` returns the current one. The application owns
a `Window` (`app.window`) and a layer stack (`push_layer`, `push_overlay`,
`pop_layer`, `pop_overlay`, `layers`).

Each event from the window is logged by the core logger and then:

- `WindowCloseEvent` stops the main loop and marks the event handled.
- `WindowResizeEvent` with a zero width or height marks the application
  `minimized`; a non-zero size clears it.
- Unless handled, the event is passed to the layers from the top down,
  stopping as soon as a layer marks it handled.

`run()` loops until `close()` is called or the window is closed: each frame
updates every layer (skipped while minimized) and then the window.
`dispose()`, also run on leaving a `with` block, shuts the window, detaches
the layers and releases the instance.

```python
from luckyengine.application import Application
from luckyengine.events import EventDispatcher, KeyPressedEvent
from luckyengine.keycodes import KeyCode
from luckyengine.layer import Layer
from luckyengine.window import Message


class GameLayer(Layer):
    def __init__(self):
        super().__init__("Game")

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        if event.key_code == KeyCode.ESCAPE:
            Application.get_instance().close()
            return True
        return False


with Application() as app:
    app.push_layer(GameLayer())
    app.window.post_message(Message.KEYDOWN, KeyCode.ESCAPE)
    app.run()  # handles the key press, then stops
```

## Logging

```python
from luckyengine import log

log.init()
log.get_client_logger().info("Loaded ", 3, " levels")
```

`init()` creates the core logger (header `Lucky`) and the client logger
(header `APP`); `get_core_logger()` and `get_client_logger()` raise
`RuntimeError` before `init()`. A `Logger(header, stream=None)` joins its
arguments into one message (booleans as `0`/`1`) and writes
`[HH:MM:SS] header: message` via `format_record`, to `stream` or else to
the current `sys.stdout`. Records are coloured by `Level` when the stream is
a terminal.

## What it does not do

The window is not a real on-screen window: nothing is drawn and no messages
come from the operating system. Messages reach it only through
`post_message` or `process_message`, and `RenderContext` only tracks whether
it is batching and how many frames were presented. There is no polling of
keyboard or mouse state and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```