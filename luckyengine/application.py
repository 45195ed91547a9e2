"""The application: owns the window and the layer stack and runs the main loop."""

from __future__ import annotations

from typing import ClassVar

from luckyengine import log
from luckyengine.events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from luckyengine.layer import Layer, LayerStack
from luckyengine.window import Window, WindowProps


def _core_logger() -> log.Logger:
    try:
        return log.get_core_logger()
    except RuntimeError:
        log.init()
        return log.get_core_logger()


class Application:
    """The single running application; create at most one at a time."""

    _instance: ClassVar[Application | None] = None

    def __init__(self, props: WindowProps | None = None) -> None:
        if Application._instance is not None:
            raise RuntimeError("Application already exists!")
        Application._instance = self

        self._layer_stack = LayerStack()
        self._running = True
        self._minimized = False
        self.window = Window(props if props is not None else WindowProps())
        self.window.set_event_callback(self.on_event)

    @staticmethod
    def get_instance() -> Application:
        """Return the application that currently exists."""
        if Application._instance is None:
            raise RuntimeError("no application exists")
        return Application._instance

    @property
    def running(self) -> bool:
        return self._running

    @property
    def minimized(self) -> bool:
        return self._minimized

    @property
    def layers(self) -> tuple[Layer, ...]:
        """The layers, bottom to top."""
        return tuple(self._layer_stack)

    def push_layer(self, layer: Layer) -> None:
        """Add an ordinary layer."""
        self._layer_stack.push_layer(layer)

    def push_overlay(self, layer: Layer) -> None:
        """Add an overlay on top of everything."""
        self._layer_stack.push_overlay(layer)

    def pop_layer(self, layer: Layer) -> None:
        """Remove an ordinary layer."""
        self._layer_stack.pop_layer(layer)

    def pop_overlay(self, layer: Layer) -> None:
        """Remove an overlay."""
        self._layer_stack.pop_overlay(layer)

    def on_event(self, event: Event) -> None:
        """Handle window events, then pass the event down from the top layer."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resize)

        _core_logger().info(str(event))

        for layer in reversed(self._layer_stack):
            if event.handled:
                break
            layer.on_event(event)

    def run(self) -> None:
        """Update layers and the window until the application is closed."""
        while self._running:
            if not self._minimized:
                for layer in self._layer_stack:
                    layer.on_update()
            self.window.on_update()

    def close(self) -> None:
        """Stop the main loop after the current frame."""
        self._running = False

    def dispose(self) -> None:
        """Shut the window, detach every layer and release the instance."""
        self.window.shutdown()
        self._layer_stack.close()
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def _on_window_resize(self, event: WindowResizeEvent) -> bool:
        if event.width == 0 or event.height == 0:
            self._minimized = True
            return False
        self._minimized = False
        return False