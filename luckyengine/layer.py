"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from luckyengine.events import Event


class Layer:
    """A unit of per-frame logic and event handling; override what you need.

    The default hooks keep simple bookkeeping: whether the layer is attached
    to a stack, how many frames it has been updated and rendered for, and
    the last event it received.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.update_count = 0
        self.render_count = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Called when the layer is added to a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame."""
        self.update_count += 1

    def on_imgui_render(self) -> None:
        """Called when the layer should draw its debug interface."""
        self.render_count += 1

    def on_event(self, event: Event) -> None:
        """Called with each event that reaches this layer."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers below overlays, ordered from bottom to top.

    Ordinary layers are inserted above the other ordinary layers but below
    every overlay; overlays always go on top.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Insert an ordinary layer above the others and attach it."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Put an overlay on top of the stack and attach it."""
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove an ordinary layer; does nothing if absent."""
        index = self._find(layer)
        if index is not None:
            layer.on_detach()
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove an overlay; does nothing if absent."""
        index = self._find(overlay)
        if index is not None:
            overlay.on_detach()
            del self._layers[index]

    def close(self) -> None:
        """Detach every layer, bottom to top, and empty the stack."""
        layers, self._layers = self._layers, []
        self._insert_index = 0
        for layer in layers:
            layer.on_detach()

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)