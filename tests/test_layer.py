import pytest

from luckyengine.events import KeyPressedEvent
from luckyengine.layer import Layer, LayerStack


class RecordingLayer(Layer):
    def __init__(self, name, journal):
        super().__init__(name)
        self.journal = journal

    def on_attach(self):
        self.journal.append(("attach", self.name))

    def on_detach(self):
        self.journal.append(("detach", self.name))


@pytest.fixture
def journal():
    return []


def names(stack):
    return [layer.name for layer in stack]


def test_layer_default_name():
    assert Layer().name == "Layer"
    assert Layer("Game").name == "Game"


def test_base_layer_hooks_leave_event_unhandled():
    layer = Layer()
    event = KeyPressedEvent(65)
    layer.on_attach()
    layer.on_update()
    layer.on_imgui_render()
    layer.on_event(event)
    layer.on_detach()
    assert event.handled is False


def test_layers_stay_below_overlays(journal):
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("o", journal))
    stack.push_layer(RecordingLayer("b", journal))
    stack.push_overlay(RecordingLayer("p", journal))
    assert names(stack) == ["a", "b", "o", "p"]
    assert len(stack) == 4


def test_push_attaches(journal):
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("o", journal))
    assert journal == [("attach", "a"), ("attach", "o")]


def test_reversed_is_top_down(journal):
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("o", journal))
    stack.push_layer(RecordingLayer("b", journal))
    assert [layer.name for layer in reversed(stack)] == ["o", "b", "a"]


def test_pop_layer_detaches_and_keeps_insert_point(journal):
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    b = RecordingLayer("b", journal)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(RecordingLayer("o", journal))
    stack.pop_layer(b)
    assert ("detach", "b") in journal
    assert names(stack) == ["a", "o"]
    stack.push_layer(RecordingLayer("c", journal))
    assert names(stack) == ["a", "c", "o"]


def test_pop_overlay_detaches(journal):
    stack = LayerStack()
    o = RecordingLayer("o", journal)
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(o)
    stack.pop_overlay(o)
    assert journal[-1] == ("detach", "o")
    assert names(stack) == ["a"]
    stack.push_layer(RecordingLayer("b", journal))
    assert names(stack) == ["a", "b"]


def test_pop_missing_is_noop(journal):
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stranger = RecordingLayer("x", journal)
    stack.pop_layer(stranger)
    stack.pop_overlay(stranger)
    assert names(stack) == ["a"]
    assert ("detach", "x") not in journal


def test_pop_uses_identity_not_name(journal):
    stack = LayerStack()
    first = RecordingLayer("same", journal)
    second = RecordingLayer("same", journal)
    stack.push_layer(first)
    stack.push_layer(second)
    stack.pop_layer(second)
    assert list(stack) == [first]


def test_close_detaches_all_in_order(journal):
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("o", journal))
    stack.push_layer(RecordingLayer("b", journal))
    journal.clear()
    stack.close()
    assert journal == [("detach", "a"), ("detach", "b"), ("detach", "o")]
    assert len(stack) == 0


def test_context_manager_closes(journal):
    with LayerStack() as stack:
        stack.push_layer(RecordingLayer("a", journal))
    assert journal[-1] == ("detach", "a")
    assert len(stack) == 0


def test_iteration_is_a_snapshot(journal):
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    stack.push_layer(a)
    seen = []
    for layer in stack:
        seen.append(layer.name)
        stack.push_overlay(RecordingLayer("late", journal))
    assert seen == ["a"]
    assert len(stack) == 2