import pytest

from hazel.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
    bit,
)


def test_bit_doubles_per_position():
    assert bit(0) == EventCategory.APPLICATION
    assert all(bit(n + 1) == 2 * bit(n) for n in range(10))


def test_categories_are_distinct_bits():
    flags = [c for c in EventCategory if c is not EventCategory.NONE]
    combined = 0
    for flag in flags:
        assert combined & flag == 0
        combined |= flag
    assert EventCategory.MOUSE_BUTTON == bit(4)


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.width == 1280 and event.height == 720
    assert event.event_type is EventType.WINDOW_RESIZE


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
    assert event.is_in_category(EventCategory.APPLICATION)
    assert not event.is_in_category(EventCategory.INPUT)


def test_key_event_strings():
    assert str(KeyPressedEvent(65, 1)) == "KeyPressedEvent: 65 (1 repeats)"
    assert str(KeyReleasedEvent(65)) == "KeyPressedEvent: 65"
    assert str(KeyTypedEvent(65)) == "KeyTypedEvent: 65"


def test_key_event_categories():
    event = KeyPressedEvent(32, 0)
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)


def test_mouse_event_strings():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"
    assert str(MouseScrolledEvent(0.0, -1.0)) == "MouseScrolledEvent: 0, -1"
    assert str(MouseButtonPressedEvent(2)) == "MouseButtonPressedEvent: 2"
    assert str(MouseButtonReleasedEvent(2)) == "MouseButtonReleasedEvent: 2"


def test_mouse_button_not_in_mouse_button_category():
    event = MouseButtonPressedEvent(0)
    assert event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.MOUSE_BUTTON)


def test_dispatch_matching_type_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_skips_handler():
    event = KeyTypedEvent(10)
    calls = []
    result = EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: calls.append(e) or True)
    assert result is False
    assert calls == []
    assert event.handled is False


def test_dispatch_overwrites_handled_with_result():
    event = WindowResizeEvent(1, 2)
    event.handled = True
    assert EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: False)
    assert event.handled is False


def test_handled_not_part_of_equality():
    a = KeyPressedEvent(5, 0)
    b = KeyPressedEvent(5, 0)
    a.handled = True
    assert a == b