from hazel.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.keycodes import Key, MouseButton
from hazel.window import WindowProps, _EventBridge, _key_code


def make_bridge():
    bridge = _EventBridge(1280, 720)
    received = []
    bridge.callback = received.append
    return bridge, received


def test_window_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Hazel Engine", 1280, 720)


def test_letter_and_special_keys():
    assert _key_code(ord("a")) == Key.A
    assert _key_code(ord("z")) == Key.Z
    assert _key_code(0xFF1B) == Key.ESCAPE
    assert _key_code(ord("5")) == Key.D5


def test_key_press_and_release_track_state():
    bridge, received = make_bridge()
    bridge.on_key_press(ord("a"), 0)
    assert Key.A in bridge.input.keys
    assert received == [KeyPressedEvent(Key.A, 0)]
    bridge.on_key_release(ord("a"), 0)
    assert Key.A not in bridge.input.keys
    assert received[-1] == KeyReleasedEvent(Key.A)


def test_text_emits_typed_events():
    bridge, received = make_bridge()
    bridge.on_text("hi")
    assert received == [KeyTypedEvent(ord("h")), KeyTypedEvent(ord("i"))]


def test_mouse_buttons_and_scroll():
    bridge, received = make_bridge()
    bridge.on_mouse_press(0, 0, 1, 0)
    assert MouseButton.LEFT in bridge.input.buttons
    assert received[0] == MouseButtonPressedEvent(MouseButton.LEFT)
    bridge.on_mouse_scroll(0, 0, 1.5, -2.0)
    assert received[1] == MouseScrolledEvent(1.5, -2.0)


def test_mouse_motion_flips_y():
    bridge, received = make_bridge()
    bridge.on_mouse_motion(10, 700, 0, 0)
    assert bridge.input.mouse_position == (10.0, 20.0)
    assert received == [MouseMovedEvent(10.0, 20.0)]


def test_resize_and_close():
    bridge, received = make_bridge()
    bridge.on_resize(640, 480)
    assert (bridge.width, bridge.height) == (640, 480)
    assert bridge.on_close() is True
    assert received == [WindowResizeEvent(640, 480), WindowCloseEvent()]