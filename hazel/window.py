"""Application windows and the translation of native input into engine events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from hazel import log
from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.keycodes import Key, MouseButton

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


@dataclass
class InputState:
    """Keys and mouse buttons currently held, and the cursor position."""

    keys: set[int] = field(default_factory=set)
    buttons: set[int] = field(default_factory=set)
    mouse_position: tuple[float, float] = (0.0, 0.0)


# Native key symbols (X11 keysym values) mapped to engine key codes.
_SPECIAL_KEYS: dict[int, int] = {
    0xFF1B: Key.ESCAPE,
    0xFF0D: Key.ENTER,
    0xFF09: Key.TAB,
    0xFF08: Key.BACKSPACE,
    0xFF63: Key.INSERT,
    0xFFFF: Key.DELETE,
    0xFF53: Key.RIGHT,
    0xFF51: Key.LEFT,
    0xFF54: Key.DOWN,
    0xFF52: Key.UP,
    0xFF55: Key.PAGE_UP,
    0xFF56: Key.PAGE_DOWN,
    0xFF50: Key.HOME,
    0xFF57: Key.END,
    0xFFE5: Key.CAPS_LOCK,
    0xFF14: Key.SCROLL_LOCK,
    0xFF7F: Key.NUM_LOCK,
    0xFF61: Key.PRINT_SCREEN,
    0xFF13: Key.PAUSE,
    0xFFE1: Key.LEFT_SHIFT,
    0xFFE3: Key.LEFT_CONTROL,
    0xFFE9: Key.LEFT_ALT,
    0xFFEB: Key.LEFT_SUPER,
    0xFFE2: Key.RIGHT_SHIFT,
    0xFFE4: Key.RIGHT_CONTROL,
    0xFFEA: Key.RIGHT_ALT,
    0xFFEC: Key.RIGHT_SUPER,
    0xFF67: Key.MENU,
    0xFFAE: Key.KP_DECIMAL,
    0xFFAF: Key.KP_DIVIDE,
    0xFFAA: Key.KP_MULTIPLY,
    0xFFAD: Key.KP_SUBTRACT,
    0xFFAB: Key.KP_ADD,
    0xFF8D: Key.KP_ENTER,
    0xFFBD: Key.KP_EQUAL,
}
_SPECIAL_KEYS.update({0xFFBE + n: Key.F1 + n for n in range(24)})
_SPECIAL_KEYS.update({0xFFB0 + n: Key.KP_0 + n for n in range(10)})

_MOUSE_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 4: MouseButton.RIGHT}


def _key_code(symbol: int) -> int:
    if ord("a") <= symbol <= ord("z"):
        return symbol - ord("a") + Key.A
    return int(_SPECIAL_KEYS.get(symbol, symbol))


class _EventBridge:
    """Receives native window events, tracks input state and emits engine events."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.callback: Optional[EventCallback] = None
        self.input = InputState()

    def _emit(self, event: Event) -> None:
        if self.callback is not None:
            self.callback(event)

    def on_resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self._emit(WindowResizeEvent(width, height))

    def on_close(self) -> bool:
        self._emit(WindowCloseEvent())
        return True

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        code = _key_code(symbol)
        self.input.keys.add(code)
        self._emit(KeyPressedEvent(code, 0))

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        code = _key_code(symbol)
        self.input.keys.discard(code)
        self._emit(KeyReleasedEvent(code))

    def on_text(self, text: str) -> None:
        for char in text:
            self._emit(KeyTypedEvent(ord(char)))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        code = int(_MOUSE_BUTTONS.get(button, button))
        self.input.buttons.add(code)
        self._emit(MouseButtonPressedEvent(code))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        code = int(_MOUSE_BUTTONS.get(button, button))
        self.input.buttons.discard(code)
        self._emit(MouseButtonReleasedEvent(code))

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._emit(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        position = (float(x), float(self.height - y))
        self.input.mouse_position = position
        self._emit(MouseMovedEvent(*position))

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
        self.on_mouse_motion(x, y, dx, dy)


class Window(ABC):
    """A window that produces engine events and presents frames."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending native events and present the frame."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event of this window."""

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None:
        """Turn vertical sync on or off."""

    @abstractmethod
    def is_vsync(self) -> bool:
        """Whether vertical sync is on."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Client area width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Client area height in pixels."""

    @property
    @abstractmethod
    def native_window(self) -> Any:
        """The underlying platform window."""

    @property
    @abstractmethod
    def input_state(self) -> InputState:
        """Current keyboard and mouse state."""


class DesktopWindow(Window):
    """A desktop window with an OpenGL context."""

    def __init__(self, props: WindowProps) -> None:
        import pyglet

        from hazel.opengl import OpenGLContext

        self._title = props.title
        self._vsync = True
        try:
            log.core_logger().info(
                "Creating window %s (%s, %s)", props.title, props.width, props.height
            )
        except RuntimeError:
            pass
        self._bridge = _EventBridge(props.width, props.height)
        self._native = pyglet.window.Window(
            width=props.width, height=props.height, caption=props.title, resizable=True
        )
        self._context = OpenGLContext(self._native)
        self._context.init()
        self.set_vsync(True)
        bridge = self._bridge
        self._native.push_handlers(
            on_resize=bridge.on_resize,
            on_close=bridge.on_close,
            on_key_press=bridge.on_key_press,
            on_key_release=bridge.on_key_release,
            on_text=bridge.on_text,
            on_mouse_press=bridge.on_mouse_press,
            on_mouse_release=bridge.on_mouse_release,
            on_mouse_scroll=bridge.on_mouse_scroll,
            on_mouse_motion=bridge.on_mouse_motion,
            on_mouse_drag=bridge.on_mouse_drag,
        )

    @property
    def title(self) -> str:
        return self._title

    @property
    def width(self) -> int:
        return self._bridge.width

    @property
    def height(self) -> int:
        return self._bridge.height

    @property
    def native_window(self) -> Any:
        return self._native

    @property
    def input_state(self) -> InputState:
        return self._bridge.input

    def on_update(self) -> None:
        self._native.dispatch_events()
        self._context.swap_buffers()

    def set_event_callback(self, callback: EventCallback) -> None:
        self._bridge.callback = callback

    def set_vsync(self, enabled: bool) -> None:
        self._native.set_vsync(bool(enabled))
        self._vsync = bool(enabled)

    def is_vsync(self) -> bool:
        return self._vsync

    def close(self) -> None:
        """Destroy the native window."""
        self._native.close()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create a desktop window with the given (or default) properties."""
    return DesktopWindow(props if props is not None else WindowProps())