"""Event types, categories and a type-based dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Callable, ClassVar, TypeVar


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    return 1 << x


class EventType(IntEnum):
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


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = bit(0)
    INPUT = bit(1)
    KEYBOARD = bit(2)
    MOUSE = bit(3)
    MOUSE_BUTTON = bit(4)


@dataclass
class Event:
    """Base class of all events; ``handled`` stops further propagation."""

    handled: bool = field(default=False, init=False, repr=False, compare=False)

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "Event"
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes an event to a handler when the event is of a given type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_type: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_type``; its result sets ``handled``."""
        if self._event.event_type == event_type.event_type:
            self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
            return True
        return False


def _num(value: float) -> str:
    return f"{value:g}"


# --- application events ---------------------------------------------------


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# --- keyboard events ------------------------------------------------------


@dataclass
class KeyEvent(Event):
    key_code: int

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int

    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


# --- mouse events ---------------------------------------------------------


@dataclass
class MouseMovedEvent(Event):
    x: float
    y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    x_offset: float
    y_offset: float

    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    button: int

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"