"""Polling access to keyboard and mouse state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional

if TYPE_CHECKING:
    from hazel.window import Window


class Input(ABC):
    """Static queries answered by the installed input implementation."""

    _instance: ClassVar[Optional["Input"]] = None

    @classmethod
    def set_instance(cls, instance: Optional["Input"]) -> None:
        Input._instance = instance

    @classmethod
    def _get(cls) -> "Input":
        if Input._instance is None:
            Input._instance = WindowInput()
        return Input._instance

    @abstractmethod
    def key_pressed(self, keycode: int) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def mouse_button_pressed(self, button: int) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """Cursor position in window coordinates."""

    @classmethod
    def is_key_pressed(cls, keycode: int) -> bool:
        return cls._get().key_pressed(int(keycode))

    @classmethod
    def is_mouse_button_pressed(cls, button: int) -> bool:
        return cls._get().mouse_button_pressed(int(button))

    @classmethod
    def get_mouse_position(cls) -> tuple[float, float]:
        return cls._get().mouse_position()

    @classmethod
    def get_mouse_x(cls) -> float:
        return cls.get_mouse_position()[0]

    @classmethod
    def get_mouse_y(cls) -> float:
        return cls.get_mouse_position()[1]


class WindowInput(Input):
    """Input read from a window, by default the running application's."""

    def __init__(self, window: Optional["Window"] = None) -> None:
        self._window = window

    def _target(self) -> "Window":
        if self._window is not None:
            return self._window
        from hazel.application import Application

        return Application.get().window

    def key_pressed(self, keycode: int) -> bool:
        return int(keycode) in self._target().input_state.keys

    def mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._target().input_state.buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._target().input_state.mouse_position