"""The application: owns the window and layer stack and runs the main loop."""

from __future__ import annotations

import time
from typing import Callable, ClassVar, Optional

from hazel import log
from hazel.events import Event, EventDispatcher, WindowCloseEvent
from hazel.layer import Layer, LayerStack
from hazel.timestep import Timestep
from hazel.window import Window, create_window


class Application:
    """The single running application."""

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(self, window: Optional[Window] = None) -> None:
        if Application._instance is not None:
            raise RuntimeError("Application already exists")
        Application._instance = self
        try:
            self._window = window if window is not None else create_window()
        except BaseException:
            Application._instance = None
            raise
        self._window.set_event_callback(self.on_event)
        self._window.set_vsync(False)
        self._layer_stack = LayerStack()
        self._running = True
        self._start = time.perf_counter()
        self._last_frame_time = 0.0

    @classmethod
    def get(cls) -> "Application":
        if Application._instance is None:
            raise RuntimeError("no application exists")
        return Application._instance

    @property
    def window(self) -> Window:
        return self._window

    @property
    def layer_stack(self) -> LayerStack:
        return self._layer_stack

    @property
    def running(self) -> bool:
        return self._running

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_closed)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)

    def push_overlay(self, overlay: Layer) -> None:
        self._layer_stack.push_overlay(overlay)

    def run(self) -> None:
        while self._running:
            now = time.perf_counter() - self._start
            timestep = Timestep(now - self._last_frame_time)
            self._last_frame_time = now
            layers = list(self._layer_stack)
            for layer in layers:
                layer.on_update(timestep)
            for layer in layers:
                layer.on_imgui_render()
            self._window.on_update()

    def close(self) -> None:
        """Stop the loop, close the window and release the application slot."""
        self._running = False
        closer = getattr(self._window, "close", None)
        if callable(closer):
            closer()
        if Application._instance is self:
            Application._instance = None

    def _on_window_closed(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True


def run_application(factory: Callable[[], Application]) -> None:
    """Set up logging, build the application with ``factory`` and run it."""
    log.init()
    log.core_logger().warning("Initialized Log!")
    log.client_logger().info("Hello Var=%s", 5)
    app = factory()
    try:
        app.run()
    finally:
        app.close()