"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from hazel.events import Event
from hazel.timestep import Timestep


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks.

    The base hooks keep simple bookkeeping: whether the layer is attached,
    how much time it has been updated for, and how many UI frames and events
    it has seen.
    """

    def __init__(self, name: str = "Layer") -> None:
        self._name = name
        self._attached = False
        self._elapsed = 0.0
        self._ui_frames = 0
        self._events_received = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def elapsed(self) -> float:
        """Total seconds passed to ``on_update``."""
        return self._elapsed

    @property
    def ui_frames(self) -> int:
        return self._ui_frames

    @property
    def events_received(self) -> int:
        return self._events_received

    def on_attach(self) -> None:
        self._attached = True

    def on_detach(self) -> None:
        self._attached = False

    def on_update(self, ts: Timestep) -> None:
        self._elapsed += float(ts)

    def on_imgui_render(self) -> None:
        self._ui_frames += 1

    def on_event(self, event: Event) -> None:
        self._events_received += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class LayerStack:
    """Layers in front, overlays after them; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        layer.on_attach()
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)
        overlay.on_attach()

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> None:
        index = self._find(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1
            layer.on_detach()

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._find(overlay)
        if index is not None:
            del self._layers[index]
            overlay.on_detach()

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)