"""Renderer front end: graphics API selection, render commands and scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Sequence

import numpy as np

from hazel.buffer import IndexBuffer, VertexBuffer

if TYPE_CHECKING:
    from hazel.camera import OrthographicCamera
    from hazel.shader import Shader


class GraphicsAPI(Enum):
    NONE = 0
    OPENGL = 1


class VertexArray(ABC):
    """A set of vertex buffers together with one index buffer."""

    @abstractmethod
    def bind(self) -> None:
        """Make this vertex array current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any current vertex array."""

    @abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer, binding its layout's attributes."""

    @abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        """Attach the index buffer used for indexed drawing."""

    @property
    @abstractmethod
    def vertex_buffers(self) -> Sequence[VertexBuffer]:
        """The vertex buffers attached so far, in order."""

    @property
    @abstractmethod
    def index_buffer(self) -> IndexBuffer | None:
        """The attached index buffer, if any."""


def create_vertex_array() -> VertexArray:
    """Create a vertex array for the active graphics API."""
    api = Renderer.get_api()
    if api is GraphicsAPI.OPENGL:
        from hazel.opengl import OpenGLVertexArray

        return OpenGLVertexArray()
    if api is GraphicsAPI.NONE:
        raise RuntimeError("RendererAPI::None is currently not supported")
    raise RuntimeError("Unknown renderer API")


class RendererAPI(ABC):
    """Low-level drawing operations of one graphics API."""

    _api: ClassVar[GraphicsAPI] = GraphicsAPI.OPENGL

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used by ``clear``."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the colour and depth buffers."""

    @abstractmethod
    def draw_indexed(self, vertex_array: VertexArray) -> None:
        """Draw triangles from the vertex array's index buffer."""

    @classmethod
    def get_api(cls) -> GraphicsAPI:
        return cls._api


class RenderCommand:
    """Static access to the active ``RendererAPI``."""

    _renderer_api: ClassVar[RendererAPI | None] = None

    @classmethod
    def set_renderer_api(cls, renderer_api: RendererAPI) -> None:
        cls._renderer_api = renderer_api

    @classmethod
    def _api(cls) -> RendererAPI:
        if cls._renderer_api is None:
            from hazel.opengl import OpenGLRendererAPI

            cls._renderer_api = OpenGLRendererAPI()
        return cls._renderer_api

    @classmethod
    def set_clear_color(cls, color: Sequence[float]) -> None:
        cls._api().set_clear_color(color)

    @classmethod
    def clear(cls) -> None:
        cls._api().clear()

    @classmethod
    def draw_indexed(cls, vertex_array: VertexArray) -> None:
        cls._api().draw_indexed(vertex_array)


@dataclass
class _SceneData:
    view_projection_matrix: np.ndarray = field(
        default_factory=lambda: np.identity(4, dtype=np.float32)
    )


class Renderer:
    """Scene-level submission of shaded geometry."""

    _scene: ClassVar[_SceneData] = _SceneData()

    @classmethod
    def begin_scene(cls, camera: OrthographicCamera) -> None:
        cls._scene.view_projection_matrix = camera.view_projection_matrix

    @classmethod
    def end_scene(cls) -> None:
        pass

    @classmethod
    def submit(cls, shader: Shader, vertex_array: VertexArray) -> None:
        shader.bind()
        shader.upload_uniform_mat4("u_ViewProjection", cls._scene.view_projection_matrix)
        vertex_array.bind()
        RenderCommand.draw_indexed(vertex_array)

    @classmethod
    def get_api(cls) -> GraphicsAPI:
        return RendererAPI.get_api()